# -*- coding: utf-8 -*-
import logging
from typing import List, Tuple

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from hireloop.db.models import DEFAULT_DEAL_BREAKERS

logger = logging.getLogger("hireloop.migrations")

# (table, column, column DDL) for columns added after the first schema shipped.
# Order matters only for readability; each entry is applied independently.
ADDED_COLUMNS: List[Tuple[str, str, str]] = [
    ("candidates", "source", "TEXT DEFAULT 'Direct Application'"),
    ("candidates", "job_id", "TEXT REFERENCES jobs(id) ON DELETE SET NULL"),
    ("jobs", "deal_breakers", f"TEXT DEFAULT '{DEFAULT_DEAL_BREAKERS}'"),
    ("jobs", "auto_sourcing_enabled", "BOOLEAN DEFAULT 0"),
    ("jobs", "sourcing_threshold", "INTEGER DEFAULT 70"),
]


def missing_columns(bind: Engine) -> List[Tuple[str, str, str]]:
    insp = inspect(bind)
    tables = set(insp.get_table_names())
    out = []
    for table, column, ddl in ADDED_COLUMNS:
        if table not in tables:
            continue
        existing = {c["name"] for c in insp.get_columns(table)}
        if column not in existing:
            out.append((table, column, ddl))
    return out


def run_migrations(bind: Engine) -> int:
    """
    Adds any column in ADDED_COLUMNS that an older database file lacks.
    Safe to run on every startup; returns the number of columns added.
    """
    pending = missing_columns(bind)
    if not pending:
        return 0

    with bind.begin() as conn:
        for table, column, ddl in pending:
            logger.info(f"Adding {column} column to {table} table...")
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {ddl}"))

    logger.info(f"Migrations applied: {len(pending)} column(s) added.")
    return len(pending)
