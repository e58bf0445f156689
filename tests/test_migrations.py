# -*- coding: utf-8 -*-
from sqlalchemy import inspect, text

from hireloop.db.database import init_db, make_engine
from hireloop.db.migrations import missing_columns, run_migrations


def _columns(engine, table):
    return {c["name"] for c in inspect(engine).get_columns(table)}


def test_fresh_database_needs_no_migration(engine):
    assert missing_columns(engine) == []
    assert run_migrations(engine) == 0


def test_old_database_gains_new_columns(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'old.db'}")
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE jobs (id TEXT PRIMARY KEY, title TEXT NOT NULL, department TEXT NOT NULL, "
            "location TEXT NOT NULL, type TEXT NOT NULL, status TEXT NOT NULL, description TEXT, "
            "requirements TEXT, responsibilities TEXT, created_at DATETIME, updated_at DATETIME)"
        ))
        conn.execute(text(
            "CREATE TABLE candidates (id TEXT PRIMARY KEY, name TEXT NOT NULL, email TEXT NOT NULL, "
            "phone TEXT, role TEXT NOT NULL, location TEXT, skills TEXT, experience TEXT, education TEXT, "
            "years_of_experience INTEGER, stage TEXT NOT NULL, fit_score INTEGER, fit_score_breakdown TEXT, "
            "resume_text TEXT, created_at DATETIME, updated_at DATETIME)"
        ))
        conn.execute(text(
            "INSERT INTO jobs (id, title, department, location, type, status) "
            "VALUES ('j1', 'Old job', 'Ops', 'Remote', 'Full-time', 'draft')"
        ))

    assert len(missing_columns(engine)) == 5

    init_db(engine)

    assert {"source", "job_id"} <= _columns(engine, "candidates")
    assert {"deal_breakers", "auto_sourcing_enabled", "sourcing_threshold"} <= _columns(engine, "jobs")
    assert run_migrations(engine) == 0

    with engine.connect() as conn:
        row = conn.execute(text("SELECT deal_breakers, sourcing_threshold FROM jobs WHERE id = 'j1'")).one()
    assert row.sourcing_threshold == 70
    assert '"no_sponsorship": false' in row.deal_breakers

    engine.dispose()
