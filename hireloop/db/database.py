# -*- coding: utf-8 -*-
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from hireloop.config import DBConfig


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    SQLite ships with foreign keys off; cascade / set-null rules
    only fire once every connection opts in.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def make_engine(url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    eng = create_engine(url, echo=echo, connect_args=connect_args)
    enable_sqlite_foreign_keys(eng)
    return eng


# Engine
engine = make_engine(DBConfig.URL, echo=DBConfig.ECHO)

# SessionLocal
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base Model
Base = declarative_base()


def get_db():
    """
    Dependency for FastAPI route handlers.
    Yields a DB session and ensures it closes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _ensure_sqlite_dir(url: str) -> None:
    if not url.startswith("sqlite:///"):
        return
    path = url[len("sqlite:///"):]
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


def init_db(bind: Engine = None):
    """
    Creates tables if they don't exist, then brings older database files
    up to the current column set.
    """
    from hireloop.db import models  # noqa: F401  registers tables on Base
    from hireloop.db.migrations import run_migrations

    bind = bind or engine
    _ensure_sqlite_dir(str(bind.url))
    Base.metadata.create_all(bind=bind)
    run_migrations(bind)
