import os
import logging
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from database.models import Base

logger = logging.getLogger(__name__)

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///resume_screener.db")


def enable_sqlite_savepoints(engine: Engine) -> Engine:
    """Let SQLAlchemy emit BEGIN itself on SQLite so nested savepoints work.

    pysqlite defers BEGIN until the first DML statement, which breaks
    Session.begin_nested(). No-op for other dialects.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


engine = enable_sqlite_savepoints(create_engine(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def configure_engine(url: str) -> Engine:
    """Rebind SessionLocal to a new database URL (e.g. from config.yaml)."""
    global engine
    engine = enable_sqlite_savepoints(create_engine(url))
    SessionLocal.configure(bind=engine)
    logger.info(f"Database engine bound to {engine.url.render_as_string(hide_password=True)}")
    return engine


def init_db(bind: Engine = None) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=bind or engine)
