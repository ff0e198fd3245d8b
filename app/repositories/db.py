"""DuckDB connection management."""

from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL, ALL_INDEXES
from settings import DB_PATH

MEMORY_DB = ":memory:"


def db_exists(db_path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return db_path == MEMORY_DB or Path(db_path).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    result = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'vote'"
    ).fetchone()
    return result[0] > 0


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    for index in ALL_INDEXES:
        conn.execute(index)
    logger.info("DB tables initialized")


def connect(db_path: str | None = None, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open a connection and make sure the schema exists.

    Repositories share this connection and open one cursor per query, which keeps
    them usable from worker threads.
    """
    path = db_path or DB_PATH
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)

    conn = duckdb.connect(path, read_only=read_only)
    if not read_only:
        init_tables(conn)
    logger.debug("DB connected: {} (read_only={})", path, read_only)
    return conn


def close_db(conn: duckdb.DuckDBPyConnection | None) -> None:
    """Close a connection opened by connect()."""
    if conn is not None:
        conn.close()
        logger.debug("DB connection closed")
