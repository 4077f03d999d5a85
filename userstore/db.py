from __future__ import annotations

# userstore/db.py
import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .config import DbConfig, load_config
from .errors import DbConnectionError

logger = logging.getLogger(__name__)

SCHEMA_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "schema.sql")


def connect(config: DbConfig) -> sqlite3.Connection:
    """
    Open a SQLite connection: Row row_factory, autocommit, foreign_keys per config.
    The file header is read up front, so a missing or non-SQLite file raises
    DbConnectionError here instead of at the first query.
    """
    conn = None
    try:
        conn = sqlite3.connect(
            config.db_path,
            timeout=config.timeout,
            detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
            isolation_level=None,
        )
        conn.execute("PRAGMA schema_version").fetchone()
        if config.foreign_keys:
            conn.execute("PRAGMA foreign_keys = ON;")
    except sqlite3.Error as e:
        if conn is not None:
            conn.close()
        raise DbConnectionError(f"cannot open database {config.db_path!r}: {e}") from e
    conn.row_factory = sqlite3.Row
    logger.info("opened database %s", config.db_path)
    return conn


@contextmanager
def get_conn(config: DbConfig | None = None) -> Iterator[sqlite3.Connection]:
    conn = connect(config or load_config())
    try:
        yield conn
    finally:
        conn.close()


def ensure_schema(conn: sqlite3.Connection, schema_path: str | None = None):
    with open(schema_path or SCHEMA_PATH, "r", encoding="utf-8") as f:
        conn.executescript(f.read())
