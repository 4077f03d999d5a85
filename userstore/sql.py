from __future__ import annotations

# userstore/sql.py
import logging
import sqlite3
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from .config import DbConfig, load_config
from .db import connect

logger = logging.getLogger(__name__)


def _bind_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    # {":ID": 1} and {"ID": 1} bind the same placeholder
    if not params:
        return {}
    return {str(k).lstrip(":"): v for k, v in params.items()}


class Sql:
    """
    Parameterized query executor over a single SQLite connection.

    Either opens its own connection from ``config`` (env/config.yaml when
    omitted) or wraps ``conn`` supplied by the caller; only a connection it
    opened itself is closed by :meth:`close`.
    """

    def __init__(self, config: DbConfig | None = None, conn: sqlite3.Connection | None = None):
        if conn is not None:
            self.config = config
            self.conn = conn
            self._owns_conn = False
        else:
            self.config = config or load_config()
            self.conn = connect(self.config)
            self._owns_conn = True

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> sqlite3.Cursor:
        logger.debug("execute: %s", query)
        # row_factory on the cursor, an adopted connection is left as the caller set it
        cur = self.conn.cursor()
        cur.row_factory = sqlite3.Row
        return cur.execute(query, _bind_params(params))

    def select(self, query: str, params: Mapping[str, Any] | None = None) -> List[Dict[str, Any]]:
        cur = self.execute(query, params)
        return [dict(r) for r in cur.fetchall()]

    def select_frame(self, query: str, params: Mapping[str, Any] | None = None) -> pd.DataFrame:
        cur = self.execute(query, params)
        cols = [d[0] for d in cur.description or ()]
        return pd.DataFrame.from_records([tuple(r) for r in cur.fetchall()], columns=cols)

    def close(self):
        if self._owns_conn:
            self.conn.close()
            logger.info("closed database %s", self.config.db_path)

    def __enter__(self) -> "Sql":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
