"""userstore: thin SQLite data-access layer (query executor + user entity)."""
from __future__ import annotations

from .config import DbConfig, load_config
from .domain.user import User
from .errors import ConfigError, DbConnectionError, ParseError, QueryError
from .sql import Sql

__all__ = [
    "DbConfig",
    "load_config",
    "Sql",
    "User",
    "ConfigError",
    "DbConnectionError",
    "ParseError",
    "QueryError",
]
