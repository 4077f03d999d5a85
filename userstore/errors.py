from __future__ import annotations

# userstore/errors.py
#
# DbConnectionError subclasses sqlite3.OperationalError, which is itself a
# sqlite3.DatabaseError (= QueryError). An ``except QueryError`` also catches
# connection failures, so catch DbConnectionError first when the two need
# different handling.
import sqlite3

# Driver errors raised while preparing/executing are not wrapped.
QueryError = sqlite3.DatabaseError


class DbConnectionError(sqlite3.OperationalError):
    """The database could not be opened, or the file is not a SQLite database."""


class ParseError(ValueError):
    """Text could not be parsed as a date-time."""


class ConfigError(ValueError):
    """config.yaml is malformed YAML, not a mapping, or holds badly typed values."""
