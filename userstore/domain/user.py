from __future__ import annotations

# userstore/domain/user.py
import json
import logging
from datetime import date, datetime, time
from typing import Any, Dict, Optional

from ..errors import ParseError
from ..repository import user_repo
from ..sql import Sql

logger = logging.getLogger(__name__)

DISPLAY_FMT = "%d/%m/%Y %H:%M:%S"


def parse_datetime(value) -> datetime:
    """datetime as is; date at midnight; text as ISO-8601 or DISPLAY_FMT."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        raise ParseError(f"cannot parse {type(value).__name__} as date-time")
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.strptime(text, DISPLAY_FMT)
    except ValueError:
        raise ParseError(f"invalid date-time: {value!r}") from None


class User:
    """One row of tb_usuarios. Every field is None until loaded or set."""

    def __init__(self, sql: Sql | None = None):
        self._sql = sql
        self._id: Optional[int] = None
        self._login: Optional[str] = None
        self._password_hash: Optional[str] = None
        self._registered_at: Optional[datetime] = None

    @property
    def id(self) -> Optional[int]:
        return self._id

    @id.setter
    def id(self, value: Optional[int]):
        self._id = None if value is None else int(value)

    @property
    def login(self) -> Optional[str]:
        return self._login

    @login.setter
    def login(self, value: Optional[str]):
        self._login = value

    @property
    def password_hash(self) -> Optional[str]:
        return self._password_hash

    @password_hash.setter
    def password_hash(self, value: Optional[str]):
        # stored verbatim
        self._password_hash = value

    @property
    def registered_at(self) -> Optional[datetime]:
        return self._registered_at

    @registered_at.setter
    def registered_at(self, value):
        # parse first so a bad value leaves the field untouched
        self._registered_at = None if value is None else parse_datetime(value)

    def load_by_id(self, user_id: int) -> None:
        """Populate from the row with this id. A missing row leaves the entity as is."""
        if self._sql is not None:
            row = user_repo.get_by_id(self._sql, user_id)
        else:
            with Sql() as sql:
                row = user_repo.get_by_id(sql, user_id)
        if row is None:
            logger.debug("tb_usuarios: no row for idusuario=%s", user_id)
            return
        # parse before assigning anything, a bad timestamp leaves the entity untouched
        dtcadastro = row["dtcadastro"]
        registered_at = None if dtcadastro is None else parse_datetime(dtcadastro)
        self.id = row["idusuario"]
        self.login = row["deslogin"]
        self.password_hash = row["dessenha"]
        self._registered_at = registered_at

    def to_dict(self) -> Dict[str, Any]:
        return {
            "idusuario": self.id,
            "deslogin": self.login,
            "dessenha": self.password_hash,
            "dtcadastro": self.registered_at.strftime(DISPLAY_FMT) if self.registered_at is not None else None,
        }

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, login={self.login!r})"
