from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from ..sql import Sql


def get_by_id(sql: Sql, user_id: int) -> Optional[Dict[str, Any]]:
    rows = sql.select("SELECT * FROM tb_usuarios WHERE idusuario = :ID", {":ID": user_id})
    return rows[0] if rows else None


def insert_user(sql: Sql, login: str, password_hash: str, registered_at: datetime | str | None = None) -> int:
    if registered_at is None:
        cur = sql.execute(
            "INSERT INTO tb_usuarios(deslogin, dessenha) VALUES(:LOGIN, :PASSWORD)",
            {":LOGIN": login, ":PASSWORD": password_hash},
        )
    else:
        if isinstance(registered_at, datetime):
            registered_at = registered_at.strftime("%Y-%m-%d %H:%M:%S")
        cur = sql.execute(
            "INSERT INTO tb_usuarios(deslogin, dessenha, dtcadastro) VALUES(:LOGIN, :PASSWORD, :DTCADASTRO)",
            {":LOGIN": login, ":PASSWORD": password_hash, ":DTCADASTRO": registered_at},
        )
    return int(cur.lastrowid)
