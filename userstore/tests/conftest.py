import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "userstore_test.db"
    # Point userstore to this temp DB
    os.environ["USERSTORE_DB_PATH"] = str(path)
    schema = Path(_PROJECT_ROOT / "schema.sql").read_text(encoding="utf-8")
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(schema)
        conn.commit()
    finally:
        conn.close()
    return str(path)


@pytest.fixture()
def sql(tmp_db_path):
    from userstore.sql import Sql
    s = Sql()
    yield s
    s.close()


@pytest.fixture()
def seed_user(tmp_db_path):
    def _seed(idusuario, deslogin, dessenha, dtcadastro):
        conn = sqlite3.connect(tmp_db_path)
        try:
            conn.execute(
                "INSERT INTO tb_usuarios(idusuario, deslogin, dessenha, dtcadastro) VALUES(?,?,?,?)",
                (idusuario, deslogin, dessenha, dtcadastro),
            )
            conn.commit()
        finally:
            conn.close()
    return _seed


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("USERSTORE_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    conn = sqlite3.connect(tmp_db_path)
    try:
        conn.execute("DELETE FROM tb_usuarios")
        conn.execute("DELETE FROM sqlite_sequence WHERE name='tb_usuarios'")
        conn.commit()
    finally:
        conn.close()
    yield
