from datetime import datetime

from userstore.repository import user_repo


def test_get_by_id_missing_returns_none(sql):
    assert user_repo.get_by_id(sql, 1) is None


def test_insert_then_get(sql):
    new_id = user_repo.insert_user(sql, "alice", "hash123", datetime(2024, 1, 1, 10, 0, 0))
    row = user_repo.get_by_id(sql, new_id)
    assert row["deslogin"] == "alice"
    assert row["dtcadastro"] == "2024-01-01 10:00:00"


def test_insert_defaults_timestamp(sql):
    new_id = user_repo.insert_user(sql, "bob", "h")
    row = user_repo.get_by_id(sql, new_id)
    assert row["dtcadastro"]
