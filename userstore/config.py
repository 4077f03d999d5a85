from __future__ import annotations

# userstore/config.py
import logging
import os
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

# DB path resolution order:
# 1) env USERSTORE_DB_PATH (highest priority)
# 2) config.yaml test_db_path (when running under tests)
# 3) config.yaml db_path
# 4) fallback: <project root>/userstore.db
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "userstore.db")
ENV_DB_PATH = "USERSTORE_DB_PATH"


class DbConfig(BaseModel):
    db_path: str
    foreign_keys: bool = True
    timeout: float = 5.0
    # server-style credentials; SQLite ignores them
    host: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None


def _read_config_yaml(path: str | None = None) -> dict:
    cfg_path = path or os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    with open(cfg_path, "r", encoding="utf-8") as f:
        try:
            cfg = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{cfg_path}: invalid YAML: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"{cfg_path}: expected a mapping, got {type(cfg).__name__}")
    return cfg


def _is_test_env() -> bool:
    return (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)


def get_db_path(cfg: dict | None = None) -> str:
    cfg = cfg if cfg is not None else _read_config_yaml()
    env_path = os.environ.get(ENV_DB_PATH)
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")

    if env_path:
        path = env_path
    elif _is_test_env() and isinstance(cfg_test, str) and cfg_test.strip():
        path = cfg_test.strip()
    elif isinstance(cfg_db, str) and cfg_db.strip():
        path = cfg_db.strip()
    else:
        logger.warning("no db_path configured, falling back to %s", _ROOT_DB)
        path = _ROOT_DB

    # make sure the directory exists
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


def load_config(path: str | None = None) -> DbConfig:
    """Build a DbConfig from env + config.yaml; extra yaml keys are passed through."""
    cfg = _read_config_yaml(path)
    extra = {k: cfg[k] for k in ("foreign_keys", "timeout", "host", "user", "password") if k in cfg}
    try:
        return DbConfig(db_path=get_db_path(cfg), **extra)
    except ValidationError as e:
        raise ConfigError(f"invalid database config: {e}") from e
