# src/todo_sync/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing secret is needed: the default endpoint is a public placeholder API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_API_URL = "https://jsonplaceholder.typicode.com/todos"
DEFAULT_CACHE_KEY = "todos"
DEFAULT_SEED_LIMIT = 10


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Remote API ----
    api_url: str
    seed_limit: int
    http_connect_timeout_seconds: float
    http_read_timeout_seconds: float

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_db_path: Path
    cache_key: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-sync").strip() or "todo-sync"
        # The console doubles as the UI, so only warnings reach it by default.
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        api_url = _env(_k("API_URL"), DEFAULT_API_URL).strip().rstrip("/") or DEFAULT_API_URL
        seed_limit = max(0, _env_int(_k("SEED_LIMIT"), DEFAULT_SEED_LIMIT))

        connect_timeout = _env_float(_k("HTTP_CONNECT_TIMEOUT_SECONDS"), 5.0)
        read_timeout = _env_float(_k("HTTP_READ_TIMEOUT_SECONDS"), 15.0)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        storage_db_path = _env_path(_k("STORAGE_DB_PATH"), data_dir / "storage.sqlite3")
        cache_key = _env(_k("CACHE_KEY"), DEFAULT_CACHE_KEY).strip() or DEFAULT_CACHE_KEY

        return Settings(
            app_name=app_name,
            log_level=log_level,
            api_url=api_url,
            seed_limit=seed_limit,
            http_connect_timeout_seconds=connect_timeout,
            http_read_timeout_seconds=read_timeout,
            data_dir=data_dir,
            storage_db_path=storage_db_path,
            cache_key=cache_key,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
