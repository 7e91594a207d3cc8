# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from todo_sync.config import DEFAULT_API_URL, Settings


def test_defaults(monkeypatch) -> None:
    for name in ("TODO_API_URL", "TODO_SEED_LIMIT", "TODO_DATA_DIR", "TODO_STORAGE_DB_PATH", "TODO_CACHE_KEY"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.api_url == DEFAULT_API_URL
    assert s.seed_limit == 10
    assert s.cache_key == "todos"
    assert s.storage_db_path == s.data_dir / "storage.sqlite3"


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_API_URL", "http://localhost:3000/todos/")
    monkeypatch.setenv("TODO_SEED_LIMIT", "25")
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TODO_STORAGE_DB_PATH", raising=False)

    s = Settings.from_env()
    assert s.api_url == "http://localhost:3000/todos"
    assert s.seed_limit == 25
    assert s.storage_db_path == tmp_path / "storage.sqlite3"


def test_bad_numbers_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TODO_SEED_LIMIT", "ten")
    monkeypatch.setenv("TODO_HTTP_READ_TIMEOUT_SECONDS", "")
    s = Settings.from_env()
    assert s.seed_limit == 10
    assert s.http_read_timeout_seconds == 15.0
