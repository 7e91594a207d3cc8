# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_sync.core.state import AppState
from todo_sync.storage.local_storage import LocalStorage
from todo_sync.storage.todo_cache import TodoCache

from .fakes import FakeTodoApi, make_todos


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-sync-test",
        api_url="https://api.test/todos",
        seed_limit=10,
        data_dir=tmp_path,
        storage_db_path=tmp_path / "storage.sqlite3",
        cache_key="todos",
    )


@pytest.fixture()
def storage(settings: SimpleNamespace) -> LocalStorage:
    return LocalStorage(settings.storage_db_path)


@pytest.fixture()
def cache(storage: LocalStorage) -> TodoCache:
    return TodoCache(storage, key="todos")


@pytest.fixture()
def api() -> FakeTodoApi:
    return FakeTodoApi(server_todos=[t.to_dict() for t in make_todos(15)])


@pytest.fixture()
def state(settings: SimpleNamespace, api: FakeTodoApi, cache: TodoCache) -> AppState:
    """
    AppState wired with a fake API.

    NOTE: the cache is the real SQLite-backed one because its contents are
    part of what we assert on.
    """
    return AppState(settings=settings, api=api, cache=cache)


@pytest.fixture()
def ready_state(state: AppState) -> AppState:
    """State already hydrated with five todos (ids 1..5), cache in sync."""
    todos = make_todos(5)
    state.todos = list(todos)
    state.cache.write(todos)
    state.loading = False
    return state
