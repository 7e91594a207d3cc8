# src/todo_sync/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the HTTP client and the storage-backed cache into AppState.
"""

from __future__ import annotations

import logging

from ..api.client import TodoApiClient
from ..config import get_settings
from ..core.state import AppState
from ..storage.local_storage import LocalStorage
from ..storage.todo_cache import TodoCache

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = LocalStorage(settings.storage_db_path)
    state = AppState(
        settings=settings,
        api=TodoApiClient.from_settings(settings),
        cache=TodoCache(storage, key=settings.cache_key),
    )
    logger.debug("State created api=%s cache_key=%s", settings.api_url, settings.cache_key)
    return state
