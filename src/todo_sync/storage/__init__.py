"""
Local persistence.

Components:
- local_storage.py: SQLite-backed string key-value store (localStorage surface)
- todo_cache.py: the todo list serialized as JSON under one key
"""
