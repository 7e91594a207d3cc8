"""
Core (no I/O of its own).

Components:
- models.py: Todo record
- ports.py: Protocols for the remote API and the cache
- state.py: AppState (todos + loading/error flags)
- todos.py: load/add/update/delete/toggle operations
- context.py: provider layer used by UI components
"""
