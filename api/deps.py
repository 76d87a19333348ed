"""
api.deps
========

FastAPI dependency providers.

`get_session` returns the process‑wide **CaseSession** backed by the
SQLite store, so every request edits the same persisted case (the tool is
single‑user).  Tests override it with an in‑memory session.
"""

from functools import lru_cache

from prescripta.session import CaseSession
from prescripta.store import SQLiteStore


@lru_cache
def get_session() -> CaseSession:
    """Singleton case session (persists across requests)."""
    return CaseSession.load(SQLiteStore())
