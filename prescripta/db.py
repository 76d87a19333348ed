"""
prescripta.db
=============

SQLite persistence layer for Prescripta.

This module exposes:

* ``engine`` – a global SQLModel engine pointing at *prescripta.db*
* ``SessionLocal`` – a session factory used via ``with SessionLocal() as s:``
* ``create_all()`` – helper to create tables at first run

The schema is a single key → JSON text table: one row per key, last
write wins.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import Field, Session, SQLModel, create_engine, select

from prescripta.settings import DB_ECHO, DB_URL


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
def make_engine(url: str = DB_URL, echo: bool = DB_ECHO) -> Engine:
    """Build an engine; SQLite connections may be shared across API worker threads."""
    return create_engine(url, echo=echo, connect_args={"check_same_thread": False})


engine = make_engine()


# ---------------------------------------------------------------------------
# Session factory
# ---------------------------------------------------------------------------
def SessionLocal(bind: Optional[Engine] = None) -> Session:  # noqa: N802 (factory camel‑case for consistency with FastAPI docs)
    """Return a new Session bound to *bind* or the global engine."""
    return Session(bind or engine)


# ---------------------------------------------------------------------------
# ORM model
# ---------------------------------------------------------------------------
def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoredBlob(SQLModel, table=True):
    """One serialized JSON document stored under a string key."""

    __tablename__ = "stored_blob"

    key: str = Field(primary_key=True, index=True)
    value: str
    updated_at: datetime = Field(default_factory=_utcnow)


# ---------------------------------------------------------------------------
# Convenience CRUD helpers
# ---------------------------------------------------------------------------
def save_blob(s: Session, key: str, value: str) -> None:
    """Insert or overwrite the row for *key*."""
    s.merge(StoredBlob(key=key, value=value, updated_at=_utcnow()))
    s.commit()


def load_blob(s: Session, key: str) -> Optional[str]:
    """Return the stored text for *key* or *None* if missing."""
    row = s.get(StoredBlob, key)
    return row.value if row else None


def all_keys(s: Session) -> list[str]:
    return list(s.exec(select(StoredBlob.key)).all())


# ---------------------------------------------------------------------------
# Utility: create tables
# ---------------------------------------------------------------------------
def create_all(bind: Optional[Engine] = None) -> None:
    """Create all tables for imported SQLModel subclasses, including StoredBlob."""
    SQLModel.metadata.create_all(bind or engine)


# ---------------------------------------------------------------------------
# Lightweight CLI
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    """
    Quick bootstrap helper.

    Examples
    --------
    $ python -m prescripta.db --create        # first‑time table creation
    $ python -m prescripta.db --keys          # list stored keys
    """
    import argparse

    parser = argparse.ArgumentParser(prog="python -m prescripta.db", description="Prescripta DB utilities")
    parser.add_argument("--create", action="store_true", help="create tables")
    parser.add_argument("--keys", action="store_true", help="list stored keys")
    args = parser.parse_args()

    if args.create:
        create_all()
        print(f"✅ schema initialised at {DB_URL}")

    if args.keys:
        with SessionLocal() as s:
            for key in all_keys(s):
                print(key)
