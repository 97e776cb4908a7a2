"""Adapters - I/O implementations of ports."""

from .memory_store import InMemoryEntryStore
from .sqlite_store import SqliteEntryStore, StoreError

__all__ = [
    "InMemoryEntryStore",
    "SqliteEntryStore",
    "StoreError",
]
