"""Entry storage interface."""

from datetime import date, datetime
from typing import Protocol

from daybook.core.entries import JournalEntry


class EntryStore(Protocol):
    """Interface for persisting journal entries, one per calendar day."""

    def list_all(self) -> list[JournalEntry]:
        """Fetch every entry, newest first."""
        ...

    def get_by_date(self, target_date: date | datetime) -> JournalEntry | None:
        """Fetch the entry for a day. Returns None if not found."""
        ...

    def upsert(self, entry: JournalEntry) -> JournalEntry:
        """Insert, or overwrite the entry sharing its date. Returns the stored entry."""
        ...

    def delete(self, entry_id: int) -> bool:
        """Delete an entry by id. Returns False if it did not exist."""
        ...

    def delete_all(self) -> int:
        """Delete every entry. Returns the number removed."""
        ...
