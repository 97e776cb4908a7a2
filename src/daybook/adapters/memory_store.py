"""In-memory entry storage adapter."""

from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Iterable

from daybook.core.entries import JournalEntry, as_day, sort_by_date


class InMemoryEntryStore:
    """
    Dict-backed entry storage.

    Implements EntryStore protocol. Nothing is persisted; useful for tests
    and dry runs.
    """

    def __init__(
        self,
        entries: Iterable[JournalEntry] = (),
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._clock = clock
        self._entries: dict[date, JournalEntry] = {}
        self._next_id = 1
        for entry in entries:
            self.upsert(entry)

    def list_all(self) -> list[JournalEntry]:
        return sort_by_date(list(self._entries.values()), newest_first=True)

    def get_by_date(self, target_date: date | datetime) -> JournalEntry | None:
        return self._entries.get(as_day(target_date))

    def upsert(self, entry: JournalEntry) -> JournalEntry:
        now = self._clock()
        existing = self._entries.get(entry.entry_date)
        if existing:
            stored = replace(entry, id=existing.id, created_at=existing.created_at, updated_at=now)
        else:
            stored = replace(entry, id=self._next_id, created_at=now, updated_at=now)
            self._next_id += 1
        self._entries[stored.entry_date] = stored
        return stored

    def delete(self, entry_id: int) -> bool:
        for day, entry in self._entries.items():
            if entry.id == entry_id:
                del self._entries[day]
                return True
        return False

    def delete_all(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count
