"""SQLite-backed entry storage adapter."""

import logging
import sqlite3
from contextlib import closing, contextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Iterator

from daybook.core.entries import JournalEntry, as_day

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    entry_date TEXT NOT NULL UNIQUE,
    title TEXT NOT NULL DEFAULT '',
    content TEXT NOT NULL DEFAULT '',
    primary_mood TEXT NOT NULL DEFAULT 'Neutral',
    secondary_mood_1 TEXT NOT NULL DEFAULT '',
    secondary_mood_2 TEXT NOT NULL DEFAULT '',
    tags TEXT NOT NULL DEFAULT '',
    is_favorite INTEGER NOT NULL DEFAULT 0,
    created_at TEXT,
    updated_at TEXT
)
"""

COLUMNS = (
    "entry_date",
    "title",
    "content",
    "primary_mood",
    "secondary_mood_1",
    "secondary_mood_2",
    "tags",
    "is_favorite",
    "created_at",
    "updated_at",
)


class StoreError(Exception):
    """Raised when the entry database cannot be read or written."""

    pass


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _row_to_entry(row: sqlite3.Row) -> JournalEntry:
    try:
        return JournalEntry(
            id=row["id"],
            entry_date=date.fromisoformat(row["entry_date"]),
            title=row["title"],
            content=row["content"],
            primary_mood=row["primary_mood"],
            secondary_mood_1=row["secondary_mood_1"],
            secondary_mood_2=row["secondary_mood_2"],
            tags=row["tags"],
            is_favorite=bool(row["is_favorite"]),
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )
    except ValueError as e:
        logger.error(f"Malformed entry row {row['id']}: {e}")
        raise StoreError(f"Malformed journal entry {row['id']}: {e}") from e


def _entry_values(entry: JournalEntry, created_at: datetime, updated_at: datetime) -> tuple:
    return (
        entry.entry_date.isoformat(),
        entry.title,
        entry.content,
        entry.primary_mood,
        entry.secondary_mood_1,
        entry.secondary_mood_2,
        entry.tags,
        int(entry.is_favorite),
        created_at.isoformat(),
        updated_at.isoformat(),
    )


class SqliteEntryStore:
    """
    SQLite entry storage.

    Implements EntryStore protocol. The entries table is keyed by id with a
    unique calendar date, so a second write for a day overwrites the first.
    """

    def __init__(self, db_path: Path | str, clock: Callable[[], datetime] = datetime.now):
        self.db_path = Path(db_path).expanduser()
        self._clock = clock
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create database directory {self.db_path.parent}: {e}")
            raise StoreError(f"Cannot create journal directory: {e}") from e
        with self._connect() as conn:
            conn.execute(SCHEMA)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, commit on success and always close."""
        try:
            with closing(sqlite3.connect(self.db_path)) as conn:
                conn.row_factory = sqlite3.Row
                with conn:
                    yield conn
        except sqlite3.Error as e:
            logger.error(f"Database error on {self.db_path}: {e}")
            raise StoreError(f"Journal database error: {e}") from e

    def list_all(self) -> list[JournalEntry]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM entries ORDER BY entry_date DESC").fetchall()
        return [_row_to_entry(row) for row in rows]

    def get_by_date(self, target_date: date | datetime) -> JournalEntry | None:
        day = as_day(target_date)
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM entries WHERE entry_date = ?", (day.isoformat(),)
            ).fetchone()
        return _row_to_entry(row) if row else None

    def upsert(self, entry: JournalEntry) -> JournalEntry:
        now = self._clock()
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, created_at FROM entries WHERE entry_date = ?",
                (entry.entry_date.isoformat(),),
            ).fetchone()

            if row:
                created_at = _parse_timestamp(row["created_at"]) or now
                assignments = ", ".join(f"{col} = ?" for col in COLUMNS)
                conn.execute(
                    f"UPDATE entries SET {assignments} WHERE id = ?",
                    (*_entry_values(entry, created_at, now), row["id"]),
                )
                entry_id = row["id"]
                logger.debug(f"Updated entry {entry_id} for {entry.entry_date}")
            else:
                placeholders = ", ".join("?" for _ in COLUMNS)
                cursor = conn.execute(
                    f"INSERT INTO entries ({', '.join(COLUMNS)}) VALUES ({placeholders})",
                    _entry_values(entry, now, now),
                )
                entry_id = cursor.lastrowid
                logger.debug(f"Created entry {entry_id} for {entry.entry_date}")

            stored = conn.execute("SELECT * FROM entries WHERE id = ?", (entry_id,)).fetchone()
        return _row_to_entry(stored)

    def delete(self, entry_id: int) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
        return cursor.rowcount > 0

    def delete_all(self) -> int:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM entries")
        logger.info(f"Deleted {cursor.rowcount} entries")
        return cursor.rowcount
