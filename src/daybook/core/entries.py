"""Pure journal entry domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime

NEUTRAL_MOOD = "Neutral"


def as_day(value: date | datetime) -> date:
    """Calendar day of a date or datetime (time of day is dropped)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_tags(text: str | None) -> list[str]:
    """Split a comma-separated tag field into trimmed, non-empty labels."""
    if not text:
        return []
    return [t.strip() for t in text.split(",") if t.strip()]


def count_words(text: str | None) -> int:
    """
    Naive word count: split on single spaces.

    Consecutive spaces produce empty tokens that still count, and tabs or
    newlines are not separators. Blank text counts as zero words.
    """
    if not text or not text.strip():
        return 0
    return len(text.split(" "))


@dataclass(frozen=True)
class JournalEntry:
    """One journal entry. At most one exists per calendar day."""

    entry_date: date
    content: str = ""
    title: str = ""
    primary_mood: str = NEUTRAL_MOOD
    secondary_mood_1: str = ""
    secondary_mood_2: str = ""
    tags: str = ""
    is_favorite: bool = False
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self):
        # Frozen, so normalise through object.__setattr__
        object.__setattr__(self, "entry_date", as_day(self.entry_date))

    @property
    def day(self) -> date:
        return self.entry_date

    @property
    def mood(self) -> str:
        """Primary mood as stored, or the neutral sentinel when blank."""
        if not self.primary_mood or not self.primary_mood.strip():
            return NEUTRAL_MOOD
        return self.primary_mood

    @property
    def tag_list(self) -> list[str]:
        return parse_tags(self.tags)

    @property
    def word_count(self) -> int:
        return count_words(self.content)


def sort_by_date(entries: list[JournalEntry], newest_first: bool = False) -> list[JournalEntry]:
    """Sort entries by calendar day. Stable for equal days."""
    return sorted(entries, key=lambda e: e.entry_date, reverse=newest_first)


def filter_favorites(entries: list[JournalEntry]) -> list[JournalEntry]:
    """Favorite entries, newest first."""
    return sort_by_date([e for e in entries if e.is_favorite], newest_first=True)
