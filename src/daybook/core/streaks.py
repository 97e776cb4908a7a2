"""Streak and missed-day calculations over a snapshot of entries."""

from dataclasses import astuple, dataclass
from datetime import date, timedelta

from .entries import JournalEntry, sort_by_date


@dataclass(frozen=True)
class StreakStats:
    """Current streak, longest streak and missed days."""

    current: int = 0
    longest: int = 0
    missed: int = 0

    def __iter__(self):
        return iter(astuple(self))


def current_streak(entries: list[JournalEntry], as_of: date | None = None) -> int:
    """
    Count consecutive journaled days ending today, or yesterday if today
    has no entry yet.

    The walk steps back one calendar day at a time and stops at the first
    day without an entry. Entries dated after as_of never match.
    """
    as_of = as_of or date.today()
    days = {e.entry_date for e in entries}

    day = as_of if as_of in days else as_of - timedelta(days=1)
    streak = 0
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def longest_streak(entries: list[JournalEntry]) -> int:
    """
    Longest run of consecutive days anywhere in the history.

    A one-day gap extends the run, a larger gap resets it to 1 and a
    repeated day leaves it unchanged.
    """
    if not entries:
        return 0

    days = [e.entry_date for e in sort_by_date(entries)]
    longest = 1
    run = 1
    for previous, current in zip(days, days[1:]):
        gap = (current - previous).days
        if gap == 1:
            run += 1
        elif gap > 1:
            run = 1
        longest = max(longest, run)
    return longest


def missed_days(entries: list[JournalEntry], as_of: date | None = None) -> int:
    """Days since the first entry (inclusive) without an entry, floored at 0."""
    if not entries:
        return 0
    as_of = as_of or date.today()
    first = min(e.entry_date for e in entries)
    span = (as_of - first).days + 1
    return max(0, span - len(entries))


def calculate_streaks(entries: list[JournalEntry], as_of: date | None = None) -> StreakStats:
    """
    All streak statistics for a snapshot.

    Pure function - no I/O. Returns (0, 0, 0) for an empty history.
    """
    if not entries:
        return StreakStats()
    as_of = as_of or date.today()
    return StreakStats(
        current=current_streak(entries, as_of),
        longest=longest_streak(entries),
        missed=missed_days(entries, as_of),
    )
