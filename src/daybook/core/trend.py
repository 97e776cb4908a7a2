"""Recent word-count trend."""

from datetime import date, timedelta

from .entries import JournalEntry

TREND_DAYS = 5


def word_trend(
    entries: list[JournalEntry],
    as_of: date | None = None,
    days: int = TREND_DAYS,
) -> list[int]:
    """
    Word counts for the last N calendar days, oldest first.

    Days without an entry are 0. Always returns exactly `days` values.
    """
    as_of = as_of or date.today()
    by_day = {e.entry_date: e for e in entries}

    trend = []
    for offset in range(days - 1, -1, -1):
        entry = by_day.get(as_of - timedelta(days=offset))
        trend.append(entry.word_count if entry else 0)
    return trend
