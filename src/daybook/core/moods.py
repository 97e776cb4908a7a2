"""Mood frequency aggregation."""

from collections import Counter

from .entries import JournalEntry, sort_by_date

NO_MOOD = "None"


def mood_counts(entries: list[JournalEntry]) -> Counter[str]:
    """Count primary moods, in order of first appearance by date."""
    return Counter(e.mood for e in sort_by_date(entries))


def top_mood(entries: list[JournalEntry]) -> str:
    """Most frequent primary mood; the earliest-seen mood wins a tie."""
    ranked = mood_counts(entries).most_common(1)
    if not ranked:
        return NO_MOOD
    return ranked[0][0]
