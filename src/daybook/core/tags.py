"""Tag frequency aggregation."""

from collections import Counter

from .entries import JournalEntry, sort_by_date

TOP_TAGS_LIMIT = 5


def tag_counts(entries: list[JournalEntry]) -> Counter[str]:
    """
    Count tag labels across all entries (case-sensitive).

    Entries are walked oldest first so that the counter's insertion order
    is the order in which each tag first appeared.
    """
    counts: Counter[str] = Counter()
    for entry in sort_by_date(entries):
        counts.update(entry.tag_list)
    return counts


def format_tag_count(tag: str, count: int) -> str:
    return f"{tag} ({count})"


def top_tags(entries: list[JournalEntry], limit: int = TOP_TAGS_LIMIT) -> list[str]:
    """
    Most used tags formatted as "<tag> (<count>)", most frequent first.

    Ties keep first-appearance order (most_common sorts stably).
    """
    return [format_tag_count(tag, count) for tag, count in tag_counts(entries).most_common(limit)]
