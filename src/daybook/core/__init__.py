"""Functional core - pure business logic with no I/O."""

from .entries import (
    NEUTRAL_MOOD,
    JournalEntry,
    as_day,
    count_words,
    filter_favorites,
    parse_tags,
    sort_by_date,
)
from .streaks import StreakStats, calculate_streaks, current_streak, longest_streak, missed_days
from .tags import tag_counts, top_tags
from .moods import NO_MOOD, mood_counts, top_mood
from .trend import word_trend
from .stats import JournalStats, compute_stats

__all__ = [
    # Entries
    "NEUTRAL_MOOD",
    "JournalEntry",
    "as_day",
    "count_words",
    "filter_favorites",
    "parse_tags",
    "sort_by_date",
    # Streaks
    "StreakStats",
    "calculate_streaks",
    "current_streak",
    "longest_streak",
    "missed_days",
    # Tags
    "tag_counts",
    "top_tags",
    # Moods
    "NO_MOOD",
    "mood_counts",
    "top_mood",
    # Trend
    "word_trend",
    # Stats
    "JournalStats",
    "compute_stats",
]
