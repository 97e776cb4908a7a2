"""Assemble every analytic from one snapshot of entries."""

from dataclasses import asdict, dataclass, field
from datetime import date

from .entries import JournalEntry
from .moods import NO_MOOD, top_mood
from .streaks import calculate_streaks
from .tags import TOP_TAGS_LIMIT, top_tags
from .trend import TREND_DAYS, word_trend


@dataclass
class JournalStats:
    """Statistics shown on the dashboard."""

    as_of: date
    total_entries: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    missed_days: int = 0
    top_tags: list[str] = field(default_factory=list)
    top_mood: str = NO_MOOD
    word_trend: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["as_of"] = self.as_of.isoformat()
        return data


def compute_stats(
    entries: list[JournalEntry],
    as_of: date | None = None,
    tag_limit: int = TOP_TAGS_LIMIT,
    trend_days: int = TREND_DAYS,
) -> JournalStats:
    """
    Compute all statistics from a single snapshot.

    Pure function - no I/O. The aggregations are independent of each other.
    """
    as_of = as_of or date.today()
    streaks = calculate_streaks(entries, as_of)

    return JournalStats(
        as_of=as_of,
        total_entries=len(entries),
        current_streak=streaks.current,
        longest_streak=streaks.longest,
        missed_days=streaks.missed,
        top_tags=top_tags(entries, tag_limit),
        top_mood=top_mood(entries),
        word_trend=word_trend(entries, as_of, trend_days),
    )
