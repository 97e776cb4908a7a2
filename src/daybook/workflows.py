"""Shared workflow layer between the CLI and the stores.

Each stats call reads one snapshot from the store and runs the pure
analytics over it.
"""

from datetime import date, timedelta
from pathlib import Path

from .adapters.sqlite_store import SqliteEntryStore
from .config import DATA_DIR, Config
from .core.stats import JournalStats, compute_stats
from .ports.entry_store import EntryStore


def get_store(config: Config) -> SqliteEntryStore:
    """Resolve the database path from config."""
    if config.database_path:
        return SqliteEntryStore(Path(config.database_path).expanduser())
    return SqliteEntryStore(DATA_DIR / "journal.db")


def compile_stats(store: EntryStore, config: Config, as_of: date | None = None) -> JournalStats:
    """Fetch all entries once and compute every statistic."""
    entries = store.list_all()
    return compute_stats(
        entries,
        as_of=as_of,
        tag_limit=config.top_tags_limit,
        trend_days=config.trend_days,
    )


def format_stats(stats: JournalStats) -> str:
    """Render stats as plain text for the terminal."""
    lines = [
        f"Stats as of {stats.as_of.strftime('%A, %b %d')}",
        "",
        f"Entries:        {stats.total_entries}",
        f"Current streak: {stats.current_streak} day(s)",
        f"Longest streak: {stats.longest_streak} day(s)",
        f"Missed days:    {stats.missed_days}",
        f"Top mood:       {stats.top_mood}",
        "",
        "Top tags:",
    ]
    lines.extend(f"  - {tag}" for tag in stats.top_tags)
    if not stats.top_tags:
        lines.append("  (none)")

    lines.extend(["", f"Words, last {len(stats.word_trend)} days:"])
    first_day = stats.as_of - timedelta(days=len(stats.word_trend) - 1)
    for offset, words in enumerate(stats.word_trend):
        day = first_day + timedelta(days=offset)
        lines.append(f"  {day.strftime('%a %m-%d')} {words:5d}")
    return "\n".join(lines)
