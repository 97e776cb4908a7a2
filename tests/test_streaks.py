"""Tests for streak calculations."""

from datetime import date, timedelta

import pytest

from daybook.core.entries import JournalEntry
from daybook.core.streaks import (
    StreakStats,
    calculate_streaks,
    current_streak,
    longest_streak,
    missed_days,
)


@pytest.fixture
def today():
    return date(2024, 1, 10)


def entries_on(*days: date) -> list[JournalEntry]:
    return [JournalEntry(entry_date=d) for d in days]


def days_back(today: date, *offsets: int) -> list[JournalEntry]:
    return entries_on(*(today - timedelta(days=o) for o in offsets))


class TestCalculateStreaks:
    def test_empty_history(self, today):
        assert calculate_streaks([], today) == StreakStats(0, 0, 0)
        assert tuple(calculate_streaks([], today)) == (0, 0, 0)

    def test_three_consecutive_days_ending_today(self):
        entries = entries_on(date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3))
        assert tuple(calculate_streaks(entries, date(2024, 1, 3))) == (3, 3, 0)

    def test_two_entries_with_gap(self):
        entries = entries_on(date(2024, 1, 1), date(2024, 1, 5))
        current, longest, missed = calculate_streaks(entries, date(2024, 1, 5))
        assert current == 1
        assert longest == 1
        assert missed == 3

    def test_order_does_not_matter(self, today):
        entries = days_back(today, 2, 0, 5, 1, 4)
        shuffled = calculate_streaks(entries, today)
        ordered = calculate_streaks(sorted(entries, key=lambda e: e.entry_date), today)
        assert shuffled == ordered

    def test_values_never_negative(self, today):
        stats = calculate_streaks(days_back(today, -3, -2, 0), today)
        assert stats.current >= 0 and stats.longest >= 0 and stats.missed >= 0


class TestCurrentStreak:
    def test_counts_from_today(self, today):
        assert current_streak(days_back(today, 0, 1, 2), today) == 3

    def test_starts_from_yesterday_when_today_missing(self, today):
        assert current_streak(days_back(today, 1, 2, 3), today) == 3

    def test_stops_at_first_gap(self, today):
        assert current_streak(days_back(today, 0, 1, 3, 4, 5), today) == 2

    def test_zero_when_last_entry_older_than_yesterday(self, today):
        assert current_streak(days_back(today, 2, 3), today) == 0

    def test_future_entries_are_ignored(self, today):
        # Tomorrow's entry neither breaks nor extends the chain
        assert current_streak(days_back(today, -1, 0, 1), today) == 2

    def test_future_entry_alone_gives_zero(self, today):
        assert current_streak(days_back(today, -1), today) == 0


class TestLongestStreak:
    def test_empty(self):
        assert longest_streak([]) == 0

    def test_single_entry(self, today):
        assert longest_streak(days_back(today, 30)) == 1

    def test_longest_run_in_the_past(self, today):
        entries = days_back(today, 0, 1, 10, 11, 12, 13, 20)
        assert longest_streak(entries) == 4

    def test_longest_can_exceed_current(self, today):
        entries = days_back(today, 5, 6, 7)
        assert longest_streak(entries) == 3
        assert current_streak(entries, today) == 0


class TestMissedDays:
    def test_first_entry_today(self, today):
        assert missed_days(days_back(today, 0), today) == 0

    def test_counts_gaps_since_first_entry(self, today):
        # 10 days inclusive, 3 entries
        assert missed_days(days_back(today, 9, 5, 0), today) == 7

    def test_floored_at_zero(self, today):
        # Future entries make count exceed span
        assert missed_days(days_back(today, 0, -1, -2), today) == 0

    def test_empty(self, today):
        assert missed_days([], today) == 0
