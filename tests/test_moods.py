"""Tests for mood aggregation."""

from datetime import date

from daybook.core.entries import NEUTRAL_MOOD, JournalEntry
from daybook.core.moods import NO_MOOD, mood_counts, top_mood


def entry(day: int, mood: str) -> JournalEntry:
    return JournalEntry(entry_date=date(2024, 1, day), primary_mood=mood)


class TestTopMood:
    def test_empty_is_none_string(self):
        assert top_mood([]) == NO_MOOD == "None"

    def test_most_frequent(self):
        entries = [entry(1, "Happy"), entry(2, "Sad"), entry(3, "Happy")]
        assert top_mood(entries) == "Happy"

    def test_tie_goes_to_earliest_mood(self):
        entries = [entry(4, "Sad"), entry(3, "Happy"), entry(2, "Sad"), entry(1, "Happy")]
        assert top_mood(entries) == "Happy"

    def test_blank_mood_counts_as_neutral(self):
        entries = [entry(1, ""), entry(2, "  "), entry(3, "Happy")]
        assert top_mood(entries) == NEUTRAL_MOOD
        assert mood_counts(entries) == {NEUTRAL_MOOD: 2, "Happy": 1}

    def test_moods_are_not_trimmed(self):
        entries = [entry(1, "Happy "), entry(2, "Happy"), entry(3, "Happy")]
        assert mood_counts(entries) == {"Happy ": 1, "Happy": 2}
        assert top_mood(entries) == "Happy"
