"""Tests for config loading."""

from daybook.config import Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.conf") == Config()

    def test_parses_values(self, tmp_path):
        path = tmp_path / "daybook.conf"
        path.write_text(
            "# Daybook settings\n"
            "\n"
            'DATABASE_PATH="~/journal/my journal.db"  # quoted\n'
            "default_mood = Calm # inline comment\n"
            "TOP_TAGS_LIMIT=3\n"
            "trend_days='7'\n"
            "not a setting\n"
            "UNKNOWN_KEY=1\n"
        )
        config = load_config(path)
        assert config.database_path == "~/journal/my journal.db"
        assert config.default_mood == "Calm"
        assert config.top_tags_limit == 3
        assert config.trend_days == 7

    def test_bad_integers_keep_defaults(self, tmp_path, caplog):
        path = tmp_path / "daybook.conf"
        path.write_text("TOP_TAGS_LIMIT=lots\nTREND_DAYS=0\n")
        config = load_config(path)
        assert config.top_tags_limit == 5
        assert config.trend_days == 5
        assert "TOP_TAGS_LIMIT" in caplog.text
        assert "TREND_DAYS" in caplog.text

    def test_empty_mood_falls_back_to_neutral(self, tmp_path):
        path = tmp_path / "daybook.conf"
        path.write_text('DEFAULT_MOOD=""\n')
        assert load_config(path).default_mood == "Neutral"
