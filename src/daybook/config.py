"""Configuration management for Daybook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.entries import NEUTRAL_MOOD
from .core.tags import TOP_TAGS_LIMIT
from .core.trend import TREND_DAYS

logger = logging.getLogger(__name__)

DAYBOOK_HOME = Path(os.environ.get("DAYBOOK_HOME", Path.home() / "daybook"))
CONFIG_FILE = DAYBOOK_HOME / "config" / "daybook.conf"
DATA_DIR = DAYBOOK_HOME / "data"


@dataclass
class Config:
    """Daybook configuration."""

    database_path: str = ""
    default_mood: str = NEUTRAL_MOOD
    top_tags_limit: int = TOP_TAGS_LIMIT
    trend_days: int = TREND_DAYS


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _positive_int(key: str, value: str, default: int) -> int:
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key.upper()}={value!r}")
        return default
    if number < 1:
        logger.warning(f"Ignoring non-positive {key.upper()}={number}")
        return default
    return number


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daybook.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "database_path":
                config.database_path = value
            case "default_mood":
                config.default_mood = value or NEUTRAL_MOOD
            case "top_tags_limit":
                config.top_tags_limit = _positive_int(key, value, config.top_tags_limit)
            case "trend_days":
                config.trend_days = _positive_int(key, value, config.trend_days)
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
