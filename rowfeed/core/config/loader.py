"""
Configuration loader — reads rowfeed.yml into a FeedConfig.

It reads YAML, validates against the Pydantic schema, and returns
a typed config. A missing file is not an error: the defaults are the
stock fixture.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from rowfeed.core.models.feed import FeedConfig

logger = logging.getLogger(__name__)

# Default config filename
FEED_CONFIG_FILE = "rowfeed.yml"


class ConfigError(Exception):
    """Raised when feed configuration is invalid or unreadable."""


def find_feed_file(start_dir: Path | None = None) -> Path | None:
    """Search for rowfeed.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to rowfeed.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / FEED_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_feed_config(path: Path | None = None) -> FeedConfig:
    """Load and validate feed configuration.

    Args:
        path: Explicit path to rowfeed.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated FeedConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    explicit = path is not None
    if path is None:
        path = find_feed_file()

    if path is None:
        logger.debug("No %s found, using defaults", FEED_CONFIG_FILE)
        return FeedConfig()

    if not path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return FeedConfig()

    logger.debug("Loading feed config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "feed" key or be flat
    feed_data = data.get("feed", data)
    if not isinstance(feed_data, dict):
        raise ConfigError(f"Expected 'feed' to be a mapping in {path}")

    try:
        config = FeedConfig.model_validate(feed_data)
    except Exception as e:
        raise ConfigError(f"Invalid feed configuration: {e}") from e

    logger.info("Loaded feed config: %d records into %s", config.count, config.consumer)
    return config
