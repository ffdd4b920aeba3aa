"""
Config check use case — validate rowfeed.yml and report issues.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from rowfeed.core.config.loader import ConfigError, find_feed_file, load_feed_config
from rowfeed.core.models.feed import FeedConfig

# Above this, most dialog tools take noticeably long to render
LARGE_FEED_WARNING = 1_000_000


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: FeedConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "config": self.config.model_dump() if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate feed configuration and report issues.

    Args:
        config_path: Optional explicit path to rowfeed.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_feed_file()
    result.config_path = config_path

    try:
        config = load_feed_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.config = config

    if config_path is None:
        result.warnings.append("No rowfeed.yml found. Using built-in defaults.")

    if shutil.which(config.consumer) is None:
        result.warnings.append(f"Consumer '{config.consumer}' not found on PATH.")

    if config.count == 0:
        result.warnings.append("count is 0. The dialog will be empty.")
    elif config.count > LARGE_FEED_WARNING:
        result.warnings.append(
            f"count is {config.count:,}. Rendering may take a long time."
        )

    if len(set(config.columns)) != len(config.columns):
        result.warnings.append("Duplicate column headers.")

    result.valid = not result.errors
    return result
