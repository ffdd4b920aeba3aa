"""
Show use case — feed a checklist dialog with generated records.

Loads the feed config, builds the consumer command line, and hands
an Action to the checklist adapter (or the mock adapter).
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from pathlib import Path

from rowfeed.adapters.base import Adapter, ExecutionContext
from rowfeed.adapters.checklist import ChecklistConsumerAdapter
from rowfeed.adapters.mock import MockAdapter
from rowfeed.core.config.loader import ConfigError, load_feed_config
from rowfeed.core.models.action import Action, Receipt
from rowfeed.core.models.feed import FeedConfig
from rowfeed.core.services.consumer_args import build_consumer_argv, format_command

logger = logging.getLogger(__name__)


@dataclass
class ShowResult:
    """Result of a show run."""

    config: FeedConfig | None = None
    argv: list[str] = field(default_factory=list)
    receipt: Receipt | None = None
    dry_run: bool = False
    error: str | None = None

    @property
    def command(self) -> str:
        return format_command(self.argv) if self.argv else ""

    def to_dict(self) -> dict:
        return {
            "error": self.error,
            "dry_run": self.dry_run,
            "count": self.config.count if self.config else None,
            "command": self.command,
            "argv": self.argv,
            "receipt": self.receipt.model_dump() if self.receipt else None,
        }


def run_show(
    config_path: Path | None = None,
    count: int | None = None,
    dry_run: bool = False,
    mock_mode: bool = False,
    adapter: Adapter | None = None,
) -> ShowResult:
    """Feed the configured checklist consumer.

    Args:
        config_path: Optional explicit path to rowfeed.yml.
        count: Override for the configured record count.
        dry_run: Build the command line but don't launch anything.
        mock_mode: Use the mock adapter instead of the real consumer.
        adapter: Explicit adapter (takes precedence over mock_mode).

    Returns:
        ShowResult with the command line and the adapter's receipt.
    """
    result = ShowResult(dry_run=dry_run)

    try:
        config = load_feed_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    if count is not None:
        if count < 0:
            result.error = f"count must be >= 0, got {count}"
            return result
        config = config.model_copy(update={"count": count})

    result.config = config
    result.argv = build_consumer_argv(config)

    if dry_run:
        logger.info("Dry run: %s", result.command)
        return result

    if adapter is None:
        if mock_mode:
            adapter = MockAdapter(adapter_name="checklist")
        else:
            adapter = ChecklistConsumerAdapter(consumer=config.consumer)

    action = Action(
        id=f"show-{uuid.uuid4().hex[:8]}",
        adapter=adapter.name,
        argv=result.argv,
        count=config.count,
        timeout=config.timeout,
    )
    context = ExecutionContext(action=action, working_dir=str(Path.cwd()))

    valid, message = adapter.validate(context)
    if not valid:
        result.receipt = Receipt.failure(
            adapter=adapter.name, action_id=action.id, error=message
        )
        return result

    logger.info("Feeding %d records to %s", config.count, config.consumer)
    result.receipt = adapter.execute(context)
    return result
