"""
Consumer command line — the argv for the checklist dialog program.

Columns come from the same FeedConfig that sizes the feed, and the
config rejects a column count that differs from the record field
count, so the consumer's grouping always lines up with the stream.
"""

from __future__ import annotations

import shlex

from rowfeed.core.models.feed import FeedConfig


def build_consumer_argv(config: FeedConfig) -> list[str]:
    """Build the consumer invocation for a checklist dialog."""
    argv = [config.consumer, "--list", "--checklist", f"--title={config.title}"]
    argv.extend(f"--column={column}" for column in config.columns)
    argv.append(f"--width={config.width}")
    argv.append(f"--height={config.height}")
    return argv


def format_command(argv: list[str]) -> str:
    """Shell-quoted rendering of argv, for display and dry runs."""
    return shlex.join(argv)
