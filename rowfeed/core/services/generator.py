"""
Record generator — the synthetic row stream.

``generate`` is lazy: records are built one at a time and never
collected, so a 100k-row feed stays flat in memory. ``write_records``
serializes them one field per line.

A closed reader surfaces as ``BrokenPipeError`` from ``write_records``.
Callers decide how to fail.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

from rowfeed.core.models.record import Record

logger = logging.getLogger(__name__)


def generate(count: int) -> Iterator[Record]:
    """Yield ``count`` records with indices 1..count.

    Raises:
        ValueError: If count is not a non-negative integer. Raised on
            the call, not on first iteration.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"count must be an integer, got {type(count).__name__}")
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return _records(count)


def _records(count: int) -> Iterator[Record]:
    for index in range(1, count + 1):
        yield Record.for_index(index)


def render(record: Record) -> str:
    """One record as newline-terminated lines."""
    return "".join(f"{value}\n" for value in record.lines())


def write_records(records: Iterable[Record], stream: TextIO) -> int:
    """Write records to a text stream, one field per line.

    Returns:
        Number of records written.
    """
    written = 0
    for record in records:
        stream.write(render(record))
        written += 1
    logger.debug("Wrote %d records", written)
    return written
