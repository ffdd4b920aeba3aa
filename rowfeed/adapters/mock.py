"""
Mock consumer — runs the full feed without a dialog.

Every record is generated and serialized exactly as for a real
consumer, but the text goes into a counting sink instead of a pipe.
Useful for timing the generator and for tests.
"""

from __future__ import annotations

import time

from rowfeed.adapters.base import Adapter, ExecutionContext
from rowfeed.core.models.action import Receipt
from rowfeed.core.services.generator import generate, write_records


class LineCounter:
    """Write-only text sink that keeps counts, not content."""

    def __init__(self) -> None:
        self.lines = 0
        self.chars = 0

    def write(self, text: str) -> int:
        self.lines += text.count("\n")
        self.chars += len(text)
        return len(text)

    def flush(self) -> None:
        pass


class MockAdapter(Adapter):
    """Consumer stand-in used by ``show --mock``."""

    def __init__(self, adapter_name: str = "mock", available: bool = True):
        self._name = adapter_name
        self._available = available

    @property
    def name(self) -> str:
        return self._name

    def is_available(self) -> bool:
        return self._available

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        start = time.monotonic()
        sink = LineCounter()
        try:
            written = write_records(generate(action.count), sink)
        except ValueError as e:
            return Receipt.failure(adapter=self._name, action_id=action.id, error=str(e))

        return Receipt.success(
            adapter=self._name,
            action_id=action.id,
            output=f"[mock] {written} records, {sink.lines} lines",
            records=written,
            lines=sink.lines,
            duration_ms=int((time.monotonic() - start) * 1000),
            metadata={"mock": True, "chars": sink.chars},
        )
