"""
Feed action and receipt — what to feed, and what came of it.

A use case builds one Action per consumer run; the adapter answers
with a Receipt. Adapters report failures in the Receipt instead of
raising.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Action(BaseModel):
    """One consumer run: the command line and the feed size."""

    id: str
    adapter: str
    argv: list[str] = Field(default_factory=list)
    count: int = Field(default=0, ge=0, strict=True)
    timeout: int | None = None       # seconds to wait once the feed is written


class Receipt(BaseModel):
    """Outcome of a consumer run.

    ``records`` counts records whose write completed, so a consumer
    that stopped reading early shows up as ``records < count``.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "skipped", "failed"] = "ok"

    records: int = 0
    lines: int = 0
    return_code: int | None = None
    duration_ms: int = 0

    output: str = ""
    error: str | None = None
    selected: list[str] = Field(default_factory=list)

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="ok", output=output, **kwargs)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="failed", error=error, **kwargs)

    @classmethod
    def skip(cls, adapter: str, action_id: str, reason: str = "", **kwargs: Any) -> Receipt:
        """A run that ended without a selection (cancel, close, timeout)."""
        return cls(adapter=adapter, action_id=action_id, status="skipped", output=reason, **kwargs)
