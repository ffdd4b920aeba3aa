"""
Feed model — what to generate and how to present it.

Loaded from rowfeed.yml. Every field has a default, so an absent
config file reproduces the stock fixture: 100,000 rows into a
500x600 ``zenity-rs`` checklist.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, field_validator

from rowfeed.core.models.record import FIELD_COUNT

DEFAULT_COLUMNS: list[str] = [
    "Check",
    "Item Name",
    "Category",
    "Info",
    "Detail",
    "Note",
    "Tag",
    "Extra",
]


class FeedConfig(BaseModel):
    """Generation and consumer settings."""

    count: int = Field(default=100_000, ge=0, strict=True)
    title: str = "Large Checklist Test"
    columns: list[str] = Field(default_factory=lambda: list(DEFAULT_COLUMNS))
    width: int = Field(default=500, gt=0, strict=True)
    height: int = Field(default=600, gt=0, strict=True)
    consumer: str = "zenity-rs"
    timeout: StrictInt | None = Field(default=None, gt=0)  # seconds; None = wait for the user

    @field_validator("columns")
    @classmethod
    def _one_column_per_field(cls, value: list[str]) -> list[str]:
        if len(value) != FIELD_COUNT:
            raise ValueError(
                f"expected {FIELD_COUNT} columns (one per record field), got {len(value)}"
            )
        return value

    @field_validator("consumer")
    @classmethod
    def _consumer_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("consumer must name an executable")
        return value.strip()
