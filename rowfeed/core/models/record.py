"""
Record model — one synthetic checklist row.

A record is eight text fields, emitted as eight consecutive lines.
The first field is the checkbox state; the rest are a fixed label
followed by the record's 1-based index.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Literal the checklist consumer reads as an unchecked box
UNCHECKED = "FALSE"

# Label prefix for every templated field, in emission order
FIELD_LABELS: dict[str, str] = {
    "name": "Item",
    "category": "Category",
    "info": "Info",
    "detail": "Detail",
    "note": "Note",
    "tag": "Tag",
    "extra": "Extra",
}


class Record(BaseModel):
    """A single checklist row.

    Field order here is the wire order: ``lines()`` walks the model
    fields as declared.
    """

    model_config = ConfigDict(frozen=True)

    checked: str = UNCHECKED
    name: str
    category: str
    info: str
    detail: str
    note: str
    tag: str
    extra: str

    @classmethod
    def for_index(cls, index: int) -> Record:
        """Build the record for a 1-based sequence index."""
        return cls(**{field: f"{label} {index}" for field, label in FIELD_LABELS.items()})

    def lines(self) -> tuple[str, ...]:
        """Field values in emission order."""
        return tuple(getattr(self, field) for field in type(self).model_fields)


FIELD_COUNT = len(Record.model_fields)
