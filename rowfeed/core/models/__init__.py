"""
Domain models — Pydantic types for the feeder.

All models are re-exported here for convenient access:

    from rowfeed.core.models import Record, FeedConfig, Action, Receipt
"""

from rowfeed.core.models.action import Action, Receipt
from rowfeed.core.models.feed import DEFAULT_COLUMNS, FeedConfig
from rowfeed.core.models.record import FIELD_COUNT, FIELD_LABELS, UNCHECKED, Record

__all__ = [
    # action.py
    "Action",
    "DEFAULT_COLUMNS",
    "FIELD_COUNT",
    "FIELD_LABELS",
    # feed.py
    "FeedConfig",
    "Receipt",
    # record.py
    "Record",
    "UNCHECKED",
]
