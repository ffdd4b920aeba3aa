"""Adapters — bindings for external consumer programs.

Public re-exports for convenient access.
"""

from rowfeed.adapters.base import Adapter, ExecutionContext
from rowfeed.adapters.checklist import ChecklistConsumerAdapter
from rowfeed.adapters.mock import MockAdapter

__all__ = [
    "Adapter",
    "ChecklistConsumerAdapter",
    "ExecutionContext",
    "MockAdapter",
]
