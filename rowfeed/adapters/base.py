"""
Consumer adapter protocol.

The show use case never spawns a consumer itself: it hands an Action
to an adapter and reads back a Receipt.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from rowfeed.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """An action plus the directory the consumer runs in."""

    action: Action
    working_dir: str = "."


class Adapter(ABC):
    """Feeds records to one kind of consumer.

    ``execute`` must not raise: spawn errors, early close and bad
    exit codes all come back as a failed Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Adapter identifier, recorded on every Receipt."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the consumer can be launched at all."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the action before launching. Returns (ok, error_message)."""

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Run the consumer with the feed attached."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
