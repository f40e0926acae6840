"""
Identifier and clock providers used when emitting events.

Games take a Providers instance so tests can supply fixed ids and times.
"""
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Providers(ABC):
    """Source of aggregate identifiers and event timestamps."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a new globally unique identifier."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time."""


class SystemProviders(Providers):
    """Random UUID4 identifiers and the UTC wall clock."""

    def new_id(self) -> str:
        return str(uuid.uuid4())

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
