"""Store interfaces (repository pattern).

Stores must be swappable. They persist plain documents keyed by collection
name; services turn those documents into domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any
from uuid import UUID

EVENTS = "events"
BOOKINGS = "bookings"

EVENT_SLUG_INDEX = "event_slug_unique"
BOOKING_EVENT_EMAIL_INDEX = "booking_event_email_unique"

UNIQUE_INDEXES: dict[str, dict[str, tuple[str, ...]]] = {
    EVENTS: {EVENT_SLUG_INDEX: ("slug",)},
    BOOKINGS: {BOOKING_EVENT_EMAIL_INDEX: ("event_id", "email")},
}

Document = dict[str, Any]


class ConstraintViolation(Exception):
    """Raised by a store when a write collides on a unique index."""

    def __init__(self, index_name: str) -> None:
        super().__init__(f"Unique index '{index_name}' violated")
        self.index_name = index_name


class StoreFacade(ABC):
    """Interface for document persistence operations."""

    @abstractmethod
    def get_connection(self) -> Any:
        """Return the cached store handle, connecting on first use."""
        ...

    @abstractmethod
    def insert(self, collection: str, record: Mapping[str, Any]) -> Document:
        """Persist a new record and return it with id and timestamps.

        Raises:
            ConstraintViolation: If a unique index already holds the key.
        """
        ...

    @abstractmethod
    def update(
        self, collection: str, record_id: UUID, patch: Mapping[str, Any]
    ) -> Document | None:
        """Apply a patch, refresh updated_at, and return the record.

        Returns None if the record does not exist.

        Raises:
            ConstraintViolation: If the patch collides on a unique index.
        """
        ...

    @abstractmethod
    def find_by_id(self, collection: str, record_id: UUID) -> Document | None:
        """Return a record by ID, or None if not found."""
        ...

    @abstractmethod
    def exists_by_id(self, collection: str, record_id: UUID) -> bool:
        """Check if a record exists."""
        ...

    @abstractmethod
    def find_by_unique_key(
        self, collection: str, key: Mapping[str, Any]
    ) -> Document | None:
        """Return the record matching every key field, or None."""
        ...

    @abstractmethod
    def find_many(
        self,
        collection: str,
        filters: Mapping[str, Any],
        order_by: Sequence[str] = ("-created_at",),
    ) -> list[Document]:
        """Return records matching every filter, ordered by the given keys."""
        ...

    @abstractmethod
    def count(self, collection: str, filters: Mapping[str, Any]) -> int:
        """Count records matching every filter."""
        ...
