"""In-process StoreFacade used by service tests and local tooling.

Unique indexes are checked and written under one lock, so concurrent
writers see the same atomic guarantee a database index gives.
"""

import copy
import threading
import uuid
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from bookings.stores.interfaces import (
    UNIQUE_INDEXES,
    ConstraintViolation,
    Document,
    StoreFacade,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryStore(StoreFacade):
    """Dict-backed document store with unique index enforcement."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._collections: dict[str, dict[UUID, Document]] = {
            name: {} for name in UNIQUE_INDEXES
        }

    def get_connection(self) -> "InMemoryStore":
        return self

    def _records(self, collection: str) -> dict[UUID, Document]:
        try:
            return self._collections[collection]
        except KeyError:
            raise ValueError(f"Unknown collection '{collection}'") from None

    def _check_unique(
        self, collection: str, candidate: Mapping[str, Any], record_id: UUID
    ) -> None:
        for index_name, fields in UNIQUE_INDEXES[collection].items():
            key = tuple(candidate.get(name) for name in fields)
            for other_id, other in self._collections[collection].items():
                if other_id != record_id and tuple(other.get(n) for n in fields) == key:
                    raise ConstraintViolation(index_name)

    def insert(self, collection: str, record: Mapping[str, Any]) -> Document:
        with self._lock:
            records = self._records(collection)
            now = self._clock()
            document = {
                **copy.deepcopy(dict(record)),
                "id": uuid.uuid4(),
                "created_at": now,
                "updated_at": now,
            }
            self._check_unique(collection, document, document["id"])
            records[document["id"]] = document
            return copy.deepcopy(document)

    def update(
        self, collection: str, record_id: UUID, patch: Mapping[str, Any]
    ) -> Document | None:
        with self._lock:
            records = self._records(collection)
            current = records.get(record_id)
            if current is None:
                return None
            document = {
                **current,
                **copy.deepcopy(dict(patch)),
                "updated_at": self._clock(),
            }
            self._check_unique(collection, document, record_id)
            records[record_id] = document
            return copy.deepcopy(document)

    def delete(self, collection: str, record_id: UUID) -> bool:
        """Remove a record. Not part of StoreFacade; tests use it to orphan bookings."""
        with self._lock:
            return self._records(collection).pop(record_id, None) is not None

    def find_by_id(self, collection: str, record_id: UUID) -> Document | None:
        with self._lock:
            document = self._records(collection).get(record_id)
            return copy.deepcopy(document)

    def exists_by_id(self, collection: str, record_id: UUID) -> bool:
        with self._lock:
            return record_id in self._records(collection)

    def find_by_unique_key(
        self, collection: str, key: Mapping[str, Any]
    ) -> Document | None:
        matches = self.find_many(collection, key, order_by=())
        return matches[0] if matches else None

    def find_many(
        self,
        collection: str,
        filters: Mapping[str, Any],
        order_by: Sequence[str] = ("-created_at",),
    ) -> list[Document]:
        with self._lock:
            matches = [
                copy.deepcopy(document)
                for document in self._records(collection).values()
                if all(document.get(name) == value for name, value in filters.items())
            ]
        # Stable sorts applied from the last key to the first.
        for key in reversed(order_by):
            name = key.lstrip("-")
            matches.sort(key=lambda document: document[name], reverse=key.startswith("-"))
        return matches

    def count(self, collection: str, filters: Mapping[str, Any]) -> int:
        return len(self.find_many(collection, filters, order_by=()))
