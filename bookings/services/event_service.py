"""Event service - all event business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from bookings.domain.errors import (
    DuplicateSlugError,
    EventNotFoundError,
    MalformedReferenceError,
    UnknownFieldError,
)
from bookings.domain.models import Event
from bookings.domain.rules import EVENT_FIELDS, EVENT_RULES
from bookings.domain.temporal import normalize_date
from bookings.domain.validation import diff_fields
from bookings.domain.value_objects import EventId, EventMode
from bookings.stores.interfaces import (
    EVENT_SLUG_INDEX,
    EVENTS,
    ConstraintViolation,
    StoreFacade,
)

logger = logging.getLogger(__name__)


def parse_event_id(event_id: object) -> UUID:
    """Parse an event ID.

    Raises:
        MalformedReferenceError: If the event_id is not a valid UUID.
    """
    try:
        return EventId.from_string(event_id).value
    except ValueError as exc:
        raise MalformedReferenceError(field="id") from exc


def _reject_unknown(fields: Mapping[str, Any], allowed: tuple[str, ...]) -> None:
    for name in fields:
        if name not in allowed:
            raise UnknownFieldError(name)


class EventService:
    """Service for event records."""

    def __init__(self, store: StoreFacade) -> None:
        self._store = store

    def create(self, fields: Mapping[str, Any]) -> Event:
        """Validate, normalize and persist a new event.

        Raises:
            DomainError: The first validation failure, in field order.
            DuplicateSlugError: If another event already has the same slug.
        """
        _reject_unknown(fields, EVENT_FIELDS)
        document = EVENT_RULES.run({name: fields.get(name) for name in EVENT_FIELDS})
        try:
            stored = self._store.insert(EVENTS, document)
        except ConstraintViolation as exc:
            if exc.index_name != EVENT_SLUG_INDEX:
                raise
            logger.warning("Rejected event with duplicate slug %s", document["slug"])
            raise DuplicateSlugError(document["slug"]) from exc

        logger.info("Created event %s (slug=%s)", stored["id"], stored["slug"])
        return Event.from_document(stored)

    def update(self, event_id: str, patch: Mapping[str, Any]) -> Event:
        """Apply changed fields to an event.

        Only fields whose values differ from the stored record are validated.
        A changed title regenerates the slug. updated_at is always refreshed.

        Raises:
            MalformedReferenceError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            DomainError: The first validation failure among changed fields.
            DuplicateSlugError: If the new title's slug is already taken.
        """
        record_id = parse_event_id(event_id)
        _reject_unknown(patch, EVENT_FIELDS)
        current = self._store.find_by_id(EVENTS, record_id)
        if current is None:
            raise EventNotFoundError(str(record_id))

        changed = diff_fields(current, patch)
        normalized = EVENT_RULES.run({**current, **patch}, only=changed)
        changes = {
            name: normalized[name]
            for name in (*EVENT_FIELDS, "slug")
            if normalized[name] != current[name]
        }

        try:
            stored = self._store.update(EVENTS, record_id, changes)
        except ConstraintViolation as exc:
            if exc.index_name != EVENT_SLUG_INDEX:
                raise
            slug = normalized["slug"]
            logger.warning("Rejected title change on %s: slug %s taken", record_id, slug)
            raise DuplicateSlugError(slug) from exc
        if stored is None:
            raise EventNotFoundError(str(record_id))

        logger.info("Updated event %s fields=%s", record_id, sorted(changes))
        return Event.from_document(stored)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            MalformedReferenceError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        record_id = parse_event_id(event_id)
        document = self._store.find_by_id(EVENTS, record_id)
        if document is None:
            raise EventNotFoundError(str(record_id))
        return Event.from_document(document)

    def get_event_by_slug(self, slug: str) -> Event:
        document = self._store.find_by_unique_key(EVENTS, {"slug": slug})
        if document is None:
            raise EventNotFoundError(slug)
        return Event.from_document(document)

    def list_events(
        self, date: str | None = None, mode: EventMode | str | None = None
    ) -> list[Event]:
        """Return events, newest first, optionally filtered by date and mode."""
        filters: dict[str, Any] = {}
        if date is not None:
            filters["date"] = normalize_date(date)
        if mode is not None:
            filters["mode"] = EVENT_RULES.run({"mode": mode}, only=("mode",))["mode"]
        documents = self._store.find_many(EVENTS, filters)
        return [Event.from_document(document) for document in documents]
