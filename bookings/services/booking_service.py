"""Booking service - booking business logic and event reference checks."""

import logging
from collections.abc import Callable, Mapping
from typing import Any
from uuid import UUID

from bookings.domain.email import validate_and_normalize
from bookings.domain.errors import (
    BookingNotFoundError,
    DanglingReferenceError,
    DuplicateBookingError,
    MalformedReferenceError,
    UnknownFieldError,
)
from bookings.domain.models import Booking, Event
from bookings.domain.rules import BOOKING_FIELDS, BOOKING_RULES
from bookings.domain.validation import diff_fields
from bookings.domain.value_objects import BookingId
from bookings.services.event_service import parse_event_id
from bookings.stores.interfaces import (
    BOOKING_EVENT_EMAIL_INDEX,
    BOOKINGS,
    EVENTS,
    ConstraintViolation,
    StoreFacade,
)

logger = logging.getLogger(__name__)


def parse_booking_id(booking_id: object) -> UUID:
    """Parse a booking ID.

    Raises:
        MalformedReferenceError: If the booking_id is not a valid UUID.
    """
    try:
        return BookingId.from_string(booking_id).value
    except ValueError as exc:
        raise MalformedReferenceError(field="id", label="booking ID") from exc


class BookingService:
    """Service for booking records."""

    def __init__(self, store: StoreFacade) -> None:
        self._store = store

    def _ensure_event_exists(self, event_id: UUID) -> None:
        if not self._store.exists_by_id(EVENTS, event_id):
            logger.warning("Rejected booking for missing event %s", event_id)
            raise DanglingReferenceError(str(event_id))

    def _persist(
        self, write: Callable[[], dict[str, Any] | None], document: Mapping[str, Any]
    ) -> dict[str, Any] | None:
        try:
            return write()
        except ConstraintViolation as exc:
            if exc.index_name != BOOKING_EVENT_EMAIL_INDEX:
                raise
            logger.warning(
                "Rejected duplicate booking of %s by %s",
                document["event_id"],
                document["email"],
            )
            raise DuplicateBookingError(str(document["event_id"]), document["email"]) from exc

    def create(self, fields: Mapping[str, Any]) -> Booking:
        """Validate and persist a new booking.

        Raises:
            MissingFieldError: If event_id or email is absent.
            MalformedReferenceError: If event_id is not a valid UUID.
            InvalidEmailError: If the email fails validation.
            DanglingReferenceError: If no event has that event_id.
            DuplicateBookingError: If the email already booked the event.
        """
        for name in fields:
            if name not in BOOKING_FIELDS:
                raise UnknownFieldError(name)
        document = BOOKING_RULES.run({name: fields.get(name) for name in BOOKING_FIELDS})
        self._ensure_event_exists(document["event_id"])

        stored = self._persist(lambda: self._store.insert(BOOKINGS, document), document)
        logger.info("Created booking %s for event %s", stored["id"], stored["event_id"])
        return Booking.from_document(stored)

    def update(self, booking_id: str, patch: Mapping[str, Any]) -> Booking:
        """Apply changed fields to a booking.

        The event reference is re-checked only when event_id itself changes.
        A booking whose event has since disappeared can still change its
        email.

        Raises:
            MalformedReferenceError: If an ID is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
            InvalidEmailError: If a changed email fails validation.
            DanglingReferenceError: If a changed event_id matches no event.
            DuplicateBookingError: If the change collides with another booking.
        """
        record_id = parse_booking_id(booking_id)
        for name in patch:
            if name not in BOOKING_FIELDS:
                raise UnknownFieldError(name)
        current = self._store.find_by_id(BOOKINGS, record_id)
        if current is None:
            raise BookingNotFoundError(str(record_id))

        changed = diff_fields(current, patch)
        normalized = BOOKING_RULES.run({**current, **patch}, only=changed)
        changes = {
            name: normalized[name]
            for name in BOOKING_FIELDS
            if normalized[name] != current[name]
        }
        if "event_id" in changes:
            self._ensure_event_exists(changes["event_id"])

        stored = self._persist(
            lambda: self._store.update(BOOKINGS, record_id, changes), normalized
        )
        if stored is None:
            raise BookingNotFoundError(str(record_id))

        logger.info("Updated booking %s fields=%s", record_id, sorted(changes))
        return Booking.from_document(stored)

    def get_booking(self, booking_id: str) -> Booking:
        """Return a booking by ID.

        Raises:
            MalformedReferenceError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
        """
        record_id = parse_booking_id(booking_id)
        document = self._store.find_by_id(BOOKINGS, record_id)
        if document is None:
            raise BookingNotFoundError(str(record_id))
        return Booking.from_document(document)

    def get_booking_event(self, booking_id: str) -> Event:
        """Resolve the event a booking points at.

        Raises:
            DanglingReferenceError: If the event no longer exists.
        """
        booking = self.get_booking(booking_id)
        document = self._store.find_by_id(EVENTS, booking.event_id.value)
        if document is None:
            raise DanglingReferenceError(str(booking.event_id))
        return Event.from_document(document)

    def list_bookings_for_event(self, event_id: str) -> list[Booking]:
        """Return bookings for an event, newest first."""
        record_id = parse_event_id(event_id)
        documents = self._store.find_many(BOOKINGS, {"event_id": record_id})
        return [Booking.from_document(document) for document in documents]

    def count_bookings_for_event(self, event_id: str) -> int:
        return self._store.count(BOOKINGS, {"event_id": parse_event_id(event_id)})

    def list_bookings_for_email(self, email: str) -> list[Booking]:
        documents = self._store.find_many(BOOKINGS, {"email": validate_and_normalize(email)})
        return [Booking.from_document(document) for document in documents]
