"""Unit tests for domain primitives and the error taxonomy.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from datetime import datetime, timezone

import pytest

from bookings.domain import Booking, BookingId, Event, EventId, EventMode
from bookings.domain.errors import (
    DanglingReferenceError,
    DomainError,
    ErrorCode,
    FieldLengthError,
    MalformedReferenceError,
    MissingFieldError,
)
from bookings.domain.value_objects import parse_uuid
from bookings.services.booking_service import parse_booking_id
from bookings.services.event_service import parse_event_id


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "12345678-1234-5678-1234-567812345678"
        event_id = EventId.from_string(raw)
        assert event_id.value == uuid.UUID(raw)
        assert str(event_id) == raw

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")

    def test_from_string_trims_whitespace(self):
        """Surrounding whitespace is ignored."""
        value = uuid.uuid4()
        assert BookingId.from_string(f"  {value}  ") == BookingId(value)

    @pytest.mark.parametrize("value", [12345, None, ""])
    def test_from_string_rejects_non_uuid(self, value):
        with pytest.raises(ValueError):
            EventId.from_string(value)

    def test_service_id_parsers_use_value_objects(self):
        """Malformed ids surface as domain errors naming the id kind."""
        with pytest.raises(MalformedReferenceError, match="Invalid booking ID format"):
            parse_booking_id("not-a-uuid")
        with pytest.raises(MalformedReferenceError, match="Invalid event ID format"):
            parse_event_id(42)

    def test_ids_compare_by_value(self):
        """Two ids wrapping the same UUID are equal."""
        value = uuid.uuid4()
        assert BookingId(value) == BookingId(value)


class TestParseUuid:
    """Tests for parse_uuid coercion."""

    def test_accepts_uuid_instance(self):
        value = uuid.uuid4()
        assert parse_uuid(value) is value

    def test_trims_string(self):
        value = uuid.uuid4()
        assert parse_uuid(f"  {value}  ") == value

    @pytest.mark.parametrize("value", [123, None, "", "507f1f77bcf86cd799439011"])
    def test_rejects_non_uuid(self, value):
        with pytest.raises(ValueError):
            parse_uuid(value)


class TestEventMode:
    def test_values(self):
        assert EventMode.values() == ("online", "offline", "hybrid")


class TestDomainModels:
    """Tests for building domain models from store documents."""

    def test_event_from_document(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        document = {
            "id": uuid.uuid4(),
            "title": "Launch",
            "slug": "launch",
            "description": "d",
            "overview": "o",
            "image": "https://example.com/a.png",
            "venue": "v",
            "location": "l",
            "date": "2024-12-15",
            "time": "09:00",
            "mode": "online",
            "audience": "a",
            "agenda": ["one"],
            "organizer": "org",
            "tags": ["t"],
            "created_at": now,
            "updated_at": now,
        }
        event = Event.from_document(document)
        assert event.id == EventId(document["id"])
        assert event.mode is EventMode.ONLINE
        assert event.agenda == ("one",)
        assert event.tags == ("t",)

    def test_booking_from_document_accepts_string_ids(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        booking_id, event_id = uuid.uuid4(), uuid.uuid4()
        booking = Booking.from_document(
            {
                "id": str(booking_id),
                "event_id": str(event_id),
                "email": "user@example.com",
                "created_at": now,
                "updated_at": now,
            }
        )
        assert booking.id == BookingId(booking_id)
        assert booking.event_id == EventId(event_id)


class TestErrors:
    """Tests for domain error messages and codes."""

    def test_str_includes_code_and_message(self):
        error = MissingFieldError("title", "Title")
        assert str(error) == "MISSING_FIELD: Title is required"
        assert error.field == "title"

    def test_length_message(self):
        error = FieldLengthError("title", "Title", 100)
        assert error.code is ErrorCode.FIELD_LENGTH
        assert error.message == "Title cannot exceed 100 characters"
        assert error.max_length == 100

    def test_dangling_reference_names_missing_id(self):
        error = DanglingReferenceError("abc")
        assert error.message == "Event with ID abc does not exist"
        assert error.event_id == "abc"

    def test_errors_are_raisable(self):
        with pytest.raises(DomainError, match="is required"):
            raise MissingFieldError("email", "Email")
