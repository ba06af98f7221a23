"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELD = "MISSING_FIELD"
    FIELD_LENGTH = "FIELD_LENGTH"
    INVALID_FIELD_TYPE = "INVALID_FIELD_TYPE"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    INVALID_ENUM = "INVALID_ENUM"
    EMPTY_SEQUENCE = "EMPTY_SEQUENCE"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_TIME_VALUE = "INVALID_TIME_VALUE"
    INVALID_EMAIL = "INVALID_EMAIL"
    MALFORMED_REFERENCE = "MALFORMED_REFERENCE"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    STORE_CONNECTION = "STORE_CONNECTION"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MissingFieldError(DomainError):
    """Raised when a required field is absent or blank after trimming."""

    def __init__(self, field: str, label: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELD,
            message=f"{label} is required",
            field=field,
        )


class FieldLengthError(DomainError):
    """Raised when a string field exceeds its maximum length."""

    def __init__(self, field: str, label: str, max_length: int) -> None:
        super().__init__(
            code=ErrorCode.FIELD_LENGTH,
            message=f"{label} cannot exceed {max_length} characters",
            field=field,
        )
        self.max_length = max_length


class InvalidFieldTypeError(DomainError):
    """Raised when a field holds a value of the wrong type."""

    def __init__(self, field: str, expected: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FIELD_TYPE,
            message=f"{field} must be {expected}",
            field=field,
        )


class UnknownFieldError(DomainError):
    """Raised when input names a field that cannot be set."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_FIELD,
            message=f"Field '{field}' cannot be set",
            field=field,
        )


class InvalidEnumError(DomainError):
    """Raised when a value is not one of the allowed choices."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_ENUM, message=message, field=field)


class EmptySequenceError(DomainError):
    """Raised when a list field that needs at least one item is empty."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.EMPTY_SEQUENCE, message=message, field=field)


class InvalidInputError(DomainError):
    """Raised when input normalizes to nothing usable."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message, field=field)


class InvalidDateError(DomainError):
    """Raised when a date string cannot be parsed into a calendar date."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message=f"Invalid date format: {value!r}",
            field="date",
        )


class InvalidTimeFormatError(DomainError):
    """Raised when a time string matches no accepted pattern."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_FORMAT,
            message=f"Invalid time format: {value!r}. Use HH:MM or HH:MM AM/PM",
            field="time",
        )


class InvalidTimeValueError(DomainError):
    """Raised when a time string has an out-of-range hour or minute."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_VALUE,
            message=f"Invalid time values: {value!r}",
            field="time",
        )


class InvalidEmailError(DomainError):
    """Raised when an email address fails syntax validation."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL,
            message="Please provide a valid email address",
            field="email",
        )


class MalformedReferenceError(DomainError):
    """Raised when an ID is not a well-formed identifier."""

    def __init__(self, field: str = "event_id", label: str = "event ID") -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_REFERENCE,
            message=f"Invalid {label} format",
            field=field,
        )


class DanglingReferenceError(DomainError):
    """Raised when a booking points at an event that does not exist."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.DANGLING_REFERENCE,
            message=f"Event with ID {event_id} does not exist",
            field="event_id",
        )
        self.event_id = event_id


class DuplicateSlugError(DomainError):
    """Raised when another event already owns the slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message=f"An event with slug '{slug}' already exists",
            field="title",
        )
        self.slug = slug


class DuplicateBookingError(DomainError):
    """Raised when the email has already booked the event."""

    def __init__(self, event_id: str, email: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_BOOKING,
            message="This email has already booked this event",
            field="email",
        )
        self.event_id = event_id
        self.email = email


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class StoreConnectionError(DomainError):
    """Raised when the store cannot establish or reuse a connection."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.STORE_CONNECTION, message=message)
