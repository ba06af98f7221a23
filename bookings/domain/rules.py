"""Validation rules for Event and Booking documents."""

from collections.abc import Callable, Mapping
from typing import Any
from uuid import UUID

from bookings.domain.email import validate_and_normalize
from bookings.domain.errors import (
    DomainError,
    EmptySequenceError,
    FieldLengthError,
    InvalidEnumError,
    InvalidFieldTypeError,
    MalformedReferenceError,
    MissingFieldError,
)
from bookings.domain.temporal import normalize_date, normalize_time
from bookings.domain.text import slugify
from bookings.domain.validation import Invalid, Stage, Valid, ValidationPipeline
from bookings.domain.value_objects import EventMode, parse_uuid

EVENT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "agenda",
    "organizer",
    "tags",
)

BOOKING_FIELDS = ("event_id", "email")


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()


def _present(document: Mapping[str, Any], field: str) -> bool:
    value = document.get(field)
    return value is not None and not (isinstance(value, str) and not value.strip())


def required_text(field: str, max_length: int | None = None) -> Stage:
    """Trimmed, non-blank string with an optional length cap."""

    def check(document: Mapping[str, Any]) -> Valid | Invalid:
        if not _present(document, field):
            return Invalid(MissingFieldError(field, _label(field)))
        value = document[field]
        if not isinstance(value, str):
            return Invalid(InvalidFieldTypeError(field, "a string"))
        value = value.strip()
        if max_length is not None and len(value) > max_length:
            return Invalid(FieldLengthError(field, _label(field), max_length))
        return Valid({field: value})

    return Stage(fields=(field,), check=check)


def required_sequence(field: str, empty_message: str) -> Stage:
    """Non-empty list of strings, each trimmed."""

    def check(document: Mapping[str, Any]) -> Valid | Invalid:
        value = document.get(field)
        if value is None:
            return Invalid(MissingFieldError(field, _label(field)))
        if not isinstance(value, (list, tuple)):
            return Invalid(InvalidFieldTypeError(field, "a list of strings"))
        if not all(isinstance(item, str) for item in value):
            return Invalid(InvalidFieldTypeError(field, "a list of strings"))
        items = [item.strip() for item in value if item.strip()]
        if not items:
            return Invalid(EmptySequenceError(field, empty_message))
        return Valid({field: items})

    return Stage(fields=(field,), check=check)


def choice(field: str, allowed: tuple[str, ...], message: str) -> Stage:
    def check(document: Mapping[str, Any]) -> Valid | Invalid:
        if not _present(document, field):
            return Invalid(MissingFieldError(field, _label(field)))
        value = document[field]
        if isinstance(value, EventMode):
            value = value.value
        if not isinstance(value, str) or value.strip() not in allowed:
            return Invalid(InvalidEnumError(field, message))
        return Valid({field: value.strip()})

    return Stage(fields=(field,), check=check)


def normalized(
    field: str,
    normalize: Callable[[Any], Any],
    label: str | None = None,
) -> Stage:
    """Required field passed through a normalizer that raises DomainError."""

    def check(document: Mapping[str, Any]) -> Valid | Invalid:
        if not _present(document, field):
            return Invalid(MissingFieldError(field, label or _label(field)))
        try:
            return Valid({field: normalize(document[field])})
        except DomainError as error:
            return Invalid(error)

    return Stage(fields=(field,), check=check)


def derived(source: str, target: str, derive: Callable[[Any], Any]) -> Stage:
    """Recompute ``target`` from the already-normalized ``source``."""

    def check(document: Mapping[str, Any]) -> Valid | Invalid:
        try:
            return Valid({target: derive(document[source])})
        except DomainError as error:
            return Invalid(error)

    return Stage(fields=(source,), check=check)


def _event_reference(value: Any) -> UUID:
    try:
        return parse_uuid(value)
    except ValueError as exc:
        raise MalformedReferenceError() from exc


EVENT_RULES = ValidationPipeline(
    required_text("title", max_length=100),
    required_text("description", max_length=1000),
    required_text("overview", max_length=500),
    required_text("image"),
    required_text("venue"),
    required_text("location"),
    normalized("date", normalize_date),
    normalized("time", normalize_time),
    choice(
        "mode",
        EventMode.values(),
        "Mode must be either online, offline, or hybrid",
    ),
    required_text("audience"),
    required_sequence("agenda", "At least one agenda item is required"),
    required_text("organizer"),
    required_sequence("tags", "At least one tag is required"),
    derived("title", "slug", slugify),
)

BOOKING_RULES = ValidationPipeline(
    normalized("event_id", _event_reference, label="Event ID"),
    normalized("email", validate_and_normalize),
)
