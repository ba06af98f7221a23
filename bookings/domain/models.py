"""Domain models representing persisted state.

These are pure domain objects built from store documents.
Django ORM models are in bookings/models.py (persistence layer).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self

from bookings.domain.value_objects import BookingId, EventId, EventMode


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: EventMode
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Self:
        return cls(
            id=EventId.from_string(document["id"]),
            title=document["title"],
            slug=document["slug"],
            description=document["description"],
            overview=document["overview"],
            image=document["image"],
            venue=document["venue"],
            location=document["location"],
            date=document["date"],
            time=document["time"],
            mode=EventMode(document["mode"]),
            audience=document["audience"],
            agenda=tuple(document["agenda"]),
            organizer=document["organizer"],
            tags=tuple(document["tags"]),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
        )


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Self:
        return cls(
            id=BookingId.from_string(document["id"]),
            event_id=EventId.from_string(document["event_id"]),
            email=document["email"],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
        )
