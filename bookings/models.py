"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models

from bookings.domain.value_objects import EventMode
from bookings.stores.interfaces import BOOKING_EVENT_EMAIL_INDEX, EVENT_SLUG_INDEX


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=100)
    slug = models.CharField(max_length=100)
    description = models.TextField()
    overview = models.TextField()
    image = models.TextField()
    venue = models.TextField()
    location = models.TextField()
    date = models.CharField(max_length=10)
    time = models.CharField(max_length=5)
    mode = models.CharField(
        max_length=7,
        choices=[(mode.value, mode.value) for mode in EventMode],
    )
    audience = models.TextField()
    agenda = models.JSONField(default=list)
    organizer = models.TextField()
    tags = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["slug"], name=EVENT_SLUG_INDEX),
        ]
        indexes = [
            models.Index(fields=["date", "mode"], name="event_date_mode_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Booking(models.Model):
    """Persistence model for bookings.

    ``event_id`` is a plain column rather than a foreign key: a booking
    outlives its event, and the reference is checked by the service.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event_id = models.UUIDField()
    email = models.CharField(max_length=254)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["event_id", "email"], name=BOOKING_EVENT_EMAIL_INDEX
            ),
        ]
        indexes = [
            models.Index(fields=["email"], name="booking_email_idx"),
            models.Index(fields=["event_id", "created_at"], name="booking_event_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.email} - {self.event_id}"
