"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from bookings.services.booking_service import BookingService
from bookings.services.event_service import EventService
from bookings.stores.connection import reset_connection_cache
from bookings.stores.memory_store import InMemoryStore


class TickingClock:
    """Clock that advances one second per reading."""

    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_connection_cache():
    reset_connection_cache()
    yield
    reset_connection_cache()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore(clock=TickingClock())


@pytest.fixture
def event_service(store: InMemoryStore) -> EventService:
    return EventService(store)


@pytest.fixture
def booking_service(store: InMemoryStore) -> BookingService:
    return BookingService(store)


@pytest.fixture
def event_data() -> dict:
    return {
        "title": "Tech Conference 2024",
        "description": "Annual tech conference covering latest trends in software development",
        "overview": "Join us for a day of learning and networking",
        "image": "https://example.com/images/event.jpg",
        "venue": "Convention Center",
        "location": "San Francisco, CA",
        "date": "2024-12-15",
        "time": "09:00",
        "mode": "hybrid",
        "audience": "Developers and Tech Enthusiasts",
        "agenda": ["Keynote Speech", "Technical Sessions", "Networking"],
        "organizer": "Tech Events Inc",
        "tags": ["technology", "conference", "networking"],
    }
