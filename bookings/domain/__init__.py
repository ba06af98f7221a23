from bookings.domain.models import Booking, Event
from bookings.domain.value_objects import BookingId, EventId, EventMode

__all__ = [
    "Event",
    "Booking",
    "EventId",
    "BookingId",
    "EventMode",
]
