from bookings.handlers.views import (
    BookingDetailView,
    BookingListView,
    EventBookingListView,
    EventDetailView,
    EventListView,
    EventSlugView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventSlugView",
    "EventBookingListView",
    "BookingListView",
    "BookingDetailView",
]
