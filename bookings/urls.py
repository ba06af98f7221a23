from django.urls import path

from bookings.handlers import (
    BookingDetailView,
    BookingListView,
    EventBookingListView,
    EventDetailView,
    EventListView,
    EventSlugView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/by-slug/<str:slug>", EventSlugView.as_view(), name="event-by-slug"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/bookings",
        EventBookingListView.as_view(),
        name="event-booking-list",
    ),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
]
