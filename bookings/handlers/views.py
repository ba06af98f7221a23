"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from functools import wraps

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.domain.errors import DomainError, ErrorCode, InvalidFieldTypeError
from bookings.handlers.serializers import BookingSerializer, EventSerializer
from bookings.services.booking_service import BookingService
from bookings.services.event_service import EventService
from bookings.stores.django_store import get_store

_STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DANGLING_REFERENCE: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_SLUG: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_BOOKING: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_CONNECTION: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=_STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def maps_domain_errors(handler):
    """Turn DomainErrors raised by a handler into error responses."""

    @wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            return handler(*args, **kwargs)
        except DomainError as error:
            return _error_response(error)

    return wrapper


def _body(request: Request) -> dict:
    if not isinstance(request.data, dict):
        raise InvalidFieldTypeError("body", "a JSON object")
    return dict(request.data)


def event_service() -> EventService:
    return EventService(get_store())


def booking_service() -> BookingService:
    return BookingService(get_store())


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    @maps_domain_errors
    def get(self, request: Request) -> Response:
        events = event_service().list_events(
            date=request.query_params.get("date"),
            mode=request.query_params.get("mode"),
        )
        return Response(EventSerializer(events, many=True).data)

    @maps_domain_errors
    def post(self, request: Request) -> Response:
        event = event_service().create(_body(request))
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PATCH /api/events/{event_id}"""

    @maps_domain_errors
    def get(self, request: Request, event_id: str) -> Response:
        return Response(EventSerializer(event_service().get_event(event_id)).data)

    @maps_domain_errors
    def patch(self, request: Request, event_id: str) -> Response:
        event = event_service().update(event_id, _body(request))
        return Response(EventSerializer(event).data)


class EventSlugView(APIView):
    """Handler for GET /api/events/by-slug/{slug}"""

    @maps_domain_errors
    def get(self, request: Request, slug: str) -> Response:
        return Response(EventSerializer(event_service().get_event_by_slug(slug)).data)


class EventBookingListView(APIView):
    """Handler for GET /api/events/{event_id}/bookings"""

    @maps_domain_errors
    def get(self, request: Request, event_id: str) -> Response:
        event_service().get_event(event_id)
        bookings = booking_service().list_bookings_for_event(event_id)
        return Response(BookingSerializer(bookings, many=True).data)


class BookingListView(APIView):
    """Handler for POST /api/bookings"""

    @maps_domain_errors
    def post(self, request: Request) -> Response:
        booking = booking_service().create(_body(request))
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailView(APIView):
    """Handler for GET/PATCH /api/bookings/{booking_id}"""

    @maps_domain_errors
    def get(self, request: Request, booking_id: str) -> Response:
        return Response(BookingSerializer(booking_service().get_booking(booking_id)).data)

    @maps_domain_errors
    def patch(self, request: Request, booking_id: str) -> Response:
        booking = booking_service().update(booking_id, _body(request))
        return Response(BookingSerializer(booking).data)
