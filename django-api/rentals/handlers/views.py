"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from rentals import cache as cache_keys
from rentals.conf import get_rental_settings
from rentals.domain.errors import DomainError, ErrorCode
from rentals.handlers.serializers import (
    AvailabilityReportSerializer,
    AvailabilityRequestSerializer,
    BookedIntervalSerializer,
)
from rentals.services.availability_service import parse_item_id
from rentals.services.factory import build_availability_service

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PAST_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ITEM_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ORDER_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ITEM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.RANGE_UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorCode.PAYMENT_FAILED: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.RESERVATION_TIMEOUT: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: DomainError) -> Response:
    http_status = STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if http_status >= 500:
        logger.error("Request failed: %s", error, exc_info=error)
    return Response(
        {"code": error.code.value, "message": error.message}, status=http_status
    )


class DomainErrorMixin:
    """Turns domain errors raised by a handler into mapped responses."""

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)


class AvailabilityCheckView(DomainErrorMixin, APIView):
    """Handler for POST /api/items/{item_id}/availability"""

    def post(self, request: Request, item_id: str) -> Response:
        payload = AvailabilityRequestSerializer(data=request.data)
        if not payload.is_valid():
            return Response(
                {
                    "code": ErrorCode.INVALID_RANGE.value,
                    "message": "Start date and end date are required as YYYY-MM-DD",
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        report = build_availability_service().check(
            item_id,
            payload.validated_data["start_date"],
            payload.validated_data["end_date"],
        )
        return Response(AvailabilityReportSerializer(report).data)


class BookedDatesView(DomainErrorMixin, APIView):
    """Handler for GET /api/items/{item_id}/booked-dates"""

    def get(self, request: Request, item_id: str) -> Response:
        key = cache_keys.booked_dates_key(parse_item_id(item_id))
        days = cache.get(key)
        if days is None:
            days = [d.isoformat() for d in build_availability_service().booked_dates(item_id)]
            cache.set(key, days, get_rental_settings().cache_timeout_seconds)
        return Response({"booked_dates": days})


class AvailableDatesView(DomainErrorMixin, APIView):
    """Handler for GET /api/items/{item_id}/available-dates"""

    def get(self, request: Request, item_id: str) -> Response:
        key = cache_keys.available_dates_key(parse_item_id(item_id))
        days = cache.get(key)
        if days is None:
            days = [
                d.isoformat() for d in build_availability_service().available_dates(item_id)
            ]
            cache.set(key, days, get_rental_settings().cache_timeout_seconds)
        return Response({"available_dates": days})


class ItemBookingsView(DomainErrorMixin, APIView):
    """Handler for GET /api/items/{item_id}/bookings"""

    def get(self, request: Request, item_id: str) -> Response:
        intervals = build_availability_service().bookings(item_id)
        return Response(BookedIntervalSerializer(intervals, many=True).data)
