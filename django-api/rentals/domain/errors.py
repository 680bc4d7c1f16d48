"""Domain error codes for the rentals module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_RANGE = "INVALID_RANGE"
    PAST_DATE = "PAST_DATE"
    RANGE_UNAVAILABLE = "RANGE_UNAVAILABLE"
    RESERVATION_TIMEOUT = "RESERVATION_TIMEOUT"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    INVALID_ITEM_ID = "INVALID_ITEM_ID"
    INVALID_ORDER_ID = "INVALID_ORDER_ID"
    PAYMENT_FAILED = "PAYMENT_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidRangeError(DomainError):
    """Raised when a date range is malformed or empty."""

    def __init__(self, message: str = "Invalid date range") -> None:
        super().__init__(code=ErrorCode.INVALID_RANGE, message=message)


class PastDateError(DomainError):
    """Raised when a requested start date precedes the current day."""

    def __init__(self, start: object) -> None:
        super().__init__(
            code=ErrorCode.PAST_DATE,
            message="Start date cannot be in the past",
        )
        self.start = start


class RangeUnavailableError(DomainError):
    """Raised when a range conflicts with a booking or the item's allowed dates."""

    def __init__(self, item_id: object, dates: object, reason: object) -> None:
        super().__init__(
            code=ErrorCode.RANGE_UNAVAILABLE,
            message="Item is not available for the selected dates",
        )
        self.item_id = item_id
        self.dates = dates
        self.reason = reason


class ReservationTimeoutError(DomainError):
    """Raised when an item's reservation lock cannot be acquired in time.

    Transient: the caller may retry with backoff.
    """

    def __init__(self, item_id: object, timeout_seconds: float) -> None:
        super().__init__(
            code=ErrorCode.RESERVATION_TIMEOUT,
            message="Item is busy, please retry",
        )
        self.item_id = item_id
        self.timeout_seconds = timeout_seconds


class PersistenceError(DomainError):
    """Raised when the booking ledger fails to read or write."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILURE,
            message="Booking storage is unavailable",
        )
        self.operation = operation


class ItemNotFoundError(DomainError):
    """Raised when an item is not found."""

    def __init__(self, item_id: object) -> None:
        super().__init__(
            code=ErrorCode.ITEM_NOT_FOUND,
            message="Item not found",
        )
        self.item_id = item_id


class InvalidItemIdError(DomainError):
    """Raised when an item ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ITEM_ID,
            message="Invalid item ID format",
        )


class InvalidOrderIdError(DomainError):
    """Raised when an order ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ORDER_ID,
            message="Invalid order ID format",
        )


class PaymentFailedError(DomainError):
    """Raised when the payment collaborator declines an order."""

    def __init__(self, order_id: object, detail: str = "") -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_FAILED,
            message="Payment could not be completed",
        )
        self.order_id = order_id
        self.detail = detail
