"""Checkout service - reference order workflow around the coordinator.

Dates are reserved before payment is captured. If any line item cannot be
reserved, or the payment collaborator declines, every interval already taken
for the order is released and the error propagates. A paid order therefore
always holds real bookings. If the compensating release itself fails, the
failure is logged, the original error still propagates, and cancel_order
can be retried for the order.
"""

import logging
from abc import ABC, abstractmethod

from rentals.domain import BookedInterval, OrderId, RentalOrder
from rentals.services.reservation_coordinator import ReservationCoordinator

logger = logging.getLogger(__name__)


class PaymentGateway(ABC):
    """Interface for the external payment collaborator."""

    @abstractmethod
    def capture(self, order: RentalOrder) -> str:
        """Capture payment for an order and return the payment reference.

        Raises:
            PaymentFailedError: If the payment is declined.
        """
        ...


class CheckoutService:
    """Places and cancels rental orders."""

    def __init__(self, coordinator: ReservationCoordinator, payments: PaymentGateway) -> None:
        self._coordinator = coordinator
        self._payments = payments

    def place_order(self, order: RentalOrder) -> list[BookedInterval]:
        """Reserve every line item, then capture payment.

        All or nothing: on failure no interval of the order remains.
        """
        intervals: list[BookedInterval] = []
        try:
            for line in order.line_items:
                intervals.append(
                    self._coordinator.reserve(
                        line.item_id,
                        line.dates.start,
                        line.dates.end,
                        order.id,
                        order.owner_id,
                    )
                )
            payment_ref = self._payments.capture(order)
        except Exception as exc:
            if intervals:
                self._release_quietly(order.id)
            logger.warning("Order %s not placed: %s", order.id, exc)
            raise

        logger.info(
            "Order %s placed with %d booking(s), payment %s",
            order.id,
            len(intervals),
            payment_ref,
        )
        return intervals

    def _release_quietly(self, order_id: OrderId) -> None:
        # The caller's error wins; a failed release leaves intervals for cancel_order.
        try:
            self._coordinator.release(order_id)
        except Exception:
            logger.exception("Could not release intervals of failed order %s", order_id)

    def cancel_order(self, order_id: OrderId) -> int:
        """Free the dates held by a cancelled order."""
        return self._coordinator.release(order_id)
