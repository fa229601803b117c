"""
Errors raised by the order workflow.

Each error names the stage that failed so callers can tell a declined payment
from a storage outage. Collaborator errors are kept on .cause and chained.
Notification failures are never raised from the workflow.
"""

from __future__ import annotations

import uuid


class OrderServiceError(Exception):
    """Base class for workflow failures."""

    stage = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidOrder(OrderServiceError):
    """Order rejected before any collaborator was called, or an illegal cancel."""

    stage = "validation"


class PaymentFailed(OrderServiceError):
    stage = "payment"

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Payment failed: {cause}", cause=cause)


class StorageFailed(OrderServiceError):
    """
    Order store raised. When raised from place_order the payment has already
    been captured and no order record exists.
    """

    stage = "storage"

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Storage failed: {cause}", cause=cause)


class OrderNotFound(OrderServiceError):
    stage = "lookup"

    def __init__(self, order_id: uuid.UUID) -> None:
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id
