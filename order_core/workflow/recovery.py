"""
Payment recovery strategies.

Called by OrderService when an order could not be stored after its payment was
captured. The workflow itself never refunds; a strategy decides what happens
to the orphaned payment (log it, queue it for reconciliation, trigger a refund
elsewhere). StorageFailed is raised to the caller after the strategy returns.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Protocol

from order_core.order import Order
from order_core.ports.repository import RepositoryError
from order_core.workflow.types import PendingReconciliation

logger = logging.getLogger(__name__)


class PaymentRecovery(Protocol):
    """Handle a captured payment whose order failed to persist."""

    def __call__(self, order: Order, error: RepositoryError) -> None:
        ...


def log_for_reconciliation(order: Order, error: RepositoryError) -> None:
    """Default: leave the payment captured and log it for manual reconciliation."""
    logger.error(
        "Payment captured but order not stored; manual reconciliation needed: "
        "order_id=%s payment_id=%s amount=%.2f error=%s",
        order.id,
        order.payment_id,
        order.total_price,
        error,
    )


class ReconciliationLog:
    """
    Outbox-style strategy: records every orphaned payment so a later job
    (refund, retry save, operator review) can work through them.
    """

    def __init__(self) -> None:
        self._pending: dict[uuid.UUID, PendingReconciliation] = {}

    def __call__(self, order: Order, error: RepositoryError) -> None:
        log_for_reconciliation(order, error)
        self._pending[order.id] = PendingReconciliation(
            order_id=order.id,
            payment_id=order.payment_id,
            amount=order.total_price,
            reason=str(error),
            timestamp=datetime.now(timezone.utc),
        )

    def pending(self) -> list[PendingReconciliation]:
        return list(self._pending.values())

    def resolve(self, order_id: uuid.UUID) -> bool:
        """Mark an entry handled. False if there was no such entry."""
        return self._pending.pop(order_id, None) is not None
