"""
Order workflow engine: place orders and move them through their lifecycle.

place_order flow: validate → build order (total computed once) → capture
payment → mark paid → save → notify. Nothing is stored unless payment
succeeded. A failed save after a captured payment is handed to the payment
recovery strategy and then raised as StorageFailed; the core never refunds.

Lifecycle flow (ready, cancel, preparing, completed): load → transition →
update → notify. Notifications are best-effort everywhere: failures are logged
and kept in the warning log, never raised.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from contextlib import AbstractContextManager, nullcontext
from datetime import datetime, timezone
from typing import Callable

from order_core.customer import Customer
from order_core.errors import InvalidOrder, OrderNotFound, PaymentFailed, StorageFailed
from order_core.order import Order, OrderItem, OrderStatus
from order_core.ports.notifier import NotificationError, Notifier
from order_core.ports.payment import PaymentError, PaymentProcessor
from order_core.ports.repository import OrderRepository, RepositoryError
from order_core.workflow.locks import KeyedLock
from order_core.workflow.recovery import PaymentRecovery, log_for_reconciliation
from order_core.workflow.types import NotificationWarning, TransitionResult

logger = logging.getLogger(__name__)


class OrderService:
    """
    Coordinates store, payment processor and notifier for every order operation.
    Collaborators are injected; the service holds no order state of its own
    beyond the notification warning log.

    Concurrency: without order_locks, lifecycle operations do an unguarded
    read-modify-write and concurrent calls on one order can lose an update.
    Pass a KeyedLock to serialize them per order id.
    """

    def __init__(
        self,
        repository: OrderRepository,
        payment_processor: PaymentProcessor,
        notifier: Notifier,
        *,
        payment_recovery: PaymentRecovery = log_for_reconciliation,
        order_locks: KeyedLock | None = None,
    ) -> None:
        self.repository = repository
        self.payment_processor = payment_processor
        self.notifier = notifier
        self.payment_recovery = payment_recovery
        self.order_locks = order_locks
        self._warnings: list[NotificationWarning] = []

    def get_warnings(self) -> list[NotificationWarning]:
        """Return notifications that failed, oldest first."""
        return list(self._warnings)

    # --- Placing orders ---

    def place_order(self, customer: Customer, items: Iterable[OrderItem]) -> Order:
        """
        Charge for and store a new order. Returns it in PAID status.

        Raises InvalidOrder (no items; payment not attempted), PaymentFailed
        (nothing stored) or StorageFailed (payment captured, order not stored).
        """
        items = tuple(items)
        if not items:
            raise InvalidOrder("Order must contain at least one item")

        order = Order(customer=customer, items=items)

        try:
            payment_id = self.payment_processor.process_payment(order.total_price)
        except PaymentError as e:
            logger.info("Order %s: payment of %.2f failed: %s", order.id, order.total_price, e)
            raise PaymentFailed(e) from e

        order.mark_paid(payment_id)

        try:
            self.repository.save(order)
        except RepositoryError as e:
            try:
                self.payment_recovery(order, e)
            except Exception:  # noqa: BLE001
                logger.exception(
                    "Payment recovery failed for order %s (payment_id=%s)", order.id, payment_id
                )
            raise StorageFailed(e) from e

        logger.info(
            "Order %s placed: customer=%s total=%.2f payment_id=%s",
            order.id,
            customer.email,
            order.total_price,
            payment_id,
        )
        self._notify("order_placed", self.notifier.notify_order_placed, order)
        return order

    # --- Queries ---

    def get_order(self, order_id: uuid.UUID) -> Order:
        try:
            order = self.repository.find_by_id(order_id)
        except RepositoryError as e:
            raise StorageFailed(e) from e
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def list_customer_orders(self, email: str) -> list[Order]:
        try:
            return self.repository.find_by_customer_email(email)
        except RepositoryError as e:
            raise StorageFailed(e) from e

    def list_all_orders(self) -> list[Order]:
        try:
            return self.repository.list_all()
        except RepositoryError as e:
            raise StorageFailed(e) from e

    # --- Lifecycle ---

    def start_preparing(self, order_id: uuid.UUID) -> TransitionResult:
        """PAID → PREPARING. No customer notification."""
        return self._advance(order_id, "start_preparing", Order.mark_preparing)

    def mark_order_ready(self, order_id: uuid.UUID) -> TransitionResult:
        """PREPARING → READY, then tell the customer."""
        return self._advance(
            order_id,
            "mark_order_ready",
            Order.mark_ready,
            notify=self.notifier.notify_order_ready,
        )

    def complete_order(self, order_id: uuid.UUID) -> TransitionResult:
        """READY → COMPLETED. No customer notification."""
        return self._advance(order_id, "complete_order", Order.mark_completed)

    def cancel_order(self, order_id: uuid.UUID) -> TransitionResult:
        """
        Cancel an order. Raises InvalidOrder if it is already completed;
        the order itself would silently ignore that request.
        """
        return self._advance(
            order_id,
            "cancel_order",
            Order.cancel,
            notify=self.notifier.notify_order_cancelled,
            reject_completed=True,
        )

    def _advance(
        self,
        order_id: uuid.UUID,
        operation: str,
        transition: Callable[[Order], bool],
        *,
        notify: Callable[[Order], None] | None = None,
        reject_completed: bool = False,
    ) -> TransitionResult:
        with self._serialized(order_id):
            order = self.get_order(order_id)
            if reject_completed and order.status == OrderStatus.COMPLETED:
                raise InvalidOrder(f"Cannot cancel completed order {order_id}")

            previous = order.status
            applied = transition(order)

            # Stored even on a no-op; the record is then rewritten unchanged.
            try:
                self.repository.update(order)
            except RepositoryError as e:
                raise StorageFailed(e) from e

            if applied:
                logger.info(
                    "Order %s: %s -> %s", order.id, previous.value, order.status.value
                )
            else:
                logger.debug(
                    "Order %s: %s was a no-op in status %s", order.id, operation, previous.value
                )
            if notify is not None:
                self._notify(operation, notify, order)
            return TransitionResult(order=order, applied=applied)

    def _serialized(self, order_id: uuid.UUID) -> AbstractContextManager[None]:
        if self.order_locks is None:
            return nullcontext()
        return self.order_locks.hold(order_id)

    def _notify(self, operation: str, send: Callable[[Order], None], order: Order) -> None:
        try:
            send(order)
        except NotificationError as e:
            logger.warning("Notification failed for order %s (%s): %s", order.id, operation, e)
            self._warnings.append(
                NotificationWarning(
                    operation=operation,
                    order_id=order.id,
                    error=e,
                    timestamp=datetime.now(timezone.utc),
                )
            )
