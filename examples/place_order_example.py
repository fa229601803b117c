"""
Order workflow example: place, advance and cancel orders.

Shows: OrderService wired from environment settings, lifecycle results with
no-op detection, a declined card payment, a failing notification channel that
does not fail the order, and the sales report.
"""

from __future__ import annotations

import logging

from order_core import Customer, OrderItem, PaymentFailed
from order_core.adapters import CompositeNotifier, ConsoleNotifier, CreditCardPayment
from order_core.config import load_settings
from order_core.factory import build_order_service
from order_core.order import Order
from order_core.ports import NotificationError, NotificationErrorKind, Notifier
from order_core.workflow import OrderService, ReconciliationLog
from reporting import orders_to_dataframe, print_report


class SmsNotifier(Notifier):
    """Example channel whose gateway is down."""

    def notify_order_placed(self, order: Order) -> None:
        raise NotificationError(NotificationErrorKind.NETWORK_ERROR, "SMS gateway unreachable")

    def notify_order_ready(self, order: Order) -> None:
        raise NotificationError(NotificationErrorKind.NETWORK_ERROR, "SMS gateway unreachable")

    def notify_order_cancelled(self, order: Order) -> None:
        raise NotificationError(NotificationErrorKind.NETWORK_ERROR, "SMS gateway unreachable")


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    reconciliation = ReconciliationLog()
    service = build_order_service(
        settings,
        notifier=CompositeNotifier([ConsoleNotifier(), SmsNotifier()]),
        payment_recovery=reconciliation,
    )

    alice = Customer(name="Alice", email="alice@example.com")
    bob = Customer(name="Bob", email="bob@example.com", phone="+1234567890")

    print("--- Place orders ---")
    latte = OrderItem(name="Coffee", description="Coffee (Medium)", price=3.50)
    first = service.place_order(alice, [latte])
    second = service.place_order(
        bob,
        [OrderItem(name="Green Tea", description="Green Tea (Large)", price=3.00, quantity=2)],
    )
    print(f"Placed {first.id}: status={first.status.value}, total={first.total_price:.2f}")

    print("\n--- Advance the first order ---")
    print(f"complete before ready applied? {service.complete_order(first.id).applied}")
    service.start_preparing(first.id)
    print(f"ready applied? {service.mark_order_ready(first.id).applied}")
    print(f"ready again applied? {service.mark_order_ready(first.id).applied}")
    service.complete_order(first.id)

    print("\n--- Cancel the second order ---")
    service.cancel_order(second.id)

    print("\n--- Declined card payment ---")
    card_service = OrderService(
        service.repository,
        CreditCardPayment(settings.gateway_url, card_limit=10.0),
        ConsoleNotifier(),
    )
    try:
        card_service.place_order(alice, [OrderItem(name="Smoothie", description="Big order", price=5.0, quantity=5)])
    except PaymentFailed as e:
        print(f"Payment failed as expected: {e}")

    print("\n--- Notification warnings ---")
    for warning in service.get_warnings():
        print(f"  {warning.operation} for {warning.order_id}: {warning.error}")
    print(f"Pending reconciliations: {len(reconciliation.pending())}")

    print()
    orders = service.list_all_orders()
    print(orders_to_dataframe(orders)[["customer_name", "status", "total_price"]])
    print_report(orders)


if __name__ == "__main__":
    main()
