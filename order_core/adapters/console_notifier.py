"""
Console and fan-out notifiers.

ConsoleNotifier writes human-readable messages to a text stream.
CompositeNotifier sends every event to several channels.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Callable, TextIO

from order_core.order import Order
from order_core.ports.notifier import NotificationError, NotificationErrorKind, Notifier

logger = logging.getLogger(__name__)


class ConsoleNotifier(Notifier):
    """Print notifications to `stream` (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _write(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            print(f"\n{message}\n", file=stream)
        except (OSError, ValueError) as e:
            raise NotificationError(NotificationErrorKind.SEND_FAILED, str(e)) from e

    def notify_order_placed(self, order: Order) -> None:
        self._write(
            "Order Placed!\n"
            f"Order ID: {order.id}\n"
            f"Customer: {order.customer.name} ({order.customer.email})\n"
            f"Items: {len(order.items)}\n"
            f"Total: ${order.total_price:.2f}\n"
            f"Status: {order.status.value}"
        )

    def notify_order_ready(self, order: Order) -> None:
        self._write(
            "Order Ready for Pickup!\n"
            f"Order ID: {order.id}\n"
            f"Customer: {order.customer.name}\n"
            "Please come to the counter!"
        )

    def notify_order_cancelled(self, order: Order) -> None:
        self._write(
            "Order Cancelled\n"
            f"Order ID: {order.id}\n"
            f"Customer: {order.customer.name}"
        )


class CompositeNotifier(Notifier):
    """
    Send each notification through every channel, in order.
    A failing channel does not stop the others; if any failed, one
    NotificationError naming them is raised after all were tried.
    """

    def __init__(self, notifiers: Sequence[Notifier]) -> None:
        self.notifiers: list[Notifier] = list(notifiers)

    def _fan_out(self, send: Callable[[Notifier], None], event: str) -> None:
        failures: list[str] = []
        for notifier in self.notifiers:
            try:
                send(notifier)
            except NotificationError as e:
                logger.warning("%s: %s channel failed: %s", event, type(notifier).__name__, e)
                failures.append(f"{type(notifier).__name__}: {e}")
        if failures:
            raise NotificationError(NotificationErrorKind.SEND_FAILED, "; ".join(failures))

    def notify_order_placed(self, order: Order) -> None:
        self._fan_out(lambda n: n.notify_order_placed(order), "order_placed")

    def notify_order_ready(self, order: Order) -> None:
        self._fan_out(lambda n: n.notify_order_ready(order), "order_ready")

    def notify_order_cancelled(self, order: Order) -> None:
        self._fan_out(lambda n: n.notify_order_cancelled(order), "order_cancelled")
