"""
Customer notification contract.

Notifier ABC: one method per customer-facing order event. A failed
notification never fails the business operation that triggered it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.order import Order


class NotificationErrorKind(Enum):
    SEND_FAILED = "send_failed"
    INVALID_RECIPIENT = "invalid_recipient"
    NETWORK_ERROR = "network_error"


class NotificationError(Exception):
    def __init__(self, kind: NotificationErrorKind, detail: str = "") -> None:
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
        self.kind = kind
        self.detail = detail


class Notifier(ABC):
    """Abstract notifier. Raise NotificationError when a message could not be sent."""

    @abstractmethod
    def notify_order_placed(self, order: Order) -> None:
        ...

    @abstractmethod
    def notify_order_ready(self, order: Order) -> None:
        ...

    @abstractmethod
    def notify_order_cancelled(self, order: Order) -> None:
        ...
