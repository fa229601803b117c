"""
Workflow result and log types: transition result, notification warning,
pending reconciliation entry.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

from order_core.order import Order
from order_core.ports.notifier import NotificationError


@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of a lifecycle operation. applied is False when the state machine
    ignored the request (order was not in the required state).
    """

    order: Order
    applied: bool


@dataclass(frozen=True)
class NotificationWarning:
    """One notification that could not be delivered. Never fails the operation."""

    operation: str
    order_id: uuid.UUID
    error: NotificationError
    timestamp: datetime


@dataclass(frozen=True)
class PendingReconciliation:
    """A captured payment with no stored order behind it."""

    order_id: uuid.UUID
    payment_id: str | None
    amount: float
    reason: str
    timestamp: datetime
