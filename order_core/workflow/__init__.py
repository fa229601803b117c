"""
Order workflow: OrderService plus its result types, payment recovery
strategies and optional per-order locking.
"""

from order_core.workflow.engine import OrderService
from order_core.workflow.locks import KeyedLock
from order_core.workflow.recovery import PaymentRecovery, ReconciliationLog, log_for_reconciliation
from order_core.workflow.types import NotificationWarning, PendingReconciliation, TransitionResult

__all__ = [
    "KeyedLock",
    "NotificationWarning",
    "OrderService",
    "PaymentRecovery",
    "PendingReconciliation",
    "ReconciliationLog",
    "TransitionResult",
    "log_for_reconciliation",
]
