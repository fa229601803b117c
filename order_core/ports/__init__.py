"""
Collaborator contracts the order workflow depends on.

Order storage, payment capture and customer notification. The workflow only
ever talks to these abstractions; concrete backends are injected.
"""

from order_core.ports.notifier import NotificationError, NotificationErrorKind, Notifier
from order_core.ports.payment import PaymentError, PaymentErrorKind, PaymentProcessor
from order_core.ports.repository import (
    AlreadyExists,
    LoadFailed,
    NotFound,
    OrderRepository,
    RepositoryError,
    SaveFailed,
)

__all__ = [
    "AlreadyExists",
    "LoadFailed",
    "NotFound",
    "NotificationError",
    "NotificationErrorKind",
    "Notifier",
    "OrderRepository",
    "PaymentError",
    "PaymentErrorKind",
    "PaymentProcessor",
    "RepositoryError",
    "SaveFailed",
]
