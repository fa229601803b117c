"""
order-core: retail order workflow with a validated order lifecycle.

Payment capture, persistence and notification are reached only through the
ports in order_core.ports. No database drivers, payment gateways or UI.
"""

__version__ = "0.1.0"

from order_core.customer import Customer
from order_core.order import Order, OrderItem, OrderStatus
from order_core.errors import (
    InvalidOrder,
    OrderNotFound,
    OrderServiceError,
    PaymentFailed,
    StorageFailed,
)
from order_core.workflow import OrderService, TransitionResult

__all__ = [
    "Customer",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderService",
    "TransitionResult",
    "OrderServiceError",
    "InvalidOrder",
    "PaymentFailed",
    "StorageFailed",
    "OrderNotFound",
]
