"""
Order: a customer's purchase with its lifecycle state.

Identity, customer, items, creation time and total are fixed at construction.
Only status and payment_id change, and only through the transition methods.

Lifecycle:
    PENDING -> PAID -> PREPARING -> READY -> COMPLETED
    CANCELLED is reachable from every state except COMPLETED.

Transitions requested from the wrong state are ignored (no exception). Each
transition method returns True when the status changed and False on a no-op,
so callers can tell the two apart.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Sequence

from order_core.customer import Customer

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderItem:
    """One line of an order. price is the resolved unit price."""

    name: str
    description: str
    price: float
    quantity: int = 1

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


_READ_ONLY_FIELDS = frozenset({"id", "customer", "items", "created_at", "total_price"})


@dataclass
class Order:
    """
    An order as seen by the core. Mutable in status/payment_id only;
    assigning any other field after construction raises AttributeError.

    total_price is computed from items when not given and is never recomputed
    afterwards. Pass it explicitly only when rehydrating a stored order.
    """

    customer: Customer
    items: Sequence[OrderItem]
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    total_price: float | None = None
    payment_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        if self.total_price is None:
            total = float(sum(item.subtotal for item in self.items))
            object.__setattr__(self, "total_price", total)

    def __setattr__(self, name: str, value: Any) -> None:
        # Fields in _READ_ONLY_FIELDS may be set once, by __init__.
        if name in _READ_ONLY_FIELDS and name in self.__dict__:
            raise AttributeError(f"Order.{name} is read-only")
        object.__setattr__(self, name, value)

    # --- Transitions ---

    def mark_paid(self, payment_id: str) -> bool:
        """Record a captured payment. Unconditional."""
        self.status = OrderStatus.PAID
        self.payment_id = payment_id
        return True

    def mark_preparing(self) -> bool:
        return self._advance(OrderStatus.PAID, OrderStatus.PREPARING)

    def mark_ready(self) -> bool:
        return self._advance(OrderStatus.PREPARING, OrderStatus.READY)

    def mark_completed(self) -> bool:
        return self._advance(OrderStatus.READY, OrderStatus.COMPLETED)

    def cancel(self) -> bool:
        """Cancel unless already completed."""
        if self.status == OrderStatus.COMPLETED:
            logger.debug("Order %s: cancel ignored, order is completed", self.id)
            return False
        self.status = OrderStatus.CANCELLED
        return True

    def _advance(self, required: OrderStatus, target: OrderStatus) -> bool:
        if self.status != required:
            logger.debug(
                "Order %s: %s -> %s ignored (requires %s)",
                self.id,
                self.status.value,
                target.value,
                required.value,
            )
            return False
        self.status = target
        return True

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation (ids and timestamps as strings)."""
        return {
            "id": str(self.id),
            "customer": self.customer.to_dict(),
            "items": [
                {
                    "name": item.name,
                    "description": item.description,
                    "price": item.price,
                    "quantity": item.quantity,
                }
                for item in self.items
            ],
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "total_price": self.total_price,
            "payment_id": self.payment_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Order:
        """Rebuild an order from to_dict() output. Keeps the stored total."""
        return cls(
            customer=Customer.from_dict(data["customer"]),
            items=[
                OrderItem(
                    name=item["name"],
                    description=item.get("description", ""),
                    price=float(item["price"]),
                    quantity=int(item.get("quantity", 1)),
                )
                for item in data["items"]
            ],
            id=uuid.UUID(str(data["id"])),
            status=OrderStatus(data["status"]),
            created_at=datetime.fromisoformat(data["created_at"]),
            total_price=float(data["total_price"]),
            payment_id=data.get("payment_id"),
        )
