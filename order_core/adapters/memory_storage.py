"""
In-memory order store.

Keeps copies of orders in a dict keyed by id, so callers mutating a returned
order never change what is stored until they call update(). Nothing survives
the process.
"""

from __future__ import annotations

import dataclasses
import uuid

from order_core.order import Order
from order_core.ports.repository import AlreadyExists, NotFound, OrderRepository


class MemoryOrderRepository(OrderRepository):
    """Dict-backed OrderRepository for tests, demos and single-process use."""

    def __init__(self) -> None:
        self._orders: dict[uuid.UUID, Order] = {}

    def count(self) -> int:
        return len(self._orders)

    def clear(self) -> None:
        self._orders.clear()

    def save(self, order: Order) -> None:
        if order.id in self._orders:
            raise AlreadyExists(f"Order {order.id} already exists")
        self._orders[order.id] = dataclasses.replace(order)

    def find_by_id(self, order_id: uuid.UUID) -> Order | None:
        order = self._orders.get(order_id)
        return dataclasses.replace(order) if order is not None else None

    def find_by_customer_email(self, email: str) -> list[Order]:
        return [
            dataclasses.replace(o) for o in self._orders.values() if o.customer.email == email
        ]

    def list_all(self) -> list[Order]:
        return [dataclasses.replace(o) for o in self._orders.values()]

    def update(self, order: Order) -> None:
        if order.id not in self._orders:
            raise NotFound(f"Order {order.id} not found")
        self._orders[order.id] = dataclasses.replace(order)

    def delete(self, order_id: uuid.UUID) -> bool:
        return self._orders.pop(order_id, None) is not None
