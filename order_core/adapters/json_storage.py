"""
JSON-file order store.

Loads the whole file on construction and rewrites it after every successful
save, update or delete. A missing file means an empty store. Meant for demos
and small single-process deployments; there is no file locking. Writes go
through a temp file that replaces the store, so a failed write keeps the
previous contents.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import tempfile
import uuid
from pathlib import Path

from order_core.order import Order
from order_core.ports.repository import (
    AlreadyExists,
    LoadFailed,
    NotFound,
    OrderRepository,
    SaveFailed,
)

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):
    """
    OrderRepository persisted as a JSON array of orders at `path`.
    Raises LoadFailed on construction if the file exists but cannot be parsed.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._orders: dict[uuid.UUID, Order] = self._load() if self._path.exists() else {}
        logger.debug("JsonOrderRepository: %d order(s) loaded from %s", len(self._orders), self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[uuid.UUID, Order]:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as e:
            raise LoadFailed(f"Failed to read {self._path}: {e}") from e
        except json.JSONDecodeError as e:
            raise LoadFailed(f"Failed to parse {self._path}: {e}") from e
        try:
            orders = [Order.from_dict(entry) for entry in raw]
        except (KeyError, TypeError, ValueError) as e:
            raise LoadFailed(f"Malformed order record in {self._path}: {e}") from e
        return {order.id: order for order in orders}

    def _flush(self) -> None:
        # A failed write leaves the existing file untouched.
        payload = json.dumps([order.to_dict() for order in self._orders.values()], indent=2)
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SaveFailed(f"Failed to write {self._path}: {e}") from e

    def save(self, order: Order) -> None:
        if order.id in self._orders:
            raise AlreadyExists(f"Order {order.id} already exists")
        self._orders[order.id] = dataclasses.replace(order)
        try:
            self._flush()
        except SaveFailed:
            del self._orders[order.id]
            raise

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
        previous = self._orders.get(order.id)
        if previous is None:
            raise NotFound(f"Order {order.id} not found")
        self._orders[order.id] = dataclasses.replace(order)
        try:
            self._flush()
        except SaveFailed:
            self._orders[order.id] = previous
            raise

    def delete(self, order_id: uuid.UUID) -> bool:
        removed = self._orders.pop(order_id, None)
        if removed is None:
            return False
        try:
            self._flush()
        except SaveFailed:
            self._orders[order_id] = removed
            raise
        return True
