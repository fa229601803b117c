"""
Order storage contract.

OrderRepository ABC: save, find_by_id, find_by_customer_email, list_all,
update, delete. In-memory and JSON-file stores ship in order_core.adapters;
database-backed stores implement the same interface.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.order import Order


class RepositoryError(Exception):
    """Base class for store failures."""


class NotFound(RepositoryError):
    pass


class AlreadyExists(RepositoryError):
    pass


class SaveFailed(RepositoryError):
    pass


class LoadFailed(RepositoryError):
    pass


class OrderRepository(ABC):
    """
    Abstract order store. Every implementation must honour the same error
    semantics so stores are interchangeable behind OrderService.
    """

    @abstractmethod
    def save(self, order: Order) -> None:
        """
        Store a new order.
        Raises AlreadyExists if order.id is already stored, SaveFailed otherwise.
        """
        ...

    @abstractmethod
    def find_by_id(self, order_id: uuid.UUID) -> Order | None:
        """Return the order or None. Raises LoadFailed if the lookup itself fails."""
        ...

    @abstractmethod
    def find_by_customer_email(self, email: str) -> list[Order]:
        """All orders for a customer email (possibly empty). Raises LoadFailed."""
        ...

    @abstractmethod
    def list_all(self) -> list[Order]:
        """All stored orders (possibly empty). Raises LoadFailed."""
        ...

    @abstractmethod
    def update(self, order: Order) -> None:
        """Replace a stored order. Raises NotFound if absent, SaveFailed otherwise."""
        ...

    @abstractmethod
    def delete(self, order_id: uuid.UUID) -> bool:
        """Remove an order. True if it existed, False if not. Raises SaveFailed."""
        ...
