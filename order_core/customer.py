"""
Customer: identity of the person placing an order.

Immutable. An order keeps the Customer it was created with, so later edits to
a customer record elsewhere never leak into existing orders.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Customer:
    """Customer snapshot: name, email, optional phone."""

    name: str
    email: str
    phone: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Customer:
        return cls(
            name=data["name"],
            email=data["email"],
            phone=data.get("phone"),
            id=uuid.UUID(str(data["id"])),
        )
