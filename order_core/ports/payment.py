"""
Payment capture contract.

PaymentProcessor ABC: process_payment(amount) -> payment id. Cash and a
simulated card processor ship in order_core.adapters; real gateways implement
this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class PaymentErrorKind(Enum):
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INVALID_INSTRUMENT = "invalid_instrument"
    PROCESSING_FAILED = "processing_failed"
    NETWORK_ERROR = "network_error"


_KIND_LABELS = {
    PaymentErrorKind.INSUFFICIENT_FUNDS: "Insufficient funds",
    PaymentErrorKind.INVALID_INSTRUMENT: "Invalid payment instrument",
    PaymentErrorKind.PROCESSING_FAILED: "Processing failed",
    PaymentErrorKind.NETWORK_ERROR: "Network error",
}


class PaymentError(Exception):
    """Payment was not captured. kind says why; detail is free text."""

    def __init__(self, kind: PaymentErrorKind, detail: str | None = None) -> None:
        label = _KIND_LABELS[kind]
        super().__init__(f"{label}: {detail}" if detail else label)
        self.kind = kind
        self.detail = detail


class PaymentProcessor(ABC):
    """
    Abstract payment processor.

    Contract:
    - Returns a unique payment id when the amount was captured.
    - Raises PaymentError when it was not.
    - Repeated identical calls must not double-charge.
    - Never touches order state; the workflow records the payment id itself.
    """

    @abstractmethod
    def process_payment(self, amount: float) -> str:
        ...

    @property
    def payment_method_name(self) -> str:
        """Display name of the payment method."""
        return "Unknown Payment Method"
