"""
Cash payment: always captured at the counter.
"""

from __future__ import annotations

import logging
import uuid

from order_core.ports.payment import PaymentProcessor

logger = logging.getLogger(__name__)


class CashPayment(PaymentProcessor):
    """Accepts every amount. Payment ids look like CASH-<uuid>."""

    def process_payment(self, amount: float) -> str:
        payment_id = f"CASH-{uuid.uuid4()}"
        logger.info("Cash payment of %.2f captured: %s", amount, payment_id)
        return payment_id

    @property
    def payment_method_name(self) -> str:
        return "Cash"
