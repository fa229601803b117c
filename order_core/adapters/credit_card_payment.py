"""
Card payment adapter: plug into OrderService via PaymentProcessor.

Sandbox-first: sandbox=True by default and payments are simulated locally.
Live charges are refused unless ORDER_CORE_LIVE_PAYMENTS_ENABLED=true, and the
gateway call itself is not wired to any provider yet, so live mode refuses
with PROCESSING_FAILED either way.
"""

from __future__ import annotations

import logging
import os
import uuid

from order_core.ports.payment import PaymentError, PaymentErrorKind, PaymentProcessor

logger = logging.getLogger(__name__)

# Environment variable that must be set to "true" to allow live (non-sandbox) charges.
LIVE_PAYMENTS_ENV = "ORDER_CORE_LIVE_PAYMENTS_ENABLED"

DEFAULT_CARD_LIMIT = 1000.0


def live_payments_enabled() -> bool:
    return os.environ.get(LIVE_PAYMENTS_ENV, "").lower() == "true"


class CreditCardPayment(PaymentProcessor):
    """
    Card processor.

    - sandbox=True (default): negative amounts and amounts above card_limit are
      declined, everything else is captured with a CC-<uuid> id.
    - sandbox=False: requires ORDER_CORE_LIVE_PAYMENTS_ENABLED=true; without a
      gateway integration the charge is refused.
    """

    def __init__(
        self,
        gateway_url: str,
        *,
        sandbox: bool = True,
        card_limit: float = DEFAULT_CARD_LIMIT,
    ) -> None:
        self._gateway_url = gateway_url
        self._sandbox = sandbox
        self._card_limit = card_limit

        if self._sandbox:
            logger.info("CreditCardPayment: SANDBOX mode is active. No real charges.")
        elif not live_payments_enabled():
            logger.warning(
                "CreditCardPayment: live payments are disabled. Set %s=true to allow real charges.",
                LIVE_PAYMENTS_ENV,
            )
        else:
            logger.warning("CreditCardPayment: LIVE payments are ENABLED against %s.", gateway_url)

    @property
    def gateway_url(self) -> str:
        return self._gateway_url

    @property
    def sandbox(self) -> bool:
        return self._sandbox

    @property
    def payment_method_name(self) -> str:
        return "Credit Card"

    def process_payment(self, amount: float) -> str:
        mode = "sandbox" if self._sandbox else "live"
        logger.info("Processing card payment of %.2f (mode=%s)", amount, mode)

        if amount < 0:
            raise PaymentError(PaymentErrorKind.PROCESSING_FAILED, "Amount cannot be negative")
        if amount > self._card_limit:
            raise PaymentError(PaymentErrorKind.PROCESSING_FAILED, "Amount exceeds card limit")

        if not self._sandbox:
            if not live_payments_enabled():
                reason = f"Live payments disabled. Set {LIVE_PAYMENTS_ENV}=true to allow real charges."
                logger.warning("Card payment refused: %s", reason)
                raise PaymentError(PaymentErrorKind.PROCESSING_FAILED, reason)
            raise PaymentError(
                PaymentErrorKind.PROCESSING_FAILED,
                f"No gateway integration for {self._gateway_url}; use sandbox=True",
            )

        payment_id = f"CC-{uuid.uuid4()}"
        logger.info("Card payment captured (sandbox): %s", payment_id)
        return payment_id
