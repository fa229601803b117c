"""
Wire an OrderService from Settings.
"""

from __future__ import annotations

from order_core.adapters import (
    CashPayment,
    ConsoleNotifier,
    CreditCardPayment,
    JsonOrderRepository,
    MemoryOrderRepository,
)
from order_core.config import Settings, load_settings
from order_core.ports import Notifier, OrderRepository, PaymentProcessor
from order_core.workflow import KeyedLock, OrderService, PaymentRecovery, log_for_reconciliation


def build_repository(settings: Settings) -> OrderRepository:
    if settings.storage == "json":
        return JsonOrderRepository(settings.storage_path)
    return MemoryOrderRepository()


def build_payment_processor(settings: Settings) -> PaymentProcessor:
    if settings.payment == "card":
        return CreditCardPayment(
            settings.gateway_url,
            sandbox=settings.payment_sandbox,
            card_limit=settings.card_limit,
        )
    return CashPayment()


def build_order_service(
    settings: Settings | None = None,
    *,
    notifier: Notifier | None = None,
    payment_recovery: PaymentRecovery = log_for_reconciliation,
    serialize_orders: bool = False,
) -> OrderService:
    """
    Build an OrderService with the store and payment method named in settings
    (loaded from the environment when omitted). Notifier defaults to the console.
    """
    settings = settings or load_settings()
    return OrderService(
        build_repository(settings),
        build_payment_processor(settings),
        notifier or ConsoleNotifier(),
        payment_recovery=payment_recovery,
        order_locks=KeyedLock() if serialize_orders else None,
    )
