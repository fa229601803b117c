"""
Reference adapters for the order ports.

In-memory and JSON-file stores; cash and sandbox card payments; console and
composite notifiers. Swap any of them for another implementation of the same
port without touching the workflow.
"""

from order_core.adapters.cash_payment import CashPayment
from order_core.adapters.console_notifier import CompositeNotifier, ConsoleNotifier
from order_core.adapters.credit_card_payment import CreditCardPayment
from order_core.adapters.json_storage import JsonOrderRepository
from order_core.adapters.memory_storage import MemoryOrderRepository

__all__ = [
    "CashPayment",
    "CompositeNotifier",
    "ConsoleNotifier",
    "CreditCardPayment",
    "JsonOrderRepository",
    "MemoryOrderRepository",
]
