"""
Tests for settings loading and service wiring.
"""

import io

import pytest

from order_core import Customer, OrderItem, OrderStatus
from order_core.adapters import (
    CashPayment,
    ConsoleNotifier,
    CreditCardPayment,
    JsonOrderRepository,
    MemoryOrderRepository,
)
from order_core.config import Settings, load_settings
from order_core.factory import build_order_service
from order_core.workflow import KeyedLock


# --- load_settings ---


def test_defaults_from_empty_environment():
    s = load_settings({})
    assert s == Settings()
    assert s.storage == "memory"
    assert s.payment == "cash"
    assert s.card_limit == 1000.0
    assert s.payment_sandbox is True
    assert s.log_level == "INFO"


def test_values_from_environment():
    s = load_settings({
        "ORDER_CORE_LOG_LEVEL": "debug",
        "ORDER_CORE_STORAGE": "JSON",
        "ORDER_CORE_STORAGE_PATH": "/tmp/o.json",
        "ORDER_CORE_PAYMENT": "card",
        "ORDER_CORE_CARD_LIMIT": "250.5",
        "ORDER_CORE_PAYMENT_GATEWAY_URL": "https://gw.test",
        "ORDER_CORE_PAYMENT_SANDBOX": "false",
    })
    assert s.log_level == "DEBUG"
    assert s.storage == "json"
    assert s.storage_path == "/tmp/o.json"
    assert s.payment == "card"
    assert s.card_limit == 250.5
    assert s.gateway_url == "https://gw.test"
    assert s.payment_sandbox is False


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("ORDER_CORE_PAYMENT", "card")
    assert load_settings().payment == "card"


@pytest.mark.parametrize(
    "env",
    [
        {"ORDER_CORE_STORAGE": "postgres"},
        {"ORDER_CORE_PAYMENT": "bitcoin"},
        {"ORDER_CORE_CARD_LIMIT": "lots"},
        {"ORDER_CORE_PAYMENT_SANDBOX": "maybe"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ValueError):
        load_settings(env)


# --- build_order_service ---


def test_build_default_service():
    service = build_order_service(Settings())
    assert isinstance(service.repository, MemoryOrderRepository)
    assert isinstance(service.payment_processor, CashPayment)
    assert isinstance(service.notifier, ConsoleNotifier)
    assert service.order_locks is None


def test_build_json_card_service(tmp_path):
    settings = Settings(storage="json", storage_path=str(tmp_path / "orders.json"), payment="card", card_limit=5.0)
    service = build_order_service(settings, notifier=ConsoleNotifier(stream=io.StringIO()), serialize_orders=True)
    assert isinstance(service.repository, JsonOrderRepository)
    assert isinstance(service.payment_processor, CreditCardPayment)
    assert isinstance(service.order_locks, KeyedLock)

    order = service.place_order(Customer(name="Alice", email="alice@example.com"), [
        OrderItem(name="Coffee", description="Coffee (Medium)", price=3.50),
    ])
    assert order.payment_id.startswith("CC-")
    assert (tmp_path / "orders.json").exists()
    assert service.get_order(order.id).status == OrderStatus.PAID
