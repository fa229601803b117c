"""
Tests for order_core entities: Customer, OrderItem, Order lifecycle.
"""

import uuid
from datetime import datetime

import pytest

from order_core import Customer, Order, OrderItem, OrderStatus


def _customer(name: str = "Test User", email: str = "test@example.com") -> Customer:
    return Customer(name=name, email=email)


def _item(price: float = 3.50, quantity: int = 1, name: str = "Coffee") -> OrderItem:
    return OrderItem(name=name, description=f"Medium {name}", price=price, quantity=quantity)


def _order_in(status: OrderStatus) -> Order:
    order = Order(customer=_customer(), items=[_item()])
    order.status = status
    return order


# --- Customer ---


def test_customer_creation():
    c = Customer(name="Alice", email="alice@example.com", phone="+1234567890")
    assert c.name == "Alice"
    assert c.email == "alice@example.com"
    assert c.phone == "+1234567890"
    assert isinstance(c.id, uuid.UUID)


def test_customer_immutable():
    c = _customer()
    with pytest.raises(AttributeError):
        c.email = "other@example.com"


# --- Order construction ---


def test_create_order_pending():
    order = Order(customer=_customer(), items=[_item()])
    assert order.status == OrderStatus.PENDING
    assert order.total_price == 3.50
    assert order.payment_id is None
    assert isinstance(order.id, uuid.UUID)
    assert isinstance(order.created_at, datetime)
    assert order.created_at.tzinfo is not None


def test_total_price_is_sum_of_price_times_quantity():
    items = [_item(3.50, 2), _item(2.50, 1, name="Tea"), _item(5.25, 3, name="Smoothie")]
    order = Order(customer=_customer(), items=items)
    assert order.total_price == pytest.approx(3.50 * 2 + 2.50 + 5.25 * 3)


def test_total_price_not_recomputed_on_transition():
    order = Order(customer=_customer(), items=[_item(4.0, 2)])
    order.mark_paid("PAY-1")
    order.mark_preparing()
    order.cancel()
    assert order.total_price == 8.0


def test_order_ids_are_unique():
    a = Order(customer=_customer(), items=[_item()])
    b = Order(customer=_customer(), items=[_item()])
    assert a.id != b.id


def test_items_are_fixed_tuple():
    items = [_item()]
    order = Order(customer=_customer(), items=items)
    items.append(_item(10.0))
    assert len(order.items) == 1
    assert isinstance(order.items, tuple)


@pytest.mark.parametrize(
    "field_name, value",
    [
        ("id", uuid.uuid4()),
        ("customer", Customer(name="Mallory", email="mallory@example.com")),
        ("items", ()),
        ("created_at", datetime(2020, 1, 1)),
        ("total_price", 0.0),
    ],
)
def test_identity_fields_are_read_only(field_name, value):
    order = Order(customer=_customer(), items=[_item()])
    before = getattr(order, field_name)
    with pytest.raises(AttributeError):
        setattr(order, field_name, value)
    assert getattr(order, field_name) == before


def test_status_and_payment_id_remain_assignable():
    order = Order(customer=_customer(), items=[_item()])
    order.status = OrderStatus.READY
    order.payment_id = "PAY-9"
    assert order.status == OrderStatus.READY
    assert order.payment_id == "PAY-9"


# --- Transitions ---


def test_order_workflow_happy_path():
    order = Order(customer=_customer(), items=[_item()])
    assert order.mark_paid("PAY-123") is True
    assert order.status == OrderStatus.PAID
    assert order.payment_id == "PAY-123"
    assert order.mark_preparing() is True
    assert order.status == OrderStatus.PREPARING
    assert order.mark_ready() is True
    assert order.status == OrderStatus.READY
    assert order.mark_completed() is True
    assert order.status == OrderStatus.COMPLETED


@pytest.mark.parametrize(
    "method, required, target",
    [
        ("mark_preparing", OrderStatus.PAID, OrderStatus.PREPARING),
        ("mark_ready", OrderStatus.PREPARING, OrderStatus.READY),
        ("mark_completed", OrderStatus.READY, OrderStatus.COMPLETED),
    ],
)
def test_forward_transitions_only_from_required_status(method, required, target):
    for status in OrderStatus:
        order = _order_in(status)
        applied = getattr(order, method)()
        if status == required:
            assert applied is True
            assert order.status == target
        else:
            assert applied is False
            assert order.status == status


def test_cancel_from_every_status_except_completed():
    for status in OrderStatus:
        order = _order_in(status)
        applied = order.cancel()
        if status == OrderStatus.COMPLETED:
            assert applied is False
            assert order.status == OrderStatus.COMPLETED
        else:
            assert applied is True
            assert order.status == OrderStatus.CANCELLED


def test_mark_paid_is_unconditional():
    order = _order_in(OrderStatus.CANCELLED)
    assert order.mark_paid("PAY-9") is True
    assert order.status == OrderStatus.PAID
    assert order.payment_id == "PAY-9"


# --- Serialization ---


def test_order_dict_round_trip_keeps_stored_total():
    order = Order(customer=_customer(), items=[_item(3.5, 2)])
    order.mark_paid("PAY-1")
    data = order.to_dict()
    data["total_price"] = 99.0
    restored = Order.from_dict(data)
    assert restored.id == order.id
    assert restored.customer == order.customer
    assert restored.items == order.items
    assert restored.status == OrderStatus.PAID
    assert restored.created_at == order.created_at
    assert restored.payment_id == "PAY-1"
    assert restored.total_price == 99.0
