"""
Tests for reporting: orders_to_dataframe, compute_sales_metrics, print_report.
"""

import pandas as pd
import pytest

from order_core import Customer, Order, OrderItem, OrderStatus
from reporting import ORDER_COLUMNS, compute_sales_metrics, orders_to_dataframe, print_report


def _order(status: OrderStatus, price: float, quantity: int = 1, email: str = "alice@example.com") -> Order:
    order = Order(
        customer=Customer(name="Alice", email=email),
        items=[OrderItem(name="Coffee", description="Coffee (Medium)", price=price, quantity=quantity)],
    )
    if status != OrderStatus.PENDING:
        order.mark_paid("PAY-1")
    order.status = status
    return order


def _sample_orders() -> list[Order]:
    return [
        _order(OrderStatus.PAID, 3.50),
        _order(OrderStatus.COMPLETED, 2.50, quantity=2),
        _order(OrderStatus.READY, 6.00),
        _order(OrderStatus.CANCELLED, 10.00),
        _order(OrderStatus.PENDING, 4.00),
    ]


# --- orders_to_dataframe ---


def test_dataframe_columns_and_rows():
    df = orders_to_dataframe(_sample_orders())
    assert list(df.columns) == ORDER_COLUMNS
    assert len(df) == 5
    assert set(df["status"]) == {"paid", "completed", "ready", "cancelled", "pending"}
    assert df["total_price"].sum() == pytest.approx(3.50 + 5.00 + 6.00 + 10.00 + 4.00)
    assert isinstance(df["created_at"].dtype, pd.DatetimeTZDtype)


def test_dataframe_item_count_sums_quantities():
    df = orders_to_dataframe([_order(OrderStatus.PAID, 1.0, quantity=3)])
    assert df.loc[0, "item_count"] == 3


def test_dataframe_empty():
    df = orders_to_dataframe([])
    assert df.empty
    assert list(df.columns) == ORDER_COLUMNS


# --- compute_sales_metrics ---


def test_sales_metrics():
    m = compute_sales_metrics(_sample_orders())
    assert m.order_count == 5
    assert m.paid_order_count == 3
    assert m.cancelled_count == 1
    assert m.gross_revenue == pytest.approx(3.50 + 5.00 + 6.00)
    assert m.average_order_value == pytest.approx((3.50 + 5.00 + 6.00) / 3)
    assert m.cancellation_rate_pct == pytest.approx(20.0)
    assert m.status_counts["pending"] == 1
    assert m.status_counts["preparing"] == 0
    assert set(m.status_counts) == {s.value for s in OrderStatus}


def test_sales_metrics_empty():
    m = compute_sales_metrics([])
    assert m.order_count == 0
    assert m.gross_revenue == 0.0
    assert m.average_order_value == 0.0
    assert m.cancellation_rate_pct == 0.0


# --- print_report ---


def test_print_report(capsys):
    m = print_report(_sample_orders())
    out = capsys.readouterr().out
    assert "--- Order Summary ---" in out
    assert "Gross revenue:   14.50" in out
    assert m.order_count == 5
