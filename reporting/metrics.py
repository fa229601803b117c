"""
Sales metrics: order counts, revenue, average order value, cancellation rate.

Revenue counts only orders whose payment stands (PAID through COMPLETED);
cancelled and pending orders contribute nothing.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from order_core.order import Order, OrderStatus

REVENUE_STATUSES = (
    OrderStatus.PAID,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.COMPLETED,
)


@dataclass
class SalesMetrics:
    """Summary figures over a set of orders."""

    order_count: int
    paid_order_count: int
    cancelled_count: int
    gross_revenue: float
    average_order_value: float
    cancellation_rate_pct: float
    status_counts: dict[str, int] = field(default_factory=dict)


def compute_sales_metrics(orders: Iterable[Order]) -> SalesMetrics:
    """
    Compute SalesMetrics from orders.

    Parameters
    ----------
    orders : iterable of Order
        Any orders, e.g. OrderService.list_all_orders().

    Returns
    -------
    SalesMetrics
        status_counts has an entry (possibly 0) for every OrderStatus value.
    """
    orders = list(orders)
    status_counts = {status.value: 0 for status in OrderStatus}
    for order in orders:
        status_counts[order.status.value] += 1

    paid_totals = np.array(
        [o.total_price for o in orders if o.status in REVENUE_STATUSES], dtype=float
    )
    gross_revenue = float(np.sum(paid_totals)) if paid_totals.size else 0.0
    average_order_value = float(np.mean(paid_totals)) if paid_totals.size else 0.0

    cancelled = status_counts[OrderStatus.CANCELLED.value]
    cancellation_rate_pct = (cancelled / len(orders) * 100.0) if orders else 0.0

    return SalesMetrics(
        order_count=len(orders),
        paid_order_count=int(paid_totals.size),
        cancelled_count=cancelled,
        gross_revenue=gross_revenue,
        average_order_value=average_order_value,
        cancellation_rate_pct=cancellation_rate_pct,
        status_counts=status_counts,
    )
