"""
Order report: print a sales summary for a set of orders.
"""

from __future__ import annotations

from collections.abc import Iterable

from order_core.order import Order
from reporting.metrics import SalesMetrics, compute_sales_metrics


def print_report(orders: Iterable[Order]) -> SalesMetrics:
    """
    Compute metrics for orders and print a summary.

    Returns
    -------
    SalesMetrics
        The computed metrics (e.g. for programmatic use).
    """
    metrics = compute_sales_metrics(orders)
    print("--- Order Summary ---")
    print(f"Orders:          {metrics.order_count}")
    print(f"Paid orders:     {metrics.paid_order_count}")
    print(f"Cancelled:       {metrics.cancelled_count} ({metrics.cancellation_rate_pct:.2f}%)")
    print(f"Gross revenue:   {metrics.gross_revenue:,.2f}")
    print(f"Avg order value: {metrics.average_order_value:,.2f}")
    for status, count in metrics.status_counts.items():
        print(f"  {status:<12} {count}")
    print("---------------------")
    return metrics
