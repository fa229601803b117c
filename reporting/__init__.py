"""
Order reporting on top of order-core.

Turns orders into a pandas table and summary sales metrics.
"""

from reporting.frame import ORDER_COLUMNS, orders_to_dataframe
from reporting.metrics import SalesMetrics, compute_sales_metrics
from reporting.order_report import print_report

__all__ = [
    "ORDER_COLUMNS",
    "orders_to_dataframe",
    "SalesMetrics",
    "compute_sales_metrics",
    "print_report",
]
