"""
Order table: one DataFrame row per order, for ad-hoc analysis and export.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from order_core.order import Order

ORDER_COLUMNS = [
    "order_id",
    "customer_name",
    "customer_email",
    "status",
    "created_at",
    "item_count",
    "total_price",
    "payment_id",
]


def orders_to_dataframe(orders: Iterable[Order]) -> pd.DataFrame:
    """
    Flatten orders into a DataFrame with ORDER_COLUMNS.

    item_count is the summed quantity across lines; status is the status value
    string. Empty input yields an empty frame with the same columns.
    """
    rows = [
        {
            "order_id": str(order.id),
            "customer_name": order.customer.name,
            "customer_email": order.customer.email,
            "status": order.status.value,
            "created_at": order.created_at,
            "item_count": sum(item.quantity for item in order.items),
            "total_price": float(order.total_price),
            "payment_id": order.payment_id,
        }
        for order in orders
    ]
    if not rows:
        return pd.DataFrame(columns=ORDER_COLUMNS)
    df = pd.DataFrame(rows, columns=ORDER_COLUMNS)
    df["created_at"] = pd.to_datetime(df["created_at"], utc=True)
    return df.sort_values("created_at", kind="stable").reset_index(drop=True)
