# agent_best_day/tools/sheets/filters.py
from __future__ import annotations

import pandas as pd

from .dates import parse_order_dates, window_bounds
from .dto import DateWindow
from .schema import ORDER_DATE, ORDER_ID


def filter_orders_by_date(orders: pd.DataFrame, window: DateWindow) -> pd.DataFrame:
    """Órdenes con 'Order Date' válida dentro de [lower, upper]. Las inválidas se descartan."""
    if orders.empty or ORDER_DATE not in orders.columns:
        return orders.iloc[0:0]
    lower, upper = window_bounds(window)
    parsed = parse_order_dates(orders[ORDER_DATE])
    mask = parsed.notna() & (parsed >= lower) & (parsed <= upper)
    return orders[mask]


def filter_line_items_by_orders(line_items: pd.DataFrame, filtered_orders: pd.DataFrame) -> pd.DataFrame:
    """Line items cuyo 'Order ID' aparece en las órdenes filtradas (sin huérfanos)."""
    if line_items.empty or ORDER_ID not in line_items.columns or ORDER_ID not in filtered_orders.columns:
        return line_items.iloc[0:0]
    valid_ids = set(filtered_orders[ORDER_ID].tolist())
    return line_items[line_items[ORDER_ID].isin(list(valid_ids))]
