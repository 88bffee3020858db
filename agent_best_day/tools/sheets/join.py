# agent_best_day/tools/sheets/join.py
from __future__ import annotations

from typing import Dict, Optional

import pandas as pd

from .schema import DEFAULT_PRICE, ORDER_ID, PRICE


def build_line_item_price_map(line_items: pd.DataFrame) -> Dict[Optional[str], Optional[str]]:
    """'Order ID' -> 'Price' del line item. Con IDs repetidos gana el último (orden de la hoja)."""
    if line_items.empty or ORDER_ID not in line_items.columns:
        return {}
    if PRICE not in line_items.columns:
        return dict.fromkeys(line_items[ORDER_ID].tolist())
    return dict(zip(line_items[ORDER_ID].tolist(), line_items[PRICE].tolist()))


def combine_orders_with_line_items(orders: pd.DataFrame, line_items: pd.DataFrame) -> pd.DataFrame:
    """Una fila por orden, mismo orden de entrada, con 'Price' del line item o "0".

    Si el line item existe pero su precio viene vacío, se conserva None (la coerción lo lleva a 0).
    """
    price_map = build_line_item_price_map(line_items)
    order_ids = orders[ORDER_ID].tolist() if ORDER_ID in orders.columns else [None] * len(orders)
    prices = [price_map[oid] if oid in price_map else DEFAULT_PRICE for oid in order_ids]
    return orders.assign(**{PRICE: pd.Series(prices, index=orders.index, dtype=object)})
