# agent_best_day/tools/sheets/agg/daily_totals.py
from __future__ import annotations

from typing import Dict
import logging

import pandas as pd

from ..schema import ORDER_DATE, PRICE

logger = logging.getLogger(__name__)

# Prefijo numérico más largo: signo, dígitos, decimales y exponente opcionales.
# "12.5 USD" -> 12.5 ; "$12" -> 0 ; "" / None -> 0
_LEADING_NUMBER = r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"


def coerce_price(values: pd.Series) -> pd.Series:
    """Coerción numérica 'best effort' del precio. Nunca falla: lo no numérico vale 0.0."""
    if values.empty:
        return pd.Series([], index=values.index, dtype="float64")
    text = values.map(lambda v: v if isinstance(v, str) else (None if v is None else str(v)))
    leading = text.str.extract(_LEADING_NUMBER, expand=False)
    return pd.to_numeric(leading, errors="coerce").fillna(0.0).astype("float64")


def daily_totals(combined: pd.DataFrame) -> Dict[str, float]:
    """Suma de 'Price' por string exacto de 'Order Date' (sin parsear).

    Las llaves salen en orden de primera aparición; sin filas -> {}.
    """
    if combined.empty:
        return {}
    prices = coerce_price(combined[PRICE]) if PRICE in combined.columns else pd.Series(0.0, index=combined.index)
    totals = prices.groupby(combined[ORDER_DATE], sort=False, dropna=False).sum()
    out = {str(day): float(total) for day, total in totals.items()}
    logger.info("Totales diarios: %s días", len(out))
    return out
