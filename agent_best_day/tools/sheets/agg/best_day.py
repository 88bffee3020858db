# agent_best_day/tools/sheets/agg/best_day.py
from __future__ import annotations

from typing import Mapping, Optional

import numpy as np

from ..dto import BestDayResult


def select_best_day(totals: Mapping[str, float]) -> Optional[BestDayResult]:
    """Día cuyo reembolso deja el menor total restante (total - total_del_día).

    Empates: gana el primero en el orden de las llaves. Sin días -> None.
    """
    if not totals:
        return None
    days = list(totals.keys())
    values = np.fromiter((float(v) for v in totals.values()), dtype="float64", count=len(days))
    remainders = values.sum() - values
    # argmin devuelve la primera posición del mínimo
    idx = int(np.argmin(remainders))
    return BestDayResult(day=days[idx], min_remainder=float(remainders[idx]))
