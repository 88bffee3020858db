# agent_best_day/tools/sheets/dates.py
from __future__ import annotations

from datetime import date, datetime, time
from typing import Tuple

import pandas as pd

from .dto import DateWindow
from .schema import DATE_SEP, PARSE_DATE_FORMAT


def normalize_date_range(start: date, end: date) -> DateWindow:
    """Día inicial a las 00:00:00 y día final a las 23:59:59 (hora local, naive).

    start > end no es error: simplemente ninguna orden cae en la ventana.
    """
    return DateWindow(
        lower=datetime.combine(start, time(0, 0, 0)),
        upper=datetime.combine(end, time(23, 59, 59)),
    )


def window_bounds(window: DateWindow) -> Tuple[pd.Timestamp, pd.Timestamp]:
    return pd.Timestamp(window.lower), pd.Timestamp(window.upper)


def parse_order_dates(values: pd.Series) -> pd.Series:
    """'DD-MM-YYYY' -> Timestamp. Se parte por '-', se invierte y se vuelve a unir.

    Cualquier otra forma (None, menos/más de tres partes, fecha imposible) -> NaT.
    """
    if values.empty:
        return pd.Series([], index=values.index, dtype="datetime64[ns]")
    text = values.where(values.map(lambda v: isinstance(v, str)), None)
    reversed_iso = text.str.split(DATE_SEP).str[::-1].str.join(DATE_SEP)
    return pd.to_datetime(reversed_iso, format=PARSE_DATE_FORMAT, errors="coerce")
