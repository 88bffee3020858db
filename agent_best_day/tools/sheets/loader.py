# agent_best_day/tools/sheets/loader.py
from __future__ import annotations

from typing import List, Sequence
import logging

import pandas as pd

from .dto import Record

logger = logging.getLogger(__name__)


def records_to_frame(records: Sequence[Record], required: Sequence[str], table_name: str = "") -> pd.DataFrame:
    """Convierte registros del proveedor en un DataFrame de texto (dtype object).

    - Conserva el orden de filas y de columnas (encabezados de la hoja).
    - Columnas requeridas que falten se agregan vacías (None) y se loguean:
      las reglas por fila (descartar / default) se encargan del resto.
    """
    if not records:
        return pd.DataFrame(columns=list(required), dtype=object)

    df = pd.DataFrame.from_records(list(records)).astype(object)
    df = df.where(df.notna(), None)

    missing = [c for c in required if c not in df.columns]
    if missing:
        logger.warning("Tabla %s sin columnas requeridas: %s", table_name or "?", missing)
        for c in missing:
            df[c] = None
    return df.reset_index(drop=True)


def frame_to_records(df: pd.DataFrame) -> List[Record]:
    """DataFrame -> lista de dicts, con None (nunca NaN) en valores ausentes."""
    if df.empty:
        return []
    clean = df.astype(object)
    clean = clean.where(clean.notna(), None)
    return clean.to_dict(orient="records")  # type: ignore[return-value]
