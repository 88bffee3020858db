# agent_best_day/tools/tool_best_day.py
from __future__ import annotations

from typing import Optional, List, Dict, Any
import dataclasses
from datetime import date, datetime
from decimal import Decimal
import math

import numpy as np
from pydantic import ValidationError

# === Capa de dominio =========================================================
from .sheets.config import AppConfig
from .sheets.dto import PipelineQuery
from .sheets.provider import TableProvider
from .sheets.service import daily_totals_for, find_best_day, run_pipeline

# Config por defecto
DEFAULT_CFG = AppConfig()


# ------------------------------- Helpers -------------------------------------
def _json_safe(obj: Any) -> Any:
    """Convierte recursivamente a tipos JSON-serializables."""
    # escalares especiales
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, float) and (math.isnan(obj) or math.isinf(obj)):
        return None

    # numpy
    if isinstance(obj, np.generic):
        return _json_safe(obj.item())
    if isinstance(obj, np.ndarray):
        return [_json_safe(x) for x in obj.tolist()]

    # estructuras
    if isinstance(obj, dict):
        return {str(k): _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [_json_safe(v) for v in obj]

    # dataclass
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _json_safe(dataclasses.asdict(obj))

    # pydantic v2
    model_dump = getattr(obj, "model_dump", None)
    if callable(model_dump):
        return _json_safe(model_dump())

    return obj


def _validation_message(exc: ValidationError) -> str:
    parts: List[str] = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or str(exc)


# --------------------------- Payload (núcleo de la tool) ----------------------
async def build_best_day_payload(
    spreadsheet: str,
    date_from: Optional[str],
    date_to: Optional[str] = None,
    provider: Optional[TableProvider] = None,
    app_cfg: Optional[AppConfig] = None,
) -> Dict[str, Any]:
    """Corre el pipeline y el cálculo del mejor día; siempre devuelve un dict JSON-safe."""
    try:
        q = PipelineQuery(dataset=spreadsheet, start_date=date_from, end_date=date_to)
    except ValidationError as exc:
        return {
            "ok": False,
            "error": f"Parámetros inválidos: {_validation_message(exc)}",
            "error_kind": "invalid_param",
            "best_day": None,
        }

    result = await run_pipeline(q, provider=provider, app_cfg=app_cfg or DEFAULT_CFG)
    payload: Dict[str, Any] = {
        "ok": result.ok,
        "dataset_id": result.meta.dataset_id,
        "filters": {"date_from": q.start_date, "date_to": q.end_date},
        "meta": result.meta,
        "orders": result.orders,
        "line_items": result.line_items,
        "combined": result.combined,
        "daily_totals": {},
        "best_day": None,
        "error": result.error,
        "error_kind": result.error_kind,
    }
    if result.ok:
        payload["daily_totals"] = daily_totals_for(result.combined)
        payload["best_day"] = find_best_day(result.combined)
    return _json_safe(payload)


# --------------------------- Tool pública (AFC) -------------------------------
async def best_day_insights(
    spreadsheet: str,
    date_from: str,                    # "YYYY-MM-DD"
    date_to: Optional[str] = None,     # "YYYY-MM-DD"; si falta, un solo día
) -> Dict[str, Any]:
    """
    Tool pública AFC-friendly: lee Orders y LineItems de la hoja, filtra por rango de fechas,
    combina un precio por orden y calcula el mejor día para reembolsar.

    Parámetros:
      - spreadsheet: link de Google Sheets o ID suelto.
      - date_from/date_to: rango "YYYY-MM-DD" (ambos extremos incluidos).

    Retorna:
      dict JSON-serializable con llaves: ok, dataset_id, filters, meta, orders, line_items,
      combined, daily_totals, best_day, error.
    """
    try:
        return await build_best_day_payload(spreadsheet, date_from, date_to)
    except Exception as exc:
        return {
            "ok": False,
            "best_day": None,
            "error": f"{type(exc).__name__}: {exc}",
        }
