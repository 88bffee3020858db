# agent_best_day/tools/sheets/dto.py
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# —— Literales y tipos ——
ErrorKindLiteral = Literal[
    "invalid_identifier",
    "fetch_failure",
    "schema_mismatch",
    "invalid_param",
    "unexpected",
]
Record = Dict[str, Optional[str]]


class PipelineQuery(BaseModel):
    """Contrato de entrada del pipeline: hoja + ventana de días (inclusiva)."""
    model_config = ConfigDict(frozen=True)

    # Link completo o ID suelto; se extrae el ID en el servicio, sin recortar espacios
    dataset: str
    start_date: date
    end_date: date

    @model_validator(mode="before")
    @classmethod
    def _default_end_date(cls, data: Any) -> Any:
        # Un solo día si no llega end_date
        if isinstance(data, dict) and data.get("end_date") is None and data.get("start_date") is not None:
            data = {**data, "end_date": data["start_date"]}
        return data


class DateWindow(BaseModel):
    """Ventana normalizada: inicio a las 00:00:00 y fin a las 23:59:59."""
    model_config = ConfigDict(frozen=True)

    lower: datetime
    upper: datetime


class BestDayResult(BaseModel):
    """Día cuyo reembolso total deja el menor ingreso restante."""
    model_config = ConfigDict(frozen=True)

    day: str
    min_remainder: float


class MetaInfo(BaseModel):
    dataset_id: str
    window: Optional[DateWindow] = None
    orders_fetched: int = 0
    line_items_fetched: int = 0
    orders_count: int = 0
    line_items_count: int = 0
    combined_count: int = 0
    generated_at: str


class PipelineResult(BaseModel):
    """Resultado de una corrida. Cada corrida produce un valor nuevo; nunca se muta."""
    model_config = ConfigDict(frozen=True)

    ok: bool
    error: Optional[str] = None
    error_kind: Optional[ErrorKindLiteral] = None
    orders: List[Record] = Field(default_factory=list)
    line_items: List[Record] = Field(default_factory=list)
    combined: List[Record] = Field(default_factory=list)
    meta: MetaInfo

    @staticmethod
    def failure(kind: ErrorKindLiteral, message: str, meta: MetaInfo) -> "PipelineResult":
        return PipelineResult(ok=False, error=message, error_kind=kind, meta=meta)
