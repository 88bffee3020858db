# agent_best_day/tools/sheets/service.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Optional, Sequence, Union
import asyncio
import logging

import pandas as pd

from .agg.best_day import select_best_day
from .agg.daily_totals import daily_totals
from .config import AppConfig
from .dates import normalize_date_range
from .dto import BestDayResult, MetaInfo, PipelineQuery, PipelineResult, Record
from .exceptions import InvalidIdentifier, PipelineError
from .filters import filter_line_items_by_orders, filter_orders_by_date
from .identifiers import extract_spreadsheet_id
from .join import combine_orders_with_line_items
from .loader import frame_to_records, records_to_frame
from .provider import GoogleSheetsProvider, TableProvider
from .schema import LINE_ITEM_COLS, ORDER_COLS, ORDER_DATE, PRICE

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong"


def _now_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="seconds")


async def run_pipeline(
    q: PipelineQuery,
    provider: Optional[TableProvider] = None,
    app_cfg: Optional[AppConfig] = None,
) -> PipelineResult:
    """
    Punto de entrada del core. Orquesta:
    ID -> lectura (Orders y LineItems en paralelo) -> filtro por fecha -> filtro de line items -> combinación.

    Los errores se devuelven como PipelineResult(ok=False); nunca hay resultados parciales.
    """
    cfg = app_cfg or AppConfig()
    dataset_id = extract_spreadsheet_id(q.dataset)
    window = normalize_date_range(q.start_date, q.end_date)
    meta = MetaInfo(dataset_id=dataset_id or "", window=window, generated_at=_now_iso())

    try:
        if not dataset_id:
            raise InvalidIdentifier("Invalid Spreadsheet link or ID")

        source = provider or GoogleSheetsProvider(cfg)
        orders_raw, line_items_raw = await asyncio.gather(
            source.fetch_table(dataset_id, cfg.orders_table),
            source.fetch_table(dataset_id, cfg.line_items_table),
        )

        orders_df = records_to_frame(orders_raw, ORDER_COLS, cfg.orders_table)
        line_items_df = records_to_frame(line_items_raw, LINE_ITEM_COLS, cfg.line_items_table)

        filtered_orders = filter_orders_by_date(orders_df, window)
        filtered_line_items = filter_line_items_by_orders(line_items_df, filtered_orders)
        combined = combine_orders_with_line_items(filtered_orders, filtered_line_items)

        logger.info(
            "Pipeline %s: orders=%s/%s line_items=%s/%s combined=%s",
            dataset_id, len(filtered_orders), len(orders_df),
            len(filtered_line_items), len(line_items_df), len(combined),
        )
        return PipelineResult(
            ok=True,
            orders=frame_to_records(filtered_orders),
            line_items=frame_to_records(filtered_line_items),
            combined=frame_to_records(combined),
            meta=meta.model_copy(update={
                "orders_fetched": len(orders_df),
                "line_items_fetched": len(line_items_df),
                "orders_count": len(filtered_orders),
                "line_items_count": len(filtered_line_items),
                "combined_count": len(combined),
            }),
        )

    except PipelineError as pe:
        logger.warning("Error de dominio en pipeline (%s): %s", pe.kind, pe)
        return PipelineResult.failure(pe.kind, str(pe) or GENERIC_ERROR, meta)  # type: ignore[arg-type]
    except Exception as ex:
        logger.exception("Fallo no controlado en pipeline.")
        return PipelineResult.failure("unexpected", str(ex) or GENERIC_ERROR, meta)


def find_best_day(combined: Union[Sequence[Record], pd.DataFrame]) -> Optional[BestDayResult]:
    """Totales diarios + selección del mejor día. Sin filas combinadas -> None (no-op)."""
    if isinstance(combined, pd.DataFrame):
        df = combined
    else:
        if not combined:
            return None
        df = records_to_frame(list(combined), [ORDER_DATE, PRICE], "combined")
    if df.empty:
        return None
    return select_best_day(daily_totals(df))


def daily_totals_for(combined: Sequence[Record]) -> Dict[str, float]:
    if not combined:
        return {}
    return daily_totals(records_to_frame(list(combined), [ORDER_DATE, PRICE], "combined"))
