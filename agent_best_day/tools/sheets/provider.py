# agent_best_day/tools/sheets/provider.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence
import logging

import httpx

from .config import AppConfig
from .dto import Record
from .exceptions import FetchFailure, SchemaMismatch

logger = logging.getLogger(__name__)

GENERIC_FETCH_ERROR = "No se pudo leer la hoja de cálculo."


class TableProvider(Protocol):
    """Fuente externa de tablas: cada fila es un dict columna -> texto (o None)."""
    async def fetch_table(self, dataset_id: str, table_name: str) -> List[Record]: ...


def _as_text(value: Any) -> Optional[str]:
    """Celda vacía o ausente -> None; cualquier otro valor se conserva como texto."""
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


def rows_to_records(values: Optional[Sequence[Sequence[Any]]]) -> List[Record]:
    """Primera fila = encabezados; el resto se mapea por posición.

    Las filas cortas (celdas finales vacías que la API omite) dan None en esas columnas.
    """
    if not values:
        return []
    if not isinstance(values, list) or not all(isinstance(r, list) for r in values):
        raise SchemaMismatch("La respuesta no es una lista de filas.")

    headers, *rows = values
    out: List[Record] = []
    for row in rows:
        rec: Record = {}
        for idx, header in enumerate(headers):
            rec[str(header)] = _as_text(row[idx]) if idx < len(row) else None
        out.append(rec)
    return out


def _error_message(response: httpx.Response) -> str:
    """Mensaje del proveedor si viene en el cuerpo ({"error": {"message": ...}})."""
    try:
        body = response.json()
    except ValueError:
        return GENERIC_FETCH_ERROR
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
        if isinstance(err, str) and err:
            return err
    return GENERIC_FETCH_ERROR


class GoogleSheetsProvider:
    """Lee rangos de Google Sheets v4 (`values.get`) con una API key."""

    def __init__(self, cfg: Optional[AppConfig] = None, client: Optional[httpx.AsyncClient] = None) -> None:
        self._cfg = cfg or AppConfig()
        # Si no nos pasan cliente, se crea uno por llamada (no hay estado entre corridas)
        self._client = client

    def build_url(self, dataset_id: str, table_name: str) -> str:
        return f"{self._cfg.base_url}/{dataset_id}/values/{table_name}!{self._cfg.sheet_range}"

    async def fetch_table(self, dataset_id: str, table_name: str) -> List[Record]:
        url = self.build_url(dataset_id, table_name)
        params = {"key": self._cfg.api_key} if self._cfg.api_key else {}
        logger.info("Leyendo tabla %s de la hoja %s", table_name, dataset_id)

        try:
            if self._client is not None:
                response = await self._client.get(url, params=params)
            else:
                async with httpx.AsyncClient(timeout=self._cfg.timeout_s) as client:
                    response = await client.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Error de red leyendo %s: %s", table_name, exc)
            raise FetchFailure(str(exc) or GENERIC_FETCH_ERROR) from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning("HTTP %s leyendo %s: %s", response.status_code, table_name, message)
            raise FetchFailure(message)

        try:
            data = response.json()
        except ValueError as exc:
            raise FetchFailure(GENERIC_FETCH_ERROR) from exc

        values = data.get("values") if isinstance(data, dict) else None
        records = rows_to_records(values)
        logger.info("Tabla %s: %s filas", table_name, len(records))
        return records


class InMemoryProvider:
    """Proveedor en memoria (tests / corridas locales). Tablas por nombre, sin distinguir dataset."""

    def __init__(self, tables: Mapping[str, Sequence[Mapping[str, Any]]]) -> None:
        self._tables: Dict[str, List[Record]] = {
            name: [{str(k): _as_text(v) for k, v in row.items()} for row in rows]
            for name, rows in tables.items()
        }

    async def fetch_table(self, dataset_id: str, table_name: str) -> List[Record]:
        if table_name not in self._tables:
            raise FetchFailure(f"Tabla no encontrada: {table_name}")
        return [dict(r) for r in self._tables[table_name]]
