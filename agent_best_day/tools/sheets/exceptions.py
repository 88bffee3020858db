# agent_best_day/tools/sheets/exceptions.py
from __future__ import annotations

class PipelineError(Exception):
    """Base para errores del dominio del pipeline."""

    kind: str = "unexpected"

class InvalidIdentifier(PipelineError):
    """Link o ID de spreadsheet vacío."""

    kind = "invalid_identifier"

class FetchFailure(PipelineError):
    """Falló la lectura de una tabla en el proveedor (red, HTTP o JSON)."""

    kind = "fetch_failure"

class SchemaMismatch(FetchFailure):
    """La respuesta del proveedor no tiene forma de tabla (lista de filas)."""

    kind = "schema_mismatch"

class InvalidParam(PipelineError):
    """Parámetro inválido o faltante."""

    kind = "invalid_param"
