# agent_best_day/tools/sheets/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from dotenv import load_dotenv

load_dotenv()

# —— Fuente de datos (Google Sheets v4) ——
SHEETS_API_KEY: Final[str] = os.getenv("SHEETS_API_KEY", os.getenv("VITE_api_key", ""))
SHEETS_BASE_URL: Final[str] = os.getenv("SHEETS_BASE_URL", "https://sheets.googleapis.com/v4/spreadsheets")
SHEETS_RANGE: Final[str] = os.getenv("SHEETS_RANGE", "A1:Z10000")
SHEETS_TIMEOUT_S: Final[float] = float(os.getenv("SHEETS_TIMEOUT_S", "10"))

# —— Tablas ——
ORDERS_TABLE: Final[str] = os.getenv("ORDERS_TABLE", "Orders")
LINE_ITEMS_TABLE: Final[str] = os.getenv("LINE_ITEMS_TABLE", "LineItems")

# —— Agente ——
AGENT_MODEL: Final[str] = os.getenv("AGENT_MODEL", "gemini-2.5-flash")
AGENT_TEMPERATURE: Final[float] = float(os.getenv("AGENT_TEMPERATURE", "0.4"))


@dataclass(frozen=True)
class AppConfig:
    """Snapshot inmutable de configuración consumida por el servicio."""
    api_key: str = SHEETS_API_KEY
    base_url: str = SHEETS_BASE_URL
    sheet_range: str = SHEETS_RANGE
    timeout_s: float = SHEETS_TIMEOUT_S
    orders_table: str = ORDERS_TABLE
    line_items_table: str = LINE_ITEMS_TABLE
    model: str = AGENT_MODEL
    temperature: float = AGENT_TEMPERATURE
