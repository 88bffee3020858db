# agent_best_day/tools/sheets/schema.py
from __future__ import annotations

from typing import Final, List

# Nombres canónicos de columnas, tal cual vienen en la hoja
ORDER_ID: Final[str] = "Order ID"
ORDER_DATE: Final[str] = "Order Date"
PRICE: Final[str] = "Price"
LINE_ITEM_ID: Final[str] = "LineItem ID"

# Columnas mínimas por tabla (el resto de columnas se conserva tal cual)
ORDER_COLS: Final[List[str]] = [ORDER_ID, ORDER_DATE]
LINE_ITEM_COLS: Final[List[str]] = [ORDER_ID, PRICE]

# Formato de fecha en la hoja: DD-MM-YYYY (se invierte a YYYY-MM-DD para parsear)
DATE_SEP: Final[str] = "-"
PARSE_DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Precio por defecto cuando una orden no tiene line item asociado
DEFAULT_PRICE: Final[str] = "0"
