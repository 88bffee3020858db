# agent_best_day/tools/sheets/identifiers.py
from __future__ import annotations

import re
from typing import Final, Pattern

SPREADSHEET_ID_RE: Final[Pattern[str]] = re.compile(r"spreadsheets/d/([a-zA-Z0-9-_]+)")


def extract_spreadsheet_id(text: str) -> str:
    """Extrae el ID desde un link de Google Sheets; si no hay match, devuelve el texto tal cual.

    >>> extract_spreadsheet_id("https://docs.google.com/spreadsheets/d/1AbC_23-xyZ/edit")
    '1AbC_23-xyZ'
    >>> extract_spreadsheet_id("1AbC_23-xyZ")
    '1AbC_23-xyZ'
    """
    match = SPREADSHEET_ID_RE.search(text or "")
    return match.group(1) if match else text
