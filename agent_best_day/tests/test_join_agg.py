# agent_best_day/tests/test_join_agg.py
from __future__ import annotations

"""
Tests de combinación (orden + precio), totales diarios y selección del mejor día.
"""

from datetime import date
from typing import List

import pandas as pd
import pytest

from agent_best_day.tools.sheets.agg.best_day import select_best_day
from agent_best_day.tools.sheets.agg.daily_totals import coerce_price, daily_totals
from agent_best_day.tools.sheets.dates import normalize_date_range
from agent_best_day.tools.sheets.filters import filter_line_items_by_orders, filter_orders_by_date
from agent_best_day.tools.sheets.join import combine_orders_with_line_items
from agent_best_day.tools.sheets.loader import records_to_frame
from agent_best_day.tools.sheets.schema import LINE_ITEM_COLS, ORDER_COLS


def _orders(rows: List[tuple]) -> pd.DataFrame:
    return records_to_frame([{"Order ID": oid, "Order Date": d} for oid, d in rows], ORDER_COLS, "Orders")


def _line_items(rows: List[tuple]) -> pd.DataFrame:
    return records_to_frame([{"Order ID": oid, "Price": p} for oid, p in rows], LINE_ITEM_COLS, "LineItems")


@pytest.fixture()
def orders() -> pd.DataFrame:
    return _orders([
        ("O1", "01-06-2024"),
        ("O2", "01-06-2024"),
        ("O3", "02-06-2024"),
        ("O4", "03-06-2024"),
    ])


# ------------------------------ Tests: combinación ----------------------------


def test_combine_keeps_cardinality_and_defaults_to_zero(orders: pd.DataFrame) -> None:
    items = _line_items([("O1", "10"), ("O3", "7.5")])
    out = combine_orders_with_line_items(orders, items)
    assert len(out) == len(orders)
    assert out["Order ID"].tolist() == ["O1", "O2", "O3", "O4"]
    assert out["Price"].tolist() == ["10", "0", "7.5", "0"]
    # la fecha no se modifica
    assert out["Order Date"].tolist() == orders["Order Date"].tolist()


def test_combine_last_line_item_wins(orders: pd.DataFrame) -> None:
    items = _line_items([("O1", "10"), ("O1", "25"), ("O2", "3")])
    out = combine_orders_with_line_items(orders, items)
    assert out["Price"].tolist() == ["25", "3", "0", "0"]


def test_combine_matched_line_item_without_price_is_none(orders: pd.DataFrame) -> None:
    items = _line_items([("O1", None)])
    out = combine_orders_with_line_items(orders, items)
    assert out["Price"].iloc[0] is None
    assert daily_totals(out) == {"01-06-2024": 0.0, "02-06-2024": 0.0, "03-06-2024": 0.0}


def test_combine_empty_orders() -> None:
    out = combine_orders_with_line_items(_orders([]), _line_items([("O1", "10")]))
    assert out.empty
    assert "Price" in out.columns


# ------------------------------ Tests: coerción -------------------------------


def test_coerce_price_best_effort() -> None:
    s = pd.Series(["10", " 2.5", "12.5 USD", "$12", "", None, "abc", "-3", "1e2", ".5"], dtype=object)
    assert coerce_price(s).tolist() == [10.0, 2.5, 12.5, 0.0, 0.0, 0.0, 0.0, -3.0, 100.0, 0.5]


# ------------------------------ Tests: totales diarios ------------------------


def test_daily_totals_sums_by_exact_date_string(orders: pd.DataFrame) -> None:
    items = _line_items([("O1", "10"), ("O2", "5.5"), ("O3", "x"), ("O4", "4")])
    totals = daily_totals(combine_orders_with_line_items(orders, items))
    assert totals == {"01-06-2024": 15.5, "02-06-2024": 0.0, "03-06-2024": 4.0}
    assert list(totals) == ["01-06-2024", "02-06-2024", "03-06-2024"]


def test_daily_totals_without_line_items_are_zero(orders: pd.DataFrame) -> None:
    totals = daily_totals(combine_orders_with_line_items(orders, _line_items([])))
    assert totals == {"01-06-2024": 0.0, "02-06-2024": 0.0, "03-06-2024": 0.0}


def test_daily_totals_empty() -> None:
    assert daily_totals(combine_orders_with_line_items(_orders([]), _line_items([]))) == {}


def test_same_day_window_yields_single_key(orders: pd.DataFrame) -> None:
    items = _line_items([("O1", "10"), ("O3", "7"), ("O2", "1")])
    window = normalize_date_range(date(2024, 6, 1), date(2024, 6, 1))
    kept = filter_orders_by_date(orders, window)
    combined = combine_orders_with_line_items(kept, filter_line_items_by_orders(items, kept))
    assert daily_totals(combined) == {"01-06-2024": 11.0}


# ------------------------------ Tests: mejor día ------------------------------


def test_select_best_day_single_bucket() -> None:
    r = select_best_day({"01-06-2024": 100.0})
    assert r is not None
    assert r.day == "01-06-2024"
    assert r.min_remainder == 0.0


def test_select_best_day_largest_day_wins() -> None:
    r = select_best_day({"A": 10.0, "B": 30.0, "C": 5.0})
    assert r is not None
    assert (r.day, r.min_remainder) == ("B", 15.0)


def test_select_best_day_tie_keeps_first_seen() -> None:
    r = select_best_day({"A": 5.0, "B": 20.0, "C": 20.0})
    assert r is not None
    assert (r.day, r.min_remainder) == ("B", 25.0)
    r2 = select_best_day({"C": 20.0, "B": 20.0, "A": 5.0})
    assert r2 is not None and r2.day == "C"


def test_select_best_day_empty_is_none() -> None:
    assert select_best_day({}) is None
