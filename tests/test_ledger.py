"""Unit tests for finance_charts.ledger."""

from __future__ import annotations

import math

import numpy as np
import pytest

from finance_charts.categories import DEFAULT_CATEGORIES, MONTH_LABELS, CategoryGroup
from finance_charts.errors import InvalidValue, OutOfRange
from finance_charts.ledger import SAMPLE_SERIES, Ledger, sample_series

EXPENSES = [
    "physiological", "safety", "belonging_love", "esteem",
    "cognitive", "aesthetic", "self_actualization", "transcendence",
]
INCOMES = ["wage", "operational", "property", "transfer"]


def test_sample_ledger_holds_sample_series() -> None:
    ledger = Ledger.from_sample()
    for definition in DEFAULT_CATEGORIES:
        assert ledger.series(definition.key) == [float(v) for v in SAMPLE_SERIES]
    assert ledger.budget_series() == [300.0] * 12


def test_categories_are_in_fixed_order() -> None:
    ledger = Ledger.from_sample()
    assert ledger.categories(CategoryGroup.EXPENSE) == EXPENSES
    assert ledger.categories(CategoryGroup.INCOME) == INCOMES
    # string group values are accepted too
    assert ledger.categories("income") == INCOMES


def test_categories_returns_a_copy() -> None:
    ledger = Ledger.from_sample()
    keys = ledger.categories(CategoryGroup.EXPENSE)
    keys.append("bogus")
    assert "bogus" not in ledger.categories(CategoryGroup.EXPENSE)


def test_unknown_group_is_out_of_range() -> None:
    with pytest.raises(OutOfRange):
        Ledger.from_sample().categories("savings")


@pytest.mark.parametrize("value", [0.0, 250.0, -42.5, 0.1, 1e300, 7])
def test_get_after_set_returns_value(value) -> None:
    ledger = Ledger.from_sample()
    for category in EXPENSES + INCOMES:
        for month in range(12):
            ledger.set(category, month, value)
            assert ledger.get(category, month) == value


def test_set_changes_only_one_cell() -> None:
    ledger = Ledger.from_sample()
    ledger.set("esteem", 5, 999)
    assert ledger.get("esteem", 5) == 999.0
    assert ledger.get("esteem", 4) == 150.0
    assert ledger.get("cognitive", 5) == 100.0


def test_get_rejects_bad_month_and_category() -> None:
    ledger = Ledger.from_sample()
    for month in (-1, 12, 100):
        with pytest.raises(OutOfRange):
            ledger.get("wage", month)
    with pytest.raises(OutOfRange):
        ledger.get("groceries", 0)
    with pytest.raises(OutOfRange):
        ledger.get("wage", 1.5)
    with pytest.raises(OutOfRange):
        ledger.get("wage", True)


def test_numpy_month_index_is_accepted() -> None:
    ledger = Ledger.from_sample()
    assert ledger.get("wage", np.int64(3)) == 120.0


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "12", None, 10**400])
def test_set_rejects_non_finite_and_non_numeric(value) -> None:
    ledger = Ledger.from_sample()
    with pytest.raises(InvalidValue):
        ledger.set("wage", 0, value)
    assert ledger.get("wage", 0) == 100.0


def test_set_rejects_bad_month_and_category() -> None:
    ledger = Ledger.from_sample()
    with pytest.raises(OutOfRange):
        ledger.set("wage", 12, 1.0)
    with pytest.raises(OutOfRange):
        ledger.set("budget", 0, 1.0)


def test_budget_access() -> None:
    ledger = Ledger.from_sample()
    ledger.set_budget(11, 450)
    assert ledger.get_budget(11) == 450.0
    assert ledger.get_budget(0) == 300.0
    with pytest.raises(OutOfRange):
        ledger.get_budget(12)
    with pytest.raises(InvalidValue):
        ledger.set_budget(0, math.nan)


def test_series_is_a_copy() -> None:
    ledger = Ledger.from_sample()
    series = ledger.series("safety")
    series[0] = -1
    assert ledger.get("safety", 0) == 100.0


def test_construction_validates_shape_and_keys() -> None:
    values = {definition.key: sample_series() for definition in DEFAULT_CATEGORIES}
    budget = [300.0] * 12

    short = dict(values, wage=[1.0] * 11)
    with pytest.raises(InvalidValue):
        Ledger(short, budget)

    missing = {k: v for k, v in values.items() if k != "transfer"}
    with pytest.raises(InvalidValue):
        Ledger(missing, budget)

    extra = dict(values, groceries=sample_series())
    with pytest.raises(InvalidValue):
        Ledger(extra, budget)

    non_finite = dict(values, esteem=[math.inf] + [0.0] * 11)
    with pytest.raises(InvalidValue):
        Ledger(non_finite, budget)

    digit_string = dict(values, wage="123456789012")
    with pytest.raises(InvalidValue):
        Ledger(digit_string, budget)

    booleans = dict(values, wage=[True] * 12)
    with pytest.raises(InvalidValue):
        Ledger(booleans, budget)

    with pytest.raises(InvalidValue):
        Ledger(values, [300.0] * 13)


def test_custom_category_set() -> None:
    definitions = [d for d in DEFAULT_CATEGORIES if d.key in {"safety", "wage"}]
    ledger = Ledger({"safety": [1.0] * 12, "wage": [2.0] * 12}, [0.0] * 12, definitions)
    assert ledger.categories(CategoryGroup.EXPENSE) == ["safety"]
    assert ledger.categories(CategoryGroup.INCOME) == ["wage"]
    with pytest.raises(OutOfRange):
        ledger.get("physiological", 0)


def test_to_frame_uses_month_labels() -> None:
    ledger = Ledger.from_sample()
    frame = ledger.to_frame(include_budget=True)
    assert list(frame.columns) == list(MONTH_LABELS)
    assert list(frame.index) == EXPENSES + INCOMES + ["budget"]
    assert frame.loc["budget", "Jan."] == 300.0
    # copies do not write through
    frame.loc["wage", "Jan."] = 0
    assert ledger.get("wage", 0) == 100.0
