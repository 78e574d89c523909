"""Unit tests for finance_charts.aggregation."""

from __future__ import annotations

import pytest

from finance_charts.aggregation import Aggregator
from finance_charts.categories import CategoryGroup
from finance_charts.editing import EditController
from finance_charts.ledger import SAMPLE_SERIES, Ledger

SAMPLE_TOTAL = float(sum(SAMPLE_SERIES))


def _aggregator():
    return Aggregator(Ledger.from_sample())


def test_yearly_total_of_sample_series() -> None:
    aggregator = _aggregator()
    for category in aggregator.ledger.categories(CategoryGroup.EXPENSE):
        assert aggregator.yearly_total(category) == SAMPLE_TOTAL


def test_yearly_total_matches_sum_after_edits() -> None:
    aggregator = _aggregator()
    ledger = aggregator.ledger
    ledger.set("wage", 0, 5000)
    ledger.set("wage", 7, 12.25)
    ledger.set("esteem", 11, 0)
    for group in CategoryGroup:
        for category in ledger.categories(group):
            assert aggregator.yearly_total(category) == sum(ledger.series(category))
    # recomputing without edits gives the same answer
    assert aggregator.yearly_total("wage") == aggregator.yearly_total("wage")


def test_yearly_total_reflects_replaced_value() -> None:
    aggregator = _aggregator()
    EditController(aggregator.ledger).apply_edit("physiological", 3, "250")
    assert aggregator.ledger.get("physiological", 3) == 250.0
    # April was 120; the new value replaces it
    assert aggregator.yearly_total("physiological") == SAMPLE_TOTAL - 120 + 250


def test_january_edit_scenario() -> None:
    aggregator = _aggregator()
    EditController(aggregator.ledger).apply_edit("physiological", 0, "300")
    totals = dict(aggregator.yearly_totals(CategoryGroup.EXPENSE))
    assert SAMPLE_TOTAL == 1200.0
    assert totals["physiological"] == 1400.0
    for group in CategoryGroup:
        for category, total in aggregator.yearly_totals(group):
            if category != "physiological":
                assert total == SAMPLE_TOTAL


def test_yearly_totals_order_and_length_match_categories() -> None:
    aggregator = _aggregator()
    for group in CategoryGroup:
        categories = aggregator.ledger.categories(group)
        totals = aggregator.yearly_totals(group)
        assert len(totals) == len(categories)
        assert [category for category, _ in totals] == categories


def test_zero_sum_categories_are_kept() -> None:
    aggregator = _aggregator()
    for month in range(12):
        aggregator.ledger.set("property", month, 0)
    totals = aggregator.yearly_totals(CategoryGroup.INCOME)
    assert ("property", 0.0) in totals
    assert len(totals) == 4


def test_pie_totals_cover_every_cell_once() -> None:
    aggregator = _aggregator()
    aggregator.ledger.set("aesthetic", 2, 17)
    aggregator.ledger.set("transcendence", 9, 3)
    pie_sum = sum(total for _, total in aggregator.yearly_totals(CategoryGroup.EXPENSE))
    cell_sum = sum(
        value
        for category in aggregator.ledger.categories(CategoryGroup.EXPENSE)
        for value in aggregator.ledger.series(category)
    )
    assert pie_sum == cell_sum
    assert aggregator.group_total(CategoryGroup.EXPENSE) == cell_sum


def test_monthly_totals_is_identity_passthrough() -> None:
    aggregator = _aggregator()
    aggregator.ledger.set("operational", 6, 42)
    monthly = aggregator.monthly_totals(CategoryGroup.INCOME)
    assert list(monthly) == aggregator.ledger.categories(CategoryGroup.INCOME)
    assert monthly["operational"] == aggregator.ledger.series("operational")
    assert monthly["operational"][6] == 42.0


def test_monthly_group_totals_net_and_variance() -> None:
    aggregator = _aggregator()
    expenses = aggregator.monthly_group_totals(CategoryGroup.EXPENSE)
    income = aggregator.monthly_group_totals(CategoryGroup.INCOME)
    assert expenses[0] == 8 * 100.0
    assert income[0] == 4 * 100.0
    assert aggregator.monthly_net()[0] == pytest.approx(-400.0)
    assert aggregator.budget_variance()[0] == pytest.approx(300.0 - 800.0)
    aggregator.ledger.set_budget(0, 1000)
    assert aggregator.budget_variance()[0] == pytest.approx(200.0)
