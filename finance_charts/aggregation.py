"""Totals and summaries derived from a :class:`~finance_charts.ledger.Ledger`.

Nothing here is cached.  Every call reads the ledger as it is right now,
so a summary can never lag behind an edit.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .categories import CategoryGroup
from .ledger import GroupLike, Ledger


class Aggregator:
    """Read-only views over a ledger for chart consumers."""

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def monthly_totals(self, group: GroupLike) -> Dict[str, List[float]]:
        """Each category's series for ``group``, unchanged, in category order."""
        return {category: self.ledger.series(category) for category in self.ledger.categories(group)}

    def budget(self) -> List[float]:
        return self.ledger.budget_series()

    def yearly_total(self, category: str) -> float:
        """Sum of the twelve entries of ``category``."""
        return float(sum(self.ledger.series(category)))

    def yearly_totals(self, group: GroupLike) -> List[Tuple[str, float]]:
        """``(category, yearly total)`` pairs in category order.

        Categories that sum to zero are kept so the result always lines up
        with :meth:`Ledger.categories`.
        """
        return [(category, self.yearly_total(category)) for category in self.ledger.categories(group)]

    def group_total(self, group: GroupLike) -> float:
        """Total of every category in ``group`` over the whole year."""
        return float(sum(total for _, total in self.yearly_totals(group)))

    def monthly_group_totals(self, group: GroupLike) -> List[float]:
        """Per-month sum across the categories of ``group``."""
        frame = self.ledger.group_frame(group)
        return [float(v) for v in frame.sum(axis=0).tolist()]

    def monthly_net(self) -> List[float]:
        """Income minus expenses for each month."""
        income = self.monthly_group_totals(CategoryGroup.INCOME)
        expenses = self.monthly_group_totals(CategoryGroup.EXPENSE)
        return [inc - exp for inc, exp in zip(income, expenses)]

    def budget_variance(self) -> List[float]:
        """Budget minus expenses for each month (positive means under budget)."""
        expenses = self.monthly_group_totals(CategoryGroup.EXPENSE)
        return [budget - spent for budget, spent in zip(self.budget(), expenses)]
