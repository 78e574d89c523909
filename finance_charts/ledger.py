"""In-memory ledger of monthly category amounts.

The ledger is a grid of twelve months by N categories, backed by a pandas
DataFrame (one row per category, one column per month index), plus a
separate budget series used only as a comparison line.  The category set
is fixed when the ledger is built; only single cells change afterwards.

Writes never trigger recomputation or chart refreshes.  Callers go through
:class:`finance_charts.sync.ViewNotifier` for that.
"""

from __future__ import annotations

from numbers import Real
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .categories import (
    BUDGET_KEY,
    DEFAULT_CATEGORIES,
    MONTH_LABELS,
    CategoryDefinition,
    CategoryGroup,
    keys_by_group,
)
from .config import MONTHS_PER_YEAR
from .errors import InvalidValue, OutOfRange
from .logging_setup import get_logger

logger = get_logger(__name__)

SAMPLE_SERIES: Tuple[float, ...] = (100, 80, 60, 120, 150, 100, 80, 60, 120, 150, 100, 80)
SAMPLE_BUDGET: Tuple[float, ...] = (300,) * MONTHS_PER_YEAR

GroupLike = Union[CategoryGroup, str]


def sample_series() -> List[float]:
    """Return a fresh copy of the sample category series."""
    return [float(v) for v in SAMPLE_SERIES]


def resolve_group(group: GroupLike) -> CategoryGroup:
    """Accept a :class:`CategoryGroup` or its string value."""
    try:
        return CategoryGroup(group)
    except ValueError as exc:
        raise OutOfRange(f"Unknown category group '{group}'") from exc


def check_month(month_index: int) -> int:
    """Validate a month index and return it as a plain ``int``."""
    if isinstance(month_index, bool) or not isinstance(month_index, (int, np.integer)):
        raise OutOfRange(f"Month index must be an integer, got {month_index!r}")
    if not 0 <= month_index < MONTHS_PER_YEAR:
        raise OutOfRange(f"Month index {month_index} outside [0, {MONTHS_PER_YEAR})")
    return int(month_index)


def _coerce_value(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidValue(f"Ledger values must be numbers, got {value!r}")
    try:
        result = float(value)
    except OverflowError as exc:
        raise InvalidValue(f"Ledger value {value!r} is too large") from exc
    if not np.isfinite(result):
        raise InvalidValue(f"Ledger values must be finite, got {value!r}")
    return result


def _coerce_series(values: Sequence[float], name: str) -> List[float]:
    if isinstance(values, (str, bytes)):
        raise InvalidValue(f"Series '{name}' must be a sequence of numbers, got {values!r}")
    try:
        entries = list(values)
    except TypeError as exc:
        raise InvalidValue(f"Series '{name}' is not a sequence") from exc
    if len(entries) != MONTHS_PER_YEAR:
        raise InvalidValue(
            f"Series '{name}' must have {MONTHS_PER_YEAR} entries, got {len(entries)}"
        )
    try:
        return [_coerce_value(entry) for entry in entries]
    except InvalidValue as exc:
        raise InvalidValue(f"Series '{name}': {exc}") from exc


class Ledger:
    """Twelve-month amounts for a fixed set of income and expense categories."""

    def __init__(
        self,
        values: Mapping[str, Sequence[float]],
        budget: Sequence[float],
        definitions: Sequence[CategoryDefinition] = DEFAULT_CATEGORIES,
    ):
        """Build a ledger from an initial data source.

        Args:
            values: Mapping of category key to 12 monthly amounts.  Must
                cover exactly the categories in ``definitions``.
            budget: 12 monthly budget amounts.
            definitions: Ordered category definitions.

        Raises:
            InvalidValue: If a series is malformed or the category keys do
                not match the definitions.
        """
        keys = [definition.key for definition in definitions]
        if len(set(keys)) != len(keys):
            raise InvalidValue("Category keys must be unique")
        if BUDGET_KEY in keys:
            raise InvalidValue(f"'{BUDGET_KEY}' is reserved for the budget series")

        missing = [key for key in keys if key not in values]
        extra = sorted(set(values) - set(keys))
        if missing or extra:
            raise InvalidValue(
                f"Ledger values do not match categories (missing={missing}, unexpected={extra})"
            )

        rows = [_coerce_series(values[key], key) for key in keys]
        months = pd.RangeIndex(MONTHS_PER_YEAR, name="month")
        self._frame = pd.DataFrame(
            rows,
            index=pd.Index(keys, name="category"),
            columns=months,
            dtype=float,
        )
        self._budget = pd.Series(
            _coerce_series(budget, BUDGET_KEY), index=months, dtype=float, name=BUDGET_KEY
        )
        self._definitions: Tuple[CategoryDefinition, ...] = tuple(definitions)
        self._by_key: Dict[str, CategoryDefinition] = {d.key: d for d in self._definitions}
        self._groups = keys_by_group(self._definitions)

    @classmethod
    def from_sample(
        cls, definitions: Sequence[CategoryDefinition] = DEFAULT_CATEGORIES
    ) -> "Ledger":
        """Ledger where every category holds the sample series."""
        values = {definition.key: sample_series() for definition in definitions}
        return cls(values, list(SAMPLE_BUDGET), definitions)

    # ------------------------------------------------------------------
    # Category metadata
    # ------------------------------------------------------------------

    @property
    def definitions(self) -> Tuple[CategoryDefinition, ...]:
        return self._definitions

    def definition(self, category: str) -> CategoryDefinition:
        self._check_category(category)
        return self._by_key[category]

    def categories(self, group: GroupLike) -> List[str]:
        """Category keys of ``group`` in their fixed legend order."""
        return list(self._groups[resolve_group(group)])

    def group_of(self, category: str) -> CategoryGroup:
        return self.definition(category).group

    def _check_category(self, category: str) -> None:
        if category not in self._by_key:
            raise OutOfRange(f"Unknown category '{category}'")

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def get(self, category: str, month_index: int) -> float:
        self._check_category(category)
        month = check_month(month_index)
        return float(self._frame.at[category, month])

    def set(self, category: str, month_index: int, value: float) -> None:
        """Overwrite one cell.  Nothing else is recomputed."""
        self._check_category(category)
        month = check_month(month_index)
        amount = _coerce_value(value)
        self._frame.at[category, month] = amount
        logger.debug("Set %s[%s] = %s", category, MONTH_LABELS[month], amount)

    def get_budget(self, month_index: int) -> float:
        return float(self._budget.iat[check_month(month_index)])

    def set_budget(self, month_index: int, value: float) -> None:
        month = check_month(month_index)
        amount = _coerce_value(value)
        self._budget.iat[month] = amount
        logger.debug("Set %s[%s] = %s", BUDGET_KEY, MONTH_LABELS[month], amount)

    # ------------------------------------------------------------------
    # Row access
    # ------------------------------------------------------------------

    def series(self, category: str) -> List[float]:
        """Copy of a category's twelve monthly amounts."""
        self._check_category(category)
        return [float(v) for v in self._frame.loc[category].tolist()]

    def budget_series(self) -> List[float]:
        return [float(v) for v in self._budget.tolist()]

    def group_frame(self, group: GroupLike) -> pd.DataFrame:
        """Copy of the rows belonging to ``group``, in category order."""
        return self._frame.loc[self.categories(group)].copy()

    def to_frame(self, include_budget: bool = False, month_labels: Optional[Sequence[str]] = None) -> pd.DataFrame:
        """Copy of the whole grid with month labels as column names.

        Args:
            include_budget: Append the budget series as a final row.
            month_labels: Column names; defaults to :data:`MONTH_LABELS`.
        """
        labels = list(month_labels or MONTH_LABELS)
        frame = self._frame.copy()
        if include_budget:
            frame.loc[BUDGET_KEY] = self._budget
        frame.columns = labels
        return frame

    def __repr__(self) -> str:
        return (
            f"Ledger(expense={len(self._groups[CategoryGroup.EXPENSE])}, "
            f"income={len(self._groups[CategoryGroup.INCOME])})"
        )
