"""Keeping charts in step with the ledger.

After any edit the consumer must call :meth:`ViewNotifier.refresh` before
showing charts again.  A refresh derives one :class:`ChartBundle`:

* the stacked bar chart, as an explicit list of ``(key, dataset)``
  bindings (budget line first, then expense categories, then income
  categories);
* the expense pie and the income pie, from the yearly totals.

Datasets are always looked up by key through the bindings, never by list
position, so adding or removing a category cannot attach a series to the
wrong data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .aggregation import Aggregator
from .categories import (
    BUDGET_BORDER_COLOR,
    BUDGET_COLOR,
    BUDGET_KEY,
    MONTH_LABELS,
    CategoryGroup,
    rgba,
)
from .errors import BindingMismatch, OutOfRange
from .ledger import Ledger
from .logging_setup import get_logger

logger = get_logger(__name__)


@dataclass
class Dataset:
    label: str
    data: List[float]
    background_color: str
    border_color: str
    kind: str = "bar"  # "bar" or "line"
    stack: Optional[str] = None
    dashed: bool = False


@dataclass(frozen=True)
class DatasetBinding:
    key: str
    dataset: Dataset


@dataclass
class PieData:
    labels: List[str]
    values: List[float]
    colors: List[str]

    @property
    def total(self) -> float:
        return float(sum(self.values))


@dataclass
class ChartBundle:
    """Everything a renderer needs to draw the three charts."""
    labels: List[str]
    bar: List[DatasetBinding] = field(default_factory=list)
    expense_pie: PieData = field(default_factory=lambda: PieData([], [], []))
    income_pie: PieData = field(default_factory=lambda: PieData([], [], []))

    def bound_keys(self) -> List[str]:
        return [binding.key for binding in self.bar]

    def dataset_for(self, key: str) -> Dataset:
        for binding in self.bar:
            if binding.key == key:
                return binding.dataset
        raise OutOfRange(f"No dataset bound to '{key}'")

    def pie_for(self, group: CategoryGroup) -> PieData:
        return self.expense_pie if CategoryGroup(group) is CategoryGroup.EXPENSE else self.income_pie


Renderer = Callable[[ChartBundle], None]


def _pie(aggregator: Aggregator, group: CategoryGroup) -> PieData:
    totals = aggregator.yearly_totals(group)
    ledger = aggregator.ledger
    return PieData(
        labels=[category for category, _ in totals],
        values=[total for _, total in totals],
        colors=[rgba(ledger.definition(category).color, 0.2) for category, _ in totals],
    )


def build_chart_bundle(
    aggregator: Aggregator, month_labels: Sequence[str] = MONTH_LABELS
) -> ChartBundle:
    """Derive all chart datasets from the current ledger state."""
    ledger = aggregator.ledger
    bindings = [
        DatasetBinding(
            BUDGET_KEY,
            Dataset(
                label="Budget",
                data=aggregator.budget(),
                background_color=rgba(BUDGET_COLOR, 0.2),
                border_color=rgba(BUDGET_BORDER_COLOR, 1),
                kind="line",
                dashed=True,
            ),
        )
    ]
    for group in CategoryGroup:
        for category, series in aggregator.monthly_totals(group).items():
            color = ledger.definition(category).color
            bindings.append(
                DatasetBinding(
                    category,
                    Dataset(
                        label=category,
                        data=series,
                        background_color=rgba(color, 0.2),
                        border_color=rgba(color, 1),
                        stack=group.value,
                    ),
                )
            )
    return ChartBundle(
        labels=list(month_labels),
        bar=bindings,
        expense_pie=_pie(aggregator, CategoryGroup.EXPENSE),
        income_pie=_pie(aggregator, CategoryGroup.INCOME),
    )


def validate_bindings(bundle: ChartBundle, ledger: Ledger) -> None:
    """Raise :class:`BindingMismatch` if ``bundle`` is out of step with ``ledger``."""
    expected = [BUDGET_KEY] + [
        category for group in CategoryGroup for category in ledger.categories(group)
    ]
    if bundle.bound_keys() != expected:
        raise BindingMismatch(
            f"Bar datasets {bundle.bound_keys()} do not match categories {expected}"
        )
    for binding in bundle.bar:
        current = ledger.budget_series() if binding.key == BUDGET_KEY else ledger.series(binding.key)
        if list(binding.dataset.data) != current:
            raise BindingMismatch(f"Dataset '{binding.key}' is stale")
    for group in CategoryGroup:
        pie = bundle.pie_for(group)
        if pie.labels != ledger.categories(group):
            raise BindingMismatch(
                f"{group.label} pie labels {pie.labels} do not match {ledger.categories(group)}"
            )
        totals = [float(sum(ledger.series(category))) for category in pie.labels]
        if pie.values != totals:
            raise BindingMismatch(f"{group.label} pie totals are stale")


class ViewNotifier:
    """Hands a freshly derived :class:`ChartBundle` to every subscribed renderer.

    Edits never refresh on their own; call :meth:`refresh` after one or
    more edits and before the charts are shown again.
    """

    def __init__(self, aggregator: Aggregator, month_labels: Sequence[str] = MONTH_LABELS):
        self.aggregator = aggregator
        self.month_labels = list(month_labels)
        self._renderers: List[Renderer] = []

    def subscribe(self, renderer: Renderer) -> Renderer:
        self._renderers.append(renderer)
        return renderer

    def unsubscribe(self, renderer: Renderer) -> None:
        if renderer in self._renderers:
            self._renderers.remove(renderer)

    def refresh(self) -> ChartBundle:
        bundle = build_chart_bundle(self.aggregator, self.month_labels)
        logger.debug("Refreshing %d renderer(s)", len(self._renderers))
        for renderer in list(self._renderers):
            renderer(bundle)
        return bundle
