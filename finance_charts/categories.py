"""Category definitions for the ledger.

The category table is data, not code: each entry names a category, the
group it belongs to, the help text shown next to its form field and the
colour used for its chart series.  Order in :data:`DEFAULT_CATEGORIES` is
the legend/row order used everywhere downstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

MONTH_LABELS: Tuple[str, ...] = (
    "Jan.", "Feb.", "Mar.", "Apr.", "May", "Jun.",
    "Jul.", "Aug.", "Sep.", "Oct.", "Nov.", "Dec.",
)

BUDGET_KEY = "budget"
BUDGET_COLOR: Tuple[int, int, int] = (255, 111, 49)
BUDGET_BORDER_COLOR: Tuple[int, int, int] = (255, 0, 0)


class CategoryGroup(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"

    @property
    def label(self) -> str:
        return "Expense" if self is CategoryGroup.EXPENSE else "Income"


@dataclass(frozen=True)
class CategoryDefinition:
    """A single ledger category."""
    key: str
    group: CategoryGroup
    description: str
    color: Tuple[int, int, int]

    @property
    def title(self) -> str:
        return self.key[:1].upper() + self.key[1:]


def rgba(color: Sequence[int], alpha: float) -> str:
    """Format an RGB triple as a CSS ``rgba(...)`` string."""
    red, green, blue = color
    return f"rgba({red},{green},{blue},{alpha})"


DEFAULT_CATEGORIES: Tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        "physiological", CategoryGroup.EXPENSE,
        "Basic survival needs like food, water, shelter, sleep.", (0, 48, 90),
    ),
    CategoryDefinition(
        "safety", CategoryGroup.EXPENSE,
        "Security, protection from harm, stability, and order.", (0, 75, 141),
    ),
    CategoryDefinition(
        "belonging_love", CategoryGroup.EXPENSE,
        "Relationships, friendships, affection, and social connections.", (0, 116, 217),
    ),
    CategoryDefinition(
        "esteem", CategoryGroup.EXPENSE,
        "Respect, recognition, self-worth, achievement, and confidence.", (65, 146, 217),
    ),
    CategoryDefinition(
        "cognitive", CategoryGroup.EXPENSE,
        "Knowledge, understanding, curiosity, and intellectual exploration.", (122, 186, 242),
    ),
    CategoryDefinition(
        "aesthetic", CategoryGroup.EXPENSE,
        "Beauty, balance, harmony, and appreciation of art.", (120, 198, 242),
    ),
    CategoryDefinition(
        "self_actualization", CategoryGroup.EXPENSE,
        "Personal growth, reaching full potential, self-fulfillment.", (120, 236, 242),
    ),
    CategoryDefinition(
        "transcendence", CategoryGroup.EXPENSE,
        "Helping others, spiritual connection, purpose beyond self.", (120, 242, 213),
    ),
    CategoryDefinition(
        "wage", CategoryGroup.INCOME,
        "Earnings from employment or labor, including salaries.", (85, 34, 51),
    ),
    CategoryDefinition(
        "operational", CategoryGroup.INCOME,
        "Profits from business activities or services rendered.", (170, 51, 102),
    ),
    CategoryDefinition(
        "property", CategoryGroup.INCOME,
        "Earnings from owning assets like rent, interest, dividends.", (204, 85, 153),
    ),
    CategoryDefinition(
        "transfer", CategoryGroup.INCOME,
        "Payments from government or others without work exchange.", (221, 153, 204),
    ),
)


def keys_by_group(definitions: Sequence[CategoryDefinition]) -> Dict[CategoryGroup, List[str]]:
    """Split definitions into ordered key lists per group."""
    grouped: Dict[CategoryGroup, List[str]] = {group: [] for group in CategoryGroup}
    for definition in definitions:
        grouped[definition.group].append(definition.key)
    return grouped
