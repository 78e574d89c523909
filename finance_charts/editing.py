"""Form-driven edits of the ledger.

Text typed into a form field is turned into a number with the same rule a
browser form parser uses: read the longest leading numeric prefix and fall
back to zero when there is none.  Invalid input is therefore never an
error; it is stored as ``0`` and the caller shows the stored value back to
the user.

:class:`EditorSession` models the month-tabbed editor: it is either
``Closed`` or open on one month, and switching months never touches data.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from .categories import BUDGET_COLOR, BUDGET_KEY, MONTH_LABELS, CategoryGroup, rgba
from .errors import EditorClosed
from .ledger import Ledger, check_month
from .logging_setup import get_logger

logger = get_logger(__name__)

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(raw: object) -> float:
    """Parse form text into a finite amount, ``0.0`` when unparseable.

    Example:
        >>> parse_amount("250")
        250.0
        >>> parse_amount("12abc")
        12.0
        >>> parse_amount("abc")
        0.0
    """
    if raw is None:
        return 0.0
    text = str(raw).strip()
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        if text:
            logger.info("Coerced non-numeric input %r to 0", text)
        return 0.0
    value = float(match.group(0))
    if not math.isfinite(value) or value == 0:
        # also folds -0.0 into 0.0
        return 0.0
    if match.end() != len(text):
        logger.info("Coerced input %r to %s", text, value)
    return value


def format_amount(value: float) -> str:
    """Text to display in a form field for a stored amount.

    Example:
        >>> format_amount(250.0)
        '250'
        >>> format_amount(12.5)
        '12.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class EditController:
    """Applies single-cell edits coming from form fields."""

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def apply_edit(self, category: str, month_index: int, raw_input: str) -> float:
        """Parse ``raw_input`` and store it in ``category`` for the month.

        Returns the value actually stored so the caller can update the
        field text.  Charts are not refreshed here.
        """
        value = parse_amount(raw_input)
        self.ledger.set(category, month_index, value)
        return value

    def apply_budget(self, month_index: int, raw_input: str) -> float:
        """Same as :meth:`apply_edit` for the budget series."""
        value = parse_amount(raw_input)
        self.ledger.set_budget(month_index, value)
        return value


# ---------------------------------------------------------------------------
# Editor view state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class OpenOnMonth:
    month_index: int


EditorState = Union[Closed, OpenOnMonth]


@dataclass(frozen=True)
class FormField:
    """One editable field of the month form."""
    key: str
    label: str
    description: str
    value: str
    color: str
    group: Optional[CategoryGroup] = None

    @property
    def is_budget(self) -> bool:
        return self.key == BUDGET_KEY


class EditorSession:
    """Month-tabbed editor over a ledger."""

    def __init__(self, ledger: Ledger, controller: Optional[EditController] = None):
        self.ledger = ledger
        self.controller = controller or EditController(ledger)
        self.state: EditorState = Closed()

    @property
    def is_open(self) -> bool:
        return isinstance(self.state, OpenOnMonth)

    @property
    def current_month(self) -> int:
        if not isinstance(self.state, OpenOnMonth):
            raise EditorClosed("Editor is closed")
        return self.state.month_index

    def open(self) -> EditorState:
        self.state = OpenOnMonth(0)
        return self.state

    def select_month(self, month_index: int) -> EditorState:
        if not self.is_open:
            raise EditorClosed("Cannot select a month while the editor is closed")
        self.state = OpenOnMonth(check_month(month_index))
        return self.state

    def close(self) -> EditorState:
        self.state = Closed()
        return self.state

    def form_fields(self) -> List[FormField]:
        """Fields for the open month: categories in order, then the budget."""
        month = self.current_month
        month_label = MONTH_LABELS[month]
        fields: List[FormField] = []
        for group in CategoryGroup:
            for category in self.ledger.categories(group):
                definition = self.ledger.definition(category)
                fields.append(
                    FormField(
                        key=category,
                        label=f"{month_label} {definition.title} {group.label}",
                        description=definition.description,
                        value=format_amount(self.ledger.get(category, month)),
                        color=rgba(definition.color, 0.2),
                        group=group,
                    )
                )
        fields.append(
            FormField(
                key=BUDGET_KEY,
                label=f"{month_label} Budget",
                description=f"Set the budget for {month_label}",
                value=format_amount(self.ledger.get_budget(month)),
                color=rgba(BUDGET_COLOR, 0.2),
            )
        )
        return fields

    def submit(self, key: str, raw_input: str) -> float:
        """Apply an edit to ``key`` (a category or the budget) for the open month."""
        month = self.current_month
        if key == BUDGET_KEY:
            return self.controller.apply_budget(month, raw_input)
        return self.controller.apply_edit(key, month, raw_input)
