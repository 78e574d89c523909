"""Writing ledger figures back into a markdown note.

A note carries one ``Currency: ...`` line and one ``Expenses: ...`` line.
Updating rewrites the first occurrence of each and leaves everything else
alone.  The ledger never reads the note back.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence, Union

from .editing import format_amount
from .errors import MissingTarget
from .logging_setup import get_logger

logger = get_logger(__name__)

_CURRENCY_LINE = re.compile(r"Currency: [^\r\n]*")
_EXPENSES_LINE = re.compile(r"Expenses: [^\r\n]*")


def rewrite_note(content: str, currency: str, expenses: Sequence[float]) -> str:
    """Return ``content`` with its currency and expenses lines replaced.

    Example:
        >>> rewrite_note("Currency: USD\\nExpenses: 1, 2", "CNY", [3.0, 4.5])
        'Currency: CNY\\nExpenses: 3, 4.5'
    """
    expenses_text = ", ".join(format_amount(value) for value in expenses)
    updated = _CURRENCY_LINE.sub(lambda _: f"Currency: {currency}", content, count=1)
    return _EXPENSES_LINE.sub(lambda _: f"Expenses: {expenses_text}", updated, count=1)


def update_financial_note(
    path: Union[str, Path], currency: str, expenses: Sequence[float]
) -> Path:
    """Rewrite the note at ``path`` in place.

    Raises:
        MissingTarget: If no note exists at ``path``.
    """
    target = Path(path)
    if not target.is_file():
        logger.warning("Financial note not found: %s", target)
        raise MissingTarget(f"File not found: {target}")
    content = target.read_text(encoding='utf-8')
    target.write_text(rewrite_note(content, currency, expenses), encoding='utf-8')
    logger.info("Updated financial data in %s", target)
    return target
