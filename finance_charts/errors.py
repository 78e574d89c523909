"""Exception types raised by the ledger core and its collaborators."""

from __future__ import annotations


class FinanceChartsError(Exception):
    """Base class for all package errors."""


class OutOfRange(FinanceChartsError, KeyError):
    """Unknown category or month index outside ``[0, 12)``."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class InvalidValue(FinanceChartsError, ValueError):
    """A non-finite or non-numeric value was written to the ledger."""


class EditorClosed(FinanceChartsError, RuntimeError):
    """Navigation was attempted on an editor that is not open."""


class BindingMismatch(FinanceChartsError):
    """A chart dataset no longer matches the ledger category it is bound to."""


class MissingTarget(FinanceChartsError, FileNotFoundError):
    """The note named for a financial data update does not exist."""
