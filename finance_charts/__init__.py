"""Top‑level package for Finance Charts.

A twelve-month income/expense ledger with the aggregations and refresh
contract behind one stacked bar chart and two pie charts.  The primary
modules are:

* ``ledger`` – the in-memory ledger store
* ``aggregation`` – yearly and monthly totals derived from the ledger
* ``editing`` – form input parsing, single-cell edits and the month editor
* ``sync`` – chart datasets and the explicit refresh contract
* ``visualization`` – functions that generate Plotly figures
* ``app`` – a Streamlit app that ties everything together

To run the app from the command line you can execute:

```bash
streamlit run finance_charts/app.py
```
"""

from .aggregation import Aggregator
from .categories import DEFAULT_CATEGORIES, MONTH_LABELS, CategoryDefinition, CategoryGroup
from .editing import EditController, EditorSession, format_amount, parse_amount
from .errors import (
    BindingMismatch,
    EditorClosed,
    FinanceChartsError,
    InvalidValue,
    MissingTarget,
    OutOfRange,
)
from .ledger import Ledger
from .sync import ChartBundle, ViewNotifier, build_chart_bundle, validate_bindings

__all__ = [
    "Aggregator",
    "BindingMismatch",
    "CategoryDefinition",
    "CategoryGroup",
    "ChartBundle",
    "DEFAULT_CATEGORIES",
    "EditController",
    "EditorClosed",
    "EditorSession",
    "FinanceChartsError",
    "InvalidValue",
    "Ledger",
    "MONTH_LABELS",
    "MissingTarget",
    "OutOfRange",
    "ViewNotifier",
    "build_chart_bundle",
    "format_amount",
    "parse_amount",
    "validate_bindings",
]
