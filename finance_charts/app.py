"""Streamlit app for editing the ledger and viewing its charts.

One month is edited at a time.  Typing into a field writes the parsed
amount into the ledger immediately and replaces the field text with what
was stored; the charts only change when an "Update" button asks for a
refresh, mirroring the explicit refresh contract of
:class:`finance_charts.sync.ViewNotifier`.

To run the app from the command line::

    streamlit run finance_charts/app.py
"""

from __future__ import annotations

import os
import sys

import streamlit as st

# Support both package execution and ``streamlit run finance_charts/app.py``.
if __package__:
    from . import config
    from . import visualization as viz
    from .aggregation import Aggregator
    from .categories import MONTH_LABELS, CategoryGroup
    from .editing import EditorSession, FormField, format_amount
    from .errors import MissingTarget
    from .ledger import Ledger
    from .logging_setup import configure_logging, get_logger
    from .notes import update_financial_note
    from .settings import load_settings, save_settings
    from .sync import ChartBundle, ViewNotifier
else:
    CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
    PARENT_DIR = os.path.dirname(CURRENT_DIR)
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from finance_charts import config  # type: ignore
    from finance_charts import visualization as viz  # type: ignore
    from finance_charts.aggregation import Aggregator  # type: ignore
    from finance_charts.categories import MONTH_LABELS, CategoryGroup  # type: ignore
    from finance_charts.editing import EditorSession, FormField, format_amount  # type: ignore
    from finance_charts.errors import MissingTarget  # type: ignore
    from finance_charts.ledger import Ledger  # type: ignore
    from finance_charts.logging_setup import configure_logging, get_logger  # type: ignore
    from finance_charts.notes import update_financial_note  # type: ignore
    from finance_charts.settings import load_settings, save_settings  # type: ignore
    from finance_charts.sync import ChartBundle, ViewNotifier  # type: ignore

logger = get_logger("finance_charts.app")

SESSION_KEY = "editor_session"
NOTIFIER_KEY = "view_notifier"
BUNDLE_KEY = "chart_bundle"
SETTINGS_KEY = "settings"


def _widget_key(month_index: int, field_key: str) -> str:
    return f"field_{month_index}_{field_key}"


def _store_bundle(bundle: ChartBundle) -> None:
    st.session_state[BUNDLE_KEY] = bundle


def _ensure_session_state() -> EditorSession:
    """Create the ledger, editor and notifier once per browser session."""
    state = st.session_state
    if SESSION_KEY not in state:
        ledger = Ledger.from_sample()
        session = EditorSession(ledger)
        session.open()
        notifier = ViewNotifier(Aggregator(ledger), MONTH_LABELS)
        notifier.subscribe(_store_bundle)
        state[SESSION_KEY] = session
        state[NOTIFIER_KEY] = notifier
        notifier.refresh()
    if SETTINGS_KEY not in state:
        state[SETTINGS_KEY] = load_settings()
    return state[SESSION_KEY]


def _on_field_change(field_key: str, widget_key: str) -> None:
    session: EditorSession = st.session_state[SESSION_KEY]
    stored = session.submit(field_key, st.session_state[widget_key])
    st.session_state[widget_key] = format_amount(stored)


def _refresh_charts() -> ChartBundle:
    notifier: ViewNotifier = st.session_state[NOTIFIER_KEY]
    return notifier.refresh()


def _on_currency_change() -> None:
    settings = dict(st.session_state[SETTINGS_KEY])
    settings["currency"] = st.session_state["currency_input"]
    st.session_state[SETTINGS_KEY] = settings
    save_settings(settings)
    logger.info("Currency set to %s", settings["currency"])


def _export_expenses(note_path: str) -> bool:
    """Write monthly expense totals to a note; warn instead of failing."""
    session: EditorSession = st.session_state[SESSION_KEY]
    expenses = Aggregator(session.ledger).monthly_group_totals(CategoryGroup.EXPENSE)
    currency = st.session_state[SETTINGS_KEY]["currency"]
    try:
        update_financial_note(note_path, currency, expenses)
    except MissingTarget:
        st.warning("File not found!")
        return False
    st.success("Financial data updated successfully!")
    return True


def _render_field(field: FormField, month_index: int) -> None:
    widget_key = _widget_key(month_index, field.key)
    # The ledger is the source of truth for the field text.
    st.session_state[widget_key] = field.value
    text_col, button_col = st.columns([4, 1])
    with text_col:
        st.text_input(
            field.label,
            key=widget_key,
            help=field.description,
            placeholder=f"Enter {field.key} {field.group.value if field.group else ''}".strip(),
            on_change=_on_field_change,
            args=(field.key, widget_key),
        )
    with button_col:
        st.button("Update", key=f"update_{widget_key}", on_click=_refresh_charts)


def _render_sidebar() -> None:
    st.sidebar.header("Settings")
    settings = st.session_state[SETTINGS_KEY]
    if "currency_input" not in st.session_state:
        st.session_state["currency_input"] = settings["currency"]
    st.sidebar.text_input(
        "Currency",
        key="currency_input",
        help="The currency to use for financial data.",
        on_change=_on_currency_change,
    )
    st.sidebar.header("Export")
    note_path = st.sidebar.text_input("Note path", placeholder="Finance/2024.md")
    if st.sidebar.button("Write expenses to note") and note_path:
        _export_expenses(note_path)


def _render_charts(currency: str) -> None:
    bundle: ChartBundle = st.session_state[BUNDLE_KEY]
    figures = viz.create_chart_figures(bundle, currency=currency)
    chart_col, pie_col = st.columns([2, 1])
    with chart_col:
        st.plotly_chart(figures["bar"], use_container_width=True)
    with pie_col:
        st.plotly_chart(figures["expense_pie"], use_container_width=True)
        st.plotly_chart(figures["income_pie"], use_container_width=True)


def main() -> None:
    """Entry point for the Streamlit app."""
    configure_logging()
    config.ensure_data_directories()
    st.set_page_config(page_title="Financial Charts", layout="wide")
    st.title("Financial Charts")

    session = _ensure_session_state()
    _render_sidebar()
    _render_charts(st.session_state[SETTINGS_KEY]["currency"])

    month_label = st.radio(
        "Month", MONTH_LABELS, index=session.current_month, horizontal=True
    )
    session.select_month(MONTH_LABELS.index(month_label))
    month = session.current_month

    fields = session.form_fields()
    expense_col, income_col = st.columns(2)
    with expense_col:
        st.subheader("Expenses")
        for field in fields:
            if field.group is CategoryGroup.EXPENSE:
                _render_field(field, month)
    with income_col:
        st.subheader("Income")
        for field in fields:
            if field.group is not CategoryGroup.EXPENSE:
                _render_field(field, month)


if __name__ == "__main__":
    main()
