#!/usr/bin/env python3
"""Print the sample ledger and its yearly totals, optionally writing them to a note."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd

from finance_charts.aggregation import Aggregator
from finance_charts.categories import CategoryGroup
from finance_charts.errors import MissingTarget
from finance_charts.ledger import Ledger
from finance_charts.notes import update_financial_note
from finance_charts.settings import load_settings


def main(note: str | None = None, currency: str | None = None) -> int:
    ledger = Ledger.from_sample()
    aggregator = Aggregator(ledger)

    print(ledger.to_frame(include_budget=True).to_string())
    for group in CategoryGroup:
        totals = pd.Series(dict(aggregator.yearly_totals(group)), name="Yearly total")
        print(f"\n{group.label} totals:")
        print(totals.to_string())
        print(f"Total {group.label.lower()} this year: {aggregator.group_total(group):,.2f}")

    if not note:
        return 0
    currency = currency or load_settings()['currency']
    try:
        update_financial_note(note, currency, aggregator.monthly_group_totals(CategoryGroup.EXPENSE))
    except MissingTarget as exc:
        print(exc)
        return 1
    print(f"\nUpdated {note}")
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Show ledger totals.')
    parser.add_argument('--note', help='Markdown note whose Currency/Expenses lines are rewritten')
    parser.add_argument('--currency', help='Currency label (defaults to saved settings)')
    args = parser.parse_args()
    raise SystemExit(main(note=args.note, currency=args.currency))
