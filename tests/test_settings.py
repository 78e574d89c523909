"""Unit tests for finance_charts.settings."""

from __future__ import annotations

import json

from finance_charts import settings


def test_missing_file_returns_defaults(tmp_path) -> None:
    assert settings.load_settings(tmp_path / "nope.json") == settings.DEFAULT_SETTINGS


def test_corrupt_file_returns_defaults(tmp_path) -> None:
    target = tmp_path / "settings.json"
    target.write_text("{not json", encoding="utf-8")
    assert settings.load_settings(target) == settings.DEFAULT_SETTINGS
    target.write_text("[1, 2]", encoding="utf-8")
    assert settings.load_settings(target) == settings.DEFAULT_SETTINGS


def test_save_then_load(tmp_path) -> None:
    target = tmp_path / "nested" / "settings.json"
    settings.save_settings({"currency": "USD", "unknown": 1}, target)
    stored = json.loads(target.read_text(encoding="utf-8"))
    assert stored == {"currency": "USD"}
    assert settings.load_settings(target) == {"currency": "USD"}


def test_non_string_currency_falls_back(tmp_path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"currency": 5}), encoding="utf-8")
    assert settings.load_settings(target)["currency"] == settings.DEFAULT_SETTINGS["currency"]
