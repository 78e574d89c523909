"""Configuration management for the finance charts package.

This module centralizes configuration values including paths, the
default currency label and environment variable overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in finance_charts/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

DATA_DIR = Path(os.getenv("FINCHARTS_DATA_DIR", _PROJECT_ROOT / "data"))

SETTINGS_PATH = Path(
    os.getenv("FINCHARTS_SETTINGS_PATH", DATA_DIR / "settings.json")
).resolve()

# Free-form label shown next to amounts; never used for conversion
DEFAULT_CURRENCY = os.getenv("FINCHARTS_CURRENCY", "CNY")

LOG_LEVEL = os.getenv("FINCHARTS_LOG_LEVEL", "INFO")

MONTHS_PER_YEAR = 12


def ensure_data_directories() -> None:
    """Create the data directory and the settings file's parent if missing."""
    for directory in [DATA_DIR, SETTINGS_PATH.parent]:
        directory.mkdir(parents=True, exist_ok=True)
