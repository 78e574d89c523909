"""Persistence of user settings (currently just the currency label)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from . import config
from .logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    'currency': config.DEFAULT_CURRENCY,
}


def load_settings(path: Path | None = None) -> Dict[str, Any]:
    target = path or config.SETTINGS_PATH
    if not target.exists():
        return DEFAULT_SETTINGS.copy()
    try:
        with target.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", target, exc)
        return DEFAULT_SETTINGS.copy()
    if not isinstance(data, dict):
        return DEFAULT_SETTINGS.copy()
    merged = DEFAULT_SETTINGS.copy()
    merged.update({k: v for k, v in data.items() if k in DEFAULT_SETTINGS})
    if not isinstance(merged['currency'], str):
        merged['currency'] = DEFAULT_SETTINGS['currency']
    return merged


def save_settings(settings: Dict[str, Any], path: Path | None = None) -> None:
    target = path or config.SETTINGS_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = DEFAULT_SETTINGS.copy()
    payload.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
    with target.open('w', encoding='utf-8') as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
