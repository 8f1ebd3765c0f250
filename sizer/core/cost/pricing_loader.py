"""
Storage pricing overrides.

Reads an optional flat JSON or YAML mapping of `provider/tier` to USD per
TB-month and merges it over the built-in table:

    aws/standard: 21.50
    databricks/standard: 23.00

Path resolution: explicit argument, then SIZER_PRICING_FILE, then
<project_root>/pricing_overrides.yaml.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

_log = logging.getLogger("sizer.pricing")

PriceTable = Dict[Tuple[str, str], float]


def _parse_override_dict(raw: dict) -> PriceTable:
    """{"aws/standard": 21.5} -> {("aws", "standard"): 21.5}; bad entries are skipped."""
    out: PriceTable = {}
    for key, value in raw.items():
        parts = str(key).split("/", 1)
        if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
            _log.warning("Skipping invalid pricing key %r (expected 'provider/tier')", key)
            continue
        try:
            price = float(value)
        except (TypeError, ValueError) as exc:
            _log.warning("Skipping invalid pricing entry %r: %s", key, exc)
            continue
        if price < 0:
            _log.warning("Skipping negative price for %r", key)
            continue
        out[(parts[0].strip().lower(), parts[1].strip().lower())] = price
    return out


def _resolve_path(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv("SIZER_PRICING_FILE", "").strip()
    if env_path:
        return Path(env_path)
    return Path(__file__).resolve().parents[3] / "pricing_overrides.yaml"


def load_pricing_overrides(path: Optional[Path] = None) -> PriceTable:
    """
    Returns an empty table when the file is absent, unreadable or malformed;
    callers fall back to the built-in prices.
    """
    resolved = _resolve_path(path)
    if not resolved.exists():
        return {}

    try:
        raw_text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        _log.warning("Cannot read pricing override file %s: %s", resolved, exc)
        return {}

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            _log.warning("Failed to parse pricing file %s as JSON or YAML: %s", resolved, exc)
            return {}

    if not isinstance(data, dict):
        _log.warning("Pricing override file %s must be a flat mapping, got %s", resolved, type(data).__name__)
        return {}

    overrides = _parse_override_dict(data)
    if overrides:
        _log.info("Loaded %d pricing overrides from %s", len(overrides), resolved)
    return overrides
