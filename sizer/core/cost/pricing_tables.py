# sizer/core/cost/pricing_tables.py
from __future__ import annotations

from typing import Dict, Optional, Tuple

# Units: USD per TB-month of object storage, list-price ballparks.
# NOTE: not authoritative; calibrate through pricing_loader overrides.

DEFAULT_TB_MONTH: Dict[Tuple[str, str], float] = {
    ("aws", "standard"): 23.55,
    ("aws", "infrequent"): 12.80,
    ("aws", "archive"): 1.01,
    ("azure", "standard"): 20.80,
    ("azure", "infrequent"): 15.36,
    ("azure", "archive"): 2.05,
    ("gcp", "standard"): 20.48,
    ("gcp", "infrequent"): 10.24,
    ("gcp", "archive"): 1.23,
    # Delta tables on the workspace's own cloud storage
    ("databricks", "standard"): 23.55,
}

FALLBACK_TB_MONTH: float = 25.0


def storage_tb_month_price(
    provider: str,
    tier: Optional[str] = None,
    overrides: Optional[Dict[Tuple[str, str], float]] = None,
) -> float:
    key = ((provider or "").lower(), (tier or "standard").lower())
    table = dict(DEFAULT_TB_MONTH)
    if overrides:
        table.update(overrides)

    if key in table:
        return table[key]
    # fallback to the provider's standard tier
    return table.get((key[0], "standard"), FALLBACK_TB_MONTH)
