# sizer/core/cost/estimator.py
from __future__ import annotations

import math
from typing import Optional

from sizer.core.errors import InvalidSizingInput

from .models import StorageCostEstimate, StorageCostInputs
from .pricing_loader import PriceTable, load_pricing_overrides
from .pricing_tables import storage_tb_month_price


def _check(inp: StorageCostInputs) -> None:
    if not math.isfinite(inp.volume_tb) or inp.volume_tb <= 0:
        raise InvalidSizingInput(f"volume_tb must be positive, got {inp.volume_tb!r}")
    if int(inp.months) != inp.months or inp.months < 1:
        raise InvalidSizingInput(f"months must be a whole number >= 1, got {inp.months!r}")
    if not math.isfinite(inp.replication) or inp.replication < 1:
        raise InvalidSizingInput(f"replication must be >= 1, got {inp.replication!r}")


def estimate_storage_cost(
    inp: StorageCostInputs,
    overrides: Optional[PriceTable] = None,
) -> StorageCostEstimate:
    _check(inp)
    if overrides is None:
        overrides = load_pricing_overrides()

    provider = inp.provider.lower()
    tier = (inp.tier or "standard").lower()
    price = storage_tb_month_price(provider, tier, overrides=overrides)

    monthly = inp.volume_tb * inp.replication * price
    total = monthly * int(inp.months)

    return StorageCostEstimate(
        volume_tb=float(inp.volume_tb),
        price_per_tb_month_usd=float(price),
        monthly_cost_usd=float(round(monthly, 2)),
        total_cost_usd=float(round(total, 2)),
        months=int(inp.months),
        assumptions={
            "provider": provider,
            "tier": tier,
            "replication": inp.replication,
            "price_overridden": (provider, tier) in (overrides or {}),
        },
    )
