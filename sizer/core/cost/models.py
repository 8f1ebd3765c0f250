# sizer/core/cost/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class StorageCostInputs:
    volume_tb: float
    provider: str = "aws"  # aws|azure|gcp|databricks
    tier: str = "standard"  # standard|infrequent|archive
    months: int = 12
    replication: float = 1.0


@dataclass
class StorageCostEstimate:
    volume_tb: float
    price_per_tb_month_usd: float
    monthly_cost_usd: float
    total_cost_usd: float
    months: int
    assumptions: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "volume_tb": self.volume_tb,
            "price_per_tb_month_usd": self.price_per_tb_month_usd,
            "monthly_cost_usd": self.monthly_cost_usd,
            "total_cost_usd": self.total_cost_usd,
            "months": self.months,
            "assumptions": self.assumptions,
        }
