from .estimator import estimate_storage_cost
from .models import StorageCostEstimate, StorageCostInputs
from .pricing_loader import load_pricing_overrides
from .pricing_tables import DEFAULT_TB_MONTH, storage_tb_month_price

__all__ = [
    "DEFAULT_TB_MONTH",
    "StorageCostEstimate",
    "StorageCostInputs",
    "estimate_storage_cost",
    "load_pricing_overrides",
    "storage_tb_month_price",
]
