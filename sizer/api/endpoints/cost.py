# sizer/api/endpoints/cost.py
from __future__ import annotations

from fastapi import APIRouter

from sizer.api.schemas.sizing import StorageCostRequest, StorageCostResponse
from sizer.core.cost import StorageCostInputs, estimate_storage_cost
from sizer.core.observability.metrics import inc_named

router = APIRouter(prefix="/cost", tags=["cost"])


@router.post("/storage", response_model=StorageCostResponse)
def storage_cost(req: StorageCostRequest):
    est = estimate_storage_cost(
        StorageCostInputs(
            volume_tb=req.volume_tb,
            provider=req.provider,
            tier=req.tier,
            months=req.months,
            replication=req.replication,
        )
    )
    inc_named("storage_cost_estimates")
    return StorageCostResponse(**est.to_dict())
