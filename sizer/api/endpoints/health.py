from __future__ import annotations

from fastapi import APIRouter

from sizer.core.observability.metrics import inc_named

router = APIRouter()


@router.get("/api/v1/health/live")
def liveness():
    inc_named("health_live")
    return {"status": "alive"}
