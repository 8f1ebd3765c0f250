# sizer/api/endpoints/volume.py
from __future__ import annotations

from fastapi import APIRouter

from sizer.api.schemas.sizing import (
    VolumeEstimateRequest,
    VolumeEstimateResponse,
    VolumeReportRequest,
    VolumeReportResponse,
)
from sizer.core.observability.metrics import inc_named, record_sized_tb
from sizer.core.volume import (
    TableSizing,
    estimate_tables,
    estimate_volume,
    format_volume,
    render_markdown,
    report_to_dict,
)

router = APIRouter(prefix="/volume", tags=["volume"])


@router.post("/estimate", response_model=VolumeEstimateResponse)
def estimate(req: VolumeEstimateRequest):
    est = estimate_volume(req.rows, req.row_size_kb)
    inc_named("volume_estimates")
    record_sized_tb(est.total_tb)
    return VolumeEstimateResponse(**est.to_dict(), display=format_volume(est))


@router.post("/report", response_model=VolumeReportResponse)
def report(req: VolumeReportRequest):
    tables = [TableSizing(name=t.name, rows=t.rows, row_size_kb=t.row_size_kb) for t in req.tables]
    rep = estimate_tables(tables)
    inc_named("volume_reports")
    record_sized_tb(rep.total_tb)

    body = report_to_dict(rep)
    if req.format == "markdown":
        body["markdown"] = render_markdown(rep, precision=req.precision)
    return VolumeReportResponse(**body)
