from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator


class _RowSizing(BaseModel):
    rows: StrictInt = Field(gt=0, description="Row count.")
    row_size_kb: float = Field(gt=0, description="Average row size in kilobytes.")

    @field_validator("row_size_kb", mode="before")
    @classmethod
    def reject_bool(cls, v):
        # JSON true would otherwise be read as 1.0
        if isinstance(v, bool):
            raise ValueError("row_size_kb must be a number, not a boolean")
        return v


class VolumeEstimateRequest(_RowSizing):
    pass


class VolumeEstimateResponse(BaseModel):
    rows: int
    row_size_kb: float
    total_kb: float
    total_tb: float
    value: float
    unit: str
    display: str


class TableSizingModel(_RowSizing):
    name: str = Field(min_length=1)


class VolumeReportRequest(BaseModel):
    tables: List[TableSizingModel] = Field(min_length=1)
    format: Literal["json", "markdown"] = "json"
    precision: int = Field(default=2, ge=0, le=6)


class VolumeReportResponse(BaseModel):
    tables: List[Dict[str, Any]]
    total: Dict[str, Any]
    markdown: Optional[str] = None


class StorageCostRequest(BaseModel):
    volume_tb: float = Field(gt=0)
    provider: str = "aws"
    tier: str = "standard"
    months: int = Field(default=12, ge=1)
    replication: float = Field(default=1.0, ge=1.0)


class StorageCostResponse(BaseModel):
    volume_tb: float
    price_per_tb_month_usd: float
    monthly_cost_usd: float
    total_cost_usd: float
    months: int
    assumptions: Dict[str, Any]
