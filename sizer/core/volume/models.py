# sizer/core/volume/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class VolumeEstimate:
    rows: int
    row_size_kb: float
    total_kb: float
    total_tb: float
    value: float  # total expressed in `unit`
    unit: str  # TB|PB

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": self.rows,
            "row_size_kb": self.row_size_kb,
            "total_kb": self.total_kb,
            "total_tb": self.total_tb,
            "value": self.value,
            "unit": self.unit,
        }


@dataclass(frozen=True)
class TableSizing:
    name: str
    rows: int
    row_size_kb: float


@dataclass
class SizingReport:
    rows: List[Tuple[TableSizing, VolumeEstimate]] = field(default_factory=list)
    total_tb: float = 0.0
    total_value: float = 0.0
    total_unit: str = "TB"

    @property
    def total_rows(self) -> int:
        return sum(t.rows for t, _ in self.rows)
