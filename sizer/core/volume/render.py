# sizer/core/volume/render.py
from __future__ import annotations

from typing import Any, Dict, List

from sizer.core.volume.models import SizingReport

HEADER = ("Table", "Rows", "Avg row size (KB)", "Volume")


def _fmt_size(kb: float) -> str:
    return f"{kb:g}"


def render_markdown(report: SizingReport, precision: int = 2) -> str:
    lines: List[str] = [
        "| " + " | ".join(HEADER) + " |",
        "|---|---:|---:|---:|",
    ]
    for table, est in report.rows:
        lines.append(
            f"| {table.name} | {est.rows:,} | {_fmt_size(est.row_size_kb)} "
            f"| {est.value:,.{precision}f} {est.unit} |"
        )
    lines.append(
        f"| **Total** | **{report.total_rows:,}** |  "
        f"| **{report.total_value:,.{precision}f} {report.total_unit}** |"
    )
    return "\n".join(lines) + "\n"


def report_to_dict(report: SizingReport) -> Dict[str, Any]:
    return {
        "tables": [{"name": t.name, **est.to_dict()} for t, est in report.rows],
        "total": {
            "rows": report.total_rows,
            "total_tb": report.total_tb,
            "value": report.total_value,
            "unit": report.total_unit,
        },
    }
