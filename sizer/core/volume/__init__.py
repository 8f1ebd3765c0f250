from .estimator import (
    KB_PER_TB,
    PB_THRESHOLD_TB,
    TB_PER_PB,
    estimate_volume,
    format_volume,
    to_display_unit,
)
from .models import SizingReport, TableSizing, VolumeEstimate
from .render import render_markdown, report_to_dict
from .scenarios import estimate_tables, load_scenarios

__all__ = [
    "KB_PER_TB",
    "PB_THRESHOLD_TB",
    "TB_PER_PB",
    "SizingReport",
    "TableSizing",
    "VolumeEstimate",
    "estimate_tables",
    "estimate_volume",
    "format_volume",
    "load_scenarios",
    "render_markdown",
    "report_to_dict",
    "to_display_unit",
]
