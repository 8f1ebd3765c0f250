# sizer/core/volume/estimator.py
"""
Storage-volume estimator.

    total_tb = rows * row_size_kb / 1024**3

Totals of 1000 TB and above are re-expressed in petabytes (binary, / 1024).
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Tuple

from sizer.core.errors import InvalidSizingInput
from sizer.core.volume.models import VolumeEstimate

KB_PER_TB: int = 1024 ** 3
TB_PER_PB: int = 1024
PB_THRESHOLD_TB: float = 1000.0


def _positive_number(name: str, value):
    # bool is a Real subclass
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidSizingInput(f"{name} must be a number, got {type(value).__name__}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise InvalidSizingInput(f"{name} is too large to size") from None
    if not finite:
        raise InvalidSizingInput(f"{name} must be finite, got {value!r}")
    if value <= 0:
        raise InvalidSizingInput(f"{name} must be positive, got {value!r}")
    return value


def _row_count(rows) -> int:
    rows = _positive_number("rows", rows)
    if isinstance(rows, int):
        return rows
    if float(rows).is_integer():
        return int(rows)
    raise InvalidSizingInput(f"rows must be a whole number, got {rows!r}")


def to_display_unit(total_tb: float) -> Tuple[float, str]:
    if total_tb >= PB_THRESHOLD_TB:
        return total_tb / TB_PER_PB, "PB"
    return total_tb, "TB"


def estimate_volume(rows, row_size_kb) -> VolumeEstimate:
    n = _row_count(rows)
    size_kb = _positive_number("row_size_kb", row_size_kb)

    # same expression as the formula; int inputs stay exact until the division
    try:
        total_kb = float(n * size_kb)
        total_tb = float(n * size_kb / KB_PER_TB)
    except OverflowError:
        total_tb = math.inf
    if not math.isfinite(total_tb):
        raise InvalidSizingInput("rows * row_size_kb is too large to size")
    value, unit = to_display_unit(total_tb)

    return VolumeEstimate(
        rows=n,
        row_size_kb=float(size_kb),
        total_kb=total_kb,
        total_tb=total_tb,
        value=value,
        unit=unit,
    )


def format_volume(estimate: VolumeEstimate, precision: int = 2) -> str:
    return f"{estimate.value:,.{precision}f} {estimate.unit}"
