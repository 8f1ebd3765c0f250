"""
Multi-table sizing.

Scenario file format (YAML or JSON), either a bare list or under `tables`:

    tables:
      - name: SALES_FACT
        rows: 4200000000
        row_size_kb: 0.8
      - name: CUSTOMER_DIM
        rows: 18000000
        row_size_kb: 1.5
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List

import yaml

from sizer.core.errors import InvalidSizingInput, ScenarioFileError
from sizer.core.volume.estimator import _positive_number, _row_count, estimate_volume, to_display_unit
from sizer.core.volume.models import SizingReport, TableSizing

_log = logging.getLogger("sizer.scenarios")


def estimate_tables(tables: Iterable[TableSizing]) -> SizingReport:
    tables = list(tables)
    if not tables:
        raise InvalidSizingInput("at least one table is required")

    seen: set[str] = set()
    report = SizingReport()
    for t in tables:
        if t.name in seen:
            raise InvalidSizingInput(f"duplicate table name {t.name!r}")
        seen.add(t.name)
        try:
            est = estimate_volume(t.rows, t.row_size_kb)
        except InvalidSizingInput as exc:
            raise InvalidSizingInput(f"table {t.name!r}: {exc}") from exc
        report.rows.append((t, est))
        report.total_tb += est.total_tb

    report.total_value, report.total_unit = to_display_unit(report.total_tb)
    return report


def _parse_entries(data: Any, source: str) -> List[TableSizing]:
    if isinstance(data, dict):
        data = data.get("tables")
    if not isinstance(data, list):
        raise ScenarioFileError(f"{source}: expected a list of tables or a mapping with a 'tables' list")

    out: List[TableSizing] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ScenarioFileError(f"{source}: entry #{i} must be a mapping, got {type(entry).__name__}")
        missing = [k for k in ("rows", "row_size_kb") if k not in entry]
        if missing:
            raise ScenarioFileError(f"{source}: entry #{i} missing {', '.join(missing)}")
        name = str(entry.get("name") or f"table_{i + 1}")
        try:
            rows = _row_count(entry["rows"])
            row_size_kb = _positive_number("row_size_kb", entry["row_size_kb"])
        except InvalidSizingInput as exc:
            raise InvalidSizingInput(f"{source}: table {name!r}: {exc}") from exc
        out.append(TableSizing(name=name, rows=rows, row_size_kb=row_size_kb))
    return out


def load_scenarios(path: Path) -> List[TableSizing]:
    """
    Read a scenario file. JSON is tried first, then YAML.

    File and shape problems raise ScenarioFileError; bad numbers raise
    InvalidSizingInput naming the table.
    """
    path = Path(path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScenarioFileError(f"cannot read scenario file {path}: {exc}") from exc

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ScenarioFileError(f"failed to parse {path} as JSON or YAML: {exc}") from exc

    tables = _parse_entries(data, str(path))
    _log.info("Loaded %d tables from %s", len(tables), path)
    return tables
