"""Size tables from row counts and average row sizes.

Examples:
    python tools/estimate_volume.py --rows 4200000000 --row-size-kb 0.8
    python tools/estimate_volume.py --file scenarios.yaml --provider azure --months 36
"""
from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
import sys
from typing import List, Optional

# ---- sys.path bootstrap (Windows-friendly) ----
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
# ---------------------------------------------

from sizer.core.cost import StorageCostInputs, estimate_storage_cost  # noqa: E402
from sizer.core.errors import SizingError  # noqa: E402
from sizer.core.volume import (  # noqa: E402
    TableSizing,
    estimate_tables,
    load_scenarios,
    render_markdown,
    report_to_dict,
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Estimate storage volume (TB/PB) from row counts.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--rows", type=int, help="Row count of a single table")
    src.add_argument("--file", type=Path, help="JSON/YAML scenario file listing tables")
    ap.add_argument("--row-size-kb", type=float, help="Average row size in KB (with --rows)")
    ap.add_argument("--name", default="table", help="Table name for --rows (default 'table')")
    ap.add_argument("--format", choices=("markdown", "json"), default="markdown")
    ap.add_argument("--precision", type=int, default=2)
    ap.add_argument("--provider", help="Append storage cost for this provider (aws|azure|gcp|databricks)")
    ap.add_argument("--tier", default="standard")
    ap.add_argument("--months", type=int, default=12)
    ap.add_argument("--replication", type=float, default=1.0)
    return ap


def _tables(args: argparse.Namespace) -> List[TableSizing]:
    if args.file is not None:
        return load_scenarios(args.file)
    return [TableSizing(name=args.name, rows=args.rows, row_size_kb=args.row_size_kb)]


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=(os.getenv("SIZER_LOG_LEVEL") or "WARNING").strip().upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.rows is not None and args.row_size_kb is None:
        ap.error("--row-size-kb is required with --rows")

    try:
        report = estimate_tables(_tables(args))
        cost = None
        if args.provider:
            cost = estimate_storage_cost(
                StorageCostInputs(
                    volume_tb=report.total_tb,
                    provider=args.provider,
                    tier=args.tier,
                    months=args.months,
                    replication=args.replication,
                )
            )
    except SizingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.format == "json":
        body = report_to_dict(report)
        if cost is not None:
            body["storage_cost"] = cost.to_dict()
        print(json.dumps(body, indent=2))
        return 0

    sys.stdout.write(render_markdown(report, precision=args.precision))
    if cost is not None:
        print()
        print(
            f"Storage cost ({cost.assumptions['provider']}/{cost.assumptions['tier']}): "
            f"${cost.monthly_cost_usd:,.2f}/month, ${cost.total_cost_usd:,.2f} over {cost.months} months"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
