from __future__ import annotations

import math
from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter
from prometheus_client import Histogram

# HTTP-level counters
_REQUESTS = Counter()

# Named counters (estimates served, health probes)
_NAMED = Counter()

HTTP_REQUESTS_TOTAL = PromCounter(
    "sizer_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "sizer_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)

ESTIMATED_TB_TOTAL = PromCounter(
    "sizer_estimated_tb_total",
    "Terabytes sized across all volume estimates",
)


UNMATCHED_PATH = "/:unmatched"


def normalize_path(path: str, status=None) -> str:
    """
    Metrics label for a request path. Routes have no path parameters, so
    matched paths are used as-is and every 404 shares one label.
    """
    if status is not None and str(status) == "404":
        return UNMATCHED_PATH
    return path or "/"


def reset_metrics() -> None:
    """Test helper: clears the in-process counters."""
    _REQUESTS.clear()
    _NAMED.clear()


def inc_http(method: str, path: str, status) -> None:
    m = (method or "UNKNOWN").upper()
    p = normalize_path(path, status)
    s = str(status if status is not None else "unknown")

    _REQUESTS["requests_total"] += 1
    _REQUESTS[f"requests_{m}"] += 1
    _REQUESTS[f"path_{p}|{s}"] += 1
    HTTP_REQUESTS_TOTAL.labels(method=m, path=p, status=s).inc()


def observe_duration(method: str, path: str, status, seconds: float) -> None:
    HTTP_REQUEST_DURATION_SECONDS.labels(
        method=(method or "UNKNOWN").upper(),
        path=normalize_path(path, status),
    ).observe(seconds)


def inc_named(name: str, value: int = 1) -> None:
    if not name:
        return
    _NAMED[name] += int(value)


def record_sized_tb(total_tb: float) -> None:
    if math.isfinite(total_tb) and total_tb > 0:
        ESTIMATED_TB_TOTAL.inc(total_tb)


def snapshot_requests() -> Dict[str, int]:
    return dict(_REQUESTS)


def snapshot_named() -> Dict[str, int]:
    return dict(_NAMED)
