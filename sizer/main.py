"""
Serve the sizing API with uvicorn.

    python -m sizer.main
    storage-sizer-api          (console script)

SIZER_HOST / SIZER_PORT pick the bind address, SIZER_LOG_LEVEL the uvicorn
log level.
"""
from __future__ import annotations

import os

import uvicorn


def run() -> None:
    uvicorn.run(
        "sizer.api.main:app",
        host=os.getenv("SIZER_HOST", "0.0.0.0"),
        port=int(os.getenv("SIZER_PORT", "8001")),
        log_level=(os.getenv("SIZER_LOG_LEVEL") or "info").strip().lower(),
    )


if __name__ == "__main__":
    run()
