from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sizer.api.endpoints import cost, health, volume
from sizer.api.endpoints import metrics as metrics_ep
from sizer.api.middleware.error_shaping import SafeErrorMiddleware, sizing_error_handler
from sizer.api.middleware.request_context import RequestContextMiddleware
from sizer.core.errors import SizingError

logging.getLogger("sizer").setLevel((os.getenv("SIZER_LOG_LEVEL") or "INFO").strip().upper())

app = FastAPI(
    title="Storage Sizer API",
    version="0.1.0",
)

app.add_exception_handler(SizingError, sizing_error_handler)

# ------------------------------------------------------------
# Middleware stack (LAST added = OUTERMOST)
#   SafeErrorMiddleware -> CORSMiddleware -> RequestContext -> handler
# ------------------------------------------------------------
app.add_middleware(RequestContextMiddleware)

_cors_origins_raw = os.getenv("SIZER_CORS_ORIGINS", "").strip()
_cors_origins = [o.strip() for o in _cors_origins_raw.split(",") if o.strip()] if _cors_origins_raw else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(SafeErrorMiddleware)

app.include_router(volume.router, prefix="/api/v1")
app.include_router(cost.router, prefix="/api/v1")
app.include_router(health.router)
app.include_router(metrics_ep.router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
