"""
Error responses for the sizing API.

Core validation errors (`SizingError`) become 422 with the core's message.
Anything else becomes a bare 500: the traceback goes to the `sizer.errors`
log, never to the client. Both carry the request id when one is known.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from sizer.core.errors import SizingError
from sizer.core.observability.metrics import inc_named

log = logging.getLogger("sizer.errors")


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id")


def _error_response(status_code: int, detail: str, rid: Optional[str]) -> JSONResponse:
    content = {"detail": detail}
    headers = {}
    if rid:
        content["request_id"] = rid
        headers["X-Request-Id"] = rid
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def sizing_error_handler(request: Request, exc: SizingError) -> JSONResponse:
    inc_named("sizing_errors")
    return _error_response(422, str(exc), _request_id(request))


class SafeErrorMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            inc_named("unhandled_errors")
            rid = _request_id(request)
            log.exception("unhandled error method=%s path=%s rid=%s", request.method, request.url.path, rid)
            return _error_response(500, "Internal Server Error", rid)
