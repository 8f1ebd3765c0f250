from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from sizer.core.observability.metrics import inc_http, observe_duration

log = logging.getLogger("sizer.request")

REQUEST_ID_HEADER = "X-Request-Id"


def _json_log(event: str, **fields):
    msg = {"event": event, **fields}
    log.info("%s", msg)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Adds:
      request.state.request_id
      response header: X-Request-Id
    and records request count/duration.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = rid

        start = time.time()
        resp = await call_next(request)
        dur = time.time() - start

        resp.headers[REQUEST_ID_HEADER] = rid

        inc_http(request.method, request.url.path, getattr(resp, "status_code", None))
        observe_duration(request.method, request.url.path, getattr(resp, "status_code", None), dur)

        if request.url.path.startswith("/api/"):
            _json_log(
                "request",
                request_id=rid,
                method=request.method,
                path=request.url.path,
                status_code=resp.status_code,
                duration_ms=int(dur * 1000),
            )
        return resp
