"""
MemoPad Backend — Request Logging Middleware
==============================================

What:  One access-log line per HTTP request, naming the memo operation it was.
How:   Classifies the request from method + path before calling downstream,
       times the call, and logs on the `memopad.access` logger with a level
       chosen from the response status.
Who:   Applied to every request except /health and the API docs.

Log lines:
    update memo=3 -> 400 in 0.4ms [a1b2c3d4] from 127.0.0.1 (2 memos held)
    GET /openapi.json -> 200 in 1.2ms [a1b2c3d4] from 127.0.0.1

Request bodies are never logged.
"""

import logging
import re
import time
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from memopad.middleware.request_id import request_id_var

logger = logging.getLogger("memopad.access")

_MEMO_PATH = re.compile(r"^/memos/?(?:(?P<memo_id>[^/]+)/?)?$")

_COLLECTION_OPS = {"POST": "create", "GET": "list"}
_ITEM_OPS = {"GET": "get", "PUT": "update", "PATCH": "update_title", "DELETE": "delete"}


def describe_memo_request(method: str, path: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Map a request onto (operation, memo id).

    Returns (None, None) for anything outside /memos or for a method the
    resource does not serve. The id is returned raw; it may not be numeric.

        describe_memo_request("PATCH", "/memos/7") → ("update_title", "7")
        describe_memo_request("GET", "/memos")     → ("list", None)
    """
    match = _MEMO_PATH.match(path)
    if match is None:
        return None, None
    memo_id = match.group("memo_id")
    if memo_id is None:
        return _COLLECTION_OPS.get(method), None
    operation = _ITEM_OPS.get(method)
    return operation, memo_id if operation else None


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs operation, memo id, status, duration, request id and store size."""

    SKIP_PATHS = {"/health", "/docs", "/redoc"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        operation, memo_id = describe_memo_request(request.method, request.url.path)
        started = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - started) * 1000
        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        status = response.status_code

        if operation is None:
            logger.log(
                _level_for(status),
                "%s %s -> %d in %.1fms [%s] from %s",
                request.method, request.url.path, status, duration_ms, rid, client_ip,
                extra={"request_id": rid, "status": status},
            )
            return response

        target = f"memo={memo_id}" if memo_id is not None else "memos"
        memo_count = request.app.state.memo_service.store.count()
        logger.log(
            _level_for(status),
            "%s %s -> %d in %.1fms [%s] from %s (%d memos held)",
            operation, target, status, duration_ms, rid, client_ip, memo_count,
            extra={
                "request_id": rid,
                "operation": operation,
                "memo_id": memo_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "memo_count": memo_count,
            },
        )
        return response
