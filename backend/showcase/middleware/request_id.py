"""
Showcase Backend - Request ID Middleware
==========================================

What:  Assigns a correlation id to each request and echoes it back.
How:   Uses the client's X-Request-ID header when present, otherwise a short
       random id; stores it in a ContextVar (for loggers and exception
       handlers) and on request.state (for route handlers).
When:  Outermost application middleware, so every log line of the request
       can carry the id.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
