"""
Employee List Backend — Request ID Middleware
===============================================

What:  Assigns an ID to each incoming request and returns it in X-Request-ID.
Why:   Every log line and error body from one request shares the same ID, so a
       user-reported error can be matched to the server log.
How:   Uses the client's X-Request-ID if present, otherwise a short UUID;
       stores it in a ContextVar and on request.state.
When:  Runs before the logging middleware.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Reuse the client's X-Request-ID header when sent (end-to-end tracing)
        2. Otherwise generate an 8-character ID (enough for correlation)
        3. Expose it via request_id_var and request.state.request_id
        4. Echo it in the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
