"""
Customer Service - Request ID Middleware
=========================================

What:  Tags each request with a correlation ID, echoed in X-Request-ID.
How:   A client-supplied X-Request-ID is kept when it is a short token of
       letters, digits, '.', '_' or '-'; anything else is replaced by a
       fresh 8-hex-digit ID. The ID lives in a ContextVar for the access
       log and the exception handlers.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def current_request_id() -> str:
    """ID of the request being handled, or "" outside a request."""
    return request_id_var.get()


def resolve_request_id(supplied: Optional[str]) -> str:
    """Keep a well-formed client ID, otherwise mint a new one."""
    if supplied and _VALID_REQUEST_ID.match(supplied):
        return supplied
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the correlation ID before the rest of the chain runs."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
