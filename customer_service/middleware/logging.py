"""
Customer Service - Access Log Middleware
=========================================

What:  One access line per customer API call.
How:   After the route has run, reads the matched route template
       (e.g. /customer/{customer_id}) and the customer id from the path,
       then logs them with method, status and duration.

    GET /customer/{customer_id} customer=C001 -> 500 in 3.2ms [a1b2c3d4]

Log levels by status:
    5xx → ERROR
    4xx → WARNING
    else → INFO

Request bodies are never logged (they carry customer names and addresses).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from customer_service.middleware.request_id import current_request_id

logger = logging.getLogger("customer_service.access")


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _route_template(request: Request) -> str:
    """Matched route path; the raw path for unrouted requests (404s)."""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access line once the response status is known."""

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        # Routing fills scope["path_params"] on the shared scope during call_next
        customer_id = request.scope.get("path_params", {}).get("customer_id", "-")
        route = _route_template(request)
        rid = current_request_id()

        logger.log(
            _level_for(response.status_code),
            "%s %s customer=%s -> %d in %.1fms [%s]",
            request.method,
            route,
            customer_id,
            response.status_code,
            elapsed_ms,
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "route": route,
                "customer_id": customer_id,
                "status": response.status_code,
                "duration_ms": elapsed_ms,
            },
        )
        return response
