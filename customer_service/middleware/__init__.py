# Middleware package init
"""
Customer Service - Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    Responses travel back through the same chain in reverse, so the
    request ID is available when the access log line is written.
"""
