"""
Customer Service - Exception Hierarchy
=======================================

What:  Application-specific exceptions for the two externally visible
       failure kinds.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       `{"err": <message>}` JSON responses with the matching status code.
Who:   Raised by the repository layer and by request binding; caught by
       the global handlers only. Intermediate layers never wrap or
       reclassify them.

Exception Hierarchy:
    CustomerServiceError (base)
    ├── ClientInputError             → 400 Bad Request
    └── OperationError               → 500 Internal Server Error
        └── CustomerNotFoundError    → 500 Internal Server Error

    Not-found is reported as 500 like any other lookup failure. It has its
    own class so that a 404 mapping can be introduced in one place.
"""

from typing import Any, Dict, Optional


class CustomerServiceError(Exception):
    """
    Base exception for all customer service errors.

    Attributes:
        message:  The text returned to the client in the `err` field
        context:  Additional debug info (logged, never returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ClientInputError(CustomerServiceError):
    """
    Raised when the request cannot be bound into the expected input.

    When:    Empty body, invalid JSON, wrong field types, missing fields.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Invalid request body",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class OperationError(CustomerServiceError):
    """
    Raised when a use-case or storage operation fails.

    When:    Connection lost, query failure, constraint violation (e.g. a
             duplicate id), lookup without a matching row.
    HTTP:    500 Internal Server Error

    The message is the raw underlying driver message.
    """

    def __init__(
        self,
        message: str = "Operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


def storage_error(exc: Exception) -> OperationError:
    """
    Build an OperationError from a SQLAlchemy error.

    The message is the driver exception SQLAlchemy wraps (`exc.orig`),
    without the statement text SQLAlchemy appends to its own message.
    """
    original = getattr(exc, "orig", None)
    message = str(original) if original is not None else str(exc)
    return OperationError(
        message=message,
        context={"error_type": type(exc).__name__},
    )


class CustomerNotFoundError(OperationError):
    """Raised by a lookup by id that matched no row."""

    def __init__(
        self,
        customer_id: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["customer_id"] = customer_id
        super().__init__(
            message=f"customer with id '{customer_id}' was not found",
            context=ctx,
        )
        self.customer_id = customer_id
