"""
Customer Service - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app(settings) returns a configured FastAPI
       instance. The settings, engine and session factory live on
       `app.state`; nothing is read from module globals at request time.
Who:   `python -m customer_service`, or
       `uvicorn customer_service.main:create_app --factory`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │   Req ID     │→│    Logging      │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────────┐ ┌──────────────┐  │
    │  │ GET/POST /customer, GET /{id}│ │ GET /health  │  │
    │  └──────────────────────────────┘ └──────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Binding→400 │ ClientInput→400 │ Operation→500│   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the database target
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from customer_service import __version__
from customer_service.config import Settings
from customer_service.database import build_engine, build_session_factory, dispose_engine
from customer_service.exceptions import ClientInputError, OperationError
from customer_service.middleware.logging import RequestLoggingMiddleware
from customer_service.middleware.request_id import RequestIDMiddleware, current_request_id
from customer_service.routes import customer, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings

    setup_logging(settings.log_level)
    logger.info("Customer service starting up...")
    logger.info(
        "Database: %s",
        settings.sqlalchemy_url.render_as_string(hide_password=True),
    )
    logger.info("Listening on http://%s:%s", settings.api_host, settings.api_port)

    yield

    logger.info("Customer service shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _format_binding_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI's validation errors into one `loc: msg` string."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes.

    Handler hierarchy:
        RequestValidationError  → 400 (request could not be bound)
        ClientInputError        → 400
        OperationError          → 500 (storage, not-found, constraint)
        Exception (fallback)    → 500

    Every body has the shape {"err": <message>}.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_binding_error(request: Request, exc: RequestValidationError):
        message = _format_binding_errors(exc)
        logger.warning("[%s] Binding error: %s", current_request_id(), message)
        return JSONResponse(status_code=400, content={"err": message})

    @app.exception_handler(ClientInputError)
    async def handle_client_input_error(request: Request, exc: ClientInputError):
        logger.warning("[%s] Client input error: %s", current_request_id(), exc.message)
        return JSONResponse(status_code=400, content={"err": exc.message})

    @app.exception_handler(OperationError)
    async def handle_operation_error(request: Request, exc: OperationError):
        logger.error(
            "[%s] Operation error: %s | Context: %s",
            current_request_id(),
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=500, content={"err": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            current_request_id(),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"err": str(exc)})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use. Read from the environment when
                  omitted (this is what `uvicorn --factory` does).

    Returns:
        Fully configured FastAPI instance. The database engine is created
        here but connects lazily on first use.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Customer API",
        description="Register, list and look up customers.",
        version=__version__,
        lifespan=lifespan,
    )

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # Last added executes first: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(customer.router)
    app.include_router(health.router)

    return app
