"""
Customer Service - Application Package
=======================================

What: Marks the `customer_service` directory as a Python package.
Who:  Used by uvicorn (`customer_service.main:create_app`), pytest and
      `python -m customer_service`.

Architecture Note:
    The service follows a three-layer architecture:

    ┌─────────────────────────────────────┐
    │       Routes (Controller Layer)     │  ← HTTP binding and JSON responses
    ├─────────────────────────────────────┤
    │        Services (Use Case Layer)    │  ← Business rules (pass-through today)
    ├─────────────────────────────────────┤
    │   Repositories (Persistence Layer)  │  ← Rows ⇄ Customer records
    ├─────────────────────────────────────┤
    │        Models & Schemas (Data)      │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    Each layer only talks to the one directly below it, through an
    abstract interface, so each can be tested with the lower layer mocked.
"""

__version__ = "1.0.0"
