"""
Customer Service - Pydantic Schemas
====================================

What:  The Customer record and the API response models.
How:   FastAPI uses these to bind request bodies, serialize responses and
       generate the OpenAPI document.

Wire format:
    Customer is exchanged as {"Id": ..., "Nama": ..., "Address": ...}.
    The Python attributes are id / name / address; the aliases give the
    case-sensitive wire names. Decoding accepts either form.
"""

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """
    What:  One customer record.
    Who:   Passed between controller, use case and repository.

    Frozen: a record is never mutated after construction, and equality is
    structural over all three fields.
    """
    id: str = Field(
        alias="Id",
        min_length=1,
        description="Customer identifier, assigned by the caller",
    )
    name: str = Field(alias="Nama", description="Customer name")
    address: str = Field(alias="Address", description="Customer address")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {"Id": "C001", "Nama": "Dummy Name 1", "Address": "Dummy Address 1"},
            ],
        },
    }


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing endpoint.

    Example:
        {"err": "failed"}
    """
    err: str = Field(description="Raw error message")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
