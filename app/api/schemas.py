"""API schemas for the catalog API.

Pydantic models for response envelopes shared across routers. Product
payloads live in app.catalog.schemas.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class SeedResponse(BaseModel):
    """Result of reseeding the catalog."""

    message: str = Field(..., description="Outcome message")
    deleted: int = Field(..., description="Products removed before seeding")
    created: int = Field(..., description="Products created from the seed dataset")
