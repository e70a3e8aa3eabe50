"""
Pydantic schemas shared by all routers.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ProblemDetailsResponse(BaseModel):
    """Problem-details body returned for every failure.

    ``errors`` is only present for validation failures.
    """

    type: str | None = None
    title: str
    status: int
    errors: dict[str, list[str]] | None = Field(
        default=None, description="Field name to validation messages"
    )
