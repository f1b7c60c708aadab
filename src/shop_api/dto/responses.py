"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every error response rendered by the exception handlers."""

    error: str = Field(..., description="Short, client-safe error summary")
    detail: str | None = Field(None, description="Optional client-safe detail")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    storage_healthy: bool = Field(..., description="Whether the document store is reachable")
