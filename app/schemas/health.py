"""Health check API schemas."""

from pydantic import BaseModel, Field

DATA_STORE = "document_store"


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready when the document store answers SELECT 1."""

    status: str = Field(default="ok", description="Readiness status")
    data_store: str = Field(default=DATA_STORE, description="Probed dependency")


class ReadinessErrorResponse(ReadinessResponse):
    """Response for GET /health/ready when the document store cannot be queried (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason (e.g. DATABASE_URL is not set)")
