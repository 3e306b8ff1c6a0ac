"""Pydantic request/response schemas for the API."""

from app.schemas.compliance import (
    ChecklistResponse,
    ChecklistRowResponse,
    ComplianceAlertResponse,
    DatedDocumentResponse,
    DocumentOnFileResponse,
    DocumentTypeSummary,
    EntityComplianceResponse,
    EntityReportResponse,
    EntitySummary,
    SeverityCountsResponse,
)
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

__all__ = [
    "ChecklistResponse",
    "ChecklistRowResponse",
    "ComplianceAlertResponse",
    "DatedDocumentResponse",
    "DocumentOnFileResponse",
    "DocumentTypeSummary",
    "EntityComplianceResponse",
    "EntityReportResponse",
    "EntitySummary",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "SeverityCountsResponse",
]
