"""Application DTOs: plain data passed between use cases and presentation."""

from app.application.dtos.compliance import (
    ChecklistPage,
    ClassifiedRecord,
    ComplianceDataset,
    DatedDocument,
    EntityComplianceProfile,
    EntityComplianceReport,
    FilterState,
    SeverityCounts,
)

__all__ = [
    "ChecklistPage",
    "ClassifiedRecord",
    "ComplianceDataset",
    "DatedDocument",
    "EntityComplianceProfile",
    "EntityComplianceReport",
    "FilterState",
    "SeverityCounts",
]
