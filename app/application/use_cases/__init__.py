"""Application use cases: one entry point per workflow."""

from app.application.use_cases.compliance import (
    ComplianceDatasetLoader,
    ComplianceQueryService,
)

__all__ = [
    "ComplianceDatasetLoader",
    "ComplianceQueryService",
]
