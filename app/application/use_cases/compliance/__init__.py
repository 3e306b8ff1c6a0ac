"""Compliance use cases: batched dataset loading and read-only compliance views."""

from app.application.use_cases.compliance.compliance_operations import (
    ComplianceQueryService,
)
from app.application.use_cases.compliance.load_dataset import ComplianceDatasetLoader

__all__ = [
    "ComplianceDatasetLoader",
    "ComplianceQueryService",
]
