"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the repository interfaces.
"""

from app.application.interfaces import (
    IDocumentRecordRepository,
    IDocumentTypeRepository,
    ITrackedEntityRepository,
)
from app.application.services import (
    ChecklistAggregator,
    ComplianceClassifier,
    EntityComplianceReportBuilder,
)
from app.application.use_cases import ComplianceDatasetLoader, ComplianceQueryService

__all__ = [
    "ChecklistAggregator",
    "ComplianceClassifier",
    "ComplianceDatasetLoader",
    "ComplianceQueryService",
    "EntityComplianceReportBuilder",
    "IDocumentRecordRepository",
    "IDocumentTypeRepository",
    "ITrackedEntityRepository",
]
