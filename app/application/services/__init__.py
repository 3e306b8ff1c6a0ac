"""Application services: compliance classification, reporting, checklist aggregation."""

from app.application.services.checklist_aggregator import (
    ChecklistAggregator,
    count_severities,
)
from app.application.services.checklist_csv_exporter import render_checklist_csv
from app.application.services.compliance_classifier import (
    DEFAULT_WARNING_HORIZON,
    ComplianceClassifier,
)
from app.application.services.compliance_report_builder import (
    EntityComplianceReportBuilder,
    severity_for,
)

__all__ = [
    "DEFAULT_WARNING_HORIZON",
    "ChecklistAggregator",
    "ComplianceClassifier",
    "EntityComplianceReportBuilder",
    "count_severities",
    "render_checklist_csv",
    "severity_for",
]
