"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for repositories and the compliance query
service. Routes depend only on these, never on infrastructure directly;
tests override the repository providers with in-memory fakes.
"""

from app.api.v1.dependencies.compliance import (
    get_checklist_aggregator,
    get_compliance_query_service,
    get_dataset_loader,
    get_document_record_repo,
    get_document_type_repo,
    get_report_builder,
    get_tracked_entity_repo,
)

__all__ = [
    "get_checklist_aggregator",
    "get_compliance_query_service",
    "get_dataset_loader",
    "get_document_record_repo",
    "get_document_type_repo",
    "get_report_builder",
    "get_tracked_entity_repo",
]
