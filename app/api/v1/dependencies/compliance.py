"""Compliance dependencies (composition root)."""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.repositories import (
    IDocumentRecordRepository,
    IDocumentTypeRepository,
    ITrackedEntityRepository,
)
from app.application.services import (
    ChecklistAggregator,
    ComplianceClassifier,
    EntityComplianceReportBuilder,
)
from app.application.use_cases.compliance import (
    ComplianceDatasetLoader,
    ComplianceQueryService,
)
from app.core.config import Settings, get_settings
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import (
    DocumentRecordRepository,
    DocumentTypeRepository,
    TrackedEntityRepository,
)


async def get_document_type_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> IDocumentTypeRepository:
    return DocumentTypeRepository(db)


async def get_tracked_entity_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ITrackedEntityRepository:
    return TrackedEntityRepository(db)


async def get_document_record_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> IDocumentRecordRepository:
    return DocumentRecordRepository(db)


async def get_dataset_loader(
    settings: Annotated[Settings, Depends(get_settings)],
    document_type_repo: Annotated[
        IDocumentTypeRepository, Depends(get_document_type_repo)
    ],
    entity_repo: Annotated[ITrackedEntityRepository, Depends(get_tracked_entity_repo)],
    document_record_repo: Annotated[
        IDocumentRecordRepository, Depends(get_document_record_repo)
    ],
) -> ComplianceDatasetLoader:
    """Build the batched loader with timeout and retry from settings."""
    return ComplianceDatasetLoader(
        document_type_repo=document_type_repo,
        entity_repo=entity_repo,
        document_record_repo=document_record_repo,
        timeout_seconds=settings.data_fetch_timeout_seconds,
        max_attempts=settings.data_fetch_max_attempts,
        retry_wait_seconds=settings.data_fetch_retry_wait_seconds,
    )


def get_report_builder(
    settings: Annotated[Settings, Depends(get_settings)],
) -> EntityComplianceReportBuilder:
    """Build the report builder around a classifier configured from settings."""
    classifier = ComplianceClassifier(
        warning_horizon=timedelta(days=settings.compliance_warning_horizon_days),
        selection_policy=settings.compliance_record_selection,
    )
    return EntityComplianceReportBuilder(classifier)


def get_checklist_aggregator(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ChecklistAggregator:
    return ChecklistAggregator(page_size=settings.checklist_page_size)


async def get_compliance_query_service(
    loader: Annotated[ComplianceDatasetLoader, Depends(get_dataset_loader)],
    report_builder: Annotated[
        EntityComplianceReportBuilder, Depends(get_report_builder)
    ],
    aggregator: Annotated[ChecklistAggregator, Depends(get_checklist_aggregator)],
) -> ComplianceQueryService:
    """Build ComplianceQueryService for the compliance routes."""
    return ComplianceQueryService(
        loader=loader, report_builder=report_builder, aggregator=aggregator
    )
