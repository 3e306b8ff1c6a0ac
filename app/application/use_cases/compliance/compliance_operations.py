"""Compliance queries: entity profile, alert flag, checklist page and CSV export.

Every call loads one dataset and recomputes from it; nothing derived is
cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime

from app.application.dtos.compliance import (
    ChecklistPage,
    ComplianceDataset,
    EntityComplianceProfile,
    EntityComplianceReport,
    FilterState,
)
from app.application.services.checklist_aggregator import ChecklistAggregator
from app.application.services.checklist_csv_exporter import render_checklist_csv
from app.application.services.compliance_report_builder import (
    EntityComplianceReportBuilder,
)
from app.application.use_cases.compliance.load_dataset import ComplianceDatasetLoader
from app.domain.enums import EntityCategory
from app.domain.exceptions import ResourceNotFoundException
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class ComplianceQueryService:
    """Read-only compliance views over one entity category."""

    def __init__(
        self,
        loader: ComplianceDatasetLoader,
        report_builder: EntityComplianceReportBuilder,
        aggregator: ChecklistAggregator,
    ) -> None:
        self.loader = loader
        self.report_builder = report_builder
        self.aggregator = aggregator

    async def get_entity_report(
        self,
        category: EntityCategory,
        entity_id: str,
        now: datetime | date | None = None,
    ) -> EntityComplianceProfile:
        """Return the compliance report and labeled documents for one entity.

        Args:
            category: Category the entity belongs to.
            entity_id: Entity id.
            now: Evaluation instant; defaults to the current UTC time.

        Returns:
            Profile with the report and every document on file.

        Raises:
            ResourceNotFoundException: If no entity of category has entity_id.
            DataUnavailableException: If the data store cannot be read.
        """
        now = now or utc_now()
        dataset = await self.loader.load(category)
        entity = dataset.entities_by_id.get(entity_id)
        if entity is None:
            raise ResourceNotFoundException(category.value, entity_id)
        records = dataset.records_for(entity_id)
        report = self.report_builder.build(
            entity, now, dataset.required_types, records
        )
        documents = self.report_builder.classify_documents(
            now, records, dataset.document_types_by_id
        )
        return EntityComplianceProfile(report=report, documents=documents)

    async def has_blocking_issues(
        self,
        category: EntityCategory,
        entity_id: str,
        now: datetime | date | None = None,
    ) -> bool:
        """True when the entity has a missing or expired mandatory document."""
        profile = await self.get_entity_report(category, entity_id, now)
        return profile.report.has_blocking_issues

    async def get_checklist(
        self,
        category: EntityCategory,
        filters: FilterState,
        now: datetime | date | None = None,
    ) -> ChecklistPage:
        """Return one ranked checklist page with global severity counts."""
        now = now or utc_now()
        dataset = await self.loader.load(category)
        reports = self._reports_for(dataset, now)
        page = replace(
            self.aggregator.aggregate(dataset.entities, reports, filters),
            required_types=dataset.required_types,
        )
        logger.debug(
            "Checklist %s: %d/%d entities match (critical=%d warning=%d ok=%d)",
            category.value,
            page.total_items,
            page.counts.total,
            page.counts.critical,
            page.counts.warning,
            page.counts.ok,
        )
        return page

    async def export_checklist_csv(
        self,
        category: EntityCategory,
        filters: FilterState,
        now: datetime | date | None = None,
    ) -> str:
        """Return the whole filtered, ranked checklist as CSV (no pagination)."""
        now = now or utc_now()
        dataset = await self.loader.load(category)
        reports = self._reports_for(dataset, now)
        ranked = self.aggregator.rank(dataset.entities, reports, filters)
        return render_checklist_csv(ranked)

    def _reports_for(
        self, dataset: ComplianceDataset, now: datetime | date
    ) -> dict[str, EntityComplianceReport]:
        required_types = dataset.required_types
        return {
            entity.id: self.report_builder.build(
                entity, now, required_types, dataset.records_for(entity.id)
            )
            for entity in dataset.entities
        }
