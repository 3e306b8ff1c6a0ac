"""Checklist aggregator: filter, rank and paginate entity reports.

Severity counts are always taken from the whole population passed in, so
badge counts stay the same while the table below them is filtered.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from app.application.dtos.compliance import (
    ChecklistPage,
    EntityComplianceReport,
    FilterState,
    SeverityCounts,
)
from app.domain.entities.tracked_entity import TrackedEntity
from app.domain.enums import OverallSeverity
from app.domain.exceptions import ValidationException

DEFAULT_PAGE_SIZE = 20


def count_severities(reports: Iterable[EntityComplianceReport]) -> SeverityCounts:
    """Return how many reports fall into each severity."""
    tally = Counter(r.severity for r in reports)
    return SeverityCounts(
        critical=tally[OverallSeverity.CRITICAL],
        warning=tally[OverallSeverity.WARNING],
        ok=tally[OverallSeverity.OK],
    )


class ChecklistAggregator:
    """Turns per-entity reports into a ranked, paginated checklist."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def rank(
        self,
        entities: Sequence[TrackedEntity],
        reports_by_entity_id: Mapping[str, EntityComplianceReport],
        filters: FilterState,
    ) -> list[EntityComplianceReport]:
        """Return filtered reports ordered CRITICAL, WARNING, OK.

        sorted() is stable, so entities of equal severity keep the order in
        which they were passed.
        """
        matching = [
            reports_by_entity_id[entity.id]
            for entity in entities
            if entity.matches_search(filters.search)
            and filters.status.matches(reports_by_entity_id[entity.id].severity)
        ]
        return sorted(matching, key=lambda r: r.severity.rank)

    def aggregate(
        self,
        entities: Sequence[TrackedEntity],
        reports_by_entity_id: Mapping[str, EntityComplianceReport],
        filters: FilterState,
    ) -> ChecklistPage:
        """Build one checklist page plus global severity counts.

        A requested page past the last one (or any page but the first of an
        empty list) falls back to page 1.

        Raises:
            ValidationException: If filters.page is below 1.
            KeyError: If an entity has no report.
        """
        if filters.page < 1:
            raise ValidationException("page must be >= 1", field="page")

        counts = count_severities(reports_by_entity_id[e.id] for e in entities)
        ranked = self.rank(entities, reports_by_entity_id, filters)

        total_items = len(ranked)
        total_pages = math.ceil(total_items / self._page_size)
        current_page = filters.page
        if current_page > max(total_pages, 1):
            current_page = 1

        offset = (current_page - 1) * self._page_size
        rows = ranked[offset : offset + self._page_size]
        if rows:
            start_index = offset + 1
            end_index = offset + len(rows)
        else:
            start_index = end_index = 0

        return ChecklistPage(
            rows=rows,
            counts=counts,
            filters=filters,
            current_page=current_page,
            total_pages=total_pages,
            page_size=self._page_size,
            start_index=start_index,
            end_index=end_index,
            total_items=total_items,
        )
