"""DTOs for document compliance (per-entity report, checklist page, dataset)."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date

from app.domain.entities.document_record import DocumentRecord
from app.domain.entities.document_type import DocumentType, required_types_for
from app.domain.entities.tracked_entity import TrackedEntity
from app.domain.enums import (
    ComplianceState,
    DocumentStatus,
    EntityCategory,
    OverallSeverity,
    StatusFilter,
)


@dataclass(frozen=True)
class DatedDocument:
    """A mandatory document type paired with the authoritative record's expiry."""

    document_type: DocumentType
    valid_until: date | None
    status: DocumentStatus | None = None  # explicit status, e.g. pending


@dataclass(frozen=True)
class EntityComplianceReport:
    """Partition of an entity's mandatory document types plus overall severity.

    Buckets are disjoint and together cover every mandatory type evaluated.
    """

    entity: TrackedEntity
    missing: list[DocumentType]
    expiring: list[DatedDocument]
    expired: list[DatedDocument]
    valid: list[DocumentType]
    severity: OverallSeverity

    @property
    def has_blocking_issues(self) -> bool:
        """True when at least one mandatory document is missing or expired."""
        return bool(self.missing or self.expired)

    @property
    def blocking_document_names(self) -> list[str]:
        """Names of missing documents followed by names of expired ones."""
        return [t.name for t in self.missing] + [
            d.document_type.name for d in self.expired
        ]

    @property
    def evaluated_count(self) -> int:
        return (
            len(self.missing) + len(self.expiring) + len(self.expired) + len(self.valid)
        )


@dataclass(frozen=True)
class ClassifiedRecord:
    """One document on file, labeled with its type and its own state."""

    record: DocumentRecord
    document_type_name: str
    is_required: bool
    state: ComplianceState


@dataclass(frozen=True)
class EntityComplianceProfile:
    """Profile view: the entity report and every document on file."""

    report: EntityComplianceReport
    documents: list[ClassifiedRecord]


@dataclass(frozen=True)
class SeverityCounts:
    """Severity distribution over a whole (unfiltered) population."""

    critical: int = 0
    warning: int = 0
    ok: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.warning + self.ok


@dataclass(frozen=True)
class FilterState:
    """Immutable checklist filter passed per call (search, status, page)."""

    search: str = ""
    status: StatusFilter = StatusFilter.ALL
    page: int = 1


@dataclass(frozen=True)
class ChecklistPage:
    """One ranked page of the checklist plus global counts.

    start_index and end_index are 1-based and inclusive; both are 0 when the
    filtered list is empty.
    required_types lists the mandatory document types of the category (the
    checklist columns).
    """

    rows: list[EntityComplianceReport]
    counts: SeverityCounts
    filters: FilterState
    current_page: int
    total_pages: int
    page_size: int
    start_index: int
    end_index: int
    total_items: int
    required_types: list[DocumentType] = field(default_factory=list)


@dataclass(frozen=True)
class ComplianceDataset:
    """Prefetched snapshot of one category used for a single view.

    Reference lookups go through the ID-keyed maps built once in build();
    nothing here queries the data store. document_types holds the types that
    apply to the category, while document_types_by_id indexes the whole
    catalog so a record of an out-of-scope type still resolves to its name.
    """

    category: EntityCategory
    entities: list[TrackedEntity]
    document_types: list[DocumentType]
    records: list[DocumentRecord]
    document_types_by_id: dict[str, DocumentType] = field(repr=False)
    records_by_entity_id: dict[str, list[DocumentRecord]] = field(repr=False)
    entities_by_id: dict[str, TrackedEntity] = field(repr=False)

    @classmethod
    def build(
        cls,
        category: EntityCategory,
        entities: list[TrackedEntity],
        catalog: list[DocumentType],
        records: list[DocumentRecord],
    ) -> ComplianceDataset:
        """Scope the catalog to category and index the fetched collections by id."""
        records_by_entity: dict[str, list[DocumentRecord]] = defaultdict(list)
        for record in records:
            records_by_entity[record.entity_id].append(record)
        return cls(
            category=category,
            entities=entities,
            document_types=[t for t in catalog if t.applies_to(category)],
            records=records,
            document_types_by_id={t.id: t for t in catalog},
            records_by_entity_id=dict(records_by_entity),
            entities_by_id={e.id: e for e in entities},
        )

    @property
    def required_types(self) -> list[DocumentType]:
        """Mandatory document types for this dataset's category."""
        return required_types_for(self.category, self.document_types)

    def records_for(self, entity_id: str) -> list[DocumentRecord]:
        return self.records_by_entity_id.get(entity_id, [])
