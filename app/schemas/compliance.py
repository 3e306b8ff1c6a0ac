"""Compliance API schemas (entity profile, alert, checklist page)."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from app.application.dtos.compliance import (
    ChecklistPage,
    ClassifiedRecord,
    DatedDocument,
    EntityComplianceProfile,
    EntityComplianceReport,
    SeverityCounts,
)
from app.domain.entities.document_type import DocumentType
from app.domain.entities.tracked_entity import TrackedEntity
from app.domain.enums import (
    ComplianceState,
    DocumentScope,
    DocumentStatus,
    EntityCategory,
    OverallSeverity,
    StatusFilter,
)


class DocumentTypeSummary(BaseModel):
    """Document type as shown in report buckets."""

    id: str
    name: str
    is_required: bool
    scope: DocumentScope
    validity_period_months: int | None = None

    @classmethod
    def from_domain(cls, doc_type: DocumentType) -> DocumentTypeSummary:
        return cls(
            id=doc_type.id,
            name=doc_type.name,
            is_required=doc_type.is_required,
            scope=doc_type.scope,
            validity_period_months=doc_type.validity_period_months,
        )


class DatedDocumentResponse(BaseModel):
    """Expired or expiring document type with its authoritative expiry date."""

    document_type: DocumentTypeSummary
    valid_until: date | None = None
    status: DocumentStatus | None = None

    @classmethod
    def from_dto(cls, doc: DatedDocument) -> DatedDocumentResponse:
        return cls(
            document_type=DocumentTypeSummary.from_domain(doc.document_type),
            valid_until=doc.valid_until,
            status=doc.status,
        )


class EntitySummary(BaseModel):
    """Tracked entity (company or driver)."""

    id: str
    display_name: str
    category: EntityCategory
    subtitle: str | None = None

    @classmethod
    def from_domain(cls, entity: TrackedEntity) -> EntitySummary:
        return cls(
            id=entity.id,
            display_name=entity.display_name,
            category=entity.category,
            subtitle=entity.subtitle,
        )


class EntityReportResponse(BaseModel):
    """Partition of an entity's mandatory documents plus overall severity."""

    entity: EntitySummary
    severity: OverallSeverity
    has_blocking_issues: bool
    missing: list[DocumentTypeSummary] = Field(default_factory=list)
    expired: list[DatedDocumentResponse] = Field(default_factory=list)
    expiring: list[DatedDocumentResponse] = Field(default_factory=list)
    valid: list[DocumentTypeSummary] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, report: EntityComplianceReport) -> EntityReportResponse:
        return cls(
            entity=EntitySummary.from_domain(report.entity),
            severity=report.severity,
            has_blocking_issues=report.has_blocking_issues,
            missing=[DocumentTypeSummary.from_domain(t) for t in report.missing],
            expired=[DatedDocumentResponse.from_dto(d) for d in report.expired],
            expiring=[DatedDocumentResponse.from_dto(d) for d in report.expiring],
            valid=[DocumentTypeSummary.from_domain(t) for t in report.valid],
        )


class DocumentOnFileResponse(BaseModel):
    """A stored document record labeled with its own compliance state."""

    id: str
    document_type_id: str
    document_type_name: str
    is_required: bool
    state: ComplianceState
    valid_from: date | None = None
    valid_until: date | None = None
    status: DocumentStatus | None = None
    file_name: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    anomalies: list[str] = Field(
        default_factory=list,
        description="Data-quality notes (e.g. unparseable dates) from the data store",
    )

    @classmethod
    def from_dto(cls, item: ClassifiedRecord) -> DocumentOnFileResponse:
        record = item.record
        return cls(
            id=record.id,
            document_type_id=record.document_type_id,
            document_type_name=item.document_type_name,
            is_required=item.is_required,
            state=item.state,
            valid_from=record.valid_from,
            valid_until=record.valid_until,
            status=record.explicit_status,
            file_name=record.file_name,
            notes=record.notes,
            created_at=record.created_at,
            anomalies=list(record.anomalies),
        )


class EntityComplianceResponse(EntityReportResponse):
    """Response for GET /compliance/{category}/entities/{entity_id}."""

    documents: list[DocumentOnFileResponse] = Field(default_factory=list)

    @classmethod
    def from_profile(
        cls, profile: EntityComplianceProfile
    ) -> EntityComplianceResponse:
        base = EntityReportResponse.from_dto(profile.report)
        return cls(
            **base.model_dump(),
            documents=[DocumentOnFileResponse.from_dto(d) for d in profile.documents],
        )


class ComplianceAlertResponse(BaseModel):
    """Response for GET /compliance/{category}/entities/{entity_id}/alert."""

    entity_id: str
    has_blocking_issues: bool


class SeverityCountsResponse(BaseModel):
    """Severity distribution over the whole category (ignores filters)."""

    critical: int
    warning: int
    ok: int
    total: int

    @classmethod
    def from_dto(cls, counts: SeverityCounts) -> SeverityCountsResponse:
        return cls(
            critical=counts.critical,
            warning=counts.warning,
            ok=counts.ok,
            total=counts.total,
        )


class ChecklistRowResponse(BaseModel):
    """One checklist row: entity, severity and its problem documents."""

    entity: EntitySummary
    severity: OverallSeverity
    has_blocking_issues: bool
    blocking_documents: list[str]
    expiring: list[DatedDocumentResponse]

    @classmethod
    def from_dto(cls, report: EntityComplianceReport) -> ChecklistRowResponse:
        return cls(
            entity=EntitySummary.from_domain(report.entity),
            severity=report.severity,
            has_blocking_issues=report.has_blocking_issues,
            blocking_documents=report.blocking_document_names,
            expiring=[DatedDocumentResponse.from_dto(d) for d in report.expiring],
        )


class ChecklistResponse(BaseModel):
    """Response for GET /compliance/{category}/checklist."""

    items: list[ChecklistRowResponse]
    counts: SeverityCountsResponse
    search: str
    status: StatusFilter
    page: int = Field(..., description="Current page (1-based, after fallback)")
    total_pages: int
    page_size: int
    start_index: int = Field(..., description="1-based index of first row; 0 if empty")
    end_index: int = Field(..., description="1-based index of last row; 0 if empty")
    total_items: int = Field(..., description="Rows matching search and status")
    required_documents: list[DocumentTypeSummary] = Field(
        default_factory=list, description="Mandatory document types of the category"
    )

    @classmethod
    def from_dto(cls, page: ChecklistPage) -> ChecklistResponse:
        return cls(
            items=[ChecklistRowResponse.from_dto(r) for r in page.rows],
            counts=SeverityCountsResponse.from_dto(page.counts),
            search=page.filters.search,
            status=page.filters.status,
            page=page.current_page,
            total_pages=page.total_pages,
            page_size=page.page_size,
            start_index=page.start_index,
            end_index=page.end_index,
            total_items=page.total_items,
            required_documents=[
                DocumentTypeSummary.from_domain(t) for t in page.required_types
            ],
        )
