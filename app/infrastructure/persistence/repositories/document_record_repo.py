"""Document record repository: company and driver documents as DocumentRecord.

Row mapping never fails on bad data. An unparseable date is dropped (no
expiry constraint from it) and an unknown status is ignored; both are
logged and noted on the record's anomalies for the data layer to fix.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.document_record import DocumentRecord
from app.domain.enums import DocumentStatus, EntityCategory
from app.domain.value_objects import ValidityWindow
from app.infrastructure.persistence.models.document_record import (
    CompanyDocumentModel,
    DriverDocumentModel,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc, parse_date

logger = logging.getLogger(__name__)


def _lenient_date(
    record_id: str, field: str, raw: Any, anomalies: list[str]
) -> date | None:
    try:
        return parse_date(raw)
    except ValueError:
        logger.warning(
            "Document record %s has unparseable %s %r; treating as unset",
            record_id,
            field,
            raw,
        )
        anomalies.append(f"{field}: unparseable value {raw!r}")
        return None


def _lenient_status(
    record_id: str, raw: str | None, anomalies: list[str]
) -> DocumentStatus | None:
    if raw is None or not raw.strip():
        return None
    try:
        return DocumentStatus(raw.strip().lower())
    except ValueError:
        logger.warning(
            "Document record %s has unknown status %r; ignoring it", record_id, raw
        )
        anomalies.append(f"status: unknown value {raw!r}")
        return None


def record_from_row(
    *,
    record_id: str,
    entity_id: str,
    document_type_id: str,
    valid_from: Any,
    valid_until: Any,
    status: str | None,
    created_at: datetime | None,
    file_name: str | None = None,
    notes: str | None = None,
) -> DocumentRecord:
    """Build a DocumentRecord from raw column values, tolerating bad data."""
    anomalies: list[str] = []
    parsed_from = _lenient_date(record_id, "valid_from", valid_from, anomalies)
    parsed_until = _lenient_date(record_id, "valid_until", valid_until, anomalies)
    window = ValidityWindow(valid_from=parsed_from, valid_until=parsed_until)
    if window.is_inverted:
        logger.warning(
            "Document record %s has valid_until %s before valid_from %s",
            record_id,
            window.valid_until,
            window.valid_from,
        )
        anomalies.append("valid_until is before valid_from")
    return DocumentRecord(
        id=record_id,
        entity_id=entity_id,
        document_type_id=document_type_id,
        valid_from=window.valid_from,
        valid_until=window.valid_until,
        explicit_status=_lenient_status(record_id, status, anomalies),
        created_at=ensure_utc(created_at),
        file_name=file_name,
        notes=notes,
        anomalies=tuple(anomalies),
    )


def company_document_to_domain(row: CompanyDocumentModel) -> DocumentRecord:
    return record_from_row(
        record_id=str(row.id),
        entity_id=str(row.company_id),
        document_type_id=str(row.document_type_id),
        valid_from=row.valid_from,
        valid_until=row.valid_until,
        status=row.status,
        created_at=row.created_at,
        file_name=row.file_name,
        notes=row.notes,
    )


def driver_document_to_domain(row: DriverDocumentModel) -> DocumentRecord:
    return record_from_row(
        record_id=str(row.id),
        entity_id=str(row.driver_id),
        document_type_id=str(row.document_type_id),
        valid_from=row.valid_from,
        valid_until=row.valid_until,
        status=row.status,
        created_at=row.created_at,
        file_name=row.file_name,
        notes=row.notes,
    )


class CompanyDocumentRepository(BaseRepository[CompanyDocumentModel]):
    """Company documents (read-only)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, CompanyDocumentModel)

    async def list_all(self) -> list[DocumentRecord]:
        rows = await self._fetch_all(select(CompanyDocumentModel))
        return [company_document_to_domain(r) for r in rows]


class DriverDocumentRepository(BaseRepository[DriverDocumentModel]):
    """Driver documents (read-only)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DriverDocumentModel)

    async def list_all(self) -> list[DocumentRecord]:
        rows = await self._fetch_all(select(DriverDocumentModel))
        return [driver_document_to_domain(r) for r in rows]


class DocumentRecordRepository:
    """IDocumentRecordRepository over company and driver documents."""

    def __init__(self, db: AsyncSession) -> None:
        self._company_documents = CompanyDocumentRepository(db)
        self._driver_documents = DriverDocumentRepository(db)

    async def list_document_records(
        self, category: EntityCategory
    ) -> list[DocumentRecord]:
        """Return every document record of category (one bulk query)."""
        if category is EntityCategory.COMPANY:
            return await self._company_documents.list_all()
        return await self._driver_documents.list_all()
