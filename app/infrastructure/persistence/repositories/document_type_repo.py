"""Document type repository. Returns domain DocumentType objects."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.document_type import DocumentType
from app.domain.enums import DocumentScope, EntityCategory
from app.infrastructure.persistence.models.document_type import DocumentTypeModel
from app.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def parse_scope(raw: str | None) -> DocumentScope | None:
    """Map a stored scope string to DocumentScope.

    NULL is the legacy encoding of a company-only type. Unknown strings
    return None so the caller can skip the type.
    """
    if raw is None:
        return DocumentScope.COMPANY
    try:
        return DocumentScope(raw.strip().lower())
    except ValueError:
        return None


def _to_domain(row: DocumentTypeModel) -> DocumentType | None:
    """Map ORM row to DocumentType; None (with a warning) for an unknown scope."""
    scope = parse_scope(row.scope)
    if scope is None:
        logger.warning(
            "Skipping document type %s (%s): unknown scope %r",
            row.id,
            row.name,
            row.scope,
        )
        return None
    return DocumentType(
        id=str(row.id),
        name=row.name,
        is_required=bool(row.is_required),
        scope=scope,
        validity_period_months=row.validity_period_months,
        description=row.description,
    )


class DocumentTypeRepository(BaseRepository[DocumentTypeModel]):
    """Document type catalog (read-only)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DocumentTypeModel)

    async def list_all_document_types(self) -> list[DocumentType]:
        """Return every document type with a known scope, ordered by name.

        The catalog is small, so it is read whole; unknown scope values are
        reported here instead of silently filtered.
        """
        rows = await self._fetch_all(
            select(DocumentTypeModel).order_by(DocumentTypeModel.name)
        )
        return [t for t in (_to_domain(r) for r in rows) if t is not None]

    async def list_document_types(
        self, category: EntityCategory
    ) -> list[DocumentType]:
        """Return document types applying to category, ordered by name."""
        return [
            t for t in await self.list_all_document_types() if t.applies_to(category)
        ]
