"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All reads are bulk per entity category: one call per collection per view,
never one call per entity or per document. Implementations raise
DataUnavailableException when the store cannot be read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from app.domain.enums import EntityCategory

if TYPE_CHECKING:
    from app.domain.entities.document_record import DocumentRecord
    from app.domain.entities.document_type import DocumentType
    from app.domain.entities.tracked_entity import TrackedEntity


class IDocumentTypeRepository(Protocol):
    """Protocol for the document type catalog (DIP)."""

    async def list_document_types(
        self, category: EntityCategory
    ) -> list[DocumentType]:
        """Return every document type (required or optional) applying to category."""

    async def list_all_document_types(self) -> list[DocumentType]:
        """Return the whole catalog regardless of scope (for labeling records)."""


class ITrackedEntityRepository(Protocol):
    """Protocol for companies / drivers (DIP)."""

    async def list_entities(self, category: EntityCategory) -> list[TrackedEntity]:
        """Return all entities of category, ordered by display name."""


class IDocumentRecordRepository(Protocol):
    """Protocol for documents on file (DIP)."""

    async def list_document_records(
        self, category: EntityCategory
    ) -> list[DocumentRecord]:
        """Return every document record held by entities of category."""
