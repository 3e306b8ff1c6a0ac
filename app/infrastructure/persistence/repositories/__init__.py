"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.document_record_repo import (
    CompanyDocumentRepository,
    DocumentRecordRepository,
    DriverDocumentRepository,
)
from app.infrastructure.persistence.repositories.document_type_repo import (
    DocumentTypeRepository,
)
from app.infrastructure.persistence.repositories.tracked_entity_repo import (
    CompanyRepository,
    DriverRepository,
    TrackedEntityRepository,
)

__all__ = [
    "BaseRepository",
    "CompanyDocumentRepository",
    "CompanyRepository",
    "DocumentRecordRepository",
    "DocumentTypeRepository",
    "DriverDocumentRepository",
    "DriverRepository",
    "TrackedEntityRepository",
]
