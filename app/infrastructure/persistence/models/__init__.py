"""Persistence models: ORM mappings of the externally owned tables, and mixins."""

from app.infrastructure.persistence.models.document_record import (
    CompanyDocumentModel,
    DriverDocumentModel,
)
from app.infrastructure.persistence.models.document_type import DocumentTypeModel
from app.infrastructure.persistence.models.mixins import (
    DocumentRowModel,
    TimestampMixin,
    UuidPrimaryKeyMixin,
    ValidityMixin,
)
from app.infrastructure.persistence.models.tracked_entity import (
    CompanyModel,
    DriverModel,
)

__all__ = [
    "CompanyDocumentModel",
    "CompanyModel",
    "DocumentRowModel",
    "DocumentTypeModel",
    "DriverDocumentModel",
    "DriverModel",
    "TimestampMixin",
    "UuidPrimaryKeyMixin",
    "ValidityMixin",
]
