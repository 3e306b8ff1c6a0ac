"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.document_record import DocumentRecord
from app.domain.entities.document_type import DocumentType
from app.domain.entities.tracked_entity import TrackedEntity

__all__ = [
    "DocumentRecord",
    "DocumentType",
    "TrackedEntity",
]
