"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import DocumentRecord, DocumentType, TrackedEntity
from app.domain.enums import (
    ComplianceState,
    DocumentScope,
    DocumentStatus,
    EntityCategory,
    OverallSeverity,
    RecordSelectionPolicy,
    StatusFilter,
)
from app.domain.exceptions import (
    ComplianceException,
    DataUnavailableException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from app.domain.value_objects import ValidityWindow

__all__ = [
    # Entities
    "DocumentRecord",
    "DocumentType",
    "TrackedEntity",
    # Enums
    "ComplianceState",
    "DocumentScope",
    "DocumentStatus",
    "EntityCategory",
    "OverallSeverity",
    "RecordSelectionPolicy",
    "StatusFilter",
    # Exceptions
    "ComplianceException",
    "DataUnavailableException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "ValidityWindow",
]
