"""Document record domain entity.

One document on file for one entity: an instance of a document type with
an optional validity window and an optional explicit lifecycle status.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from app.domain.enums import DocumentStatus
from app.domain.exceptions import ValidationException
from app.domain.value_objects.core import ValidityWindow


@dataclass(frozen=True)
class DocumentRecord:
    """Immutable view of a stored document record.

    anomalies holds data-quality notes recorded while the row was mapped
    (e.g. an unparseable valid_until that was dropped).
    """

    id: str
    entity_id: str
    document_type_id: str
    valid_from: date | None = None
    valid_until: date | None = None
    explicit_status: DocumentStatus | None = None
    created_at: datetime | None = None
    file_name: str | None = None
    notes: str | None = None
    anomalies: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Document record ID is required", field="id")
        if not self.entity_id:
            raise ValidationException(
                "Document record must belong to an entity", field="entity_id"
            )

    @property
    def window(self) -> ValidityWindow:
        """Validity window built from valid_from / valid_until."""
        return ValidityWindow(valid_from=self.valid_from, valid_until=self.valid_until)

    @property
    def has_anomalies(self) -> bool:
        return bool(self.anomalies)
