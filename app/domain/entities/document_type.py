"""Document type domain entity.

Reference data describing one kind of paperwork (license, contract,
certificate) and which entity categories must hold it.
"""

from dataclasses import dataclass

from app.domain.enums import DocumentScope, EntityCategory
from app.domain.exceptions import ValidationException


@dataclass(frozen=True)
class DocumentType:
    """Immutable document type definition.

    validity_period_months is informational only; a record's own
    valid_until governs classification.
    """

    id: str
    name: str
    is_required: bool
    scope: DocumentScope
    validity_period_months: int | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Document type ID is required", field="id")

    def applies_to(self, category: EntityCategory) -> bool:
        """Return whether this type is evaluated for entities of the category."""
        return self.scope.applies_to(category)

    def is_mandatory_for(self, category: EntityCategory) -> bool:
        """Return whether entities of the category must hold this type."""
        return self.is_required and self.applies_to(category)


def required_types_for(
    category: EntityCategory, document_types: list[DocumentType]
) -> list[DocumentType]:
    """Return the mandatory types for a category, preserving catalog order."""
    return [t for t in document_types if t.is_mandatory_for(category)]
