"""DocumentType ORM model. Catalog of document kinds (table owned externally)."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    TimestampMixin,
    UuidPrimaryKeyMixin,
)


class DocumentTypeModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    """Document type definition. Table: document_types.

    scope is free text in the store ('company', 'driver', 'both'; NULL on
    legacy rows); it is converted to DocumentScope by the repository.
    """

    __tablename__ = "document_types"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    scope: Mapped[str | None] = mapped_column(String, nullable=True)
    validity_period_months: Mapped[int | None] = mapped_column(Integer, nullable=True)
