"""SQLAlchemy mixins for common columns of the document tables (DRY).

Provides: UuidPrimaryKeyMixin, TimestampMixin, ValidityMixin, and the
combined DocumentRowModel used by company and driver document tables.
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class UuidPrimaryKeyMixin:
    """Mixin for tables keyed by UUID. Ids are exposed as strings."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(Uuid(as_uuid=False), primary_key=True)


class TimestampMixin:
    """Mixin for created_at (timezone-aware). Nullable on legacy tables."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True)


class ValidityMixin:
    """Mixin for valid_from / valid_until (calendar dates, both optional)."""

    @declared_attr
    def valid_from(cls) -> Mapped[date | None]:
        return mapped_column(Date, nullable=True)

    @declared_attr
    def valid_until(cls) -> Mapped[date | None]:
        return mapped_column(Date, nullable=True, index=True)


class DocumentRowModel(UuidPrimaryKeyMixin, TimestampMixin, ValidityMixin):
    """Combined mixin for a stored document row: id, dates, status, file info."""

    __abstract__ = True

    @declared_attr
    def document_type_id(cls) -> Mapped[str]:
        return mapped_column(Uuid(as_uuid=False), nullable=False, index=True)

    @declared_attr
    def status(cls) -> Mapped[str | None]:
        return mapped_column(String, nullable=True)

    @declared_attr
    def file_name(cls) -> Mapped[str | None]:
        return mapped_column(String, nullable=True)

    @declared_attr
    def notes(cls) -> Mapped[str | None]:
        return mapped_column(Text, nullable=True)
