"""Company and Driver ORM models (only the columns compliance views read)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    TimestampMixin,
    UuidPrimaryKeyMixin,
)


class CompanyModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    """Contracted partner company. Table: companies."""

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    business_id: Mapped[str | None] = mapped_column(String, nullable=True)


class DriverModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    """Driver working for a partner company. Table: drivers."""

    __tablename__ = "drivers"

    full_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    driver_number: Mapped[str] = mapped_column(String, nullable=False)
