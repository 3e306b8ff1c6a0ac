"""Company and driver document ORM models. One row per document on file."""

from sqlalchemy import Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import DocumentRowModel


class CompanyDocumentModel(DocumentRowModel, Base):
    """Document held by a company. Table: company_documents."""

    __tablename__ = "company_documents"

    company_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False), nullable=False, index=True
    )


class DriverDocumentModel(DocumentRowModel, Base):
    """Document held by a driver. Table: driver_documents."""

    __tablename__ = "driver_documents"

    driver_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False), nullable=False, index=True
    )
