"""Base repository: read-only bulk queries with uniform error translation."""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import DataUnavailableException
from app.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository for the externally owned tables.

    Subclasses build SELECT statements and map rows to domain types; any
    SQLAlchemy error surfaces as DataUnavailableException naming the source.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @property
    def source_name(self) -> str:
        """Name used in errors and logs (the table name)."""
        table: Any = getattr(self.model, "__tablename__", self.model.__name__)
        return str(table)

    async def _fetch_all(self, stmt: Select[Any]) -> list[ModelType]:
        """Execute stmt and return all ORM rows.

        Raises:
            DataUnavailableException: If the query fails.
        """
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.warning("Query on %s failed: %s", self.source_name, exc)
            raise DataUnavailableException(self.source_name, str(exc)) from exc
        return list(result.scalars().all())
