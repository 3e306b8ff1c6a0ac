"""Tracked entity repository: companies and drivers as TrackedEntity."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.tracked_entity import TrackedEntity
from app.domain.enums import EntityCategory
from app.infrastructure.persistence.models.tracked_entity import (
    CompanyModel,
    DriverModel,
)
from app.infrastructure.persistence.repositories.base import BaseRepository


def company_to_domain(row: CompanyModel) -> TrackedEntity:
    """Map company row; subtitle is the business ID."""
    return TrackedEntity(
        id=str(row.id),
        display_name=row.name,
        category=EntityCategory.COMPANY,
        subtitle=row.business_id,
    )


def driver_to_domain(row: DriverModel) -> TrackedEntity:
    """Map driver row; subtitle is the driver number."""
    return TrackedEntity(
        id=str(row.id),
        display_name=row.full_name,
        category=EntityCategory.DRIVER,
        subtitle=row.driver_number,
    )


class CompanyRepository(BaseRepository[CompanyModel]):
    """Companies (read-only)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, CompanyModel)

    async def list_all(self) -> list[TrackedEntity]:
        rows = await self._fetch_all(select(CompanyModel).order_by(CompanyModel.name))
        return [company_to_domain(r) for r in rows]


class DriverRepository(BaseRepository[DriverModel]):
    """Drivers (read-only)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DriverModel)

    async def list_all(self) -> list[TrackedEntity]:
        rows = await self._fetch_all(
            select(DriverModel).order_by(DriverModel.full_name)
        )
        return [driver_to_domain(r) for r in rows]


class TrackedEntityRepository:
    """ITrackedEntityRepository over companies and drivers."""

    def __init__(self, db: AsyncSession) -> None:
        self._companies = CompanyRepository(db)
        self._drivers = DriverRepository(db)

    async def list_entities(self, category: EntityCategory) -> list[TrackedEntity]:
        """Return all entities of category, ordered by display name."""
        if category is EntityCategory.COMPANY:
            return await self._companies.list_all()
        return await self._drivers.list_all()
