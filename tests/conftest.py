"""Pytest configuration and fixtures for the compliance service.

HTTP tests run app.main:app through httpx ASGITransport with the three
repository providers overridden by an in-memory store, so no database is
needed. Factory fixtures build domain objects with sensible defaults.
"""

import os

# Settings are read when app.main is imported; pin test values first.
os.environ["DATABASE_URL"] = ""
os.environ["DATA_FETCH_RETRY_WAIT_SECONDS"] = "0"
os.environ["DATA_FETCH_MAX_ATTEMPTS"] = "2"

from collections.abc import AsyncIterator, Callable  # noqa: E402
from datetime import date, datetime  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.api.v1.dependencies import (  # noqa: E402
    get_document_record_repo,
    get_document_type_repo,
    get_tracked_entity_repo,
)
from app.core.config import get_settings  # noqa: E402
from app.domain.entities import DocumentRecord, DocumentType, TrackedEntity  # noqa: E402
from app.domain.enums import DocumentScope, DocumentStatus, EntityCategory  # noqa: E402
from app.domain.exceptions import DataUnavailableException  # noqa: E402

get_settings.cache_clear()

from app.main import app  # noqa: E402


class InMemoryComplianceStore:
    """Implements the three repository interfaces over plain lists.

    Set fail_with to make every read raise (e.g. DataUnavailableException).
    """

    def __init__(self) -> None:
        self.document_types: list[DocumentType] = []
        self.entities: list[TrackedEntity] = []
        self.records: list[DocumentRecord] = []
        self.fail_with: Exception | None = None
        self.calls = 0

    def _check(self) -> None:
        self.calls += 1
        if self.fail_with is not None:
            raise self.fail_with

    async def list_document_types(
        self, category: EntityCategory
    ) -> list[DocumentType]:
        self._check()
        return [t for t in self.document_types if t.applies_to(category)]

    async def list_all_document_types(self) -> list[DocumentType]:
        self._check()
        return list(self.document_types)

    async def list_entities(self, category: EntityCategory) -> list[TrackedEntity]:
        self._check()
        return [e for e in self.entities if e.category is category]

    async def list_document_records(
        self, category: EntityCategory
    ) -> list[DocumentRecord]:
        self._check()
        ids = {e.id for e in self.entities if e.category is category}
        return [r for r in self.records if r.entity_id in ids]


@pytest.fixture
def store() -> InMemoryComplianceStore:
    return InMemoryComplianceStore()


@pytest.fixture
def unavailable() -> DataUnavailableException:
    return DataUnavailableException("document_records", "connection refused")


@pytest.fixture
async def client(store: InMemoryComplianceStore) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), backed by store."""
    app.dependency_overrides[get_document_type_repo] = lambda: store
    app.dependency_overrides[get_tracked_entity_repo] = lambda: store
    app.dependency_overrides[get_document_record_repo] = lambda: store
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_type() -> Callable[..., DocumentType]:
    """Factory for DocumentType (required, company scope by default)."""

    def _make(
        type_id: str = "type-1",
        name: str | None = None,
        is_required: bool = True,
        scope: DocumentScope = DocumentScope.COMPANY,
    ) -> DocumentType:
        return DocumentType(
            id=type_id,
            name=name or f"Document {type_id}",
            is_required=is_required,
            scope=scope,
        )

    return _make


@pytest.fixture
def make_entity() -> Callable[..., TrackedEntity]:
    """Factory for TrackedEntity (company by default)."""

    def _make(
        entity_id: str = "entity-1",
        name: str | None = None,
        category: EntityCategory = EntityCategory.COMPANY,
        subtitle: str | None = None,
    ) -> TrackedEntity:
        return TrackedEntity(
            id=entity_id,
            display_name=name or f"Entity {entity_id}",
            category=category,
            subtitle=subtitle,
        )

    return _make


@pytest.fixture
def make_record() -> Callable[..., DocumentRecord]:
    """Factory for DocumentRecord; ids are generated when not given."""
    counter = {"n": 0}

    def _make(
        entity_id: str = "entity-1",
        document_type_id: str = "type-1",
        valid_until: date | None = None,
        status: DocumentStatus | None = None,
        created_at: datetime | None = None,
        record_id: str | None = None,
        valid_from: date | None = None,
    ) -> DocumentRecord:
        counter["n"] += 1
        return DocumentRecord(
            id=record_id or f"rec-{counter['n']}",
            entity_id=entity_id,
            document_type_id=document_type_id,
            valid_from=valid_from,
            valid_until=valid_until,
            explicit_status=status,
            created_at=created_at,
        )

    return _make
