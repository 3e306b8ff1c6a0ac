"""Tests for domain entities, value objects and enums."""

from datetime import date, timedelta

import pytest

from app.domain.entities import DocumentRecord, DocumentType, TrackedEntity
from app.domain.entities.document_type import required_types_for
from app.domain.enums import (
    DocumentScope,
    DocumentStatus,
    EntityCategory,
    OverallSeverity,
    StatusFilter,
)
from app.domain.exceptions import ValidationException
from app.domain.value_objects import ValidityWindow


class TestDocumentScope:
    @pytest.mark.parametrize(
        ("scope", "category", "expected"),
        [
            (DocumentScope.COMPANY, EntityCategory.COMPANY, True),
            (DocumentScope.COMPANY, EntityCategory.DRIVER, False),
            (DocumentScope.DRIVER, EntityCategory.DRIVER, True),
            (DocumentScope.DRIVER, EntityCategory.COMPANY, False),
            (DocumentScope.BOTH, EntityCategory.COMPANY, True),
            (DocumentScope.BOTH, EntityCategory.DRIVER, True),
        ],
    )
    def test_applies_to(self, scope, category, expected) -> None:
        assert scope.applies_to(category) is expected


def test_non_compliant_statuses() -> None:
    assert not DocumentStatus.ACTIVE.is_non_compliant
    assert DocumentStatus.PENDING.is_non_compliant
    assert DocumentStatus.REJECTED.is_non_compliant
    assert DocumentStatus.EXPIRED.is_non_compliant


def test_severity_rank_order() -> None:
    assert sorted(OverallSeverity, key=lambda s: s.rank, reverse=True) == [
        OverallSeverity.OK,
        OverallSeverity.WARNING,
        OverallSeverity.CRITICAL,
    ]


def test_status_filter_matches() -> None:
    assert StatusFilter.ALL.matches(OverallSeverity.OK)
    assert StatusFilter.CRITICAL.matches(OverallSeverity.CRITICAL)
    assert not StatusFilter.CRITICAL.matches(OverallSeverity.WARNING)


def test_required_types_for_keeps_catalog_order() -> None:
    types = [
        DocumentType("1", "B", True, DocumentScope.DRIVER),
        DocumentType("2", "A", True, DocumentScope.BOTH),
        DocumentType("3", "C", False, DocumentScope.BOTH),
        DocumentType("4", "D", True, DocumentScope.COMPANY),
    ]
    assert [t.id for t in required_types_for(EntityCategory.DRIVER, types)] == ["1", "2"]


def test_entities_require_ids() -> None:
    with pytest.raises(ValidationException):
        DocumentType("", "X", True, DocumentScope.BOTH)
    with pytest.raises(ValidationException):
        TrackedEntity("", "X", EntityCategory.COMPANY)
    with pytest.raises(ValidationException) as exc_info:
        DocumentRecord(id="r1", entity_id="", document_type_id="t1")
    assert exc_info.value.details == {"field": "entity_id"}


def test_tracked_entity_empty_search_matches_all() -> None:
    entity = TrackedEntity("1", "Acme", EntityCategory.COMPANY)
    assert entity.matches_search("")
    assert not entity.matches_search("beta")


def test_document_record_anomalies_do_not_affect_equality() -> None:
    clean = DocumentRecord(id="r1", entity_id="e1", document_type_id="t1")
    flagged = DocumentRecord(
        id="r1", entity_id="e1", document_type_id="t1", anomalies=("valid_until: bad",)
    )
    assert clean == flagged
    assert flagged.has_anomalies and not clean.has_anomalies


class TestValidityWindow:
    def test_half_open_end(self) -> None:
        window = ValidityWindow(valid_until=date(2024, 1, 1))
        assert window.has_lapsed(date(2024, 1, 1))
        assert not window.has_lapsed(date(2023, 12, 31))

    def test_lapses_within_is_exclusive(self) -> None:
        window = ValidityWindow(valid_until=date(2024, 1, 31))
        assert not window.lapses_within(date(2024, 1, 1), timedelta(days=30))
        assert window.lapses_within(date(2024, 1, 2), timedelta(days=30))

    def test_open_ended_never_lapses(self) -> None:
        window = ValidityWindow()
        assert window.is_open_ended
        assert not window.has_lapsed(date.max)
        assert not window.lapses_within(date(2024, 1, 1), timedelta(days=3650))

    def test_inverted(self) -> None:
        assert ValidityWindow(date(2024, 2, 1), date(2024, 1, 1)).is_inverted
        assert not ValidityWindow(None, date(2024, 1, 1)).is_inverted
