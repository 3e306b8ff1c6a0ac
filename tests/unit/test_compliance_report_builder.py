"""Unit tests for EntityComplianceReportBuilder and severity_for."""

from datetime import date

import pytest

from app.application.services.compliance_classifier import ComplianceClassifier
from app.application.services.compliance_report_builder import (
    EntityComplianceReportBuilder,
    severity_for,
)
from app.domain.enums import (
    ComplianceState,
    DocumentScope,
    DocumentStatus,
    EntityCategory,
    OverallSeverity,
)

NOW = date(2024, 1, 1)


@pytest.fixture
def builder() -> EntityComplianceReportBuilder:
    return EntityComplianceReportBuilder(ComplianceClassifier())


@pytest.mark.parametrize(
    ("missing", "expired", "expiring", "expected"),
    [
        (0, 0, 0, OverallSeverity.OK),
        (0, 0, 2, OverallSeverity.WARNING),
        (1, 0, 0, OverallSeverity.CRITICAL),
        (0, 1, 0, OverallSeverity.CRITICAL),
        (1, 1, 5, OverallSeverity.CRITICAL),
    ],
)
def test_severity_for(missing, expired, expiring, expected) -> None:
    assert severity_for(missing, expired, expiring) is expected


def test_buckets_partition_required_types(builder, make_entity, make_type, make_record) -> None:
    """Each required type lands in exactly one bucket."""
    entity = make_entity()
    types = [
        make_type("a", "Insurance"),
        make_type("b", "License"),
        make_type("c", "Contract"),
        make_type("d", "Tax certificate"),
    ]
    records = [
        make_record(document_type_id="a", valid_until=date(2024, 1, 1)),
        make_record(document_type_id="b", valid_until=date(2024, 1, 31)),
        make_record(document_type_id="c", valid_until=date(2024, 1, 30)),
    ]

    report = builder.build(entity, NOW, types, records)

    assert [t.id for t in report.missing] == ["d"]
    assert [d.document_type.id for d in report.expired] == ["a"]
    assert [d.document_type.id for d in report.expiring] == ["c"]
    assert [t.id for t in report.valid] == ["b"]
    assert report.evaluated_count == len(types)
    assert report.severity is OverallSeverity.CRITICAL
    assert report.has_blocking_issues is True
    assert report.blocking_document_names == ["Tax certificate", "Insurance"]


def test_expiring_only_is_warning(builder, make_entity, make_type, make_record) -> None:
    report = builder.build(
        make_entity(),
        NOW,
        [make_type()],
        [make_record(valid_until=date(2024, 1, 20))],
    )
    assert report.severity is OverallSeverity.WARNING
    assert report.has_blocking_issues is False
    assert report.expiring[0].valid_until == date(2024, 1, 20)


def test_no_required_types_is_ok(builder, make_entity) -> None:
    report = builder.build(make_entity(), NOW, [], [])
    assert report.severity is OverallSeverity.OK
    assert report.evaluated_count == 0
    assert report.missing == report.expired == report.expiring == report.valid == []


def test_optional_and_other_scope_types_skipped(
    builder, make_entity, make_type
) -> None:
    driver = make_entity("drv-1", category=EntityCategory.DRIVER)
    types = [
        make_type("company-only", scope=DocumentScope.COMPANY),
        make_type("optional", is_required=False, scope=DocumentScope.DRIVER),
        make_type("shared", scope=DocumentScope.BOTH),
    ]
    report = builder.build(driver, NOW, types, [])
    assert [t.id for t in report.missing] == ["shared"]
    assert report.evaluated_count == 1


def test_pending_record_reported_as_expired_with_status(
    builder, make_entity, make_type, make_record
) -> None:
    report = builder.build(
        make_entity(),
        NOW,
        [make_type()],
        [make_record(valid_until=date(2026, 1, 1), status=DocumentStatus.PENDING)],
    )
    assert report.expired[0].status is DocumentStatus.PENDING
    assert report.severity is OverallSeverity.CRITICAL


def test_classify_documents_labels_every_record(
    builder, make_type, make_record
) -> None:
    types = {"a": make_type("a", "Insurance", is_required=False)}
    records = [
        make_record(document_type_id="a", valid_until=date(2024, 6, 1)),
        make_record(document_type_id="ghost", valid_until=date(2023, 6, 1)),
    ]

    documents = builder.classify_documents(NOW, records, types)

    assert [d.document_type_name for d in documents] == [
        "Insurance",
        "Unknown document type",
    ]
    assert [d.state for d in documents] == [
        ComplianceState.VALID,
        ComplianceState.EXPIRED,
    ]
    assert all(d.is_required is False for d in documents)
