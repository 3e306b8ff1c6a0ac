"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    ComplianceException,
    DataUnavailableException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_compliance_exception_default_error_code() -> None:
    """Base ComplianceException uses class name as error_code when not provided."""
    exc = ComplianceException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "ComplianceException"
    assert exc.details == {}


def test_compliance_exception_to_dict() -> None:
    exc = ComplianceException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid page", field="page")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "page"}
    assert ValidationException("Bad").details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("driver", "d-42")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "driver not found: d-42"
    assert exc.details == {"resource_type": "driver", "resource_id": "d-42"}


def test_data_unavailable_exception() -> None:
    exc = DataUnavailableException("company_documents", "timed out after 30s")
    assert exc.error_code == "DATA_UNAVAILABLE"
    assert exc.details == {"source": "company_documents", "reason": "timed out after 30s"}
    assert isinstance(exc, ComplianceException)


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
