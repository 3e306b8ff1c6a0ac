"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.domain.enums import RecordSelectionPolicy


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.compliance_warning_horizon_days == 30
    assert settings.checklist_page_size == 20
    assert settings.compliance_record_selection is RecordSelectionPolicy.LATEST_CREATED


def test_selection_policy_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPLIANCE_RECORD_SELECTION", "furthest_valid_until")
    settings = Settings(_env_file=None)
    assert settings.compliance_record_selection is RecordSelectionPolicy.FURTHEST_VALID_UNTIL


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("compliance_warning_horizon_days", -1, "COMPLIANCE_WARNING_HORIZON_DAYS"),
        ("checklist_page_size", 0, "CHECKLIST_PAGE_SIZE"),
        ("data_fetch_timeout_seconds", 0, "DATA_FETCH_TIMEOUT_SECONDS"),
        ("data_fetch_max_attempts", 0, "DATA_FETCH_MAX_ATTEMPTS"),
        ("data_fetch_retry_wait_seconds", -0.1, "DATA_FETCH_RETRY_WAIT_SECONDS"),
    ],
)
def test_out_of_range_values_rejected(field, value, message) -> None:
    with pytest.raises(ValidationError, match=message):
        Settings(_env_file=None, **{field: value})
