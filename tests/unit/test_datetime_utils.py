"""Unit tests for app.shared.utils.datetime."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from app.shared.utils.datetime import (
    ensure_utc,
    format_display_date,
    parse_date,
    to_utc_date,
    utc_now,
)


def test_utc_now_is_aware() -> None:
    assert utc_now().tzinfo is UTC


def test_ensure_utc_naive_and_aware() -> None:
    naive = datetime(2024, 1, 1, 12, 0)
    assert ensure_utc(naive) == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    helsinki = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(helsinki) == datetime(2023, 12, 31, 23, 0, tzinfo=UTC)
    assert ensure_utc(None) is None


def test_to_utc_date() -> None:
    assert to_utc_date(date(2024, 3, 1)) == date(2024, 3, 1)
    plus_two = timezone(timedelta(hours=2))
    assert to_utc_date(datetime(2024, 3, 1, 1, 0, tzinfo=plus_two)) == date(2024, 2, 29)


class TestParseDate:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, None),
            ("", None),
            ("   ", None),
            ("2024-01-31", date(2024, 1, 31)),
            ("2024-01-31T10:00:00+00:00", date(2024, 1, 31)),
            ("2024-01-31T10:00:00Z", date(2024, 1, 31)),
            ("2024-01-31 10:00:00", date(2024, 1, 31)),
            (date(2024, 1, 31), date(2024, 1, 31)),
            (datetime(2024, 1, 31, 23, 0, tzinfo=UTC), date(2024, 1, 31)),
        ],
    )
    def test_accepted_values(self, raw, expected) -> None:
        assert parse_date(raw) == expected

    @pytest.mark.parametrize("raw", ["31.1.2024", "not a date", "2024-02-30"])
    def test_malformed_strings_raise(self, raw) -> None:
        with pytest.raises(ValueError):
            parse_date(raw)

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported"):
            parse_date(20240131)  # type: ignore[arg-type]


def test_format_display_date_has_no_padding() -> None:
    assert format_display_date(date(2024, 1, 5)) == "5.1.2024"
    assert format_display_date(date(2024, 12, 31)) == "31.12.2024"
