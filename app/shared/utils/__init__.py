"""Shared utilities: UTC datetime handling and date parsing."""

from app.shared.utils.datetime import (
    ensure_utc,
    format_display_date,
    parse_date,
    to_utc_date,
    utc_now,
)

__all__ = [
    "ensure_utc",
    "format_display_date",
    "parse_date",
    "to_utc_date",
    "utc_now",
]
