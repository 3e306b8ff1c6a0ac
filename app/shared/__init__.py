"""Shared utilities: telemetry (logging) and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
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
