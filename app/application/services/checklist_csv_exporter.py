"""CSV rendering of a ranked checklist (spreadsheet-friendly, semicolon separated)."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from app.application.dtos.compliance import EntityComplianceReport
from app.shared.utils.datetime import format_display_date

# Byte-order mark so spreadsheet apps detect UTF-8.
_BOM = "\ufeff"

CHECKLIST_CSV_HEADER = [
    "Name",
    "Identifier",
    "Status",
    "Missing or expired",
    "Expiring soon",
]


def _expiring_cell(report: EntityComplianceReport) -> str:
    parts = []
    for item in report.expiring:
        if item.valid_until is None:
            parts.append(item.document_type.name)
        else:
            parts.append(
                f"{item.document_type.name} ({format_display_date(item.valid_until)})"
            )
    return ", ".join(parts)


def checklist_rows(reports: Iterable[EntityComplianceReport]) -> list[list[str]]:
    """Return one CSV row per report (header not included)."""
    return [
        [
            report.entity.display_name,
            report.entity.subtitle or "",
            report.severity.value,
            ", ".join(report.blocking_document_names),
            _expiring_cell(report),
        ]
        for report in reports
    ]


def render_checklist_csv(reports: Iterable[EntityComplianceReport]) -> str:
    """Render ranked reports as UTF-8 CSV text with BOM and header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";", lineterminator="\n")
    writer.writerow(CHECKLIST_CSV_HEADER)
    writer.writerows(checklist_rows(reports))
    return _BOM + buffer.getvalue()
