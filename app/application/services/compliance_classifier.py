"""Compliance classifier: one state per (entity, document type) pair.

Single precedence policy used by every view (profile, checklist, export):

1. Optional document types are not evaluated.
2. No record of the type on file: MISSING.
3. Otherwise, on the authoritative record:
   a. explicit status "expired", or validity window already ended: EXPIRED
   b. explicit status "pending" or "rejected": EXPIRED (not yet compliant)
   c. valid_until before now + warning horizon: EXPIRING
   d. VALID

Stateless apart from its configuration; safe to share and to call
repeatedly with the same inputs.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime, timedelta

from app.domain.entities.document_record import DocumentRecord
from app.domain.entities.document_type import DocumentType
from app.domain.enums import ComplianceState, DocumentStatus, RecordSelectionPolicy
from app.shared.utils.datetime import ensure_utc, to_utc_date

DEFAULT_WARNING_HORIZON = timedelta(days=30)

_OLDEST = datetime.min.replace(tzinfo=UTC)


def _created_key(record: DocumentRecord) -> datetime:
    return ensure_utc(record.created_at) or _OLDEST


def _valid_until_key(record: DocumentRecord) -> date:
    # No expiry outlasts any date.
    return record.valid_until if record.valid_until is not None else date.max


class ComplianceClassifier:
    """Classifies document records against a warning horizon."""

    def __init__(
        self,
        warning_horizon: timedelta = DEFAULT_WARNING_HORIZON,
        selection_policy: RecordSelectionPolicy = RecordSelectionPolicy.LATEST_CREATED,
    ) -> None:
        if warning_horizon < timedelta(0):
            raise ValueError("warning_horizon must not be negative")
        self._warning_horizon = warning_horizon
        self._selection_policy = selection_policy

    def classify(
        self,
        now: datetime | date,
        doc_type: DocumentType,
        records: Iterable[DocumentRecord],
    ) -> ComplianceState | None:
        """Return the compliance state of doc_type given the entity's records.

        Args:
            now: Evaluation instant (or calendar day, UTC).
            doc_type: Document type being checked.
            records: Records on file for the entity; records of other types
                are ignored.

        Returns:
            The state, or None when doc_type is optional (not evaluated).
        """
        if not doc_type.is_required:
            return None
        record = self.select_record(doc_type.id, records)
        if record is None:
            return ComplianceState.MISSING
        return self.classify_record(now, record)

    def select_record(
        self, document_type_id: str, records: Iterable[DocumentRecord]
    ) -> DocumentRecord | None:
        """Return the authoritative record of a type, or None if none is on file.

        LATEST_CREATED prefers the newest created_at, then the furthest
        valid_until. FURTHEST_VALID_UNTIL prefers the furthest valid_until
        (no expiry first), then the newest created_at. Remaining ties go to
        the record that appears first.
        """
        matching = [r for r in records if r.document_type_id == document_type_id]
        if not matching:
            return None
        if self._selection_policy is RecordSelectionPolicy.FURTHEST_VALID_UNTIL:
            return max(matching, key=lambda r: (_valid_until_key(r), _created_key(r)))
        return max(matching, key=lambda r: (_created_key(r), _valid_until_key(r)))

    def classify_record(
        self, now: datetime | date, record: DocumentRecord
    ) -> ComplianceState:
        """Return the state of a single record (steps 3a-3d), never MISSING."""
        as_of = to_utc_date(now)
        window = record.window
        status = record.explicit_status
        if status is DocumentStatus.EXPIRED or window.has_lapsed(as_of):
            return ComplianceState.EXPIRED
        if status is not None and status.is_non_compliant:
            return ComplianceState.EXPIRED
        if window.lapses_within(as_of, self._warning_horizon):
            return ComplianceState.EXPIRING
        return ComplianceState.VALID
