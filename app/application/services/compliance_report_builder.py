"""Builds the per-entity compliance report from classifier output."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from app.application.dtos.compliance import (
    ClassifiedRecord,
    DatedDocument,
    EntityComplianceReport,
)
from app.application.services.compliance_classifier import ComplianceClassifier
from app.domain.entities.document_record import DocumentRecord
from app.domain.entities.document_type import DocumentType
from app.domain.entities.tracked_entity import TrackedEntity
from app.domain.enums import ComplianceState, OverallSeverity


def severity_for(
    missing_count: int, expired_count: int, expiring_count: int
) -> OverallSeverity:
    """Overall severity from bucket sizes; critical always wins over warning."""
    if missing_count > 0 or expired_count > 0:
        return OverallSeverity.CRITICAL
    if expiring_count > 0:
        return OverallSeverity.WARNING
    return OverallSeverity.OK


class EntityComplianceReportBuilder:
    """Partitions an entity's mandatory document types into compliance buckets."""

    def __init__(self, classifier: ComplianceClassifier) -> None:
        self._classifier = classifier

    def build(
        self,
        entity: TrackedEntity,
        now: datetime | date,
        required_types: Sequence[DocumentType],
        records_for_entity: Sequence[DocumentRecord],
    ) -> EntityComplianceReport:
        """Classify every required type for the entity and bucket the results.

        Types that are optional or scoped to the other category are skipped,
        so callers may pass an unfiltered catalog. An empty list of required
        types yields an OK report with empty buckets.

        Args:
            entity: Entity being evaluated.
            now: Evaluation instant.
            required_types: Mandatory types for the entity's category.
            records_for_entity: Every record on file for the entity.

        Returns:
            Report with missing / expiring / expired / valid buckets and severity.
        """
        missing: list[DocumentType] = []
        expiring: list[DatedDocument] = []
        expired: list[DatedDocument] = []
        valid: list[DocumentType] = []

        for doc_type in required_types:
            if not doc_type.is_mandatory_for(entity.category):
                continue
            record = self._classifier.select_record(doc_type.id, records_for_entity)
            if record is None:
                missing.append(doc_type)
                continue
            state = self._classifier.classify_record(now, record)
            if state is ComplianceState.EXPIRED:
                expired.append(
                    DatedDocument(doc_type, record.valid_until, record.explicit_status)
                )
            elif state is ComplianceState.EXPIRING:
                expiring.append(
                    DatedDocument(doc_type, record.valid_until, record.explicit_status)
                )
            else:
                valid.append(doc_type)

        return EntityComplianceReport(
            entity=entity,
            missing=missing,
            expiring=expiring,
            expired=expired,
            valid=valid,
            severity=severity_for(len(missing), len(expired), len(expiring)),
        )

    def classify_documents(
        self,
        now: datetime | date,
        records_for_entity: Sequence[DocumentRecord],
        document_types_by_id: dict[str, DocumentType],
    ) -> list[ClassifiedRecord]:
        """Label every record on file with its type name and own state.

        Type names come from the prefetched map; a record whose type is not
        in the catalog is labeled "Unknown document type".
        """
        classified: list[ClassifiedRecord] = []
        for record in records_for_entity:
            doc_type = document_types_by_id.get(record.document_type_id)
            classified.append(
                ClassifiedRecord(
                    record=record,
                    document_type_name=(
                        doc_type.name if doc_type else "Unknown document type"
                    ),
                    is_required=doc_type.is_required if doc_type else False,
                    state=self._classifier.classify_record(now, record),
                )
            )
        return classified
