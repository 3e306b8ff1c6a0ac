"""Domain enumerations for document compliance.

Enums represent closed sets of domain values. Raw strings from the data
store are converted at the persistence boundary; an unknown raw value never
reaches the domain as a silent default.
"""

from enum import Enum


class EntityCategory(str, Enum):
    """Category of a tracked entity (whose documents are being checked)."""

    COMPANY = "company"
    DRIVER = "driver"


class DocumentScope(str, Enum):
    """Which entity categories a document type applies to."""

    COMPANY = "company"
    DRIVER = "driver"
    BOTH = "both"

    def applies_to(self, category: EntityCategory) -> bool:
        """Return whether a type with this scope is evaluated for the category."""
        if self is DocumentScope.BOTH:
            return True
        return self.value == category.value


class DocumentStatus(str, Enum):
    """Explicit lifecycle status set on a document record by an administrator."""

    ACTIVE = "active"
    PENDING = "pending"
    REJECTED = "rejected"
    EXPIRED = "expired"

    @property
    def is_non_compliant(self) -> bool:
        """True for statuses that make the record count as expired."""
        return self in (
            DocumentStatus.EXPIRED,
            DocumentStatus.PENDING,
            DocumentStatus.REJECTED,
        )


class ComplianceState(str, Enum):
    """Compliance of one (entity, document type) pair."""

    MISSING = "missing"
    EXPIRED = "expired"
    EXPIRING = "expiring"
    VALID = "valid"


class OverallSeverity(str, Enum):
    """Per-entity aggregate of compliance states.

    Members are declared in ranking order: CRITICAL sorts first.
    """

    CRITICAL = "critical"
    WARNING = "warning"
    OK = "ok"

    @property
    def rank(self) -> int:
        """Sort key for checklist ranking (CRITICAL < WARNING < OK)."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK: dict[OverallSeverity, int] = {
    OverallSeverity.CRITICAL: 0,
    OverallSeverity.WARNING: 1,
    OverallSeverity.OK: 2,
}


class StatusFilter(str, Enum):
    """Checklist status filter: one severity, or ALL for pass-through."""

    ALL = "all"
    CRITICAL = "critical"
    WARNING = "warning"
    OK = "ok"

    def matches(self, severity: OverallSeverity) -> bool:
        """Return whether an entity with the given severity passes this filter."""
        if self is StatusFilter.ALL:
            return True
        return self.value == severity.value


class RecordSelectionPolicy(str, Enum):
    """How to pick the authoritative record when an entity holds several of one type.

    LATEST_CREATED: newest created_at wins (ties: furthest valid_until).
    FURTHEST_VALID_UNTIL: record valid the longest wins (no expiry beats any date).
    """

    LATEST_CREATED = "latest_created"
    FURTHEST_VALID_UNTIL = "furthest_valid_until"
