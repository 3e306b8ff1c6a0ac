"""Domain value objects for document compliance.

Value objects are immutable types that represent domain concepts. They have
no identity, only value.
"""

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class ValidityWindow:
    """Half-open period [valid_from, valid_until) during which a document is current.

    Either bound may be missing: no valid_until means the document never
    lapses by date. Comparisons are by calendar day; a document whose
    valid_until is today is already past its window.
    """

    valid_from: date | None = None
    valid_until: date | None = None

    @property
    def is_open_ended(self) -> bool:
        """True when there is no expiry date."""
        return self.valid_until is None

    @property
    def is_inverted(self) -> bool:
        """True when both bounds are set and valid_until is before valid_from."""
        if self.valid_from is None or self.valid_until is None:
            return False
        return self.valid_until < self.valid_from

    def has_lapsed(self, as_of: date) -> bool:
        """Return whether the window has ended on or before as_of."""
        return self.valid_until is not None and self.valid_until <= as_of

    def lapses_within(self, as_of: date, horizon: timedelta) -> bool:
        """Return whether valid_until falls before as_of + horizon.

        The lookahead is exclusive: a document valid until exactly
        as_of + horizon does not lapse within it.
        """
        return self.valid_until is not None and self.valid_until < as_of + horizon
