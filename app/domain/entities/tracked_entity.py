"""Tracked entity: a company or driver whose documents are checked."""

from dataclasses import dataclass

from app.domain.enums import EntityCategory
from app.domain.exceptions import ValidationException


@dataclass(frozen=True)
class TrackedEntity:
    """Read-only subject of compliance tracking.

    subtitle is the secondary identifier shown next to the name: the
    business ID for companies, the driver number for drivers.
    """

    id: str
    display_name: str
    category: EntityCategory
    subtitle: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Entity ID is required", field="id")

    def matches_search(self, needle: str) -> bool:
        """Case-insensitive substring match on display name and subtitle.

        An empty needle matches every entity.
        """
        if not needle:
            return True
        folded = needle.casefold()
        if folded in self.display_name.casefold():
            return True
        return self.subtitle is not None and folded in self.subtitle.casefold()
