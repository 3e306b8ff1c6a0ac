"""Domain value objects and shared value types."""

from app.domain.value_objects.core import ValidityWindow

__all__ = [
    "ValidityWindow",
]
