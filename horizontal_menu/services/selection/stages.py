"""Interaction stage enumeration."""
from enum import Enum


class InteractionStage(str, Enum):
    """Stages of the category/sub-category filtering flow."""

    BROWSING = "browsing"  # No category selected, no results shown
    CHOOSING = "choosing"  # Sub-menu open for multi-select
    VIEWING = "viewing"  # Filtered results shown, sub-menu closed

    def __str__(self) -> str:
        """Return the string value of the stage."""
        return self.value
