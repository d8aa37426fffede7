"""Selection state."""
from typing import Optional, Set
from uuid import UUID

from pydantic import BaseModel

from horizontal_menu.services.selection.stages import InteractionStage


class SelectionState(BaseModel):
    """Current selection of the menu screen."""

    selected_category: Optional[UUID] = None  # Category whose sub-menu is open
    causing_category: Optional[UUID] = None  # Category that produced the viewed results
    selected_sub_categories: Set[str] = set()
    stage: InteractionStage = InteractionStage.BROWSING

    def is_empty(self) -> bool:
        """Check if nothing is selected."""
        return (
            self.selected_category is None
            and self.causing_category is None
            and not self.selected_sub_categories
        )

    def clear(self) -> None:
        """Return to browsing with nothing selected."""
        self.selected_category = None
        self.causing_category = None
        self.selected_sub_categories = set()
        self.stage = InteractionStage.BROWSING
