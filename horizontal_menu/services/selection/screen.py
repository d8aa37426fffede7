"""Render model handed to the presentation layer."""
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from horizontal_menu.services.menu.base import Product
from horizontal_menu.services.selection.stages import InteractionStage


class CategoryEntry(BaseModel):
    """Category button in the horizontal menu."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    highlighted: bool = False
    expanded: bool = False  # Sub-menu of this category is open


class SubCategoryEntry(BaseModel):
    """Cell of the sub-menu grid."""

    model_config = ConfigDict(frozen=True)

    name: str
    checked: bool = False


class MenuScreen(BaseModel):
    """Everything needed to draw the menu screen once."""

    model_config = ConfigDict(frozen=True)

    stage: InteractionStage
    categories: List[CategoryEntry] = []
    sub_menu: List[SubCategoryEntry] = []
    results: List[Product] = []  # Filtered products, filled only while viewing
    can_confirm: bool = False
    can_reset: bool = False
    show_results: bool = False
