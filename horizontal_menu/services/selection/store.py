"""Menu store holding the catalog and the current selection."""
import logging
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional
from uuid import UUID

from horizontal_menu.services.menu.base import MenuCategory, Product
from horizontal_menu.services.menu.errors import InvalidSelection
from horizontal_menu.services.selection.screen import (
    CategoryEntry,
    MenuScreen,
    SubCategoryEntry,
)
from horizontal_menu.services.selection.stages import InteractionStage
from horizontal_menu.services.selection.state import SelectionState

logger = logging.getLogger(__name__)

Listener = Callable[[MenuScreen], None]


class MenuStore:
    """
    State container for the menu screen.

    Holds the static catalog (categories and products) and the only mutable
    entity, the selection state. Mutations notify subscribed listeners with a
    fresh MenuScreen whenever the selection actually changed.

    In strict mode, selecting a category that is not in the catalog or
    toggling a sub-category outside the open sub-menu raises InvalidSelection.
    Otherwise unknown categories are recorded and stray toggles are ignored.
    """

    def __init__(
        self,
        categories: Iterable[MenuCategory] = (),
        products: Iterable[Product] = (),
        strict: bool = False,
    ):
        self.strict = strict
        self._categories: List[MenuCategory] = list(categories)
        self._categories_by_id: Dict[UUID, MenuCategory] = {
            category.id: category for category in self._categories
        }
        self._products: List[Product] = list(products)
        self._state = SelectionState()
        self._listeners: List[Listener] = []

    # Catalog

    @property
    def categories(self) -> List[MenuCategory]:
        return list(self._categories)

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    def get_category(self, category_id: Optional[UUID]) -> Optional[MenuCategory]:
        """Get a category by id."""
        if category_id is None:
            return None
        return self._categories_by_id.get(category_id)

    def set_catalog(
        self,
        categories: Iterable[MenuCategory],
        products: Optional[Iterable[Product]] = None,
    ) -> None:
        """Replace the catalog and, if given, the products. Clears the selection."""
        categories = list(categories)
        by_id = {category.id: category for category in categories}
        new_products = list(products) if products is not None else self._products

        self._categories = categories
        self._categories_by_id = by_id
        self._products = new_products
        self._state.clear()
        logger.info(
            f"[MENU STORE] Catalog replaced - {len(categories)} categories, "
            f"{len(new_products)} products"
        )
        self._notify()

    # Selection state

    @property
    def state(self) -> SelectionState:
        """Copy of the current selection state."""
        return self._state.model_copy(deep=True)

    @property
    def stage(self) -> InteractionStage:
        return self._state.stage

    @property
    def selected_category(self) -> Optional[UUID]:
        return self._state.selected_category

    @property
    def causing_category(self) -> Optional[UUID]:
        return self._state.causing_category

    @property
    def selected_sub_categories(self) -> FrozenSet[str]:
        return frozenset(self._state.selected_sub_categories)

    def select_category(self, category_id: UUID) -> None:
        """
        Select a category, or deselect it if it is already selected.

        Either way the sub-category selection is cleared.
        """
        category = self.get_category(category_id)
        if category is None and self.strict:
            raise InvalidSelection(f"Unknown category: {category_id}")

        title = category.title if category else str(category_id)
        state = self._state
        if state.selected_category == category_id:
            state.clear()
            logger.info(f"[MENU STORE] {title} clicked - sub-menu closed")
        else:
            state.selected_category = category_id
            state.causing_category = None
            state.selected_sub_categories = set()
            state.stage = InteractionStage.CHOOSING
            if category is None:
                logger.warning(f"[MENU STORE] Selected category {category_id} is not in the catalog")
            logger.info(f"[MENU STORE] {title} clicked - sub-menu opened")
        self._notify()

    def toggle_sub_category(self, name: str) -> None:
        """Add name to the sub-category selection, or remove it if present."""
        if name not in self.open_sub_categories():
            message = f"Sub-category '{name}' is not in the open sub-menu"
            if self.strict:
                raise InvalidSelection(message)
            logger.warning(f"[MENU STORE] {message}, ignoring")
            return

        selected = self._state.selected_sub_categories
        if name in selected:
            selected.discard(name)
        else:
            selected.add(name)
        logger.debug(f"[MENU STORE] {name} clicked - selection: {sorted(selected)}")
        self._notify()

    def confirm_selection(self) -> None:
        """Close the sub-menu and show the filtered results."""
        state = self._state
        if state.stage != InteractionStage.CHOOSING or not state.selected_sub_categories:
            logger.debug(f"[MENU STORE] Nothing to confirm in stage {state.stage}")
            return

        state.causing_category = state.selected_category
        state.selected_category = None
        state.stage = InteractionStage.VIEWING
        logger.info("[MENU STORE] Continue with selected sub-menus")
        self._notify()

    def cancel_selection(self) -> None:
        """Drop the whole selection and go back to browsing."""
        if self._clear():
            logger.info("[MENU STORE] Filters cancelled")

    def reset(self) -> None:
        """Drop the whole selection and go back to browsing."""
        if self._clear():
            logger.info("[MENU STORE] Filters reset")

    def _clear(self) -> bool:
        if self._state.is_empty():
            return False
        self._state.clear()
        self._notify()
        return True

    # Derived queries

    def filtered_products(self) -> List[Product]:
        """Get the products whose sub-category is selected; empty without a selection."""
        selected = self._state.selected_sub_categories
        if not selected:
            return []
        return [product for product in self._products if product.sub_category in selected]

    def open_sub_categories(self) -> List[str]:
        """Get the sub-categories of the open sub-menu."""
        category = self.get_category(self._state.selected_category)
        return list(category.sub_categories) if category else []

    def is_category_highlighted(self, category_id: UUID) -> bool:
        """Check if a category is marked active (open or causing the results)."""
        return category_id in (self._state.selected_category, self._state.causing_category)

    def is_sub_category_selected(self, name: str) -> bool:
        return name in self._state.selected_sub_categories

    @property
    def can_confirm(self) -> bool:
        return self._state.stage == InteractionStage.CHOOSING and bool(
            self._state.selected_sub_categories
        )

    @property
    def can_reset(self) -> bool:
        return bool(self._state.selected_sub_categories)

    @property
    def show_results(self) -> bool:
        return self._state.stage == InteractionStage.VIEWING

    def screen(self) -> MenuScreen:
        """Build the render model for the current state."""
        state = self._state
        return MenuScreen(
            stage=state.stage,
            categories=[
                CategoryEntry(
                    id=category.id,
                    title=category.title,
                    highlighted=self.is_category_highlighted(category.id),
                    expanded=category.id == state.selected_category,
                )
                for category in self._categories
            ],
            sub_menu=[
                SubCategoryEntry(name=name, checked=name in state.selected_sub_categories)
                for name in self.open_sub_categories()
            ],
            results=self.filtered_products() if self.show_results else [],
            can_confirm=self.can_confirm,
            can_reset=self.can_reset,
            show_results=self.show_results,
        )

    # Observation

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with a fresh MenuScreen after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        screen = self.screen()
        for listener in list(self._listeners):
            listener(screen)
