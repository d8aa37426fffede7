"""Catalog loader decoding raw catalog payloads into menu models."""
import json
import logging
from pathlib import PurePath
from typing import Any, List, Optional, Type, TypeVar, TYPE_CHECKING

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from horizontal_menu.services.menu.base import CatalogSource, MenuCategory, Product
from horizontal_menu.services.menu.errors import CatalogLoadError

if TYPE_CHECKING:
    from horizontal_menu.services.selection.store import MenuStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

YAML_SUFFIXES = {".yaml", ".yml"}


class MenuLoader:
    """Loads the category catalog and products from a catalog source."""

    def __init__(self, source: CatalogSource):
        self.source = source

    async def load_catalog(self, locator: str) -> List[MenuCategory]:
        """Load categories stored under locator, preserving source order."""
        categories = await self._load(locator, MenuCategory)
        logger.info(f"[MENU LOADER] Catalog loaded - {len(categories)} categories from '{locator}'")
        return categories

    async def load_products(self, locator: str) -> List[Product]:
        """Load products stored under locator."""
        products = await self._load(locator, Product)
        logger.info(f"[MENU LOADER] Products loaded - {len(products)} products from '{locator}'")
        return products

    async def populate(
        self,
        store: "MenuStore",
        catalog_locator: str,
        products_locator: Optional[str] = None,
    ) -> None:
        """
        Load everything, then replace the store's catalog in one step.

        The store is left untouched if any part of the load fails.
        """
        categories = await self.load_catalog(catalog_locator)
        products = None
        if products_locator is not None:
            products = await self.load_products(products_locator)
        store.set_catalog(categories, products)

    async def _load(self, locator: str, model: Type[ModelT]) -> List[ModelT]:
        try:
            raw = await self.source.read(locator)
        except OSError as e:
            logger.error(f"[MENU LOADER] Cannot read '{locator}' - {type(e).__name__}: {e}")
            raise CatalogLoadError(locator, e) from e

        try:
            data = self._parse(locator, raw)
            return self._decode(data, model)
        except (ValidationError, UnicodeDecodeError, ValueError, yaml.YAMLError, TypeError) as e:
            logger.error(f"[MENU LOADER] Cannot decode '{locator}' - {type(e).__name__}: {e}")
            raise CatalogLoadError(locator, e) from e

    @staticmethod
    def _parse(locator: str, raw: bytes) -> Any:
        text = raw.decode("utf-8")
        if PurePath(locator).suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)

    @staticmethod
    def _decode(data: Any, model: Type[ModelT]) -> List[ModelT]:
        if not isinstance(data, list):
            raise TypeError(f"expected a list of entries, got {type(data).__name__}")
        # Identifiers are assigned at decode time, never taken from the payload
        entries = [
            {key: value for key, value in entry.items() if key != "id"}
            if isinstance(entry, dict)
            else entry
            for entry in data
        ]
        return TypeAdapter(List[model]).validate_python(entries)
