"""Factories wiring configuration to menu services."""
from typing import Optional

from horizontal_menu.core.config import Settings, settings as default_settings
from horizontal_menu.services.menu.file_source import FileCatalogSource
from horizontal_menu.services.menu.loader import MenuLoader
from horizontal_menu.services.selection.store import MenuStore


def get_catalog_source(settings: Optional[Settings] = None) -> FileCatalogSource:
    """Get catalog source instance."""
    settings = settings or default_settings
    return FileCatalogSource(base_dir=settings.data_dir)


def get_menu_loader(settings: Optional[Settings] = None) -> MenuLoader:
    """Get menu loader instance."""
    return MenuLoader(source=get_catalog_source(settings))


def get_menu_store(settings: Optional[Settings] = None) -> MenuStore:
    """Get an empty menu store instance."""
    settings = settings or default_settings
    return MenuStore(strict=settings.strict_selection)
