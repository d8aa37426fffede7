"""Menu screen startup."""
import logging
from typing import Optional

from horizontal_menu.core.config import Settings, settings as default_settings
from horizontal_menu.core.dependencies import get_menu_loader, get_menu_store
from horizontal_menu.core.logging import setup_logging
from horizontal_menu.services.menu.errors import CatalogLoadError
from horizontal_menu.services.selection.store import MenuStore

logger = logging.getLogger(__name__)


async def startup(settings: Optional[Settings] = None) -> MenuStore:
    """
    Build the menu store and load the catalog into it.

    Raises:
        CatalogLoadError: if the catalog or products cannot be loaded. The
            caller decides on the fallback.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    store = get_menu_store(settings)
    loader = get_menu_loader(settings)
    try:
        await loader.populate(store, settings.catalog_file, settings.products_file)
    except CatalogLoadError as e:
        logger.error(f"[STARTUP] Menu catalog unavailable - {e}")
        raise
    return store
