"""File system catalog source."""
from pathlib import Path
from typing import Optional, Union

from horizontal_menu.services.menu.base import CatalogSource

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class FileCatalogSource(CatalogSource):
    """Catalog source reading files below a base directory."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        """Initialize with optional base directory (bundled data by default)."""
        if base_dir is None:
            base_dir = DEFAULT_DATA_DIR
        self.base_dir = Path(base_dir)

    def resolve(self, locator: str) -> Path:
        """Resolve a locator to a path; absolute locators are used as-is."""
        path = Path(locator)
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    async def read(self, locator: str) -> bytes:
        """Read the file behind locator."""
        with open(self.resolve(locator), "rb") as f:
            return f.read()
