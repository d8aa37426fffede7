"""Menu domain errors."""
from typing import Optional


class MenuError(Exception):
    """Base class for menu errors."""


class CatalogLoadError(MenuError):
    """Raised when a catalog resource is missing or cannot be decoded."""

    def __init__(self, locator: str, cause: Optional[BaseException] = None):
        self.locator = locator
        self.cause = cause
        reason = f"{type(cause).__name__}: {cause}" if cause else "unknown error"
        super().__init__(f"Failed to load catalog '{locator}' ({reason})")


class InvalidSelection(MenuError):
    """Raised in strict mode when a selection does not match the catalog."""
