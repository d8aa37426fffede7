"""Menu catalog models and source interface."""
from abc import ABC, abstractmethod
from typing import Tuple
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MenuCategory(BaseModel):
    """Top-level menu entry with its sub-categories."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    title: str
    sub_categories: Tuple[str, ...] = Field(alias="subMenus")

    @field_validator("sub_categories")
    @classmethod
    def _unique_sub_categories(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = set()
        for name in value:
            if name in seen:
                raise ValueError(f"duplicate sub-category '{name}'")
            seen.add(name)
        return value


class Product(BaseModel):
    """Catalog product filed under a category and sub-category."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    category: str
    sub_category: str = Field(alias="subCategory")


class CatalogSource(ABC):
    """Abstract base class for catalog byte sources."""

    @abstractmethod
    async def read(self, locator: str) -> bytes:
        """Return the raw payload stored under locator."""
        pass
