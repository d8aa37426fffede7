"""Shared test fixtures and configuration."""
import pytest
from pathlib import Path

from horizontal_menu.core.config import Settings
from horizontal_menu.services.menu.base import MenuCategory, Product
from horizontal_menu.services.menu.file_source import FileCatalogSource
from horizontal_menu.services.menu.loader import MenuLoader
from horizontal_menu.services.selection.store import MenuStore


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def test_settings():
    """Settings pointing at the test fixtures."""
    return Settings(
        data_dir=FIXTURES_DIR,
        catalog_file="test_menu.json",
        products_file="test_products.json",
        strict_selection=False,
        log_level="DEBUG",
    )


@pytest.fixture
def test_loader():
    """Create menu loader reading the test fixtures."""
    return MenuLoader(FileCatalogSource(base_dir=FIXTURES_DIR))


@pytest.fixture
def categories():
    """Small in-memory catalog."""
    return [
        MenuCategory(title="Category 1", sub_categories=["A", "B"]),
        MenuCategory(title="Category 2", sub_categories=["C", "D"]),
    ]


@pytest.fixture
def products():
    """Products filed under the in-memory catalog."""
    return [
        Product(name="P1", category="Category 1", sub_category="A"),
        Product(name="P2", category="Category 1", sub_category="B"),
        Product(name="P3", category="Category 2", sub_category="C"),
    ]


@pytest.fixture
def store(categories, products):
    """Lenient menu store with the in-memory catalog."""
    return MenuStore(categories, products)


@pytest.fixture
def strict_store(categories, products):
    """Strict menu store with the in-memory catalog."""
    return MenuStore(categories, products, strict=True)


@pytest.fixture
def cat1(categories):
    return categories[0]


@pytest.fixture
def cat2(categories):
    return categories[1]
