"""Pytest configuration and shared fixtures."""

import asyncio
from pathlib import Path
from typing import Callable, List

import pytest


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def make_products() -> Callable[..., List]:
    from catalog_ui.models import Product

    def _make(count: int, start: int = 1) -> List[Product]:
        return [
            Product(
                id=i,
                title=f"Item {i}",
                description=f"Description of item {i}",
                price=float(i),
            )
            for i in range(start, start + count)
        ]

    return _make


class ScriptedCatalog:
    """Catalog service serving a fixed product list, optionally failing.

    Queued ``errors`` are raised one per fetch before any page is served. When
    ``gate`` is set, each fetch waits on it so a test can act on the loader
    while the request is in flight.
    """

    def __init__(self, products, total=None):
        self.products = list(products)
        self.total = len(self.products) if total is None else total
        self.requests = []
        self.errors = []
        self.gate = None

    async def fetch_page(self, limit, skip):
        from catalog_ui.models import CatalogPage

        self.requests.append((limit, skip))
        if self.gate is not None:
            await self.gate.wait()
        if self.errors:
            raise self.errors.pop(0)
        return CatalogPage(
            products=self.products[skip : skip + limit], total=self.total
        )


@pytest.fixture
def scripted_catalog(make_products) -> Callable[..., ScriptedCatalog]:
    def _make(count: int = 25, total=None) -> ScriptedCatalog:
        return ScriptedCatalog(make_products(count), total=total)

    return _make
