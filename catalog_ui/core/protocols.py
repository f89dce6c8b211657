"""Protocol definitions for dependency injection."""

from typing import Protocol

from catalog_ui.models import CatalogPage


class CatalogServicePort(Protocol):
    async def fetch_page(self, limit: int, skip: int) -> CatalogPage: ...
