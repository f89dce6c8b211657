"""Manager classes for application state."""

from .catalog_loader_manager import CatalogLoaderManager, LoaderState
from .pagination_manager import PaginationManager
from .search_manager import SearchManager

__all__ = [
    "CatalogLoaderManager",
    "LoaderState",
    "PaginationManager",
    "SearchManager",
]
