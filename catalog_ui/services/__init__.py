"""Catalog service implementations."""

from .catalog_client import CatalogClient
from .memory_catalog import MemoryCatalog

__all__ = ["CatalogClient", "MemoryCatalog"]
