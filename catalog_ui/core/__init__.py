"""Core interfaces and errors.

The dependency injection container lives in ``catalog_ui.core.di_container``
and is imported from there, since it depends on the managers that depend on
this package.
"""

from .errors import FetchFailure
from .protocols import CatalogServicePort

__all__ = ["CatalogServicePort", "FetchFailure"]
