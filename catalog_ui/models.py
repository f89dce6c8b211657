"""Catalog data models.

Wire models (``Product``, ``CatalogPage``) validate what the catalog service
returns. Display models (``ProductGroup``, ``CatalogSnapshot``) are what the
loader hands to the presentation layer.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Single catalog record. Extra service fields are kept but unused."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Union[int, str]
    title: str
    description: str = ""
    price: float


class CatalogPage(BaseModel):
    """One page of records plus the full catalog size reported by the service"""

    products: List[Product] = Field(default_factory=list)
    total: int = Field(ge=0)
    skip: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class ProductGroup:
    index: int
    start: int
    end: int
    products: Tuple[Product, ...]

    @property
    def label(self) -> str:
        return f"Products {self.start} - {self.end}"


@dataclass(frozen=True)
class CatalogSnapshot:
    groups: Tuple[ProductGroup, ...]
    loading: bool
    exhausted: bool
    filter_term: str
    total_loaded: int
    total_available: Optional[int]
    page: int
    last_error: Optional[str] = None

    @property
    def can_load_more(self) -> bool:
        return not self.loading and not self.exhausted

    @property
    def visible_count(self) -> int:
        return sum(len(group.products) for group in self.groups)
