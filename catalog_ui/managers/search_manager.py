"""Search manager - derives the visible subset of loaded products."""

from typing import Iterable, List

from catalog_ui.models import Product


class SearchManager:
    """Case-insensitive substring search over title and description."""

    def __init__(self, query: str = ""):
        self.query = query.lower()

    def set_query(self, query: str) -> None:
        self.query = query.lower()

    def matches(self, product: Product) -> bool:
        if not self.query:
            return True
        return (
            self.query in product.title.lower()
            or self.query in product.description.lower()
        )

    def apply(self, products: Iterable[Product]) -> List[Product]:
        return [product for product in products if self.matches(product)]
