"""In-memory catalog service for offline use."""

from typing import Iterable, List

from catalog_ui.models import CatalogPage, Product


class MemoryCatalog:
    def __init__(self, products: Iterable[Product]):
        self.products: List[Product] = list(products)
        self.requests: List[tuple] = []

    async def fetch_page(self, limit: int, skip: int) -> CatalogPage:
        self.requests.append((limit, skip))
        return CatalogPage(
            products=self.products[skip : skip + limit],
            total=len(self.products),
            skip=skip,
            limit=limit,
        )

    @classmethod
    def sample(cls, count: int = 25) -> "MemoryCatalog":
        kinds = ["Phone Case", "Laptop Stand", "Desk Lamp", "USB Cable", "Notebook"]
        products = []
        for i in range(count):
            kind = kinds[i % len(kinds)]
            products.append(
                Product(
                    id=i + 1,
                    title=f"{kind} #{i + 1}",
                    description=f"Sample {kind.lower()} for offline browsing",
                    price=round(4.99 + i * 1.5, 2),
                )
            )
        return cls(products)
