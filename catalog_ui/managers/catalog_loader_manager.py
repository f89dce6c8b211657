"""Catalog Loader Manager - fetches, accumulates and filters catalog pages."""

import enum
import logging
from typing import Callable, List, Optional, Tuple

from catalog_ui.core.errors import FetchFailure
from catalog_ui.core.protocols import CatalogServicePort
from catalog_ui.managers.pagination_manager import PaginationManager
from catalog_ui.managers.search_manager import SearchManager
from catalog_ui.models import CatalogPage, CatalogSnapshot, Product, ProductGroup

logger = logging.getLogger("CatalogUI.CatalogLoaderManager")


class LoaderState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"


class CatalogLoaderManager:
    """Owns the accumulated products, the page cursor and the filtered view.

    Only one fetch may be in flight at a time. ``set_filter`` is synchronous
    and may be called at any point, including while a fetch is suspended.
    """

    def __init__(
        self,
        service: CatalogServicePort,
        page_size: int = 10,
        on_error: Optional[Callable[[FetchFailure], None]] = None,
    ):
        """Initialize CatalogLoaderManager.

        Args:
            service: Catalog service used to fetch pages
            page_size: Number of records requested per page, also the display group size
            on_error: Callback invoked with the failure when a fetch fails
        """
        self.service = service
        self.on_error = on_error
        self.pagination = PaginationManager(page_size=page_size)
        self.search = SearchManager()

        self._accumulated: List[Product] = []
        self._view: List[Product] = []
        self._filter_term = ""
        self.last_error: Optional[str] = None

    @classmethod
    async def create(
        cls,
        service: CatalogServicePort,
        page_size: int = 10,
        on_error: Optional[Callable[[FetchFailure], None]] = None,
    ) -> "CatalogLoaderManager":
        """Build a loader and fetch the first page."""
        loader = cls(service, page_size=page_size, on_error=on_error)
        await loader.load_next_page()
        return loader

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def loading(self) -> bool:
        return self.pagination.loading

    @property
    def exhausted(self) -> bool:
        return self.pagination.exhausted

    @property
    def total_available(self) -> Optional[int]:
        return self.pagination.total

    @property
    def filter_term(self) -> str:
        return self._filter_term

    @property
    def accumulated(self) -> Tuple[Product, ...]:
        return tuple(self._accumulated)

    @property
    def view(self) -> Tuple[Product, ...]:
        return tuple(self._view)

    @property
    def state(self) -> LoaderState:
        if self.pagination.loading:
            return LoaderState.FETCHING
        if self.pagination.exhausted:
            return LoaderState.EXHAUSTED
        return LoaderState.IDLE

    async def load_next_page(self) -> bool:
        """Fetch the next page and merge it into the accumulation.

        Returns True when a page was merged. Returns False without touching
        any state when a fetch is already running or the catalog is
        exhausted, and False after a failed fetch, which is reported through
        ``last_error`` and ``on_error`` rather than raised.
        """
        if not self.pagination.can_load_more():
            logger.debug(
                "Ignoring load request (loading=%s, exhausted=%s)",
                self.pagination.loading,
                self.pagination.exhausted,
            )
            return False

        # Guard is set before the first await
        self.pagination.start_loading()
        page = self.pagination.page
        limit = self.pagination.page_size
        skip = self.pagination.offset
        logger.info(f"Fetching page {page} (limit={limit}, skip={skip})")

        try:
            try:
                result = await self.service.fetch_page(limit=limit, skip=skip)
                result = CatalogPage.model_validate(result, from_attributes=True)
            except FetchFailure as e:
                self._report_failure(e)
                return False
            except Exception as e:
                logger.exception("Unexpected error while fetching catalog page")
                self._report_failure(FetchFailure(f"Unexpected error: {e}"))
                return False

            self._accumulated.extend(result.products)
            self._recompute_view()
            self.pagination.finish_loading(len(self._accumulated), result.total)
            self.last_error = None
        finally:
            # Cancellation or a failed merge must not leave the guard set
            if self.pagination.loading:
                self.pagination.fail_loading()

        logger.info(
            f"Merged {len(result.products)} products "
            f"({len(self._accumulated)}/{result.total} loaded)"
        )
        if self.pagination.exhausted:
            logger.info("Catalog exhausted")
        return True

    def set_filter(self, term: str) -> None:
        """Narrow the view to products whose title or description contains term."""
        self._filter_term = term
        self.search.set_query(term)
        self._recompute_view()
        logger.debug(
            f"Filter '{term}' matches {len(self._view)}/{len(self._accumulated)} products"
        )

    def get_snapshot(self) -> CatalogSnapshot:
        """Group the current view for display, one group per page size."""
        size = self.pagination.page_size
        groups = []
        for index, start in enumerate(range(0, len(self._view), size)):
            chunk = tuple(self._view[start : start + size])
            groups.append(
                ProductGroup(
                    index=index,
                    start=start + 1,
                    end=start + len(chunk),
                    products=chunk,
                )
            )

        return CatalogSnapshot(
            groups=tuple(groups),
            loading=self.pagination.loading,
            exhausted=self.pagination.exhausted,
            filter_term=self._filter_term,
            total_loaded=len(self._accumulated),
            total_available=self.pagination.total,
            page=self.pagination.page,
            last_error=self.last_error,
        )

    def _recompute_view(self) -> None:
        self._view = self.search.apply(self._accumulated)

    def _report_failure(self, error: FetchFailure) -> None:
        self.pagination.fail_loading()
        self.last_error = error.message
        logger.warning(f"Failed to fetch page {self.pagination.page}: {error.message}")
        if self.on_error:
            try:
                self.on_error(error)
            except Exception:
                logger.exception("Error in on_error callback")
