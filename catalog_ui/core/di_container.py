"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from catalog_ui.config import AppSettings
from catalog_ui.core.errors import FetchFailure
from catalog_ui.core.protocols import CatalogServicePort
from catalog_ui.managers import CatalogLoaderManager
from catalog_ui.services import CatalogClient


@dataclass
class AppContainer:
    settings: AppSettings

    _catalog_service: Optional[CatalogServicePort] = field(
        default=None, repr=False
    )

    @property
    def catalog_service(self) -> CatalogServicePort:
        if self._catalog_service is None:
            catalog = self.settings.catalog
            self._catalog_service = CatalogClient(
                base_url=catalog.base_url,
                endpoint=catalog.endpoint,
                timeout=catalog.request_timeout,
            )
        return self._catalog_service

    async def create_loader(
        self, on_error: Optional[Callable[[FetchFailure], None]] = None
    ) -> CatalogLoaderManager:
        return await CatalogLoaderManager.create(
            self.catalog_service,
            page_size=self.settings.catalog.page_size,
            on_error=on_error,
        )

    def close(self) -> None:
        close = getattr(self._catalog_service, "close", None)
        if close is not None:
            close()

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        catalog_service: Optional[CatalogServicePort] = None,
    ) -> "AppContainer":
        return cls(
            settings=settings or AppSettings.load(),
            _catalog_service=catalog_service,
        )
