"""HTTP client for the remote product catalog."""

import asyncio
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from catalog_ui.core.errors import FetchFailure
from catalog_ui.models import CatalogPage

logger = logging.getLogger("CatalogUI.CatalogClient")


class CatalogClient:
    """Fetches limit/skip pages from a JSON catalog endpoint.

    The blocking request runs in a worker thread so the event loop driving the
    loader stays free while I/O is outstanding.
    """

    def __init__(
        self,
        base_url: str = "https://dummyjson.com",
        endpoint: str = "/products",
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.url = base_url.rstrip("/") + "/" + endpoint.lstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    async def fetch_page(self, limit: int, skip: int) -> CatalogPage:
        return await asyncio.to_thread(self.get_page, limit, skip)

    def get_page(self, limit: int, skip: int) -> CatalogPage:
        params = {"limit": limit, "skip": skip}
        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchFailure(f"Could not reach catalog service: {e}") from e

        logger.debug(f"GET {self.url} {params} -> {response.status_code}")
        if response.status_code != 200:
            raise FetchFailure(
                f"Catalog service returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchFailure("Catalog service returned invalid JSON") from e

        try:
            return CatalogPage.model_validate(payload)
        except ValidationError as e:
            raise FetchFailure(
                f"Unexpected catalog payload: {e.error_count()} validation error(s)"
            ) from e

    def close(self) -> None:
        self.session.close()
