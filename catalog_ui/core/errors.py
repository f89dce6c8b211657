"""Errors raised at the catalog service boundary."""

from typing import Optional


class FetchFailure(RuntimeError):
    """Raised when a page cannot be retrieved from the catalog service."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
