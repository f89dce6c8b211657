"""Pagination state management for incremental catalog loading."""

from typing import Optional


class PaginationManager:
    def __init__(self, page_size: int = 10):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.page = 1
        self.total: Optional[int] = None
        self.exhausted = False
        self.loading = False

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def can_load_more(self) -> bool:
        return not self.exhausted and not self.loading

    def start_loading(self) -> None:
        self.loading = True

    def finish_loading(self, accumulated_count: int, total: int) -> None:
        """Advance the cursor after a merged page.

        Exhaustion compares against the accumulated count after the merge and
        never reverts once set.
        """
        self.loading = False
        self.page += 1
        self.total = total
        if total <= accumulated_count:
            self.exhausted = True

    def fail_loading(self) -> None:
        self.loading = False
