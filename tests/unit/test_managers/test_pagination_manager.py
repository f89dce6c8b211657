"""Tests for PaginationManager."""

import pytest


def test_pagination_manager_initial_state():
    from catalog_ui.managers.pagination_manager import PaginationManager

    manager = PaginationManager(page_size=10)

    assert manager.page == 1
    assert manager.offset == 0
    assert manager.total is None
    assert manager.exhausted is False
    assert manager.loading is False
    assert manager.page_size == 10


def test_pagination_manager_rejects_empty_pages():
    from catalog_ui.managers.pagination_manager import PaginationManager

    with pytest.raises(ValueError):
        PaginationManager(page_size=0)


def test_pagination_manager_start_loading():
    from catalog_ui.managers.pagination_manager import PaginationManager

    manager = PaginationManager()

    manager.start_loading()

    assert manager.loading is True
    assert manager.can_load_more() is False


def test_pagination_manager_finish_loading_more_remaining():
    from catalog_ui.managers.pagination_manager import PaginationManager

    manager = PaginationManager(page_size=10)

    manager.start_loading()
    manager.finish_loading(accumulated_count=10, total=25)

    assert manager.loading is False
    assert manager.page == 2
    assert manager.offset == 10
    assert manager.total == 25
    assert manager.exhausted is False
    assert manager.can_load_more() is True


def test_pagination_manager_finish_loading_reaches_total():
    from catalog_ui.managers.pagination_manager import PaginationManager

    manager = PaginationManager(page_size=10)

    manager.start_loading()
    manager.finish_loading(accumulated_count=25, total=25)

    assert manager.exhausted is True
    assert manager.can_load_more() is False


def test_pagination_manager_exhaustion_never_reverts():
    from catalog_ui.managers.pagination_manager import PaginationManager

    manager = PaginationManager(page_size=10)

    manager.finish_loading(accumulated_count=10, total=5)
    manager.finish_loading(accumulated_count=10, total=100)

    assert manager.exhausted is True


def test_pagination_manager_fail_loading_keeps_cursor():
    from catalog_ui.managers.pagination_manager import PaginationManager

    manager = PaginationManager(page_size=10)
    manager.finish_loading(accumulated_count=10, total=30)

    manager.start_loading()
    manager.fail_loading()

    assert manager.loading is False
    assert manager.page == 2
    assert manager.exhausted is False
    assert manager.can_load_more() is True
