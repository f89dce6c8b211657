"""Tests for catalog models."""

import pytest


def test_product_is_immutable():
    from pydantic import ValidationError

    from catalog_ui.models import Product

    product = Product(id=1, title="Phone Case", description="", price=9.99)

    with pytest.raises(ValidationError):
        product.title = "Other"


def test_product_accepts_any_numeric_price():
    from catalog_ui.models import Product

    assert Product(id=1, title="Refund", price=-1).price == -1.0
    assert Product(id=2, title="Cable", price="4.5").price == 4.5


def test_catalog_page_requires_total():
    from pydantic import ValidationError

    from catalog_ui.models import CatalogPage

    with pytest.raises(ValidationError):
        CatalogPage.model_validate({"products": []})


def test_product_group_label():
    from catalog_ui.models import ProductGroup

    group = ProductGroup(index=1, start=11, end=20, products=())

    assert group.label == "Products 11 - 20"


def test_snapshot_can_load_more():
    from catalog_ui.models import CatalogSnapshot

    def snapshot(loading, exhausted):
        return CatalogSnapshot(
            groups=(),
            loading=loading,
            exhausted=exhausted,
            filter_term="",
            total_loaded=0,
            total_available=None,
            page=1,
        )

    assert snapshot(False, False).can_load_more is True
    assert snapshot(True, False).can_load_more is False
    assert snapshot(False, True).can_load_more is False
