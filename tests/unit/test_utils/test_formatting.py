"""Tests for formatting utilities."""


def test_truncate_text_short():
    from catalog_ui.utils.formatting import truncate_text

    assert truncate_text("Short text", max_length=100) == "Short text"


def test_truncate_text_long():
    from catalog_ui.utils.formatting import truncate_text

    result = truncate_text("a" * 150, max_length=100)

    assert len(result) == 103
    assert result.endswith("...")


def test_format_price_whole_number():
    from catalog_ui.utils.formatting import format_price

    assert format_price(549) == "$549"
    assert format_price(12.0) == "$12"


def test_format_price_cents():
    from catalog_ui.utils.formatting import format_price

    assert format_price(9.99) == "$9.99"
    assert format_price(9.5, currency_symbol="EUR ") == "EUR 9.50"


def test_format_progress():
    from catalog_ui.utils.formatting import format_progress

    assert format_progress(0, None) == "0 loaded"
    assert format_progress(20, 194) == "20 of 194 loaded"
