"""Text formatting utilities."""

from typing import Union


def truncate_text(text: str, max_length: int = 100) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_price(price: Union[int, float], currency_symbol: str = "$") -> str:
    if float(price).is_integer():
        return f"{currency_symbol}{int(price)}"
    return f"{currency_symbol}{price:.2f}"


def format_progress(loaded: int, total) -> str:
    if total is None:
        return f"{loaded} loaded"
    return f"{loaded} of {total} loaded"
