"""Utility functions."""

from .formatting import format_price, format_progress, truncate_text

__all__ = ["format_price", "format_progress", "truncate_text"]
