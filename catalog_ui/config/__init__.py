"""Configuration management."""

from .settings import AppSettings, CatalogSettings, DisplaySettings

__all__ = ["AppSettings", "CatalogSettings", "DisplaySettings"]
