"""Application settings configuration."""

from dataclasses import dataclass
from typing import Optional

import yaml


@dataclass(frozen=True)
class CatalogSettings:
    base_url: str = "https://dummyjson.com"
    endpoint: str = "/products"
    page_size: int = 10
    request_timeout: float = 15.0


@dataclass(frozen=True)
class DisplaySettings:
    description_length: int = 120
    currency_symbol: str = "$"


@dataclass(frozen=True)
class AppSettings:
    catalog: CatalogSettings
    display: DisplaySettings

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(path)
        return cls(
            catalog=CatalogSettings(
                base_url=config.get("base_url", "https://dummyjson.com"),
                endpoint=config.get("endpoint", "/products"),
                page_size=config.get("page_size", 10),
                request_timeout=config.get("request_timeout", 15.0),
            ),
            display=DisplaySettings(
                description_length=config.get("description_length", 120),
                currency_symbol=config.get("currency_symbol", "$"),
            ),
        )

    @staticmethod
    def _load_yaml(path: str) -> dict:
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            return {}
        except yaml.YAMLError:
            return {}
        return data if isinstance(data, dict) else {}
