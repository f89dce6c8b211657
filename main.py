#!/usr/bin/env python3
"""
Catalog UI Main Entry Point
Loads settings, wires the catalog service and runs the console browser
"""
import argparse
import asyncio
import logging

from catalog_ui.application import ConsoleApp
from catalog_ui.config import AppSettings
from catalog_ui.core.di_container import AppContainer
from catalog_ui.services import MemoryCatalog


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse a paged product catalog")
    parser.add_argument(
        "--config", default="settings.yml", help="Path to settings.yml"
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Browse a built-in sample catalog instead of the remote service",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = AppSettings.load(args.config)
    container = AppContainer.create(
        settings=settings,
        catalog_service=MemoryCatalog.sample() if args.offline else None,
    )

    try:
        asyncio.run(ConsoleApp(container).run())
    except KeyboardInterrupt:
        logging.info("Interrupted")


if __name__ == "__main__":
    main()
