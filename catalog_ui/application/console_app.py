"""Console front end for the catalog loader."""

import asyncio
import logging
from typing import Callable, List, Optional

from catalog_ui.config import DisplaySettings
from catalog_ui.core.di_container import AppContainer
from catalog_ui.managers import CatalogLoaderManager
from catalog_ui.models import CatalogSnapshot
from catalog_ui.utils import format_price, format_progress, truncate_text

logger = logging.getLogger("CatalogUI.ConsoleApp")

HELP_TEXT = "Enter = load more, /text = search, / = clear search, q = quit"


class ConsoleApp:
    """Renders loader snapshots as text and routes typed commands back.

    Lines starting with ``/`` set the search term, an empty line or ``more``
    loads the next page, ``q`` or ``quit`` exits.
    """

    def __init__(
        self,
        container: AppContainer,
        read_line: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        self.container = container
        self.display: DisplaySettings = container.settings.display
        self.read_line = read_line or input
        self.write = write or print
        self.loader: Optional[CatalogLoaderManager] = None

    def render(self, snapshot: CatalogSnapshot) -> str:
        lines: List[str] = ["Products"]
        if snapshot.filter_term:
            lines.append(f'Search: "{snapshot.filter_term}"')
        lines.append(format_progress(snapshot.total_loaded, snapshot.total_available))

        for group in snapshot.groups:
            lines.append("")
            lines.append(f"== {group.label} ==")
            for product in group.products:
                lines.append(f"  {product.title}")
                if product.description:
                    description = truncate_text(
                        product.description, self.display.description_length
                    )
                    lines.append(f"    {description}")
                price = format_price(product.price, self.display.currency_symbol)
                lines.append(f"    Price: {price}")

        if not snapshot.groups and snapshot.total_loaded:
            lines.append("")
            lines.append("No products match your search.")

        lines.append("")
        if snapshot.last_error:
            lines.append(f"Error: {snapshot.last_error}")
        if snapshot.loading:
            lines.append("Loading...")
        elif snapshot.can_load_more:
            lines.append("[Load More]")
        return "\n".join(lines)

    async def handle_command(self, line: str) -> bool:
        """Apply one line of input. Returns False when the user quits."""
        command = line.strip()
        if command in ("q", "quit"):
            return False

        if command.startswith("/"):
            self.loader.set_filter(command[1:])
        elif command in ("", "more"):
            if self.loader.get_snapshot().can_load_more:
                await self.loader.load_next_page()
            else:
                self.write("Nothing more to load.")
                return True
        else:
            self.write(HELP_TEXT)
            return True

        self.write(self.render(self.loader.get_snapshot()))
        return True

    async def run(self) -> None:
        try:
            self.loader = await self.container.create_loader()
            self.write(self.render(self.loader.get_snapshot()))
            self.write(HELP_TEXT)

            while True:
                try:
                    line = await asyncio.to_thread(self.read_line, "> ")
                except EOFError:
                    break
                if not await self.handle_command(line):
                    break
        finally:
            self.container.close()
        logger.info("Console session finished")
