"""Statuses command for CLI."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from gatebadge.cli.formatting import _format_color_swatch
from gatebadge.cli.main import app


@app.command()
def statuses() -> None:
    """List every status with its badge text, color and block width."""
    from gatebadge.core.services import ImageService

    catalog = ImageService.from_config().catalog

    table = Table()
    table.add_column("Status")
    table.add_column("Text")
    table.add_column("Color")
    table.add_column("Width", justify="right")

    for status in catalog.statuses:
        table.add_row(
            status.name,
            catalog.display_text(status),
            _format_color_swatch(catalog.display_background_color(status)),
            str(catalog.display_width(status)),
        )

    console = Console(force_terminal=True)
    console.print(table)
