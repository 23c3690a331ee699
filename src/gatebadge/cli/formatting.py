"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text


if TYPE_CHECKING:
    from gatebadge.core.models import Color


def _format_color_swatch(color: Color) -> Text:
    """Format a color as its hex code preceded by a swatch in that color.

    Args:
        color: The color to show.

    Returns:
        Rich Text like "■ #44cc11", the square painted in the color.
    """
    swatch = Text("■ ", style=color.hex)
    swatch.append(color.hex)
    return swatch
