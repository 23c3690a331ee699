"""Rendering adapters: Pillow-backed fonts and the SVG badge renderer."""

from gatebadge.adapters.rendering.fonts import BadgeFont, resolve_font
from gatebadge.adapters.rendering.svg import SvgBadgeRenderer, SvgDocument


__all__ = [
    "BadgeFont",
    "SvgBadgeRenderer",
    "SvgDocument",
    "resolve_font",
]
