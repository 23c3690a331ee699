"""Font resolution and text measurement backed by Pillow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from PIL import ImageFont


logger = logging.getLogger(__name__)

FALLBACK_FAMILY = "sans-serif"


@dataclass(frozen=True, slots=True)
class BadgeFont:
    """A loaded font together with the family name written into the SVG.

    Implements TextMeasurer.

    Attributes:
        family: CSS font family used by the document.
        size: Font size in pixels.
        face: The Pillow font used for measuring advances.
    """

    family: str
    size: int
    face: ImageFont.FreeTypeFont | ImageFont.ImageFont

    def measure(self, text: str) -> float:
        """Return the horizontal advance of text in pixels."""
        return float(self.face.getlength(text))

    @property
    def css_family(self) -> str:
        """Family list for the ``font-family`` attribute, generic last."""
        if self.family == FALLBACK_FAMILY:
            return FALLBACK_FAMILY
        return f"{self.family},{FALLBACK_FAMILY}"


@lru_cache(maxsize=None)
def resolve_font(preferences: tuple[tuple[str, str], ...], size: int) -> BadgeFont:
    """Load the first available font from an ordered preference list.

    Pillow searches the platform font directories for each file name. When
    none of the candidates can be loaded, Pillow's bundled default font is
    used instead; a missing font is never fatal.

    Results are memoized, so each preference list is resolved once per process.

    Args:
        preferences: Ordered (family, font file) pairs.
        size: Font size in pixels.

    Returns:
        The resolved font.
    """
    for family, filename in preferences:
        try:
            face = ImageFont.truetype(filename, size)
        except OSError:
            logger.debug("Font %s (%s) not available", family, filename)
            continue
        logger.info("Using font %s from %s", family, filename)
        return BadgeFont(family=family, size=size, face=face)

    logger.warning(
        "None of the preferred fonts (%s) could be loaded, using default font",
        ", ".join(family for family, _ in preferences) or "none configured",
    )
    return BadgeFont(
        family=FALLBACK_FAMILY,
        size=size,
        face=ImageFont.load_default(size=size),
    )
