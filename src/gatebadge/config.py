"""Configuration for gatebadge.

The badge template is fixed, but its constants travel in a single
configuration object handed to the service at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Self

from gatebadge.core.exceptions import ConfigurationError
from gatebadge.core.models import Color


# (font family as written into the SVG, font file Pillow looks up)
DEFAULT_FONT_PREFERENCES: tuple[tuple[str, str], ...] = (
    ("Verdana", "Verdana.ttf"),
    ("DejaVu Sans", "DejaVuSans.ttf"),
    ("Liberation Sans", "LiberationSans-Regular.ttf"),
    ("Arial", "Arial.ttf"),
)

GENERATOR_COMMENT = "Generated by gatebadge SVG Badge Generator"


@dataclass(frozen=True, slots=True)
class BadgeConfig:
    """Geometry, colors, and typography of the quality gate badge.

    Attributes:
        label_text: Text of the left block.
        label_width: Width of the left block in pixels.
        canvas_height: Height of the whole badge in pixels.
        x_margin: Horizontal padding before (and after) block text.
        corner_arc_diameter: Diameter of the rounded corners.
        label_background: Fill of the left block.
        shadow_color: Fill of the text shadow layer.
        text_color: Fill of the foreground text layer.
        text_baseline: Baseline of both foreground texts.
        label_shadow_baseline: Baseline of the label shadow.
        status_shadow_baseline: Baseline of the status shadow.
        font_size: Font size in pixels.
        font_preferences: Ordered (family, font file) candidates.
        generator_comment: Comment embedded in every document.

    Example:
        >>> config = BadgeConfig()
        >>> config.label_width, config.canvas_height
        (75, 20)
        >>> config.with_overrides(label_text="gate").label_text
        'gate'
    """

    label_text: str = "quality gate"
    label_width: int = 75
    canvas_height: int = 20
    x_margin: int = 4
    corner_arc_diameter: int = 6
    label_background: Color = field(default_factory=lambda: Color(85, 85, 85))
    shadow_color: Color = field(default_factory=lambda: Color(0, 0, 0, 85))
    text_color: Color = field(default_factory=lambda: Color(255, 255, 255))
    text_baseline: int = 14
    label_shadow_baseline: int = 14
    status_shadow_baseline: int = 15
    font_size: int = 11
    font_preferences: tuple[tuple[str, str], ...] = DEFAULT_FONT_PREFERENCES
    generator_comment: str = GENERATOR_COMMENT

    def __post_init__(self) -> None:
        """Reject geometry the badge template cannot be drawn with."""
        for name in ("label_width", "canvas_height", "font_size"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive")
        if self.x_margin < 0:
            raise ConfigurationError("x_margin cannot be negative")
        if self.corner_arc_diameter < 0:
            raise ConfigurationError("corner_arc_diameter cannot be negative")
        if self.label_width <= self.corner_arc_diameter:
            raise ConfigurationError(
                "label_width must be larger than corner_arc_diameter"
            )
        if not self.label_text:
            raise ConfigurationError("label_text cannot be empty")

    def with_overrides(self, **changes: object) -> Self:
        """Return a validated copy with the given fields replaced.

        Raises:
            ConfigurationError: If the resulting configuration is invalid.
            TypeError: If a field name is unknown.
        """
        return replace(self, **changes)  # type: ignore[arg-type]
