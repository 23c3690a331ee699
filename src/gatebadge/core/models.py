"""Core domain models for gatebadge.

These models are pure Python dataclasses and enums with no I/O dependencies.
They describe the closed set of quality gate statuses and how each one is
displayed on a badge.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Self

from gatebadge.core.exceptions import UnknownStatusError


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with 8-bit channels.

    Attributes:
        red: Red channel, 0-255.
        green: Green channel, 0-255.
        blue: Blue channel, 0-255.
        alpha: Opacity channel, 0-255 (255 is opaque).

    Example:
        >>> Color(85, 85, 85).hex
        '#555555'
        >>> round(Color(0, 0, 0, 85).opacity, 3)
        0.333
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        """Validate that every channel fits in a byte."""
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} out of range: {value}")

    @property
    def hex(self) -> str:
        """Opaque part of the color as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def opacity(self) -> float:
        """Alpha channel as a fraction between 0 and 1."""
        return self.alpha / 255

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 255


class BadgeColor(Enum):
    """Background palette available to status blocks."""

    GRAY = Color(159, 159, 159)
    GREEN = Color(68, 204, 17)
    ORANGE = Color(254, 125, 55)
    RED = Color(224, 93, 68)


class QualityGateStatus(Enum):
    """Possible outcomes of a quality gate lookup for a project or view."""

    # No gate is active for the project or view.
    NONE = "none"
    OK = "ok"
    WARN = "warn"
    ERROR = "error"
    NOT_FOUND = "not_found"
    # Access to the project or view is restricted.
    FORBIDDEN = "forbidden"

    @classmethod
    def parse(cls, name: str) -> Self:
        """Convert external text into a status.

        Matching is case-insensitive and accepts ``-`` in place of ``_``,
        so ``"not-found"``, ``"NOT_FOUND"`` and ``"not_found"`` are equivalent.

        Args:
            name: Status name as received from a request or the command line.

        Returns:
            The matching status.

        Raises:
            UnknownStatusError: If the name matches no status.
        """
        normalized = name.strip().upper().replace("-", "_")
        try:
            return cls[normalized]
        except KeyError:
            raise UnknownStatusError(
                name, available=[member.name for member in cls]
            ) from None


@dataclass(frozen=True, slots=True)
class StatusDisplay:
    """How a status is drawn: its text and its block background.

    Attributes:
        text: Text shown in the status block (e.g., "passing").
        background: Fill color of the status block.
    """

    text: str
    background: Color

    def __post_init__(self) -> None:
        """Validate display fields after initialization."""
        if not self.text:
            raise ValueError("Status display text cannot be empty")
