"""Status catalog: the closed table of badge statuses and their display data."""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from gatebadge.core.exceptions import ConfigurationError, UnknownStatusError
from gatebadge.core.models import BadgeColor, QualityGateStatus, StatusDisplay


if TYPE_CHECKING:
    from gatebadge.core.models import Color
    from gatebadge.core.ports import TextMeasurer


STATUS_TABLE: Mapping[QualityGateStatus, StatusDisplay] = MappingProxyType(
    {
        QualityGateStatus.NONE: StatusDisplay("not set", BadgeColor.GRAY.value),
        QualityGateStatus.OK: StatusDisplay("passing", BadgeColor.GREEN.value),
        QualityGateStatus.WARN: StatusDisplay("warning", BadgeColor.ORANGE.value),
        QualityGateStatus.ERROR: StatusDisplay("failing", BadgeColor.RED.value),
        QualityGateStatus.NOT_FOUND: StatusDisplay("not found", BadgeColor.RED.value),
        QualityGateStatus.FORBIDDEN: StatusDisplay("forbidden", BadgeColor.RED.value),
    }
)


def text_block_width(measurer: TextMeasurer, text: str, x_margin: int) -> int:
    """Width of a block holding text with x_margin padding on both sides.

    The renderer sizes the status block with this same function, so a
    catalog width and a rendered block never disagree.
    """
    return math.ceil(measurer.measure(text)) + 2 * x_margin


class StatusCatalog:
    """Lookup of display text, color, and width for every status.

    Widths are measured once, when the catalog is built.

    Example:
        >>> class Fixed:
        ...     def measure(self, text: str) -> float:
        ...         return 6.0 * len(text)
        >>> catalog = StatusCatalog(Fixed(), x_margin=4)
        >>> catalog.display_text(QualityGateStatus.OK)
        'passing'
        >>> catalog.display_width(QualityGateStatus.OK)
        50
    """

    def __init__(
        self,
        measurer: TextMeasurer,
        x_margin: int,
        table: Mapping[QualityGateStatus, StatusDisplay] = STATUS_TABLE,
    ) -> None:
        missing = [s.name for s in QualityGateStatus if s not in table]
        if missing:
            raise ConfigurationError(
                f"Status table has no display entry for: {', '.join(missing)}"
            )
        self._table = MappingProxyType(dict(table))
        self._widths = MappingProxyType(
            {
                status: text_block_width(measurer, display.text, x_margin)
                for status, display in self._table.items()
            }
        )

    @property
    def statuses(self) -> tuple[QualityGateStatus, ...]:
        """All statuses in declaration order."""
        return tuple(QualityGateStatus)

    def entry(self, status: QualityGateStatus) -> StatusDisplay:
        """Look up the display entry of a status.

        Raises:
            UnknownStatusError: If status is not a QualityGateStatus.
        """
        if not isinstance(status, QualityGateStatus):
            raise UnknownStatusError(
                status, available=[s.name for s in QualityGateStatus]
            )
        return self._table[status]

    def display_text(self, status: QualityGateStatus) -> str:
        return self.entry(status).text

    def display_background_color(self, status: QualityGateStatus) -> Color:
        return self.entry(status).background

    def display_width(self, status: QualityGateStatus) -> int:
        """Pixel width of the status block: measured text plus both margins."""
        self.entry(status)
        return self._widths[status]
