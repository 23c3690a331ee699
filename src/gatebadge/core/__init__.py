"""Core domain module for gatebadge.

This module contains the status model, the status catalog and the port
definitions. It has no I/O dependencies and can be tested in isolation.
"""

from gatebadge.core.catalog import STATUS_TABLE, StatusCatalog
from gatebadge.core.models import BadgeColor, Color, QualityGateStatus, StatusDisplay
from gatebadge.core.ports import (
    BadgeCachePort,
    BadgeRendererPort,
    TextMeasurer,
    VectorDocument,
)


__all__ = [
    "STATUS_TABLE",
    "BadgeCachePort",
    "BadgeColor",
    "BadgeRendererPort",
    "Color",
    "QualityGateStatus",
    "StatusCatalog",
    "StatusDisplay",
    "TextMeasurer",
    "VectorDocument",
]
