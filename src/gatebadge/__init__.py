"""gatebadge - SVG quality gate badges with a process-lifetime cache.

This library turns a quality gate status into a small two-block SVG badge
and serves repeated requests for the same status from memory.

Example:
    >>> from gatebadge import ImageService, QualityGateStatus
    >>> service = ImageService.from_config()
    >>> svg = service.image_for(QualityGateStatus.OK).read()
    >>> svg.startswith(b"<?xml")
    True
"""

from gatebadge.adapters.cache import InMemoryBadgeCache
from gatebadge.adapters.executor import SynchronousExecutor, ThreadPoolExecutorAdapter
from gatebadge.adapters.rendering import (
    BadgeFont,
    SvgBadgeRenderer,
    SvgDocument,
    resolve_font,
)
from gatebadge.config import BadgeConfig
from gatebadge.core.catalog import STATUS_TABLE, StatusCatalog
from gatebadge.core.exceptions import (
    BadgeSerializationError,
    ConfigurationError,
    GatebadgeError,
    RenderError,
    UnknownStatusError,
)
from gatebadge.core.models import BadgeColor, Color, QualityGateStatus, StatusDisplay
from gatebadge.core.ports import (
    BadgeCachePort,
    BadgeRendererPort,
    ExecutorPort,
    TextMeasurer,
    VectorDocument,
)
from gatebadge.core.services import ImageService


__version__ = "0.1.0"

__all__ = [
    "STATUS_TABLE",
    "BadgeCachePort",
    "BadgeColor",
    "BadgeConfig",
    "BadgeFont",
    "BadgeRendererPort",
    "BadgeSerializationError",
    "Color",
    "ConfigurationError",
    "ExecutorPort",
    "GatebadgeError",
    "ImageService",
    "InMemoryBadgeCache",
    "QualityGateStatus",
    "RenderError",
    "StatusCatalog",
    "StatusDisplay",
    "SvgBadgeRenderer",
    "SvgDocument",
    "SynchronousExecutor",
    "TextMeasurer",
    "ThreadPoolExecutorAdapter",
    "UnknownStatusError",
    "VectorDocument",
    "__version__",
    "resolve_font",
]
