"""Core domain services for gatebadge."""

import logging
from typing import BinaryIO

from gatebadge.config import BadgeConfig
from gatebadge.core.catalog import StatusCatalog
from gatebadge.core.exceptions import ConfigurationError, UnknownStatusError
from gatebadge.core.models import QualityGateStatus
from gatebadge.core.ports import (
    BadgeCachePort,
    BadgeRendererPort,
    ExecutorPort,
    VectorDocument,
)


logger = logging.getLogger(__name__)


class ImageService:
    """Single entry point for quality gate badge images.

    Serves each status from the cache, rendering it on the first request.
    """

    CONTENT_TYPE = "image/svg+xml"

    def __init__(
        self,
        config: BadgeConfig | None = None,
        renderer: BadgeRendererPort | None = None,
        cache: BadgeCachePort | None = None,
        catalog: StatusCatalog | None = None,
        executor: ExecutorPort | None = None,
    ) -> None:
        """Wire the service from one config.

        Parts left as None are built from the config: the renderer from the
        resolved Pillow font, the catalog from the renderer's font, and an
        in-memory cache. When only a renderer is given, its config is used.

        Raises:
            ConfigurationError: If config and renderer.config differ.
        """
        if renderer is not None:
            if config is None:
                config = renderer.config
            elif renderer.config != config:
                raise ConfigurationError(
                    "renderer config differs from the service config"
                )
        if config is None:
            config = BadgeConfig()
        if renderer is None:
            from gatebadge.adapters.rendering import SvgBadgeRenderer, resolve_font

            font = resolve_font(config.font_preferences, config.font_size)
            renderer = SvgBadgeRenderer(font, config)
        if catalog is None:
            catalog = StatusCatalog(renderer.font, config.x_margin)
        if cache is None:
            from gatebadge.adapters.cache import InMemoryBadgeCache

            cache = InMemoryBadgeCache()

        self._config = config
        self._renderer = renderer
        self._catalog = catalog
        self._cache = cache
        self._executor = executor
        logger.info("ImageService is now ready")

    @classmethod
    def from_config(
        cls,
        config: BadgeConfig | None = None,
        executor: ExecutorPort | None = None,
    ) -> "ImageService":
        """Create an ImageService with the default font, renderer and cache.

        Args:
            config: Badge template constants. Defaults to ``BadgeConfig()``.
            executor: Optional executor used by warm() for parallel rendering.

        Returns:
            A ready-to-use ImageService.
        """
        return cls(config=config, executor=executor)

    @property
    def catalog(self) -> StatusCatalog:
        """The status catalog used to draw badges."""
        return self._catalog

    def render(self, status: QualityGateStatus) -> VectorDocument:
        """Render the badge for status without consulting the cache.

        The status block is drawn at the catalog's display width.

        Args:
            status: The status to draw.

        Returns:
            A new document.

        Raises:
            UnknownStatusError: If status is not a QualityGateStatus.
        """
        display = self._catalog.entry(status)
        return self._renderer.render(
            self._config.label_text,
            self._config.label_background,
            display.text,
            display.background,
            status_width=self._catalog.display_width(status),
        )

    def image_for(self, status: QualityGateStatus) -> BinaryIO:
        """Return the badge image for status.

        Args:
            status: The quality gate status to display.

        Returns:
            A new binary reader over the complete SVG document, positioned at
            its start.

        Raises:
            UnknownStatusError: If status is not a QualityGateStatus. Raised
                before the cache is consulted.
            BadgeSerializationError: If the badge could not be serialized.
                Nothing is cached, so the call can be retried.
        """
        if not isinstance(status, QualityGateStatus):
            raise UnknownStatusError(
                status, available=[s.name for s in QualityGateStatus]
            )
        return self._cache.get(status, self.render)

    def warm(self, max_workers: int | None = None) -> dict[QualityGateStatus, int]:
        """Render and cache the badge of every status ahead of requests.

        Rendering runs in parallel when an executor is injected and
        max_workers is not 1. Otherwise statuses are rendered sequentially.

        Args:
            max_workers: Use 1 to force sequential rendering.

        Returns:
            Dict mapping each status to the size of its badge in bytes.
        """
        statuses = self._catalog.statuses

        def size_of(status: QualityGateStatus) -> tuple[QualityGateStatus, int]:
            with self.image_for(status) as stream:
                return status, len(stream.read())

        results: dict[QualityGateStatus, int] = {}

        if max_workers == 1 or self._executor is None:
            for status in statuses:
                _, results[status] = size_of(status)
        else:
            executor = self._executor
            with executor:
                futures = [executor.submit(size_of, status) for status in statuses]
                for future in futures:
                    result_tuple = future.result()
                    # Type narrowing: size_of returns tuple[QualityGateStatus, int]
                    assert isinstance(result_tuple, tuple)
                    status, size = result_tuple
                    results[status] = size

        logger.info("Warmed %d badges", len(results))
        return results
