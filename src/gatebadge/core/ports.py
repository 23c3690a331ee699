"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

from gatebadge.core.models import QualityGateStatus


if TYPE_CHECKING:
    from concurrent.futures import Future

    from gatebadge.config import BadgeConfig
    from gatebadge.core.models import Color


@runtime_checkable
class VectorDocument(Protocol):
    """A complete, serializable vector image."""

    @property
    def width(self) -> int:
        """Canvas width in pixels."""
        ...

    @property
    def height(self) -> int:
        """Canvas height in pixels."""
        ...

    def write(self, stream: BinaryIO) -> None:
        """Serialize the document as UTF-8 bytes into stream.

        Raises:
            OSError: If the stream rejects the write.
        """
        ...


RenderFunction = Callable[[QualityGateStatus], VectorDocument]


@runtime_checkable
class TextMeasurer(Protocol):
    """Measures the horizontal advance of text under a fixed font."""

    def measure(self, text: str) -> float:
        """Return the advance width of text in pixels."""
        ...


@runtime_checkable
class BadgeRendererPort(Protocol):
    """Stateless drawing routine producing a two-block badge.

    Attributes:
        font: Measures text in the font the document is drawn with.
        config: Layout constants, label text and label background included.
    """

    font: TextMeasurer
    config: BadgeConfig

    def render(
        self,
        label_text: str,
        label_color: Color,
        status_text: str,
        status_color: Color,
        status_width: int | None = None,
    ) -> VectorDocument:
        """Draw the label block and the status block into a new document.

        Args:
            label_text: Text of the left block (e.g., "quality gate").
            label_color: Background of the left block.
            status_text: Text of the right block (e.g., "passing").
            status_color: Background of the right block.
            status_width: Width of the status block. Measured from the
                renderer's font when None.

        Returns:
            The rendered document.
        """
        ...


@runtime_checkable
class BadgeCachePort(Protocol):
    """Process-lifetime store of serialized badges keyed by status."""

    def get(self, status: QualityGateStatus, render: RenderFunction) -> BinaryIO:
        """Return a reader positioned at the start of the badge for status.

        On the first request for a status, render is called, its document is
        serialized and stored. Later requests reuse the stored bytes.

        Args:
            status: The status to look up.
            render: Called with status on a miss to produce the document.

        Returns:
            A new binary reader over the complete badge.

        Raises:
            BadgeSerializationError: If the document cannot be serialized.
        """
        ...

    def contains(self, status: QualityGateStatus) -> bool:
        """Whether a badge for status is already stored."""
        ...


@runtime_checkable
class ExecutorPort(Protocol):
    """Executor for parallel task execution.

    Abstracts over concurrent.futures executors so the core domain never
    imports thread pools directly.
    """

    def submit(
        self, fn: Callable[..., object], *args: object, **kwargs: object
    ) -> Future[object]:  # type: ignore[name-defined, unused-ignore]
        """Submit a function for execution and return its future."""
        ...

    def __enter__(self) -> ExecutorPort:
        """Enter context manager."""
        ...

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Exit context manager."""
        ...
