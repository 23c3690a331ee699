"""In-memory badge cache adapter implementing BadgeCachePort."""

from __future__ import annotations

import io
import logging
import threading
from typing import TYPE_CHECKING, BinaryIO

from gatebadge.core.exceptions import BadgeSerializationError


if TYPE_CHECKING:
    from gatebadge.core.models import QualityGateStatus
    from gatebadge.core.ports import RenderFunction


logger = logging.getLogger(__name__)


class InMemoryBadgeCache:
    """Process-lifetime cache of serialized badges.

    Each status is rendered at most once: concurrent first requests for the
    same status wait on a per-status lock while one of them renders. Stored
    badges are immutable bytes and every caller gets its own reader, so one
    caller's reads never move another caller's position.

    Entries are never evicted; the status set is closed and small.
    """

    def __init__(self) -> None:
        self._entries: dict[QualityGateStatus, bytes] = {}
        self._locks: dict[QualityGateStatus, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, status: QualityGateStatus) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(status)
            if lock is None:
                lock = self._locks[status] = threading.Lock()
            return lock

    def get(self, status: QualityGateStatus, render: RenderFunction) -> BinaryIO:
        """Return a new reader over the badge for status, rendering it on first use.

        Args:
            status: The status to look up.
            render: Called with status on a miss to produce the document.

        Returns:
            A binary reader positioned at offset zero.

        Raises:
            BadgeSerializationError: If the rendered document cannot be written
                into the cache buffer. No entry is stored.
        """
        content = self._entries.get(status)
        if content is not None:
            logger.debug("Found badge for %s in cache, reusing it", status.name)
            return io.BytesIO(content)

        with self._lock_for(status):
            # Another thread may have stored it while we waited
            content = self._entries.get(status)
            if content is None:
                logger.debug("Rendering badge for %s, then caching it", status.name)
                content = self._serialize(status, render)
                self._entries[status] = content
        return io.BytesIO(content)

    @staticmethod
    def _serialize(status: QualityGateStatus, render: RenderFunction) -> bytes:
        document = render(status)
        buffer = io.BytesIO()
        try:
            document.write(buffer)
        except OSError as e:
            raise BadgeSerializationError(status, cause=e) from e
        return buffer.getvalue()

    def contains(self, status: QualityGateStatus) -> bool:
        """Whether a badge for status is already stored."""
        return status in self._entries

    def statuses(self) -> list[QualityGateStatus]:
        """Statuses with a stored badge, in the order they were first rendered."""
        return list(self._entries)

    def statistics(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with 'entries' (stored badges) and 'total_bytes'.
        """
        entries = dict(self._entries)
        return {
            "entries": len(entries),
            "total_bytes": sum(len(content) for content in entries.values()),
        }
