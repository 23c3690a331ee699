"""Unit tests for InMemoryBadgeCache adapter."""

from __future__ import annotations

import threading
import time

import pytest

from gatebadge.adapters.cache import InMemoryBadgeCache
from gatebadge.core.exceptions import BadgeSerializationError
from gatebadge.core.models import QualityGateStatus


OK = QualityGateStatus.OK


@pytest.mark.cache
class TestGet:
    """Tests for get() method."""

    def test_miss_renders_and_returns_content(self, static_document) -> None:
        """get() renders on first request and returns the serialized bytes."""
        cache = InMemoryBadgeCache()

        stream = cache.get(OK, lambda status: static_document(b"<svg>ok</svg>"))

        assert stream.read() == b"<svg>ok</svg>"
        assert cache.contains(OK)

    def test_hit_does_not_render_again(self, static_document) -> None:
        """get() renders each status once."""
        cache = InMemoryBadgeCache()
        rendered: list[QualityGateStatus] = []

        def render(status: QualityGateStatus):
            rendered.append(status)
            return static_document()

        cache.get(OK, render)
        cache.get(OK, render)
        cache.get(QualityGateStatus.ERROR, render)

        assert rendered == [OK, QualityGateStatus.ERROR]

    def test_repeated_get_returns_identical_bytes(self, static_document) -> None:
        cache = InMemoryBadgeCache()

        first = cache.get(OK, lambda s: static_document(b"abc")).read()
        second = cache.get(OK, lambda s: static_document(b"changed")).read()

        assert first == second == b"abc"

    def test_render_receives_requested_status(self, static_document) -> None:
        cache = InMemoryBadgeCache()
        seen: list[QualityGateStatus] = []

        def render(status: QualityGateStatus):
            seen.append(status)
            return static_document()

        cache.get(QualityGateStatus.FORBIDDEN, render)

        assert seen == [QualityGateStatus.FORBIDDEN]


@pytest.mark.cache
class TestReaders:
    """Every caller gets its own reader over the stored bytes."""

    def test_fully_read_stream_does_not_affect_next_request(
        self, static_document
    ) -> None:
        """Reading a stream to the end, then requesting again, reads from the start."""
        cache = InMemoryBadgeCache()
        render = lambda status: static_document(b"0123456789")  # noqa: E731

        first = cache.get(OK, render)
        assert first.read() == b"0123456789"
        assert first.read() == b""

        second = cache.get(OK, render)
        assert second.read() == b"0123456789"

    def test_interleaved_readers_keep_independent_positions(
        self, static_document
    ) -> None:
        """A second request never moves the position of an earlier reader."""
        cache = InMemoryBadgeCache()
        render = lambda status: static_document(b"0123456789")  # noqa: E731

        first = cache.get(OK, render)
        assert first.read(4) == b"0123"

        second = cache.get(OK, render)
        assert second.read(2) == b"01"

        assert first.read() == b"456789"
        assert second.read() == b"23456789"

    def test_each_request_returns_a_new_reader(self, static_document) -> None:
        cache = InMemoryBadgeCache()
        render = lambda status: static_document()  # noqa: E731

        assert cache.get(OK, render) is not cache.get(OK, render)

    def test_closing_a_reader_does_not_break_later_requests(
        self, static_document
    ) -> None:
        cache = InMemoryBadgeCache()
        render = lambda status: static_document(b"abc")  # noqa: E731

        cache.get(OK, render).close()

        assert cache.get(OK, render).read() == b"abc"


@pytest.mark.cache
class TestSerializationFailure:
    """A failed serialization leaves no entry behind."""

    def test_failure_raises_badge_serialization_error(self, failing_document) -> None:
        cache = InMemoryBadgeCache()

        with pytest.raises(BadgeSerializationError) as exc_info:
            cache.get(OK, lambda status: failing_document(b"<svg/>"))

        assert exc_info.value.status is OK
        assert isinstance(exc_info.value.cause, OSError)
        assert not cache.contains(OK)

    def test_next_request_renders_from_scratch(
        self, static_document, failing_document
    ) -> None:
        cache = InMemoryBadgeCache()
        documents = [failing_document(b"<svg/>"), static_document(b"<svg>ok</svg>")]
        rendered: list[QualityGateStatus] = []

        def render(status: QualityGateStatus):
            rendered.append(status)
            return documents[len(rendered) - 1]

        with pytest.raises(BadgeSerializationError):
            cache.get(OK, render)

        assert cache.get(OK, render).read() == b"<svg>ok</svg>"
        assert rendered == [OK, OK]

    def test_render_exception_propagates_unchanged(self) -> None:
        """Errors raised by the renderer itself are not wrapped."""
        cache = InMemoryBadgeCache()

        def render(status: QualityGateStatus):
            raise ValueError("bad layout")

        with pytest.raises(ValueError, match="bad layout"):
            cache.get(OK, render)

        assert not cache.contains(OK)


@pytest.mark.cache
@pytest.mark.tier(2)
class TestConcurrency:
    """Concurrent first requests render once."""

    def test_concurrent_first_requests_render_once(self, static_document) -> None:
        from gatebadge.adapters.executor import ThreadPoolExecutorAdapter

        cache = InMemoryBadgeCache()
        callers = 16
        barrier = threading.Barrier(callers)
        counter_lock = threading.Lock()
        render_calls: list[QualityGateStatus] = []

        def render(status: QualityGateStatus):
            with counter_lock:
                render_calls.append(status)
            time.sleep(0.05)
            return static_document(b"<svg>shared</svg>")

        def request() -> bytes:
            barrier.wait(timeout=5)
            return cache.get(OK, render).read()

        with ThreadPoolExecutorAdapter(max_workers=callers) as executor:
            futures = [executor.submit(request) for _ in range(callers)]
            results = [future.result(timeout=10) for future in futures]

        assert render_calls == [OK]
        assert results == [b"<svg>shared</svg>"] * callers

    def test_different_statuses_render_independently(self, static_document) -> None:
        from gatebadge.adapters.executor import ThreadPoolExecutorAdapter

        cache = InMemoryBadgeCache()
        statuses = list(QualityGateStatus) * 4
        counter_lock = threading.Lock()
        render_calls: list[QualityGateStatus] = []

        def render(status: QualityGateStatus):
            with counter_lock:
                render_calls.append(status)
            time.sleep(0.01)
            return static_document(status.name.encode())

        with ThreadPoolExecutorAdapter(max_workers=8) as executor:
            futures = {
                executor.submit(lambda s=s: cache.get(s, render).read()): s
                for s in statuses
            }
            for future, status in futures.items():
                assert future.result(timeout=10) == status.name.encode()

        assert sorted(render_calls, key=lambda s: s.name) == sorted(
            QualityGateStatus, key=lambda s: s.name
        )


@pytest.mark.cache
class TestInspection:
    """Tests for contains(), statuses() and statistics()."""

    def test_empty_cache(self) -> None:
        cache = InMemoryBadgeCache()

        assert not cache.contains(OK)
        assert cache.statuses() == []
        assert cache.statistics() == {"entries": 0, "total_bytes": 0}

    def test_statistics_count_entries_and_bytes(self, static_document) -> None:
        cache = InMemoryBadgeCache()
        cache.get(OK, lambda s: static_document(b"12345"))
        cache.get(QualityGateStatus.WARN, lambda s: static_document(b"123"))

        assert cache.statuses() == [OK, QualityGateStatus.WARN]
        assert cache.statistics() == {"entries": 2, "total_bytes": 8}

    def test_implements_cache_port(self) -> None:
        from gatebadge.core.ports import BadgeCachePort

        assert isinstance(InMemoryBadgeCache(), BadgeCachePort)
