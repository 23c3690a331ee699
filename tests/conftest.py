"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fakes for the test suite.
"""

from __future__ import annotations

from typing import BinaryIO

import pytest

from gatebadge.config import BadgeConfig


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, catalog, and services")
    config.addinivalue_line("markers", "render: Fonts and SVG renderer")
    config.addinivalue_line("markers", "cache: In-memory badge cache adapter")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow)",
    )


class FixedWidthFont:
    """Font stand-in where every character is 6 pixels wide."""

    family = "Test Sans"
    css_family = "Test Sans,sans-serif"
    size = 11

    def measure(self, text: str) -> float:
        return 6.0 * len(text)


class StaticDocument:
    """VectorDocument that always serializes to the same bytes."""

    def __init__(self, content: bytes = b"<svg/>", width: int = 100) -> None:
        self.content = content
        self.width = width
        self.height = 20

    def write(self, stream: BinaryIO) -> None:
        stream.write(self.content)


class FailingDocument(StaticDocument):
    """VectorDocument whose serialization fails half way."""

    def write(self, stream: BinaryIO) -> None:
        stream.write(self.content[:3])
        raise OSError("disk full")


@pytest.fixture
def fixed_font() -> FixedWidthFont:
    return FixedWidthFont()


@pytest.fixture
def config() -> BadgeConfig:
    return BadgeConfig()


@pytest.fixture(autouse=True)
def _clear_font_cache() -> None:
    """Resolve fonts afresh in every test."""
    from gatebadge.adapters.rendering.fonts import resolve_font

    resolve_font.cache_clear()


@pytest.fixture
def static_document() -> type[StaticDocument]:
    return StaticDocument


@pytest.fixture
def failing_document() -> type[FailingDocument]:
    return FailingDocument
