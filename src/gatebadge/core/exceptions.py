"""Domain exceptions for gatebadge.

All library errors inherit from GatebadgeError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from gatebadge.core.models import QualityGateStatus


class GatebadgeError(Exception):
    """Base class for all gatebadge exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(GatebadgeError):
    """Raised for configuration problems (invalid geometry, incomplete tables)."""

    pass


class UnknownStatusError(GatebadgeError):
    """Raised when a value outside the quality gate status set is requested.

    Attributes:
        value: The rejected value.
        available: Names of the valid statuses.
    """

    def __init__(self, value: object, available: list[str] | None = None) -> None:
        self.value = value
        self.available = available if available is not None else []
        super().__init__(f"Unknown quality gate status: {value!r}")

    @property
    def recovery_hint(self) -> str:
        """Suggest the valid status names."""
        if self.available:
            return f"Valid statuses: {', '.join(self.available)}"
        return "Use a member of QualityGateStatus"


class RenderError(GatebadgeError):
    """Base class for badge rendering errors."""

    pass


class BadgeSerializationError(RenderError):
    """Raised when a rendered badge cannot be written into its byte buffer.

    The cache keeps no entry for the status, so the request can be retried.

    Attributes:
        status: The status whose badge failed to serialize.
        cause: The underlying I/O exception.
    """

    def __init__(
        self,
        status: QualityGateStatus,
        cause: Exception | None = None,
    ) -> None:
        self.status = status
        self.cause = cause
        super().__init__(f"Failed to serialize badge for status {status.name}")

    @property
    def recovery_hint(self) -> str:
        """Suggest retrying."""
        return f"Retry the request; no badge was cached for {self.status.name}"
