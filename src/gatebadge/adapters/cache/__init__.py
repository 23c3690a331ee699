"""Cache adapters."""

from gatebadge.adapters.cache.memory import InMemoryBadgeCache


__all__ = ["InMemoryBadgeCache"]
