"""
Key-value cache providers for bucket existence checks.

ArrayCache keeps entries in process memory with a per-entry lifetime.
ChainCache layers several providers, fastest first, so a host application
can put a shared cache (memcached, redis, database) behind the in-process one.

Dependencies: cachetools
System role: Stat cache backends used by bucket validation
"""

import logging
import math
import time
from collections.abc import Callable, Iterable
from typing import Any, NamedTuple, Protocol, runtime_checkable

from cachetools import TLRUCache

logger = logging.getLogger(__name__)


@runtime_checkable
class CacheProvider(Protocol):
    """Minimal key-value cache interface used by validation."""

    def contains(self, key: str) -> bool: ...

    def fetch(self, key: str) -> Any: ...

    def save(self, key: str, value: Any, lifetime: int | None = None) -> bool: ...

    def delete(self, key: str) -> bool: ...


class _Entry(NamedTuple):
    value: Any
    lifetime: int | None


def _time_to_use(key: str, entry: _Entry, now: float) -> float:
    if not entry.lifetime:
        return math.inf
    return now + entry.lifetime


class ArrayCache:
    """
    In-process cache with per-entry expiry.

    Backed by cachetools.TLRUCache; a lifetime of None or 0 never expires.
    Entries are evicted least-recently-used once maxsize is reached.
    """

    def __init__(
        self,
        maxsize: int = 1024,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the cache.

        Args:
            maxsize: Maximum number of entries
            timer: Clock used for expiry (seconds)
        """
        self._cache = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=timer)

    def contains(self, key: str) -> bool:
        return key in self._cache

    def fetch(self, key: str) -> Any:
        entry = self._cache.get(key)
        return entry.value if entry is not None else None

    def save(self, key: str, value: Any, lifetime: int | None = None) -> bool:
        self._cache[key] = _Entry(value, lifetime)
        return True

    def delete(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    def __len__(self) -> int:
        return len(self._cache)


class ChainCache:
    """
    Layered cache that writes through to every provider.

    Reads walk providers in order. A fetch hit in a later provider is copied
    into the earlier ones.
    """

    def __init__(self, providers: Iterable[CacheProvider]) -> None:
        """
        Initialize the chain.

        Args:
            providers: Cache providers, fastest first

        Raises:
            ValueError: If no providers are given
        """
        self.providers = list(providers)
        if not self.providers:
            raise ValueError("ChainCache requires at least one provider")

    def contains(self, key: str) -> bool:
        return any(provider.contains(key) for provider in self.providers)

    def fetch(self, key: str) -> Any:
        for index, provider in enumerate(self.providers):
            if provider.contains(key):
                value = provider.fetch(key)
                for earlier in self.providers[:index]:
                    earlier.save(key, value)
                logger.debug(f"{__name__}:fetch - Hit key={key} layer={index}")
                return value
        return None

    def save(self, key: str, value: Any, lifetime: int | None = None) -> bool:
        stored = True
        for provider in self.providers:
            stored = provider.save(key, value, lifetime) and stored
        return stored

    def delete(self, key: str) -> bool:
        deleted = False
        for provider in self.providers:
            deleted = provider.delete(key) or deleted
        return deleted
