from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass
class CachedValue(Generic[T]):
    value: T
    loaded_at: dt.datetime


class TimedCache(Generic[T]):
    """An in-process cache holding a single value with a TTL.

    The cache is owned by whoever constructs it (normally one instance per
    service for the lifetime of the app), so two services never share state
    by accident. Loading is left to the caller because the loaders in this
    project are coroutines.

    This cache is process-local. If you run multiple Uvicorn workers,
    each worker will maintain its own copy (still <= TTL).
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], dt.datetime] = _utcnow):
        self._ttl = dt.timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._cached: CachedValue[T] | None = None
        self._invalidated = False

    @property
    def ttl(self) -> dt.timedelta:
        return self._ttl

    def set(self, value: T) -> None:
        self._cached = CachedValue(value, self._clock())
        self._invalidated = False

    def invalidate(self) -> None:
        self._invalidated = True

    def get(self) -> Optional[T]:
        """Return the cached value while it is fresh, otherwise None."""
        if self._cached is None or self._invalidated:
            return None
        if self._clock() - self._cached.loaded_at >= self._ttl:
            return None
        return self._cached.value

    def get_stale(self) -> Optional[T]:
        """Return whatever was cached last, ignoring TTL and invalidation."""
        if self._cached is None:
            return None
        return self._cached.value

    def age_seconds(self) -> Optional[float]:
        if self._cached is None:
            return None
        return (self._clock() - self._cached.loaded_at).total_seconds()
