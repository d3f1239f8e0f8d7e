from __future__ import annotations

import time
from typing import Any, Callable


class TTLCache:
    """In-process TTL cache with lazy expiry. No background refresh, no locking.

    ``clock`` returns monotonic seconds and can be swapped in tests.
    """

    def __init__(
        self,
        default_ttl: int = 90,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_ttl = default_ttl
        self._clock = clock
        self._store: dict[str, tuple[Any, float]] = {}  # key -> (data, expires_at)

    def get(self, key: str) -> Any | None:
        """Return cached value or None if missing or expired. Expired entries are dropped."""
        entry = self._store.get(key)
        if entry is None:
            return None
        data, expires_at = entry
        if self._clock() >= expires_at:
            del self._store[key]
            return None
        return data

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store value for ttl seconds, or default_ttl when ttl is None."""
        effective_ttl = ttl if ttl is not None else self._default_ttl
        self._store[key] = (value, self._clock() + effective_ttl)
