import time
from collections import OrderedDict
from typing import Any, Callable, Tuple


class TTLCache:
    """Bounded in-memory cache whose entries expire after ``ttl`` seconds."""

    def __init__(
        self,
        *,
        ttl: float,
        max_size: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.cache: "OrderedDict[str, Tuple[float, Any]]" = OrderedDict()
        self.ttl = ttl
        self.max_size = max_size
        self._clock = clock

    def __setitem__(self, key: str, value: Any) -> None:
        if key in self.cache:
            self.cache.move_to_end(key)
        self.cache[key] = (self._clock(), value)
        # If we've exceeded max size, remove oldest
        if len(self.cache) > self.max_size:
            self.cache.popitem(last=False)

    def __getitem__(self, key: str) -> Any:
        if key not in self:
            raise KeyError(key)
        return self.cache[key][1]

    def __contains__(self, key: str) -> bool:
        entry = self.cache.get(key)
        if entry is None:
            return False
        if self._expired(entry[0]):
            del self.cache[key]
            return False
        return True

    def pop(self, key: str) -> None:
        self.cache.pop(key, None)

    def clear(self) -> None:
        self.cache.clear()

    def _expired(self, stored_at: float) -> bool:
        return self._clock() - stored_at >= self.ttl
