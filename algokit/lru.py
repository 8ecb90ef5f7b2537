"""A fixed-capacity cache that evicts the least recently used entry."""

from __future__ import annotations

from collections import OrderedDict

_MISSING = -1


class LRUCache:
    """Map integer keys to values, dropping the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recently used, or -1 if absent."""
        if key not in self._entries:
            return _MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if over capacity."""
        self._entries.pop(key, None)
        self._entries[key] = value
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=False)