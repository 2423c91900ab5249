"""Hash tables that grow to the next supplied prime size when half full."""

from __future__ import annotations

from .hash_table import CollisionType, HashTable
from .primes import get_next_size

_MAX_LOAD = 0.5


class _GrowingTable(HashTable):
    """Table that re-inserts every entry into a larger table on rehash."""

    def _entries(self):
        if self._collision_type is CollisionType.CHAIN:
            for bucket in self._table:
                if bucket is not None:
                    yield from bucket
        else:
            for entry in self._table:
                if entry is not None:
                    yield entry

    def _slot_keys(self):
        """Keys of the occupied probing slots in slot order; empty for chaining."""
        if self._collision_type is CollisionType.CHAIN:
            return []
        return [entry[0] for entry in self._table if entry is not None]

    def _put(self, item):
        HashTable.insert(self, item)
        if self.load() >= _MAX_LOAD:
            self.rehash()

    def rehash(self):
        """Move every entry into a table of the next supplied size.

        Raises RuntimeError when no more sizes are available.
        """
        new_size = get_next_size()
        old_entries = list(self._entries())
        self._params[-1] = new_size
        self._size = new_size
        self._count = 0
        self._table = [None] * new_size
        for entry in old_entries:
            HashTable.insert(self, entry)


class DynamicHashMap(_GrowingTable):
    """String-to-string map that grows once its load reaches one half."""

    def insert(self, key, value):
        self._put((key, value))

    def rehash(self):
        super().rehash()


class DynamicHashSet(_GrowingTable):
    """Set of strings that grows once its load reaches one half."""

    def insert(self, key):
        self._put((key, ""))

    def rehash(self):
        super().rehash()

    def find(self, key):
        return HashTable.find(self, key) is not None