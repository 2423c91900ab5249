"""Fixed-size string hash tables with chaining, linear or double probing."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional

_MASK = (1 << 64) - 1


class CollisionType(str, Enum):
    """Collision resolution strategy of a table."""

    CHAIN = "Chain"
    LINEAR = "Linear"
    DOUBLE = "Double"


def _char_code(byte: int) -> int:
    if 0x61 <= byte <= 0x7A:
        return byte - 0x61
    signed = byte - 256 if byte > 127 else byte
    return signed - 0x41 + 26


def _poly_hash(key: str, base: int) -> int:
    """Polynomial hash of the key's bytes, wrapping at 64 bits."""
    total = 0
    power = 1
    for byte in key.encode("utf-8"):
        total = (total + _char_code(byte) * power) & _MASK
        power = (power * base) & _MASK
    return total


class HashTable:
    """Open table of (key, value) string pairs.

    ``params`` is ``[z1, size]`` for chaining and linear probing and
    ``[z1, z2, c2, size]`` for double hashing; the size is always last.
    """

    def __init__(self, collision_type, params):
        self._collision_type = CollisionType(collision_type)
        self._params = list(params)
        if not self._params:
            raise ValueError("params must not be empty")
        if self._collision_type is CollisionType.DOUBLE:
            if len(self._params) < 3:
                raise ValueError("double hashing needs z1, z2, c2 and size")
            if self._params[2] <= 0:
                raise ValueError("c2 must be positive")
        self._size = self._params[-1]
        if self._size <= 0:
            raise ValueError("table size must be positive")
        self._count = 0
        self._table: list = [None] * self._size

    @property
    def collision_type(self) -> CollisionType:
        return self._collision_type

    @property
    def size(self) -> int:
        return self._size

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def get_slot(self, key, z1):
        """Home slot of ``key`` using ``z1`` as the polynomial base."""
        return _poly_hash(key, z1) % self._size

    def _step(self, key: str) -> int:
        if self._collision_type is CollisionType.DOUBLE:
            c2 = self._params[2]
            return c2 - (_poly_hash(key, self._params[1]) % c2)
        return 1

    def insert(self, item):
        """Store a (key, value) pair unless the key exists or the table is full."""
        key, value = item
        slot = self.get_slot(key, self._params[0])

        if self._collision_type is CollisionType.CHAIN:
            if self._table[slot] is None:
                self._table[slot] = []
            bucket = self._table[slot]
            if any(existing == key for existing, _ in bucket):
                return
            bucket.append((key, value))
            self._count += 1
            return

        step = self._step(key)
        probe = slot
        while (entry := self._table[probe]) is not None:
            if entry[0] == key:
                return
            probe = (probe + step) % self._size
            if probe == slot:
                return
        self._table[probe] = (key, value)
        self._count += 1

    def find(self, key) -> Optional[str]:
        """Value stored under ``key``, or None."""
        slot = self.get_slot(key, self._params[0])

        if self._collision_type is CollisionType.CHAIN:
            for existing, value in self._table[slot] or ():
                if existing == key:
                    return value
            return None

        step = self._step(key)
        probe = slot
        while (entry := self._table[probe]) is not None:
            if entry[0] == key:
                return entry[1]
            probe = (probe + step) % self._size
            if probe == slot:
                break
        return None

    def load(self):
        """Fraction of the table size that is occupied by entries."""
        return self._count / self._size

    def table_string(self):
        """Render every slot in order, as shown by print_table."""
        parts = []
        if self._collision_type is CollisionType.CHAIN:
            for bucket in self._table:
                if bucket is None:
                    parts.append("<EMPTY> | ")
                else:
                    parts.append("".join(f"({k}:{v}) " for k, v in bucket) + "| ")
        else:
            for entry in self._table:
                if entry is None:
                    parts.append("<EMPTY> | ")
                else:
                    parts.append(f"({entry[0]}:{entry[1]}) | ")
        return "".join(parts)

    def print_table(self):
        """Write the rendered table and a newline to stdout; return the text."""
        text = self.table_string()
        out = sys.stdout
        out.write(text)
        out.write("\n")
        out.flush()
        return text


class HashMap(HashTable):
    """String-to-string map over a fixed-size table."""

    def insert(self, key, value):
        super().insert((key, value))

    def find(self, key):
        return super().find(key)


class HashSet(HashTable):
    """Set of strings over a fixed-size table."""

    def insert(self, key):
        super().insert((key, ""))

    def find(self, key):
        return super().find(key) is not None