"""Allocation of object slots by lowest free index."""

from __future__ import annotations

from typing import Set


class PoolFullError(Exception):
    """Raised when no free slot remains in an ObjectPool."""


class ObjectPool:
    """Hands out integer ids in 0..maxobjs-1, always the lowest free one."""

    def __init__(self, maxobjs: int) -> None:
        if maxobjs < 0:
            raise ValueError("maxobjs must not be negative")
        self.maxobjs = maxobjs
        self._used: Set[int] = set()
        self._highest = -1

    def alloc(self) -> int:
        """Take and return the lowest free id; raise PoolFullError if none."""
        for obj_id in range(self.maxobjs):
            if obj_id not in self._used:
                self._used.add(obj_id)
                self._highest = max(self._highest, obj_id)
                return obj_id
        raise PoolFullError(f"all {self.maxobjs} slots are in use")

    def use(self, obj_id: int) -> int:
        """Mark a given id as taken and return it."""
        if obj_id < 0 or obj_id > self.maxobjs:
            raise ValueError(f"id {obj_id} out of range 0..{self.maxobjs}")
        self._used.add(obj_id)
        self._highest = max(self._highest, obj_id)
        return obj_id

    def free(self, obj_id: int) -> None:
        """Release an id; the highest id is recomputed when it is the one freed."""
        self._used.discard(obj_id)
        if obj_id == self._highest:
            self._highest = max(self._used, default=-1)

    def free_all(self) -> None:
        self._used.clear()
        self._highest = -1

    def highest(self) -> int:
        """Highest id in use, or -1 when the pool is empty."""
        return self._highest

    def is_allocated(self, obj_id: int) -> bool:
        return obj_id in self._used