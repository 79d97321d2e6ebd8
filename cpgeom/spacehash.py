"""Spatial hash: a broad-phase index over a fixed table of grid cells."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from .spatialindex import BBFunc, QueryFunc, SegmentQueryFunc, SpatialIndex
from .transform import BB
from .vector import Vector

_MASK = (1 << 64) - 1


def cell_floor(f: float) -> int:
    """Integer grid coordinate of ``f``, rounding towards negative infinity."""
    i = int(f)
    if f < 0 and i != f:
        return i - 1
    return i


def hash_cell(x: int, y: int, n: int) -> int:
    """Table slot of grid cell ``(x, y)`` in a table of ``n`` slots."""
    hx = ((x & _MASK) * 1640531513) & _MASK
    hy = ((y & _MASK) * 2654435789) & _MASK
    return (hx ^ hy) % n


class _Handle:
    __slots__ = ("obj", "stamp")

    def __init__(self, obj: Any) -> None:
        self.obj = obj
        self.stamp = 0


class SpaceHash(SpatialIndex):
    """Objects hashed into the grid cells their bounding boxes touch.

    Cells of size ``celldim`` are folded into ``num_cells`` table slots, so
    queries may report objects from colliding cells as well.
    """

    def __init__(
        self,
        celldim: float,
        num_cells: int,
        bbfunc: BBFunc,
        static_index: SpatialIndex | None = None,
    ) -> None:
        if num_cells <= 0:
            raise ValueError("num_cells must be positive")
        if not celldim > 0:
            raise ValueError("celldim must be positive")
        super().__init__(bbfunc, static_index)
        self.celldim = celldim
        self.num_cells = num_cells
        self._table: list[list[_Handle]] = [[] for _ in range(num_cells)]
        self._handles: dict[tuple[int, int], _Handle] = {}
        self._stamp = 1

    def _cells(self, bb: BB) -> Iterator[int]:
        dim = self.celldim
        l = cell_floor(bb.l / dim)
        r = cell_floor(bb.r / dim)
        b = cell_floor(bb.b / dim)
        t = cell_floor(bb.t / dim)
        for i in range(l, r + 1):
            for j in range(b, t + 1):
                yield hash_cell(i, j, self.num_cells)

    def _hash_handle(self, hand: _Handle, bb: BB) -> None:
        for idx in self._cells(bb):
            cell = self._table[idx]
            if any(h is hand for h in cell):
                continue
            cell.insert(0, hand)

    def _clear_table(self) -> None:
        self._table = [[] for _ in range(self.num_cells)]

    def _remove_orphans(self, idx: int) -> list[_Handle]:
        cell = self._table[idx]
        if any(h.obj is None for h in cell):
            cell = [h for h in cell if h.obj is not None]
            self._table[idx] = cell
        return cell

    def _query_cell(self, idx: int, obj: Any, func: QueryFunc) -> None:
        for hand in list(self._remove_orphans(idx)):
            other = hand.obj
            if hand.stamp == self._stamp or other is obj or other is None:
                continue
            func(obj, other)
            hand.stamp = self._stamp

    def _segment_query_cell(self, idx: int, obj: Any, func: SegmentQueryFunc) -> float:
        t = 1.0
        for hand in list(self._remove_orphans(idx)):
            other = hand.obj
            if hand.stamp == self._stamp or other is None:
                continue
            t = min(t, func(obj, other))
            hand.stamp = self._stamp
        return t

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[Any]:
        return iter([hand.obj for hand in self._handles.values()])

    def contains(self, obj: Any, hash_id: int) -> bool:
        return (hash_id, id(obj)) in self._handles

    def insert(self, obj: Any, hash_id: int) -> None:
        key = (hash_id, id(obj))
        hand = self._handles.get(key)
        if hand is None:
            hand = _Handle(obj)
            self._handles[key] = hand
        self._hash_handle(hand, self.bbfunc(obj))

    def remove(self, obj: Any, hash_id: int) -> None:
        hand = self._handles.pop((hash_id, id(obj)), None)
        if hand is not None:
            hand.obj = None

    def reindex(self) -> None:
        self._clear_table()
        for hand in list(self._handles.values()):
            self._hash_handle(hand, self.bbfunc(hand.obj))

    def reindex_object(self, obj: Any, hash_id: int) -> None:
        hand = self._handles.pop((hash_id, id(obj)), None)
        if hand is not None:
            hand.obj = None
            self.insert(obj, hash_id)

    def reindex_query(self, func: QueryFunc) -> None:
        self._clear_table()
        for hand in list(self._handles.values()):
            obj = hand.obj
            if obj is None:
                continue
            for idx in self._cells(self.bbfunc(obj)):
                if any(h is hand for h in self._table[idx]):
                    continue
                self._query_cell(idx, obj, func)
                self._table[idx].insert(0, hand)
            self._stamp += 1

        self.collide_static(self.static_index, func)

    def query(self, obj: Any, bb: BB, func: QueryFunc) -> None:
        for idx in self._cells(bb):
            self._query_cell(idx, obj, func)
        self._stamp += 1

    def segment_query(
        self, obj: Any, a: Vector, b: Vector, t_exit: float, func: SegmentQueryFunc
    ) -> None:
        a = a * (1.0 / self.celldim)
        b = b * (1.0 / self.celldim)

        cell_x = cell_floor(a.x)
        cell_y = cell_floor(a.y)

        if b.x > a.x:
            x_inc = 1
            temp_h = math.floor(a.x + 1.0) - a.x
        else:
            x_inc = -1
            temp_h = a.x - math.floor(a.x)

        if b.y > a.y:
            y_inc = 1
            temp_v = math.floor(a.y + 1.0) - a.y
        else:
            y_inc = -1
            temp_v = a.y - math.floor(a.y)

        dx = abs(b.x - a.x)
        dy = abs(b.y - a.y)
        dtdx = 1.0 / dx if dx != 0 else math.inf
        dtdy = 1.0 / dy if dy != 0 else math.inf

        next_h = temp_h * dtdx if temp_h != 0 else dtdx
        next_v = temp_v * dtdy if temp_v != 0 else dtdy

        t = 0.0
        while t < t_exit:
            idx = hash_cell(cell_x, cell_y, self.num_cells)
            t_exit = min(t_exit, self._segment_query_cell(idx, obj, func))

            if next_v < next_h:
                cell_y += y_inc
                t = next_v
                next_v += dtdy
            else:
                cell_x += x_inc
                t = next_h
                next_h += dtdx

        self._stamp += 1