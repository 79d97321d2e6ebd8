"""Convex hulls of point sets by QuickHull."""

from __future__ import annotations

from collections.abc import Sequence

from .vector import Vector


def loop_indexes(verts: Sequence[Vector]) -> tuple[int, int]:
    """Indexes of the lowest-then-leftmost and highest-then-rightmost vertices.

    The first index is the vertex with the smallest x (ties broken by the
    smallest y), the second the vertex with the largest x (ties broken by the
    largest y).
    """
    if not verts:
        raise ValueError("loop_indexes() needs at least one vertex")

    start = end = 0
    lowest = highest = verts[0]
    for i, v in enumerate(verts[1:], start=1):
        if v.x < lowest.x or (v.x == lowest.x and v.y < lowest.y):
            lowest = v
            start = i
        elif v.x > highest.x or (v.x == highest.x and v.y > highest.y):
            highest = v
            end = i
    return start, end


def _partition(
    buf: list[Vector], lo: int, count: int, a: Vector, b: Vector, tol: float
) -> int:
    """Move the points of ``buf[lo:lo+count]`` left of ``a -> b`` to the front.

    The point farthest to the left ends up first. Returns how many points
    lie to the left.
    """
    if count == 0:
        return 0

    best = 0.0
    pivot = 0
    delta = b - a
    value_tol = tol * delta.length()

    head = 0
    tail = count - 1
    while head <= tail:
        value = (buf[lo + head] - a).cross(delta)
        if value > value_tol:
            if value > best:
                best = value
                pivot = head
            head += 1
        else:
            buf[lo + head], buf[lo + tail] = buf[lo + tail], buf[lo + head]
            tail -= 1

    if pivot != 0:
        buf[lo], buf[lo + pivot] = buf[lo + pivot], buf[lo]
    return head


def _reduce(
    buf: list[Vector],
    lo: int,
    count: int,
    a: Vector,
    pivot: Vector,
    b: Vector,
    out: int,
    tol: float,
) -> int:
    """Write the hull points between ``a`` and ``b`` into ``buf[out:]``."""
    if count == 0:
        buf[out] = pivot
        return 1

    left = _partition(buf, lo, count, a, pivot, tol)
    index = 0
    if left >= 1:
        index = _reduce(buf, lo + 1, left - 1, a, buf[lo], pivot, out, tol)

    buf[out + index] = pivot
    index += 1

    right = _partition(buf, lo + left, count - left, pivot, b, tol)
    if right < 1:
        return index
    return index + _reduce(
        buf, lo + left + 1, right - 1, pivot, buf[lo + left], b, out + index, tol
    )


def convex_hull(verts: Sequence[Vector], tol: float = 0.0) -> list[Vector]:
    """Counter-clockwise convex hull of ``verts``.

    Points closer than ``tol`` (relative to the edge length) to a hull edge
    are dropped. The hull starts at the vertex with the smallest x.
    """
    buf = list(verts)
    start, end = loop_indexes(buf)
    if start == end:
        return [buf[0]]

    buf[0], buf[start] = buf[start], buf[0]
    if end == 0:
        buf[1], buf[start] = buf[start], buf[1]
    else:
        buf[1], buf[end] = buf[end], buf[1]

    a = buf[0]
    b = buf[1]
    count = _reduce(buf, 2, len(buf) - 2, a, b, a, 1, tol) + 1
    return buf[:count]