"""Polylines, their simplification and assembly from loose segments."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .hull import loop_indexes
from .vector import Vector


def _next(i: int, count: int) -> int:
    return (i + 1) % count


def sharpness(a: Vector, b: Vector, c: Vector) -> float:
    """Cosine of the angle at ``b`` between ``b -> a`` and ``b -> c``."""
    return (a - b).normalize().dot((c - b).normalize())


@dataclass
class PolyLine:
    """An ordered run of vertices; closed when the ends coincide."""

    verts: list[Vector] = field(default_factory=list)

    def push(self, v: Vector) -> PolyLine:
        """Append a vertex at the end."""
        self.verts.append(v)
        return self

    def enqueue(self, v: Vector) -> PolyLine:
        """Insert a vertex at the front."""
        self.verts.insert(0, v)
        return self

    def is_closed(self) -> bool:
        return len(self.verts) > 1 and self.verts[0] == self.verts[-1]

    def is_short(self, count: int, start: int, end: int, min_length: float) -> bool:
        """Whether the run from ``start`` to ``end`` (wrapping at ``count``) is
        no longer than ``min_length``."""
        length = 0.0
        i = start
        while i != end:
            nxt = _next(i, count)
            length += self.verts[i].distance(self.verts[nxt])
            if length > min_length:
                return False
            i = nxt
        return True

    def simplify_vertexes(self, tol: float) -> PolyLine:
        """Join adjacent segments whose angle differs by less than ``tol`` radians.

        Works well for hard-edged shapes.
        """
        if len(self.verts) < 2:
            raise ValueError("simplify_vertexes() needs at least two vertices")

        reduced = PolyLine([self.verts[0], self.verts[1]])
        min_sharp = -math.cos(tol)

        for vert in self.verts[2:]:
            if sharpness(reduced.verts[-2], reduced.verts[-1], vert) <= min_sharp:
                reduced.verts[-1] = vert
            else:
                reduced.push(vert)

        if (
            self.is_closed()
            and sharpness(reduced.verts[-2], reduced.verts[0], reduced.verts[1])
            < min_sharp
        ):
            reduced.verts[0] = reduced.verts[-2]
        return reduced

    def simplify_curves(self, tol: float) -> PolyLine:
        """Reduce the vertex count, never straying more than ``tol`` from the
        original line. Works best for smooth shapes."""
        if not self.verts:
            raise ValueError("simplify_curves() needs at least one vertex")

        reduced = PolyLine()
        min_length = tol / 2.0
        verts = self.verts

        if self.is_closed():
            length = len(verts) - 1
            start, end = loop_indexes(verts[:length])
            reduced.push(verts[start])
            _douglas_peucker(self, reduced, length, start, end, min_length, tol)
            reduced.push(verts[end])
            _douglas_peucker(self, reduced, length, end, start, min_length, tol)
            reduced.push(verts[start])
        else:
            reduced.push(verts[0])
            _douglas_peucker(self, reduced, len(verts), 0, len(verts) - 1, min_length, tol)
            reduced.push(verts[-1])
        return reduced


def _douglas_peucker(
    source: PolyLine,
    reduced: PolyLine,
    length: int,
    start: int,
    end: int,
    min_length: float,
    tol: float,
) -> None:
    """Push onto ``reduced`` the vertices kept strictly between start and end."""
    if (end - start + length) % length < 2:
        return

    verts = source.verts
    a = verts[start]
    b = verts[end]

    if a.near(b, min_length) and source.is_short(length, start, end, min_length):
        return

    best = 0.0
    best_i = start
    n = (b - a).perp().normalize()
    d = n.dot(a)

    i = _next(start, length)
    while i != end:
        dist = abs(n.dot(verts[i]) - d)
        if dist > best:
            best = dist
            best_i = i
        i = _next(i, length)

    if best > tol:
        _douglas_peucker(source, reduced, length, start, best_i, min_length, tol)
        reduced.push(verts[best_i])
        _douglas_peucker(source, reduced, length, best_i, end, min_length, tol)


@dataclass
class PolyLineSet:
    """A collection of polylines built up segment by segment."""

    lines: list[PolyLine] = field(default_factory=list)

    def find_ends(self, v: Vector) -> int | None:
        """Index of the first polyline that ends with ``v``."""
        for i, line in enumerate(self.lines):
            if line.verts and line.verts[-1] == v:
                return i
        return None

    def find_starts(self, v: Vector) -> int | None:
        """Index of the first polyline that starts with ``v``."""
        for i, line in enumerate(self.lines):
            if line.verts and line.verts[0] == v:
                return i
        return None

    def push(self, line: PolyLine) -> None:
        self.lines.append(line)

    def join(self, before: int, after: int) -> None:
        """Append line ``after`` to line ``before`` and drop ``after``."""
        self.lines[before].verts.extend(self.lines[after].verts)
        del self.lines[after]

    def collect_segment(self, v0: Vector, v1: Vector) -> None:
        """Add the segment ``v0 -> v1``.

        It starts a new polyline, extends or closes an existing one, or joins
        two of them together.
        """
        before = self.find_ends(v0)
        after = self.find_starts(v1)

        if before is not None and after is not None:
            if before == after:
                self.lines[before].push(v1)
            else:
                self.join(before, after)
        elif before is not None:
            self.lines[before].push(v1)
        elif after is not None:
            self.lines[after].enqueue(v0)
        else:
            self.push(PolyLine([v0, v1]))