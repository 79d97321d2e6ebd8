"""Marching squares: trace contours of a sampled 2D field."""

from __future__ import annotations

from collections.abc import Callable

from .polyline import PolyLineSet
from .transform import BB
from .vector import Vector, lerp

SegmentFunc = Callable[[Vector, Vector, PolyLineSet], None]
SampleFunc = Callable[[Vector], float]
CellFunc = Callable[
    [float, float, float, float, float, float, float, float, float, SegmentFunc, PolyLineSet],
    None,
]


def _collect(v0: Vector, v1: Vector, lines: PolyLineSet) -> None:
    lines.collect_segment(v0, v1)


def march_cells(
    bb: BB,
    x_samples: int,
    y_samples: int,
    threshold: float,
    sample: SampleFunc,
    cell: CellFunc,
    segment: SegmentFunc | None = None,
) -> PolyLineSet:
    """Sample ``bb`` on a grid and run ``cell`` over every grid square.

    Each sample point is evaluated once. Segments go to ``segment``, which by
    default joins them into polylines.
    """
    if x_samples < 2 or y_samples < 2:
        raise ValueError("at least two samples are needed along each axis")
    if segment is None:
        segment = _collect

    x_denom = 1.0 / (x_samples - 1)
    y_denom = 1.0 / (y_samples - 1)

    buffer = [sample(Vector(lerp(bb.l, bb.r, i * x_denom), bb.b)) for i in range(x_samples)]
    lines = PolyLineSet()

    for j in range(y_samples - 1):
        y0 = lerp(bb.b, bb.t, j * y_denom)
        y1 = lerp(bb.b, bb.t, (j + 1) * y_denom)

        b = buffer[0]
        d = sample(Vector(bb.l, y1))
        buffer[0] = d

        for i in range(x_samples - 1):
            x0 = lerp(bb.l, bb.r, i * x_denom)
            x1 = lerp(bb.l, bb.r, (i + 1) * x_denom)

            a = b
            b = buffer[i + 1]
            c = d
            d = sample(Vector(x1, y1))
            buffer[i + 1] = d

            cell(threshold, a, b, c, d, x0, x1, y0, y1, segment, lines)

    return lines


def _seg(v0: Vector, v1: Vector, segment: SegmentFunc, lines: PolyLineSet) -> None:
    if v0 != v1:
        segment(v1, v0, lines)


def _midlerp(x0: float, x1: float, s0: float, s1: float, t: float) -> float:
    return lerp(x0, x1, (t - s0) / (s1 - s0))


def _case(t: float, a: float, b: float, c: float, d: float) -> int:
    return (a > t) | (b > t) << 1 | (c > t) << 2 | (d > t) << 3


def march_cell_soft(
    threshold: float,
    a: float,
    b: float,
    c: float,
    d: float,
    x0: float,
    x1: float,
    y0: float,
    y1: float,
    segment: SegmentFunc,
    lines: PolyLineSet,
) -> None:
    """Emit the interpolated contour segments of one grid square.

    ``a`` and ``b`` are the bottom-left and bottom-right samples, ``c`` and
    ``d`` the top-left and top-right ones.
    """
    t = threshold

    def left() -> Vector:
        return Vector(x0, _midlerp(y0, y1, a, c, t))

    def right() -> Vector:
        return Vector(x1, _midlerp(y0, y1, b, d, t))

    def bottom() -> Vector:
        return Vector(_midlerp(x0, x1, a, b, t), y0)

    def top() -> Vector:
        return Vector(_midlerp(x0, x1, c, d, t), y1)

    match _case(t, a, b, c, d):
        case 0x1:
            _seg(left(), bottom(), segment, lines)
        case 0x2:
            _seg(bottom(), right(), segment, lines)
        case 0x3:
            _seg(left(), right(), segment, lines)
        case 0x4:
            _seg(top(), left(), segment, lines)
        case 0x5:
            _seg(top(), bottom(), segment, lines)
        case 0x6:
            _seg(bottom(), right(), segment, lines)
            _seg(top(), left(), segment, lines)
        case 0x7:
            _seg(top(), right(), segment, lines)
        case 0x8:
            _seg(right(), top(), segment, lines)
        case 0x9:
            _seg(left(), bottom(), segment, lines)
            _seg(right(), top(), segment, lines)
        case 0xA:
            _seg(bottom(), top(), segment, lines)
        case 0xB:
            _seg(left(), top(), segment, lines)
        case 0xC:
            _seg(right(), left(), segment, lines)
        case 0xD:
            _seg(right(), bottom(), segment, lines)
        case 0xE:
            _seg(bottom(), left(), segment, lines)


def _segs(a: Vector, b: Vector, c: Vector, segment: SegmentFunc, lines: PolyLineSet) -> None:
    _seg(b, c, segment, lines)
    _seg(a, b, segment, lines)


def march_cell_hard(
    threshold: float,
    a: float,
    b: float,
    c: float,
    d: float,
    x0: float,
    x1: float,
    y0: float,
    y1: float,
    segment: SegmentFunc,
    lines: PolyLineSet,
) -> None:
    """Emit the axis-aligned contour segments of one grid square.

    The contour runs through the square's centre lines, giving a blocky,
    aliased outline.
    """
    xm = lerp(x0, x1, 0.5)
    ym = lerp(y0, y1, 0.5)
    mid = Vector(xm, ym)

    match _case(threshold, a, b, c, d):
        case 0x1:
            _segs(Vector(x0, ym), mid, Vector(xm, y0), segment, lines)
        case 0x2:
            _segs(Vector(xm, y0), mid, Vector(x1, ym), segment, lines)
        case 0x3:
            _seg(Vector(x0, ym), Vector(x1, ym), segment, lines)
        case 0x4:
            _segs(Vector(xm, y1), mid, Vector(x0, ym), segment, lines)
        case 0x5:
            _seg(Vector(xm, y1), Vector(xm, y0), segment, lines)
        case 0x6:
            _segs(Vector(xm, y0), mid, Vector(x0, ym), segment, lines)
            _segs(Vector(xm, y1), mid, Vector(x1, ym), segment, lines)
        case 0x7:
            _segs(Vector(xm, y1), mid, Vector(x1, ym), segment, lines)
        case 0x8:
            _segs(Vector(x1, ym), mid, Vector(xm, y1), segment, lines)
        case 0x9:
            _segs(Vector(x1, ym), mid, Vector(xm, y0), segment, lines)
            _segs(Vector(x0, ym), mid, Vector(xm, y1), segment, lines)
        case 0xA:
            _seg(Vector(xm, y0), Vector(xm, y1), segment, lines)
        case 0xB:
            _segs(Vector(x0, ym), mid, Vector(xm, y1), segment, lines)
        case 0xC:
            _seg(Vector(x1, ym), Vector(x0, ym), segment, lines)
        case 0xD:
            _segs(Vector(x1, ym), mid, Vector(xm, y0), segment, lines)
        case 0xE:
            _segs(Vector(xm, y0), mid, Vector(x0, ym), segment, lines)


def march_soft(
    bb: BB,
    x_samples: int,
    y_samples: int,
    threshold: float,
    sample: SampleFunc,
    segment: SegmentFunc | None = None,
) -> PolyLineSet:
    """Trace an anti-aliased contour of the field at ``threshold``."""
    return march_cells(bb, x_samples, y_samples, threshold, sample, march_cell_soft, segment)


def march_hard(
    bb: BB,
    x_samples: int,
    y_samples: int,
    threshold: float,
    sample: SampleFunc,
    segment: SegmentFunc | None = None,
) -> PolyLineSet:
    """Trace an aliased, axis-aligned contour of the field at ``threshold``."""
    return march_cells(bb, x_samples, y_samples, threshold, sample, march_cell_hard, segment)