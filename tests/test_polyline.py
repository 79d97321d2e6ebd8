import math

import pytest

from cpgeom.polyline import PolyLine, PolyLineSet, sharpness
from cpgeom.vector import Vector


def test_sharpness_straight_and_right_angle():
    assert sharpness(Vector(0, 0), Vector(1, 0), Vector(2, 0)) == pytest.approx(-1.0)
    assert sharpness(Vector(0, 0), Vector(1, 0), Vector(1, 1)) == pytest.approx(0.0)


def test_push_and_enqueue_return_self():
    line = PolyLine([Vector(1, 0)])
    assert line.push(Vector(2, 0)) is line
    assert line.enqueue(Vector(0, 0)) is line
    assert line.verts == [Vector(0, 0), Vector(1, 0), Vector(2, 0)]


def test_is_closed():
    assert PolyLine([Vector(0, 0), Vector(1, 0), Vector(0, 0)]).is_closed()
    assert not PolyLine([Vector(0, 0), Vector(1, 0)]).is_closed()
    assert not PolyLine([Vector(0, 0)]).is_closed()


def test_is_short():
    line = PolyLine([Vector(0, 0), Vector(1, 0), Vector(2, 0)])
    assert line.is_short(3, 0, 2, 5.0)
    assert not line.is_short(3, 0, 2, 1.5)
    assert line.is_short(3, 1, 1, 0.0)


def test_simplify_vertexes_merges_collinear():
    line = PolyLine([Vector(0, 0), Vector(1, 0), Vector(2, 0), Vector(3, 0)])
    assert line.simplify_vertexes(0.1).verts == [Vector(0, 0), Vector(3, 0)]


def test_simplify_vertexes_keeps_corner():
    verts = [Vector(0, 0), Vector(1, 0), Vector(1, 1)]
    assert PolyLine(verts).simplify_vertexes(0.1).verts == verts


def test_simplify_vertexes_needs_two_vertices():
    with pytest.raises(ValueError):
        PolyLine([Vector(0, 0)]).simplify_vertexes(0.1)


def test_simplify_curves_open_straight_line():
    line = PolyLine([Vector(0, 0), Vector(1, 0), Vector(2, 0), Vector(3, 0)])
    assert line.simplify_curves(0.5).verts == [Vector(0, 0), Vector(3, 0)]


def test_simplify_curves_keeps_peak():
    verts = [Vector(0, 0), Vector(1, 0), Vector(2, 5), Vector(3, 0), Vector(4, 0)]
    reduced = PolyLine(verts).simplify_curves(1.0)
    assert reduced.verts == [Vector(0, 0), Vector(2, 5), Vector(4, 0)]


def test_simplify_curves_closed_square():
    verts = [
        Vector(0, 0),
        Vector(1, 0),
        Vector(2, 0),
        Vector(2, 2),
        Vector(0, 2),
        Vector(0, 0),
    ]
    reduced = PolyLine(verts).simplify_curves(0.1)
    assert reduced.is_closed()
    assert reduced.verts == [Vector(0, 0), Vector(2, 0), Vector(2, 2), Vector(0, 2), Vector(0, 0)]


def test_simplify_curves_stays_within_tolerance():
    verts = [Vector(x / 10, math.sin(x / 10)) for x in range(64)]
    tol = 0.05
    reduced = PolyLine(verts).simplify_curves(tol)
    assert reduced.verts[0] == verts[0]
    assert reduced.verts[-1] == verts[-1]
    assert len(reduced.verts) < len(verts)
    for p in verts:
        nearest = min(
            p.distance(p.closest_point_on_segment(a, b))
            for a, b in zip(reduced.verts, reduced.verts[1:])
        )
        assert nearest <= tol + 1e-9


def test_simplify_curves_empty_raises():
    with pytest.raises(ValueError):
        PolyLine().simplify_curves(0.1)


def test_collect_segments_into_closed_loop():
    pls = PolyLineSet()
    corners = [Vector(0, 0), Vector(1, 0), Vector(1, 1), Vector(0, 1)]
    for a, b in zip(corners, corners[1:] + corners[:1]):
        pls.collect_segment(a, b)
    assert len(pls.lines) == 1
    assert pls.lines[0].is_closed()
    assert pls.lines[0].verts == corners + corners[:1]


def test_collect_segment_joins_two_lines():
    pls = PolyLineSet()
    pls.collect_segment(Vector(0, 0), Vector(1, 0))
    pls.collect_segment(Vector(2, 0), Vector(3, 0))
    assert len(pls.lines) == 2
    pls.collect_segment(Vector(1, 0), Vector(2, 0))
    assert len(pls.lines) == 1
    assert pls.lines[0].verts == [Vector(0, 0), Vector(1, 0), Vector(2, 0), Vector(3, 0)]


def test_collect_segment_prepends():
    pls = PolyLineSet()
    pls.collect_segment(Vector(1, 0), Vector(2, 0))
    pls.collect_segment(Vector(0, 0), Vector(1, 0))
    assert pls.lines[0].verts == [Vector(0, 0), Vector(1, 0), Vector(2, 0)]


def test_find_starts_and_ends():
    pls = PolyLineSet()
    pls.push(PolyLine([Vector(0, 0), Vector(1, 0)]))
    pls.push(PolyLine([Vector(5, 5), Vector(6, 6)]))
    assert pls.find_starts(Vector(5, 5)) == 1
    assert pls.find_ends(Vector(1, 0)) == 0
    assert pls.find_ends(Vector(5, 5)) is None
    assert pls.find_starts(Vector(9, 9)) is None


def test_join_removes_second_line():
    pls = PolyLineSet()
    pls.push(PolyLine([Vector(0, 0)]))
    pls.push(PolyLine([Vector(1, 1)]))
    pls.push(PolyLine([Vector(2, 2)]))
    pls.join(0, 2)
    assert [line.verts for line in pls.lines] == [[Vector(0, 0), Vector(2, 2)], [Vector(1, 1)]]