from dataclasses import dataclass

import pytest

from cpgeom.spatialindex import SpatialIndex
from cpgeom.transform import BB


@dataclass(eq=False)
class Item:
    bb: BB


class ListIndex(SpatialIndex):
    """Brute-force index used to exercise the shared behaviour."""

    def __init__(self, bbfunc, static_index=None):
        super().__init__(bbfunc, static_index)
        self.items = {}

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(list(self.items.values()))

    def contains(self, obj, hash_id):
        return self.items.get(hash_id) is obj

    def insert(self, obj, hash_id):
        self.items[hash_id] = obj

    def remove(self, obj, hash_id):
        if self.items.get(hash_id) is obj:
            del self.items[hash_id]

    def reindex(self):
        pass

    def reindex_object(self, obj, hash_id):
        pass

    def reindex_query(self, func):
        self.collide_static(self.static_index, func)

    def query(self, obj, bb, func):
        for other in list(self.items.values()):
            if other is not obj and self.bbfunc(other).intersects(bb):
                func(obj, other)

    def segment_query(self, obj, a, b, t_exit, func):
        for other in list(self.items.values()):
            func(obj, other)


def get_bb(item):
    return item.bb


def test_abstract_index_cannot_be_created():
    with pytest.raises(TypeError):
        SpatialIndex(get_bb, None)


def test_static_index_is_linked_to_dynamic():
    static = ListIndex(get_bb)
    dynamic = ListIndex(get_bb, static)
    assert static.dynamic_index is dynamic
    assert dynamic.static_index is static

    wall = Item(BB(0, 0, 10, 1))
    static.insert(wall, 1)
    ball = Item(BB(1, 0, 2, 2))
    dynamic.insert(ball, 2)
    pairs = []
    SpatialIndex.collide_static(
        dynamic, dynamic.static_index, lambda a, b: pairs.append((a, b))
    )
    assert [(a is ball, b is wall) for a, b in pairs] == [(True, True)]


def test_collide_static_reports_overlapping_pairs():
    static = ListIndex(get_bb)
    dynamic = ListIndex(get_bb, static)
    wall = Item(BB(0, 0, 10, 1))
    far = Item(BB(50, 50, 60, 60))
    static.insert(wall, 1)
    static.insert(far, 2)
    ball = Item(BB(2, 0.5, 3, 1.5))
    dynamic.insert(ball, 3)

    pairs = []
    dynamic.collide_static(static, lambda a, b: pairs.append((a, b)))
    assert len(pairs) == 1
    assert pairs[0][0] is ball
    assert pairs[0][1] is wall


def test_collide_static_with_empty_static_calls_nothing():
    static = ListIndex(get_bb)
    dynamic = ListIndex(get_bb, static)
    dynamic.insert(Item(BB(0, 0, 1, 1)), 1)
    pairs = []
    dynamic.collide_static(static, lambda a, b: pairs.append((a, b)))
    assert pairs == []


def test_collide_static_without_static_index_calls_nothing():
    dynamic = ListIndex(get_bb)
    dynamic.insert(Item(BB(0, 0, 1, 1)), 1)
    pairs = []
    dynamic.collide_static(None, lambda a, b: pairs.append((a, b)))
    assert pairs == []


def test_reindex_query_goes_through_collide_static():
    static = ListIndex(get_bb)
    dynamic = ListIndex(get_bb, static)
    floor = Item(BB(-5, -1, 5, 0))
    static.insert(floor, 1)
    box = Item(BB(-1, -0.5, 1, 1))
    dynamic.insert(box, 2)
    pairs = []
    dynamic.reindex_query(lambda a, b: pairs.append((a, b)))
    assert [(a is box, b is floor) for a, b in pairs] == [(True, True)]