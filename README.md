# cpgeom

Pure-Python 2D geometry building blocks of the kind a rigid-body physics
engine is built on, with no dependencies beyond the standard library.

- `cpgeom.vector`: an immutable `Vector` dataclass with `+`, `-`, unary
  `-` and `*` (by a scalar), `dot`, `cross`, `perp`, `reverse_perp`,
  `project`, `rotate`, `unrotate`, `length`, `normalize` (the zero vector
  stays zero), interpolation (`lerp`, `slerp`, `slerp_const`,
  `lerp_const`), `clamp` to a length, distances and closest-point
  helpers (`closest_point_on_segment`, `closest_t`, `lerp_t`,
  `closest_dist`). It also has `for_angle` and the scalar helpers `clamp`,
  `clamp01`, `lerp` and `lerp_const`.
- `cpgeom.transform`: `BB`, an axis-aligned bounding box (`l`, `b`, `r`,
  `t`) with `center`, `for_extents` and `intersects`; and `Transform`, a
  2D affine transform with the constructors `identity`, `from_rows`,
  `translate`, `scale`, `rotate`, `rigid`, `ortho`, `bone_scale` and
  `axial_scale`, and the operations `point`, `vect`, `bb`, `inverse`,
  `rigid_inverse`, `mult` (also the `@` operator) and `wrap`.
- `cpgeom.hull`: `convex_hull(verts, tol)` returns the counter-clockwise
  hull by QuickHull, starting at the vertex with the smallest x;
  `loop_indexes(verts)` finds the extreme vertices.
- `cpgeom.polyline`: `PolyLine` (`push`, `enqueue`, `is_closed`,
  `is_short`, `simplify_vertexes`, `simplify_curves`) and `PolyLineSet`,
  which assembles loose segments into polylines with `collect_segment`.
- `cpgeom.march`: marching squares over any sampling function.
  `march_soft` traces an interpolated contour, `march_hard` an aliased,
  axis-aligned one; both return a `PolyLineSet`. `march_cells`,
  `march_cell_soft` and `march_cell_hard` are the building blocks.
- `cpgeom.spatialindex`: `SpatialIndex`, the abstract interface of a
  broad-phase index (`insert`, `remove`, `contains`, `reindex`,
  `reindex_object`, `reindex_query`, `query`, `segment_query`,
  `collide_static`, `len()` and iteration).
- `cpgeom.spacehash`: `SpaceHash`, a `SpatialIndex` that hashes objects
  into the grid cells their bounding boxes touch, plus `cell_floor` and
  `hash_cell`.

## Installation

```
pip install cpgeom
```

## Example

```python
from cpgeom.vector import Vector
from cpgeom.transform import BB, Transform
from cpgeom.hull import convex_hull
from cpgeom.march import march_soft
from cpgeom.spacehash import SpaceHash

# Vectors and transforms
t = Transform.translate(Vector(1, 2)) @ Transform.rotate(0.5)
p = t.point(Vector(3, 0))

# Convex hull of a point cloud
hull = convex_hull([Vector(0, 0), Vector(2, 0), Vector(1, 1), Vector(2, 2), Vector(0, 2)], 0.0)

# Trace the outline of a disc of radius 3
def sample(point):
    return 1.0 if point.length() < 3 else 0.0

lines = march_soft(BB(-5, -5, 5, 5), 32, 32, 0.5, sample)
for line in lines.lines:
    print(len(line.verts), line.is_closed())

# Broad-phase candidates from a spatial hash
boxes = {"a": BB(0, 0, 1, 1), "b": BB(0.5, 0.5, 2, 2), "c": BB(10, 10, 11, 11)}
index = SpaceHash(1.0, 101, boxes.__getitem__)
for hash_id, name in enumerate(boxes):
    index.insert(name, hash_id)

found = []
index.query(None, BB(0, 0, 1, 1), lambda obj, other: found.append(other))
```

`SpaceHash.query` calls the function once per candidate. Cells are folded
into a fixed number of table slots, so candidates from colliding cells may
be reported too; check the bounding boxes (for example with
`BB.intersects`) when exact results are needed.

## What it does not do

This package supplies geometry and broad-phase indexing only. It has no
bodies, shapes, collision detection between shapes, constraints, joints or
solver, and no simulation step; no bounding-box tree index is provided
besides `SpaceHash`. There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```