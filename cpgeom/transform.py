"""Axis-aligned bounding boxes and 2D affine transforms."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector, for_angle


@dataclass(frozen=True)
class BB:
    """Axis-aligned bounding box: left, bottom, right, top."""

    l: float
    b: float
    r: float
    t: float

    def center(self) -> Vector:
        return Vector(self.l, self.b).lerp(Vector(self.r, self.t), 0.5)

    @classmethod
    def for_extents(cls, center: Vector, hw: float, hh: float) -> BB:
        """Box centred on ``center`` with half-width ``hw`` and half-height ``hh``."""
        return cls(center.x - hw, center.y - hh, center.x + hw, center.y + hh)

    def intersects(self, other: BB) -> bool:
        return (
            self.l <= other.r
            and other.l <= self.r
            and self.b <= other.t
            and other.b <= self.t
        )


@dataclass(frozen=True)
class Transform:
    """Affine transform ``[[a, c, tx], [b, d, ty]]``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @classmethod
    def from_rows(
        cls, a: float, c: float, tx: float, b: float, d: float, ty: float
    ) -> Transform:
        """Build a transform from its matrix written row by row."""
        return cls(a, b, c, d, tx, ty)

    @classmethod
    def translate(cls, translate: Vector) -> Transform:
        return cls.from_rows(1, 0, translate.x, 0, 1, translate.y)

    @classmethod
    def scale(cls, scale_x: float, scale_y: float) -> Transform:
        return cls.from_rows(scale_x, 0, 0, 0, scale_y, 0)

    @classmethod
    def rotate(cls, radians: float) -> Transform:
        rot = for_angle(radians)
        return cls.from_rows(rot.x, -rot.y, 0, rot.y, rot.x, 0)

    @classmethod
    def rigid(cls, translate: Vector, radians: float) -> Transform:
        rot = for_angle(radians)
        return cls.from_rows(rot.x, -rot.y, translate.x, rot.y, rot.x, translate.y)

    @classmethod
    def ortho(cls, bb: BB) -> Transform:
        """Map ``bb`` onto the square from (-1, -1) to (1, 1)."""
        return cls.from_rows(
            2.0 / (bb.r - bb.l), 0.0, -(bb.r + bb.l) / (bb.r - bb.l),
            0.0, 2.0 / (bb.t - bb.b), -(bb.t + bb.b) / (bb.t - bb.b),
        )

    @classmethod
    def bone_scale(cls, v0: Vector, v1: Vector) -> Transform:
        """Map (0, 0) to ``v0`` and (1, 0) to ``v1``."""
        d = v1 - v0
        return cls.from_rows(d.x, -d.y, v0.x, d.y, d.x, v0.y)

    @classmethod
    def axial_scale(cls, axis: Vector, pivot: Vector, scale: float) -> Transform:
        """Scale by ``scale`` along ``axis`` about ``pivot``."""
        a = axis.x * axis.y * (scale - 1.0)
        b = axis.dot(pivot) * (1.0 - scale)
        return cls.from_rows(
            scale * axis.x * axis.x + axis.y * axis.y, a, axis.x * b,
            a, axis.x * axis.x + scale * axis.y * axis.y, axis.y * b,
        )

    def rigid_inverse(self) -> Transform:
        """Inverse of a rigid transform (rotation and translation only)."""
        return Transform.from_rows(
            self.d, -self.c, self.c * self.ty - self.tx * self.d,
            -self.b, self.a, self.tx * self.b - self.a * self.ty,
        )

    def inverse(self) -> Transform:
        inv_det = 1.0 / (self.a * self.d - self.c * self.b)
        return Transform.from_rows(
            self.d * inv_det,
            -self.c * inv_det,
            (self.c * self.ty - self.tx * self.d) * inv_det,
            -self.b * inv_det,
            self.a * inv_det,
            (self.tx * self.b - self.a * self.ty) * inv_det,
        )

    def mult(self, other: Transform) -> Transform:
        """Compose: the result applies ``other`` first, then ``self``."""
        t, t2 = self, other
        return Transform.from_rows(
            t.a * t2.a + t.c * t2.b,
            t.a * t2.c + t.c * t2.d,
            t.a * t2.tx + t.c * t2.ty + t.tx,
            t.b * t2.a + t.d * t2.b,
            t.b * t2.c + t.d * t2.d,
            t.b * t2.tx + t.d * t2.ty + t.ty,
        )

    def __matmul__(self, other: Transform) -> Transform:
        return self.mult(other)

    def point(self, p: Vector) -> Vector:
        return Vector(
            self.a * p.x + self.c * p.y + self.tx,
            self.b * p.x + self.d * p.y + self.ty,
        )

    def vect(self, v: Vector) -> Vector:
        """Transform a direction, ignoring translation."""
        return Vector(self.a * v.x + self.c * v.y, self.b * v.x + self.d * v.y)

    def bb(self, bb: BB) -> BB:
        """Bounding box enclosing the transformed box."""
        hw = (bb.r - bb.l) * 0.5
        hh = (bb.t - bb.b) * 0.5
        a = self.a * hw
        b = self.c * hh
        d = self.b * hw
        e = self.d * hh
        hw_max = max(abs(a + b), abs(a - b))
        hh_max = max(abs(d + e), abs(d - e))
        return BB.for_extents(self.point(bb.center()), hw_max, hh_max)

    def wrap(self, inner: Transform) -> Transform:
        """Apply ``inner`` in the coordinate frame of this transform."""
        return self.inverse().mult(inner.mult(self))