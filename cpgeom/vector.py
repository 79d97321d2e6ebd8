"""Two-dimensional vectors and scalar helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass


def clamp(f: float, lo: float, hi: float) -> float:
    """Clamp ``f`` into ``[lo, hi]``; when ``lo > hi`` the smaller bound wins."""
    if f > lo:
        return min(f, hi)
    return min(lo, hi)


def clamp01(f: float) -> float:
    """Clamp ``f`` into ``[0, 1]``."""
    return max(0.0, min(f, 1.0))


def lerp(f1: float, f2: float, t: float) -> float:
    """Linearly interpolate between ``f1`` and ``f2``."""
    return f1 * (1.0 - t) + f2 * t


def lerp_const(f1: float, f2: float, d: float) -> float:
    """Move ``f1`` towards ``f2`` by at most ``d``."""
    return f1 + clamp(f2 - f1, -d, d)


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"{self.x:f},{self.y:f}"

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, s: float) -> Vector:
        return Vector(self.x * s, self.y * s)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def perp(self) -> Vector:
        """Rotate 90 degrees counter-clockwise."""
        return Vector(-self.y, self.x)

    def reverse_perp(self) -> Vector:
        """Rotate 90 degrees clockwise."""
        return Vector(self.y, -self.x)

    def project(self, other: Vector) -> Vector:
        return other * (self.dot(other) / other.dot(other))

    def to_angle(self) -> float:
        return math.atan2(self.y, self.x)

    def rotate(self, other: Vector) -> Vector:
        """Complex multiplication of the two vectors."""
        return Vector(
            self.x * other.x - self.y * other.y,
            self.x * other.y + self.y * other.x,
        )

    def unrotate(self, other: Vector) -> Vector:
        """Inverse of :meth:`rotate`."""
        return Vector(
            self.x * other.x + self.y * other.y,
            self.y * other.x - self.x * other.y,
        )

    def length_sq(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def lerp(self, other: Vector, t: float) -> Vector:
        return self * (1.0 - t) + other * t

    def normalize(self) -> Vector:
        """Unit vector in the same direction; the zero vector stays zero."""
        return self * (1.0 / (self.length() + 1e-15))

    def slerp(self, other: Vector, t: float) -> Vector:
        """Spherical interpolation between two vectors."""
        dot = self.normalize().dot(other.normalize())
        omega = math.acos(clamp(dot, -1.0, 1.0))
        if omega < 1e-3:
            return self.lerp(other, t)
        denom = 1.0 / math.sin(omega)
        return self * (math.sin((1.0 - t) * omega) * denom) + other * (
            math.sin(t * omega) * denom
        )

    def slerp_const(self, other: Vector, a: float) -> Vector:
        """Spherically rotate towards ``other`` by at most ``a`` radians."""
        dot = self.normalize().dot(other.normalize())
        omega = math.acos(clamp(dot, -1.0, 1.0))
        t = min(a, omega) / omega if omega else math.nan
        return self.slerp(other, t)

    def clamp(self, length: float) -> Vector:
        """Limit the vector's length to ``length``."""
        if self.dot(self) > length * length:
            return self.normalize() * length
        return Vector(self.x, self.y)

    def lerp_const(self, other: Vector, d: float) -> Vector:
        return self + (other - self).clamp(d)

    def distance(self, other: Vector) -> float:
        return (self - other).length()

    def distance_sq(self, other: Vector) -> float:
        return (self - other).length_sq()

    def near(self, other: Vector, d: float) -> bool:
        return self.distance_sq(other) < d * d

    def point_greater(self, b: Vector, c: Vector) -> bool:
        return (b.y - self.y) * (self.x + b.x - 2 * c.x) > (b.x - self.x) * (
            self.y + b.y - 2 * c.y
        )

    def check_axis(self, v1: Vector, p: Vector, n: Vector) -> bool:
        return p.dot(n) <= max(self.dot(n), v1.dot(n))

    def closest_t(self, b: Vector) -> float:
        delta = b - self
        return -clamp(delta.dot(self + b) / delta.length_sq(), -1.0, 1.0)

    def lerp_t(self, b: Vector, t: float) -> Vector:
        ht = 0.5 * t
        return self * (0.5 - ht) + b * (0.5 + ht)

    def closest_dist(self, v1: Vector) -> float:
        return self.lerp_t(v1, self.closest_t(v1)).length_sq()

    def closest_point_on_segment(self, a: Vector, b: Vector) -> Vector:
        """Closest point to this one on the segment from ``a`` to ``b``."""
        delta = a - b
        t = clamp01(delta.dot(self - b) / delta.length_sq())
        return b + delta * t


def for_angle(a: float) -> Vector:
    """Unit vector pointing at angle ``a`` (radians)."""
    return Vector(math.cos(a), math.sin(a))