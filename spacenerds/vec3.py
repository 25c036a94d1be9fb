"""Three-dimensional vectors and helpers for headings, spheres and planes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

ZERO_TOLERANCE = 0.000001


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def len2(self) -> float:
        """Square of the vector's length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.len2())

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; raises ZeroDivisionError for a zero vector."""
        length = self.magnitude()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def dist(self, other: Vec3) -> float:
        return (self - other).magnitude()

    def lerp(self, other: Vec3, t: float) -> Vec3:
        """Linear interpolation from this vector (t=0) to other (t=1)."""
        return Vec3(
            self.x + t * (other.x - self.x),
            self.y + t * (other.y - self.y),
            self.z + t * (other.z - self.z),
        )


def normalize_euler_0_2pi(a: float) -> float:
    """Bring a negative angle up into the range starting at zero."""
    while a < 0:
        a += 2 * math.pi
    return a


def heading_mark_to_vec3(r: float, heading: float, mark: float) -> Vec3:
    """Vector of length r for a heading (around y from +x toward -z) and mark (up from xz)."""
    return Vec3(
        r * math.cos(mark) * math.cos(heading),
        r * math.sin(mark),
        -r * math.cos(mark) * math.sin(heading),
    )


def vec3_to_heading_mark(v: Vec3) -> Tuple[float, float, float]:
    """Return (r, heading, mark) for a direction vector."""
    heading = normalize_euler_0_2pi(math.atan2(-v.z, v.x))
    dist = v.magnitude()
    mark = 0.0 if dist < ZERO_TOLERANCE else math.asin(v.y / dist)
    return dist, heading, mark


def sphere_line_segment_intersection(
    v0: Vec3, v1: Vec3, center: Vec3, r: float
) -> Optional[Tuple[Vec3, Vec3]]:
    """Endpoints of the part of segment v0-v1 inside the sphere, or None if none."""
    cx, cy, cz = center
    px, py, pz = v0
    vx, vy, vz = v1.x - px, v1.y - py, v1.z - pz

    a = vx * vx + vy * vy + vz * vz
    b = 2.0 * (px * vx + py * vy + pz * vz - vx * cx - vy * cy - vz * cz)
    c = (
        px * px - 2 * px * cx + cx * cx
        + py * py - 2 * py * cy + cy * cy
        + pz * pz - 2 * pz * cz + cz * cz
        - r * r
    )
    d = b * b - 4.0 * a * c
    if d <= 0:
        return None

    t1 = (-b - math.sqrt(d)) / (2.0 * a)
    t2 = (-b + math.sqrt(d)) / (2.0 * a)
    if (t1 < 0 and t2 < 0) or (t1 > 1 and t2 > 1):
        return None

    start = v0 if t1 < 0 else v0.lerp(v1, t1)
    end = v1 if t2 > 1 else v0.lerp(v1, t2)
    return start, end


def plane_vector_u_and_v_from_normal(n: Vec3) -> Tuple[Vec3, Vec3]:
    """Two perpendicular unit vectors (u, v) lying on the plane with normal n."""
    basis = Vec3(1.0, 0.0, 0.0)
    if abs(n.dot(basis)) < ZERO_TOLERANCE:
        basis = Vec3(0.0, 1.0, 0.0)
    v = basis.cross(n).normalized()
    u = n.cross(v).normalized()
    return u, v