from __future__ import annotations
from dataclasses import dataclass
from math import inf, sqrt
from typing import Iterable

from .geom import EPS, Vec2, Vec3, Mat4, add, sub, scale, dot, cross, normalize, transform_mat4
from .predicates import plane_from_points


@dataclass(frozen=True)
class Sphere:
    center: Vec3 = (0.0, 0.0, 0.0)
    radius: float = 1.0


@dataclass(frozen=True)
class Circle:
    center: Vec2 = (0.0, 0.0)
    radius: float = 0.0


@dataclass(frozen=True)
class Plane3:
    """normal — одиничний вектор; constant — зсув: dot(normal, p) + constant == 0."""
    normal: Vec3
    constant: float

    @classmethod
    def from_points(cls, a: Vec3, b: Vec3, c: Vec3) -> "Plane3":
        n, offset = plane_from_points(a, b, c)
        return cls(n, offset)

    def distance_to_point(self, p: Vec3) -> float:
        return dot(self.normal, p) + self.constant


@dataclass(frozen=True)
class Box3:
    """
    Вісь-орієнтований паралелепіпед (AABB).
    Порожній бокс: min = +inf, max = -inf (будь-яка точка його розширює).
    """
    min: Vec3
    max: Vec3

    @classmethod
    def empty(cls) -> "Box3":
        return cls((inf, inf, inf), (-inf, -inf, -inf))

    @classmethod
    def from_center_and_size(cls, center: Vec3, size: Vec3) -> "Box3":
        half = scale(size, 0.5)
        return cls(sub(center, half), add(center, half))

    @classmethod
    def from_points(cls, points: Iterable[Vec3]) -> "Box3":
        box = cls.empty()
        for p in points:
            box = box.expand_by_point(p)
        return box

    def is_empty(self) -> bool:
        return any(self.min[i] > self.max[i] for i in range(3))

    def center(self) -> Vec3:
        return scale(add(self.min, self.max), 0.5)

    def size(self) -> Vec3:
        return sub(self.max, self.min)

    def expand_by_point(self, p: Vec3) -> "Box3":
        return Box3(
            (min(self.min[0], p[0]), min(self.min[1], p[1]), min(self.min[2], p[2])),
            (max(self.max[0], p[0]), max(self.max[1], p[1]), max(self.max[2], p[2])),
        )

    def contains_point(self, p: Vec3) -> bool:
        """Межа вважається всередині."""
        return all(self.min[i] <= p[i] <= self.max[i] for i in range(3))

    def contains_box(self, other: "Box3") -> bool:
        return all(
            other.min[i] >= self.min[i] and other.max[i] <= self.max[i] for i in range(3)
        )

    def intersects_box(self, other: "Box3") -> bool:
        return all(
            self.min[i] <= other.max[i] and self.max[i] >= other.min[i] for i in range(3)
        )

    def intersects_sphere(self, sphere: Sphere) -> bool:
        # найближча до центру точка бокса
        c = sphere.center
        d2 = 0.0
        for i in range(3):
            q = min(max(c[i], self.min[i]), self.max[i])
            d2 += (q - c[i]) ** 2
        return d2 <= sphere.radius * sphere.radius

    def intersects_plane(self, plane: Plane3) -> bool:
        """Площина перетинає бокс, якщо проєкції крайніх кутів лежать по різні боки (або на ній)."""
        lo = hi = 0.0
        for i in range(3):
            n = plane.normal[i]
            if n > 0:
                lo += n * self.min[i]
                hi += n * self.max[i]
            else:
                lo += n * self.max[i]
                hi += n * self.min[i]
        return lo + plane.constant <= 0 <= hi + plane.constant

    def intersects_triangle(self, a: Vec3, b: Vec3, c: Vec3) -> bool:
        """
        Separating Axis Test: 9 осей (осі бокса x ребра трикутника),
        3 осі бокса і нормаль трикутника.
        """
        if self.is_empty():
            return False

        center = self.center()
        extents = sub(self.max, center)
        # зсуваємо трикутник так, щоб центр бокса був у початку координат
        v0, v1, v2 = sub(a, center), sub(b, center), sub(c, center)
        f0, f1, f2 = sub(v1, v0), sub(v2, v1), sub(v0, v2)

        axes = []
        for e in ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)):
            for f in (f0, f1, f2):
                axes.append(cross(e, f))
        axes += [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]
        axes.append(cross(f0, f1))

        for axis in axes:
            if axis == (0.0, 0.0, 0.0):
                continue  # ребро паралельне осі бокса
            p0, p1, p2 = dot(v0, axis), dot(v1, axis), dot(v2, axis)
            r = sum(extents[i] * abs(axis[i]) for i in range(3))
            if max(p0, p1, p2) < -r or min(p0, p1, p2) > r:
                return False
        return True

    def transform_mat4(self, m: Mat4) -> "Box3":
        """AABB восьми кутів після перетворення матрицею m."""
        corners = (
            (self.max[0] if i & 1 else self.min[0],
             self.max[1] if i & 2 else self.min[1],
             self.max[2] if i & 4 else self.min[2])
            for i in range(8)
        )
        return Box3.from_points(transform_mat4(p, m) for p in corners)


# ---------- трикутники ----------
def triangle_bounds(a: Vec3, b: Vec3, c: Vec3) -> Box3:
    return Box3(
        (min(a[0], b[0], c[0]), min(a[1], b[1], c[1]), min(a[2], b[2], c[2])),
        (max(a[0], b[0], c[0]), max(a[1], b[1], c[1]), max(a[2], b[2], c[2])),
    )

def triangle_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    """Одинична нормаль (a->b->c проти год. стрілки); для виродженого — нульовий вектор."""
    return normalize(cross(sub(b, a), sub(c, a)))

def triangle_centroid(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    return ((a[0] + b[0] + c[0]) / 3, (a[1] + b[1] + c[1]) / 3, (a[2] + b[2] + c[2]) / 3)

def circumcircle(a: Vec2, b: Vec2, c: Vec2) -> Circle:
    """Описане коло 2D-трикутника; для колінеарних точок — Circle((0, 0), 0)."""
    ax, ay = a
    bx, by = b
    cx, cy = c
    d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if abs(d) < EPS:
        return Circle()
    a2 = ax*ax + ay*ay
    b2 = bx*bx + by*by
    c2 = cx*cx + cy*cy
    ux = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
    uy = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
    return Circle((ux, uy), sqrt((ax - ux) ** 2 + (ay - uy) ** 2))


# ---------- відрізки ----------
def closest_point_on_segment(point: Vec2, p: Vec2, q: Vec2) -> Vec2:
    """Найближча до point точка відрізка [p, q] (параметр обрізається до [0, 1])."""
    pqx, pqy = q[0] - p[0], q[1] - p[1]
    dx, dy = point[0] - p[0], point[1] - p[1]
    d = pqx*pqx + pqy*pqy
    t = pqx*dx + pqy*dy
    if d > 0:
        t /= d
    t = min(max(t, 0.0), 1.0)
    return (p[0] + t*pqx, p[1] + t*pqy)
