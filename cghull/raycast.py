from __future__ import annotations
from dataclasses import dataclass

from .geom import RAY_EPS, Vec3, sub, dot, cross, norm, normalize
from .shapes import Box3

PARALLEL_EPS = 1e-10  # |d| менше цього — промінь паралельний шару бокса


@dataclass(frozen=True)
class Ray3:
    """Промінь-відрізок: origin + t * direction, t ∈ [0, length]. direction зазвичай одиничний."""
    origin: Vec3 = (0.0, 0.0, 0.0)
    direction: Vec3 = (0.0, 0.0, 0.0)
    length: float = 1.0

    @classmethod
    def from_segment(cls, a: Vec3, b: Vec3) -> "Ray3":
        d = sub(b, a)
        return cls(a, normalize(d), norm(d))


@dataclass(frozen=True)
class RayHit:
    hit: bool = False
    fraction: float = 0.0   # t / length


MISS = RayHit()


def intersects_triangle(ray: Ray3, a: Vec3, b: Vec3, c: Vec3) -> RayHit:
    """
    Möller–Trumbore. Попадання рахується лише для t ∈ (eps, length + eps];
    fraction — частка довжини променя до точки перетину.
    """
    edge1 = sub(b, a)
    edge2 = sub(c, a)
    h = cross(ray.direction, edge2)
    det = dot(edge1, h)
    if -RAY_EPS < det < RAY_EPS:
        return MISS  # паралельно площині трикутника

    inv_det = 1.0 / det
    s = sub(ray.origin, a)
    u = inv_det * dot(s, h)
    if u < -RAY_EPS or u > 1.0 + RAY_EPS:
        return MISS

    q = cross(s, edge1)
    v = inv_det * dot(ray.direction, q)
    if v < -RAY_EPS or u + v > 1.0 + RAY_EPS:
        return MISS

    t = inv_det * dot(edge2, q)
    if RAY_EPS < t <= ray.length + RAY_EPS:
        return RayHit(True, t / ray.length)
    return MISS


def intersects_box(ray: Ray3, box: Box3) -> bool:
    """Slab-тест; паралельні осі обробляються окремо."""
    tmin = 0.0
    tmax = ray.length
    for i in range(3):
        d = ray.direction[i]
        if abs(d) < PARALLEL_EPS:
            if ray.origin[i] < box.min[i] or ray.origin[i] > box.max[i]:
                return False
            continue
        inv = 1.0 / d
        t0 = (box.min[i] - ray.origin[i]) * inv
        t1 = (box.max[i] - ray.origin[i]) * inv
        if inv < 0:
            t0, t1 = t1, t0
        tmin = max(tmin, t0)
        tmax = min(tmax, t1)
        if tmax < tmin:
            return False
    return True
