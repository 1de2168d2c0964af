# cghull/predicates.py
from __future__ import annotations
from math import sqrt
from typing import Tuple

from .geom import Vec2, Vec3, EPS, sub, cross, dot, norm, length_sq

Plane = Tuple[Vec3, float]  # (одинична нормаль, зсув): dot(n, p) + offset == 0


# ---------- 2D ----------
def orient2d(a: Vec2, b: Vec2, c: Vec2) -> float:
    """
    Подвоєна орієнтована площа трикутника (a, b, c):
      >0  поворот проти годинникової стрілки (c ліворуч від a->b),
      <0  за годинниковою,
       0  колінеарні.
    """
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])

def distance_to_line(a: Vec2, b: Vec2, p: Vec2, eps: float = EPS) -> float:
    """Беззнакова перпендикулярна відстань від p до прямої (a, b); 0 для виродженої прямої."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    ln = sqrt(dx*dx + dy*dy)
    if ln < eps:
        return 0.0
    return abs((p[0] - a[0]) * (-dy / ln) + (p[1] - a[1]) * (dx / ln))


# ---------- 3D ----------
def orient3d(a: Vec3, b: Vec3, c: Vec3, d: Vec3) -> float:
    ab = sub(b, a)
    ac = sub(c, a)
    ad = sub(d, a)
    return dot(cross(ab, ac), ad)

def signed_distance_to_plane(a: Vec3, b: Vec3, c: Vec3, p: Vec3) -> float:
    n = cross(sub(b, a), sub(c, a))
    area2 = norm(n)
    if area2 == 0.0:
        return 0.0
    return orient3d(a, b, c, p) / area2

def visible_from_point(a: Vec3, b: Vec3, c: Vec3, p: Vec3, eps: float = EPS) -> bool:
    return signed_distance_to_plane(a, b, c, p) > eps

def plane_from_points(a: Vec3, b: Vec3, c: Vec3, eps: float = EPS) -> Plane:
    """
    Площина через a, b, c з нормаллю за правилом правої руки (a->b->c проти год. стрілки).
    Для виродженого трикутника (|n| < eps) — умовна площина z = 0: ((0, 0, 1), 0.0).
    """
    nx, ny, nz = cross(sub(b, a), sub(c, a))
    ln = sqrt(nx*nx + ny*ny + nz*nz)
    if ln < eps:
        return (0.0, 0.0, 1.0), 0.0
    inv = 1.0 / ln
    n = (nx*inv, ny*inv, nz*inv)
    return n, -dot(n, a)

def plane_distance(plane: Plane, p: Vec3) -> float:
    n, offset = plane
    return dot(n, p) + offset

def dist_sq_to_line(p: Vec3, a: Vec3, b: Vec3, eps: float = EPS) -> float:
    """Квадрат відстані від p до прямої (a, b); для виродженої прямої — до точки a."""
    ap = sub(p, a)
    ab = sub(b, a)
    ab2 = length_sq(ab)
    if ab2 < eps:
        return length_sq(ap)
    return length_sq(cross(ap, ab)) / ab2
