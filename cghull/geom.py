from __future__ import annotations
from math import sqrt
from typing import Iterable, Sequence, Tuple

EPS = 1e-12      # епс для побудови оболонок (абсолютний, не масштабований)
RAY_EPS = 1e-8   # епс для ray/triangle

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Mat4 = Sequence[float]  # 16 чисел, column-major (як у gl-matrix)


# ---------- плоский буфер координат ----------
def point_count(points: Sequence[float], stride: int) -> int:
    """Кількість точок у плоскому буфері [x0, y0, (z0,) x1, ...]."""
    n, rest = divmod(len(points), stride)
    if rest:
        raise ValueError(
            f"Buffer length {len(points)} is not a multiple of stride {stride}"
        )
    return n

def point2(points: Sequence[float], i: int) -> Vec2:
    return (points[2*i], points[2*i + 1])

def point3(points: Sequence[float], i: int) -> Vec3:
    return (points[3*i], points[3*i + 1], points[3*i + 2])


# ---------- векторна алгебра на кортежах ----------
def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])

def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])

def scale(a: Vec3, s: float) -> Vec3:
    return (a[0]*s, a[1]*s, a[2]*s)

def dot(a: Vec3, b: Vec3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]

def cross(a: Vec3, b: Vec3) -> Vec3:
    return (a[1]*b[2] - a[2]*b[1],
            a[2]*b[0] - a[0]*b[2],
            a[0]*b[1] - a[1]*b[0])

def length_sq(a: Vec3) -> float:
    return dot(a, a)

def norm(a: Vec3) -> float:
    return sqrt(dot(a, a))

def normalize(a: Vec3) -> Vec3:
    """Одиничний вектор; нульовий вектор повертається як є."""
    n = norm(a)
    if n == 0.0:
        return a
    inv = 1.0 / n
    return (a[0]*inv, a[1]*inv, a[2]*inv)

def dist_sq(a: Vec3, b: Vec3) -> float:
    return length_sq(sub(a, b))

def centroid(points: Iterable[Vec3]) -> Vec3:
    xs = ys = zs = 0.0
    n = 0
    for x, y, z in points:
        xs += x; ys += y; zs += z; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return (xs*inv, ys*inv, zs*inv)

def transform_mat4(p: Vec3, m: Mat4) -> Vec3:
    """
    Точка * 4x4 матриця (column-major) з перспективним діленням на w.
    Якщо w == 0, ділення не виконується.
    """
    x, y, z = p
    w = m[3]*x + m[7]*y + m[11]*z + m[15]
    if w == 0.0:
        w = 1.0
    return ((m[0]*x + m[4]*y + m[8]*z + m[12]) / w,
            (m[1]*x + m[5]*y + m[9]*z + m[13]) / w,
            (m[2]*x + m[6]*y + m[10]*z + m[14]) / w)
