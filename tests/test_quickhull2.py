"""
Тести 2D QuickHull.

Покривають вироджені входи, сценарій «квадрат», обхід проти год. стрілки
та опуклість результату на випадкових точках і точках на колі.
"""

import math
import random

import pytest

from cghull.predicates import orient2d
from cghull.quickhull2 import planar_hull


def _pt(points, i):
    return (points[2 * i], points[2 * i + 1])


def _signed_area(points, hull):
    s = 0.0
    for k, i in enumerate(hull):
        x1, y1 = _pt(points, i)
        x2, y2 = _pt(points, hull[(k + 1) % len(hull)])
        s += x1 * y2 - x2 * y1
    return s / 2


def _assert_convex(points, hull, tol=1e-9):
    n = len(points) // 2
    for k, i in enumerate(hull):
        a = _pt(points, i)
        b = _pt(points, hull[(k + 1) % len(hull)])
        for j in range(n):
            assert orient2d(a, b, _pt(points, j)) >= -tol, (i, j)


# ============== Degenerate inputs ==============

@pytest.mark.parametrize("points, expected", [
    ([], []),
    ([3.0, 4.0], [0]),
    ([3.0, 4.0, -1.0, 2.0], [0, 1]),
])
def test_fewer_than_three_points_returned_as_is(points, expected):
    assert planar_hull(points) == expected


def test_collinear_keeps_only_extremes():
    assert planar_hull([0, 0, 1, 0, 2, 0]) == [0, 2]


def test_same_x_collapses_to_leftmost():
    # вертикальний набір: перша знайдена точка з мінімальним x
    assert planar_hull([1, 0, 1, 5, 1, 2, 1, -3]) == [0]


def test_duplicates_are_not_repeated():
    pts = [0, 0, 4, 0, 0, 4, 0, 0, 4, 0, 1, 1]
    hull = planar_hull(pts)
    assert len(hull) == len(set(hull)) == 3
    assert {_pt(pts, i) for i in hull} == {(0, 0), (4, 0), (0, 4)}


def test_odd_buffer_length_rejected():
    with pytest.raises(ValueError):
        planar_hull([0, 0, 1, 1, 2])


# ============== Scenarios ==============

def test_square_returns_corners_ccw(square_points):
    assert planar_hull(square_points) == [0, 1, 2, 3]


def test_triangle_with_interior_point():
    pts = [0, 0, 10, 0, 5, 8, 5, 3]
    hull = planar_hull(pts)
    assert sorted(hull) == [0, 1, 2]
    assert _signed_area(pts, hull) > 0


def test_circle_points_all_on_hull_in_angular_order():
    n = 32
    order = list(range(n))
    random.Random(5).shuffle(order)
    pts = []
    for k in order:
        t = 2 * math.pi * k / n
        pts += [math.cos(t), math.sin(t)]
    hull = planar_hull(pts)

    assert len(hull) == n
    assert _pt(pts, hull[0]) == pytest.approx((-1.0, 0.0), abs=1e-12)
    # кожен наступний крок — поворот проти год. стрілки на 2*pi/n
    angles = [math.atan2(pts[2 * i + 1], pts[2 * i]) for i in hull]
    for k in range(n):
        step = (angles[(k + 1) % n] - angles[k]) % (2 * math.pi)
        assert step == pytest.approx(2 * math.pi / n)


# ============== Properties ==============

def test_random_cloud_is_convex_and_ccw(random_cloud_2d):
    hull = planar_hull(random_cloud_2d)
    n = len(random_cloud_2d) // 2
    assert len(hull) == len(set(hull))
    assert all(0 <= i < n for i in hull)
    assert _signed_area(random_cloud_2d, hull) > 0
    _assert_convex(random_cloud_2d, hull)


def test_deterministic(random_cloud_2d):
    assert planar_hull(random_cloud_2d) == planar_hull(list(random_cloud_2d))


def test_input_not_mutated(random_cloud_2d):
    before = list(random_cloud_2d)
    planar_hull(random_cloud_2d)
    assert random_cloud_2d == before


def test_matches_qhull(random_cloud_2d):
    np = pytest.importorskip("numpy")
    spatial = pytest.importorskip("scipy.spatial")

    ours = planar_hull(random_cloud_2d)
    ref = [int(i) for i in spatial.ConvexHull(np.reshape(random_cloud_2d, (-1, 2))).vertices]

    assert set(ours) == set(ref)
    # той самий цикл з точністю до стартової вершини
    k = ref.index(ours[0])
    assert ref[k:] + ref[:k] == ours
