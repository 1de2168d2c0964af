import numpy as np
import pytest

from cghull.pipeline import convex_hull, hull_vertices


@pytest.fixture
def cloud3():
    rng = np.random.default_rng(11)
    return rng.uniform(-1, 1, size=(120, 3))


@pytest.fixture
def cloud2():
    rng = np.random.default_rng(3)
    return rng.normal(size=(150, 2))


def test_2d_array_dispatches_to_planar(square_points):
    arr = np.reshape(square_points, (-1, 2))
    assert convex_hull(arr) == [0, 1, 2, 3]


def test_3d_list_of_tuples(cube_corners):
    tris = convex_hull(cube_corners)
    assert len(tris) == 36
    assert hull_vertices(tris) == list(range(8))


@pytest.mark.parametrize("bad", [
    [1.0, 2.0, 3.0],
    np.zeros((4, 4)),
    np.zeros((2, 3, 2)),
])
def test_rejects_bad_shapes(bad):
    with pytest.raises(ValueError):
        convex_hull(bad)


def test_unknown_backend(cube_corners):
    with pytest.raises(ValueError):
        convex_hull(cube_corners, backend="cgal")


def test_scipy_backend_agrees_2d(cloud2):
    pytest.importorskip("scipy")
    ours = convex_hull(cloud2)
    ref = convex_hull(cloud2, backend="scipy")
    assert set(ours) == set(ref)
    k = ref.index(ours[0])
    assert ref[k:] + ref[:k] == ours


def test_scipy_backend_agrees_3d(cloud3):
    pytest.importorskip("scipy")
    ours = convex_hull(cloud3)
    ref = convex_hull(cloud3, backend="SciPy")
    assert hull_vertices(ours) == hull_vertices(ref)
    assert len(ours) == len(ref)


def test_scipy_backend_outward_winding(cloud3):
    pytest.importorskip("scipy")
    tris = convex_hull(cloud3, backend="scipy")
    center = cloud3.mean(axis=0)
    for k in range(0, len(tris), 3):
        a, b, c = cloud3[tris[k:k + 3]]
        assert np.dot(np.cross(b - a, c - a), a - center) > 0


def test_scipy_backend_degenerate_is_empty():
    pytest.importorskip("scipy")
    flat = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0), (0.5, 0.2, 0)]
    assert convex_hull(flat, backend="scipy") == []
    assert convex_hull(flat) == []


def test_hull_vertices():
    assert hull_vertices([3, 1, 2, 1, 3, 0]) == [0, 1, 2, 3]


@pytest.mark.parametrize("points, expected", [
    ([(0, 0), (1, 0), (2, 0)], [0, 2]),      # колінеарні: лише крайні
    ([(1, 0), (1, 5), (1, 2)], [0]),         # спільний x: лише найлівіша
    ([(0, 0), (3, 1)], [0, 1]),
])
def test_scipy_backend_degenerate_2d_matches_internal(points, expected):
    pytest.importorskip("scipy")
    assert convex_hull(points) == expected
    assert convex_hull(points, backend="scipy") == expected
