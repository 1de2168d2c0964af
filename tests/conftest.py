"""Спільні фікстури: сценарії «квадрат» і «куб» та детерміновані випадкові хмари точок."""

import math
import random

import pytest


def flatten(points):
    return [c for p in points for c in p]


@pytest.fixture
def square_points():
    # 4 кути + 4 внутрішні точки
    return flatten([
        (-100, -100), (100, -100), (100, 100), (-100, 100),
        (0, 0), (-50, -50), (50, 50), (-25, 25),
    ])


@pytest.fixture
def cube_corners():
    return [
        (0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0),
        (0, 0, 1), (1, 0, 1), (0, 1, 1), (1, 1, 1),
    ]


@pytest.fixture
def random_cloud_2d():
    rng = random.Random(2024)
    return flatten((rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(300))


@pytest.fixture
def random_cloud_3d():
    rng = random.Random(7)
    return flatten(
        (rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1)) for _ in range(200)
    )


@pytest.fixture
def fibonacci_sphere():
    """50 точок на одиничній сфері — усі мають стати вершинами оболонки."""
    n = 50
    golden = math.pi * (3.0 - math.sqrt(5.0))
    pts = []
    for i in range(n):
        y = 1.0 - 2.0 * (i + 0.5) / n
        r = math.sqrt(1.0 - y * y)
        pts.append((r * math.cos(golden * i), y, r * math.sin(golden * i)))
    return pts
