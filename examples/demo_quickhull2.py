# examples/demo_quickhull2.py
from __future__ import annotations

import logging
import random

import matplotlib.pyplot as plt

from cghull.quickhull2 import planar_hull


def square_points():
    """Сценарій «квадрат»: 4 кути + 4 внутрішні точки."""
    return [
        -100, -100, 100, -100, 100, 100, -100, 100,
        0, 0, -50, -50, 50, 50, -25, 25,
    ]


def random_points(n: int, seed: int = 1):
    rng = random.Random(seed)
    out = []
    for _ in range(n):
        out += [rng.gauss(0.0, 40.0), rng.gauss(0.0, 40.0)]
    return out


def draw(ax, points, hull, title):
    xs, ys = points[0::2], points[1::2]
    ax.scatter(xs, ys, s=8, color="grey")
    loop = hull + hull[:1]
    ax.plot([xs[i] for i in loop], [ys[i] for i in loop], color="tab:red", linewidth=1.2)
    for k, i in enumerate(hull):
        ax.annotate(str(k), (xs[i], ys[i]), fontsize=7)
    ax.set_aspect("equal")
    ax.set_title(title)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    sq = square_points()
    sq_hull = planar_hull(sq)
    print("square hull:", sq_hull)

    pts = random_points(500)
    hull = planar_hull(pts)
    print(f"random: {len(pts) // 2} points -> {len(hull)} hull vertices")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 5))
    draw(ax1, sq, sq_hull, "square")
    draw(ax2, pts, hull, "500 random points")
    plt.show()
