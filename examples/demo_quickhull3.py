# examples/demo_quickhull3.py
from __future__ import annotations

import logging
import math
import random

import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

from cghull.hull import SpatialHull


def generate_points(n: int, seed: int = 3):
    """
    Вершини куба + n випадкових точок у кулі радіуса 0.5 навколо його центру,
    тож оболонкою має вийти сам куб (12 трикутників).
    """
    pts = [
        0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0,
        0, 0, 1, 1, 0, 1, 1, 1, 1, 0, 1, 1,
    ]
    rng = random.Random(seed)
    for _ in range(n):
        u, v = rng.random(), rng.random()
        theta, phi = 2 * math.pi * u, math.acos(2 * v - 1)
        r = 0.5 * rng.random() ** (1 / 3)
        pts += [
            0.5 + r * math.sin(phi) * math.cos(theta),
            0.5 + r * math.sin(phi) * math.sin(theta),
            0.5 + r * math.cos(phi),
        ]
    return pts


def draw(ax, points, hull):
    xs, ys, zs = points[0::3], points[1::3], points[2::3]
    tris = hull.faces()
    if not tris:
        ax.set_title("Оболонки немає")
        return
    ax.plot_trisurf(xs, ys, zs, triangles=tris, alpha=0.35, edgecolor="k", linewidth=0.4)
    ax.scatter(xs, ys, zs, s=4, color="grey")

    # однакові масштаби
    max_range = max(max(xs) - min(xs), max(ys) - min(ys), max(zs) - min(zs)) or 1.0
    mx, my, mz = (0.5 * (min(c) + max(c)) for c in (xs, ys, zs))
    ax.set_xlim(mx - max_range / 2, mx + max_range / 2)
    ax.set_ylim(my - max_range / 2, my + max_range / 2)
    ax.set_zlim(mz - max_range / 2, mz + max_range / 2)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title(f"Convex hull: {len(tris)} triangles")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    pts = generate_points(200)
    hull = SpatialHull(pts)
    print("VALIDATION:", hull.validate())

    with open("hull.off", "w", encoding="utf-8") as f:
        f.write(hull.to_off())
    print("Wrote hull.off — можна глянути в MeshLab/ParaView.")

    fig = plt.figure(figsize=(6, 6))
    draw(fig.add_subplot(111, projection="3d"), pts, hull)
    plt.show()
