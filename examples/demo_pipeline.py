# examples/demo_pipeline.py
import numpy as np

from cghull.pipeline import convex_hull, hull_vertices

if __name__ == "__main__":
    rng = np.random.default_rng(0)
    cloud = rng.normal(size=(1000, 3))

    ours = convex_hull(cloud)                   # наш QuickHull
    ref = convex_hull(cloud, backend="scipy")   # Qhull через SciPy
    print("Triangles (internal / scipy):", len(ours) // 3, len(ref) // 3)
    print("Same vertex set:", hull_vertices(ours) == hull_vertices(ref))

    flat = rng.uniform(size=(300, 2))
    print("2D hull:", convex_hull(flat))
