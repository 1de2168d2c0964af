"""
cghull — невелика бібліотека обчислювальної геометрії.
Ядро: 2D QuickHull (явний стек) і інкрементальний 3D QuickHull з горизонтом;
поруч — векторна алгебра, предикати, AABB/сфера/площина та ray casting.
"""

__version__ = "0.1.0"

from cghull.geom import EPS, RAY_EPS, Vec2, Vec3
from cghull.predicates import orient2d, orient3d, distance_to_line, signed_distance_to_plane
from cghull.quickhull2 import planar_hull
from cghull.hull import Face, SpatialHull, spatial_hull
from cghull.shapes import Box3, Circle, Plane3, Sphere
from cghull.raycast import Ray3, RayHit

__all__ = [
    "EPS", "RAY_EPS", "Vec2", "Vec3",
    "orient2d", "orient3d", "distance_to_line", "signed_distance_to_plane",
    "planar_hull", "Face", "SpatialHull", "spatial_hull",
    "Box3", "Circle", "Plane3", "Sphere", "Ray3", "RayHit",
    "__version__",
]
