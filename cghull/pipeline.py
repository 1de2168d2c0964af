from __future__ import annotations
import logging
from typing import Iterable, List, Sequence

import numpy as np

from .geom import EPS
from .hull import spatial_hull
from .quickhull2 import planar_hull

logger = logging.getLogger(__name__)


def convex_hull(
    points: Iterable[Sequence[float]],
    backend: str = "internal",
    eps: float = EPS,
) -> List[int]:
    """
    Опукла оболонка для масиву точок форми (N, 2) або (N, 3):
      - 2D: індекси вершин проти год. стрілки;
      - 3D: плоский буфер трикутників з нормалями назовні.

    backend="internal" — наші QuickHull-и;
    backend="scipy"    — scipy.spatial.ConvexHull (Qhull), для звірки результатів.

    Вироджені набори дають ті самі тривіальні відповіді в обох backend-ах:
    2D — індекси як є (N < 3), крайні точки (колінеарні) або лише найлівіша (спільний x);
    3D — порожній список.
    """
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        raise ValueError(f"Expected an array of shape (N, 2) or (N, 3), got {arr.shape}")
    dim = arr.shape[1]

    name = backend.lower()
    if name == "internal":
        flat = arr.ravel().tolist()
        return planar_hull(flat, eps) if dim == 2 else spatial_hull(flat, eps)

    if name == "scipy":
        try:
            from scipy.spatial import ConvexHull, QhullError
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='internal'."
            ) from e
        return _scipy_hull(arr, ConvexHull, QhullError, eps)

    raise ValueError(f"Невідомий backend: {backend}")


def _scipy_hull(arr: np.ndarray, ConvexHull, QhullError, eps: float) -> List[int]:
    n, dim = arr.shape
    if n < dim + 1:
        return list(range(n)) if dim == 2 else []
    try:
        qh = ConvexHull(arr)
    except QhullError:
        # Qhull відмовляється від вироджених наборів; для 2D віддаємо той самий
        # тривіальний результат, що й planar_hull, для 3D — «оболонки немає»
        logger.debug("scipy backend: degenerate input of %d points", n)
        if dim == 2:
            return planar_hull(arr.ravel().tolist(), eps)
        return []

    if dim == 2:
        # для 2D Qhull уже віддає вершини проти год. стрілки
        return [int(i) for i in qh.vertices]

    out: List[int] = []
    for (a, b, c), eq in zip(qh.simplices, qh.equations):
        normal = np.cross(arr[b] - arr[a], arr[c] - arr[a])
        if np.dot(normal, eq[:3]) < 0:
            b, c = c, b
        out.extend((int(a), int(b), int(c)))
    return out


def hull_vertices(triangles: Sequence[int]) -> List[int]:
    """Відсортовані унікальні вершини плоского буфера трикутників."""
    return sorted({int(i) for i in triangles})
