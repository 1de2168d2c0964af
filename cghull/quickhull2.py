from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Sequence

from .geom import EPS, point_count, point2
from .predicates import orient2d, distance_to_line

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """
    Підзадача QuickHull на стеку.
    p1, p2: кінці ребра; candidates лежать строго ліворуч від p1->p2 (зовні оболонки).
            Оболонка обходиться проти год. стрілки, тож у послідовності ланцюжок іде p2 ... p1.
    insert_pos: позиція в послідовності оболонки, куди вставляється нова вершина.
    """
    p1: int
    p2: int
    candidates: List[int]
    insert_pos: int


def planar_hull(points: Sequence[float], eps: float = EPS) -> List[int]:
    """
    Опукла оболонка 2D-точок (QuickHull без рекурсії).

    Вхід: плоский буфер [x0, y0, x1, y1, ...].
    Вихід: індекси вершин оболонки проти годинникової стрілки, починаючи з найлівішої.
    Менше 3 точок -> усі індекси як є; усі точки з однаковим x -> лише найлівіша.
    """
    n = point_count(points, 2)
    if n < 3:
        return list(range(n))

    # найлівіша та найправіша (при рівності — перша знайдена)
    left = right = 0
    min_x = max_x = points[0]
    for i in range(1, n):
        x = points[2*i]
        if x < min_x:
            min_x = x
            left = i
        if x > max_x:
            max_x = x
            right = i

    if abs(max_x - min_x) < eps:
        logger.debug("planar_hull: all %d points share x, collapsing to index %d", n, left)
        return [left]

    a, b = point2(points, left), point2(points, right)
    upper: List[int] = []
    lower: List[int] = []
    for i in range(n):
        if i == left or i == right:
            continue
        o = orient2d(a, b, point2(points, i))
        if o > eps:
            upper.append(i)
        elif o < -eps:
            lower.append(i)
        # |o| <= eps: на прямій (left, right), у оболонку не потрапить

    # [left, нижній ланцюжок, right, верхній ланцюжок] — обхід проти год. стрілки.
    # Верхній ланцюжок дописується в кінець, тому позиція 1 для нижнього не зсувається.
    hull = [left, right]
    _expand(points, left, right, upper, hull, len(hull), eps)
    _expand(points, right, left, lower, hull, 1, eps)

    logger.debug("planar_hull: %d points -> %d hull vertices", n, len(hull))
    return hull


def _expand(
    points: Sequence[float],
    p1: int,
    p2: int,
    candidates: List[int],
    hull: List[int],
    insert_pos: int,
    eps: float,
) -> None:
    """Вставити в hull вершини ланцюжка між p2 і p1 (ті, що зовні ребра p1->p2), явним стеком."""
    if not candidates:
        return

    stack = [Frame(p1, p2, candidates, insert_pos)]
    while stack:
        fr = stack.pop()
        a, b = point2(points, fr.p1), point2(points, fr.p2)

        # найвіддаленіша від прямої (p1, p2); при рівності лишається перша
        far = -1
        best = eps
        for i in fr.candidates:
            d = distance_to_line(a, b, point2(points, i), eps)
            if d > best:
                best = d
                far = i
        if far == -1:
            continue

        c = point2(points, far)
        left_set: List[int] = []
        right_set: List[int] = []
        for i in fr.candidates:
            if i == far:
                continue
            p = point2(points, i)
            if orient2d(a, c, p) > eps:
                left_set.append(i)
            elif orient2d(c, b, p) > eps:
                right_set.append(i)
            # інакше точка всередині трикутника (p1, far, p2)

        hull.insert(fr.insert_pos, far)

        # Ліва частина (p1, far) стоїть у послідовності після far, права (far, p2) — на місці far.
        # Стек LIFO: праву кладемо першою, ліва обробляється одразу і вставляє лише правіше
        # insert_pos, тож позиція правої частини лишається дійсною.
        if right_set:
            stack.append(Frame(far, fr.p2, right_set, fr.insert_pos))
        if left_set:
            stack.append(Frame(fr.p1, far, left_set, fr.insert_pos + 1))
