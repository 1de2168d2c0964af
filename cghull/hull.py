from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .geom import EPS, Vec3, dot, dist_sq, point_count, point3
from .predicates import Plane, plane_from_points, plane_distance, dist_sq_to_line

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]          # орієнтоване ребро (u, v)
UEdge = Tuple[int, int]         # неорієнтоване ребро (min(u,v), max(u,v))
Tetra = Tuple[int, int, int, int]


@dataclass(eq=False)
class Face:
    """
    Трикутна грань опуклої оболонки.
    v: індекси вершин проти год. стрілки, якщо дивитись ззовні (нормаль назовні).
    normal, offset: площина грані, dot(normal, p) + offset == 0.
    outside: conflict list — точки, що лежать строго зовні площини й ще не в оболонці.
    """
    v: Tuple[int, int, int]
    normal: Vec3
    offset: float
    outside: List[int] = field(default_factory=list)

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        a, b, c = self.v
        return ((a, b), (b, c), (c, a))

    def distance(self, p: Vec3) -> float:
        return dot(self.normal, p) + self.offset


class SpatialHull:
    """
    Інкрементальний 3D QuickHull (детермінований).

    Вхід: плоский буфер [x0, y0, z0, x1, ...]; сам буфер не змінюється.
    Вихід: self.faces_list — грані оболонки; triangles() — плоский список індексів.
    Менше 4 точок або відсутність невиродженого тетраедра -> порожня оболонка.
    """

    def __init__(self, points: Sequence[float], eps: float = EPS):
        self.P = points
        self.n = point_count(points, 3)
        self.eps = eps

        self.faces_list: List[Face] = []
        self.edge2face: Dict[Edge, Face] = {}   # орієнтоване ребро -> грань, що його містить
        self.iterations = 0

        if self.n < 4:
            logger.debug("spatial_hull: %d points, need at least 4", self.n)
            return
        tetra = self._find_initial_tetra()
        if tetra is None:
            return

        self._build_initial_faces(tetra)
        self._expand_until_done()
        logger.debug(
            "spatial_hull: %d points -> %d faces after %d insertions",
            self.n, len(self.faces_list), self.iterations,
        )

    # ---------------- Публічний API ----------------
    def faces(self) -> List[Tuple[int, int, int]]:
        return [f.v for f in self.faces_list]

    def triangles(self) -> List[int]:
        """Плоский індексний буфер (i0, j0, k0, i1, j1, k1, ...)."""
        return [i for f in self.faces_list for i in f.v]

    def vertices(self) -> List[int]:
        return sorted({i for f in self.faces_list for i in f.v})

    # ---------------- Внутрішні методи ----------------
    def _pt(self, i: int) -> Vec3:
        return point3(self.P, i)

    def _plane(self, a: int, b: int, c: int) -> Plane:
        return plane_from_points(self._pt(a), self._pt(b), self._pt(c), self.eps)

    def _find_initial_tetra(self) -> Optional[Tetra]:
        """
        Стартовий тетраедр з екстремальних точок:
          - v0, v1: найвіддаленіша пара серед шести осьових екстремумів;
          - v2: найдальша від прямої (v0, v1);
          - v3: найдальша від площини (v0, v1, v2).
        None, якщо точки збігаються, колінеарні або копланарні (з точністю eps).
        """
        ext = [0] * 6  # min x, max x, min y, max y, min z, max z
        for i in range(1, self.n):
            p = self._pt(i)
            for axis in range(3):
                if p[axis] < self.P[3*ext[2*axis] + axis]:
                    ext[2*axis] = i
                if p[axis] > self.P[3*ext[2*axis + 1] + axis]:
                    ext[2*axis + 1] = i

        v0, v1 = 0, 1
        best = 0.0
        for i in range(6):
            for j in range(i + 1, 6):
                d = dist_sq(self._pt(ext[i]), self._pt(ext[j]))
                if d > best:
                    best = d
                    v0, v1 = ext[i], ext[j]
        if best < self.eps:
            logger.debug("spatial_hull: all points coincide")
            return None

        a, b = self._pt(v0), self._pt(v1)
        v2 = -1
        best = 0.0
        for i in range(self.n):
            if i == v0 or i == v1:
                continue
            d = dist_sq_to_line(self._pt(i), a, b, self.eps)
            if d > best:
                best = d
                v2 = i
        if v2 == -1 or best < self.eps:
            logger.debug("spatial_hull: all points collinear")
            return None

        plane = self._plane(v0, v1, v2)
        v3 = -1
        best = 0.0
        for i in range(self.n):
            if i in (v0, v1, v2):
                continue
            d = abs(plane_distance(plane, self._pt(i)))
            if d > best:
                best = d
                v3 = i
        if v3 == -1 or best < self.eps:
            logger.debug("spatial_hull: all points coplanar")
            return None

        return v0, v1, v2, v3

    def _add_face(self, a: int, b: int, c: int) -> Face:
        """Створити грань і зареєструвати її орієнтовані ребра в edge2face."""
        normal, offset = self._plane(a, b, c)
        face = Face((a, b, c), normal, offset)
        self.faces_list.append(face)
        for e in face.edges():
            self.edge2face[e] = face
        return face

    def _build_initial_faces(self, tetra: Tetra) -> None:
        """Чотири грані тетраедра з нормалями назовні + початковий розподіл точок."""
        v0, v1, v2, v3 = tetra
        if plane_distance(self._plane(v0, v1, v2), self._pt(v3)) < 0:
            # v3 під площиною (v0, v1, v2) — базова грань уже дивиться назовні
            tris = [(v0, v1, v2), (v3, v1, v0), (v3, v2, v1), (v3, v0, v2)]
        else:
            tris = [(v0, v2, v1), (v3, v0, v1), (v3, v1, v2), (v3, v2, v0)]
        new_faces = [self._add_face(*t) for t in tris]

        pool = [i for i in range(self.n) if i not in tetra]
        self._assign_outside(new_faces, pool)

    def _assign_outside(self, new_faces: List[Face], pool: List[int]) -> int:
        """
        Розкласти точки pool по conflict lists нових граней: кожна точка йде до першої грані,
        відносно якої вона строго зовні. Повертає кількість точок, що не дісталися нікому
        (вони всередині оболонки).
        """
        for face in new_faces:
            if not pool:
                break
            rest: List[int] = []
            for pi in pool:
                if face.distance(self._pt(pi)) > self.eps:
                    face.outside.append(pi)
                else:
                    rest.append(pi)
            pool = rest
        return len(pool)

    def _pick_apex(self) -> Optional[Tuple[Face, int]]:
        """
        Глобально найвіддаленіша зовнішня точка серед усіх граней.
        При рівних відстанях — менший індекс точки (не залежить від порядку граней).
        """
        best_face: Optional[Face] = None
        best_p = -1
        best_d = 0.0
        for face in self.faces_list:
            for pi in face.outside:
                d = face.distance(self._pt(pi))
                if best_face is None or d > best_d or (d == best_d and pi < best_p):
                    best_face, best_p, best_d = face, pi, d
        if best_face is None:
            return None
        return best_face, best_p

    def _collect_visible_region(self, seed: Face, apex: Vec3) -> List[Face]:
        """BFS по сусідніх (через спільне ребро) гранях, які бачать apex. Порядок — порядок відкриття."""
        visible = [seed]
        seen: Set[int] = {id(seed)}
        queue = deque([seed])
        while queue:
            face = queue.popleft()
            for u, v in face.edges():
                nb = self.edge2face.get((v, u))
                if nb is None or id(nb) in seen:
                    continue
                seen.add(id(nb))
                if nb.distance(apex) > self.eps:
                    visible.append(nb)
                    queue.append(nb)
        return visible

    def _add_point_and_update(self, seed: Face, apex_idx: int) -> None:
        """
        Додати apex до оболонки:
          1) знайти видимий «ковпак» і горизонт,
          2) знести видимі грані,
          3) пришити нові грані (e0, e1, apex) вздовж горизонту,
          4) перекинути конфліктні точки на нові грані.
        """
        visible = self._collect_visible_region(seed, self._pt(apex_idx))
        doomed = {id(f) for f in visible}

        # горизонт: ребра видимих граней, сусід через які не видимий
        horizon: List[Edge] = []
        for face in visible:
            for u, v in face.edges():
                nb = self.edge2face.get((v, u))
                if nb is None or id(nb) not in doomed:
                    horizon.append((u, v))

        pool: List[int] = []
        for face in visible:
            pool.extend(pi for pi in face.outside if pi != apex_idx)

        self.faces_list = [f for f in self.faces_list if id(f) not in doomed]
        for face in visible:
            for e in face.edges():
                if self.edge2face.get(e) is face:
                    del self.edge2face[e]

        new_faces = [self._add_face(e0, e1, apex_idx) for e0, e1 in horizon]
        dropped = self._assign_outside(new_faces, pool)
        logger.debug(
            "apex %d: %d visible, %d horizon edges, %d points became interior",
            apex_idx, len(visible), len(horizon), dropped,
        )

    def _expand_until_done(self) -> None:
        """Головний цикл: поки існує грань із зовнішніми точками, розширюємо hull."""
        while True:
            picked = self._pick_apex()
            if picked is None:
                break
            face, apex_idx = picked
            self._add_point_and_update(face, apex_idx)
            self.iterations += 1

    # ---------------- Діагностика / Експорт ----------------
    def validate(self, tol: float = 1e-9) -> dict:
        """
        Перевірка коректності:
          - кожне неорієнтоване ребро зустрічається рівно у 2 гранях;
          - жодна вхідна точка не лежить зовні площини жодної грані (далі ніж tol);
          - характеристика Ейлера V - E + F.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        edge_count: Dict[UEdge, int] = {}
        for f in self.faces_list:
            for u, v in f.edges():
                key = (min(u, v), max(u, v))
                edge_count[key] = edge_count.get(key, 0) + 1
        bad_edges = [(e, k) for e, k in edge_count.items() if k != 2]

        bad_orient: List[int] = []
        for fid, f in enumerate(self.faces_list):
            if any(f.distance(self._pt(i)) > tol for i in range(self.n)):
                bad_orient.append(fid)

        vertices = len(self.vertices())
        return {
            "faces": len(self.faces_list),
            "unique_vertices": vertices,
            "bad_edges": bad_edges,
            "bad_orient_faces": bad_orient,
            "euler": vertices - len(edge_count) + len(self.faces_list),
        }

    def to_off(self) -> str:
        """Текст OFF для граней оболонки (вершини перенумеровано щільно)."""
        used = self.vertices()
        remap = {old: new for new, old in enumerate(used)}
        lines = ["OFF", f"{len(used)} {len(self.faces_list)} 0"]
        for i in used:
            x, y, z = self._pt(i)
            lines.append(f"{x} {y} {z}")
        for f in self.faces_list:
            a, b, c = (remap[i] for i in f.v)
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)


def spatial_hull(points: Sequence[float], eps: float = EPS) -> List[int]:
    """
    Опукла оболонка 3D-точок: плоский буфер трикутників (кожна трійка — грань,
    обхід проти год. стрілки ззовні). Порожній список для вироджених входів.
    """
    return SpatialHull(points, eps).triangles()
