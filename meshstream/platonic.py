"""
Platonic solids, scaled to the unit sphere. Each vertex normal is its position,
so the solids shade smooth; use the Cube primitive for a flat-shaded hexahedron.

Vertex tables for the tetrahedron, octahedron and dodecahedron follow Paul Bourke,
http://paulbourke.net/geometry/platonic/
"""
from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

from .generator import IndexedGenerator, require_at_least
from .poly import NGon, Polygon, Triangle
from .vertex import Vec3, Vertex, v_add, v_norm, v_scale

Tri = Tuple[int, int, int]


class _Solid(IndexedGenerator):
    """A fixed table of positions plus a fixed table of faces."""

    def __init__(self, vertices: Sequence[Vec3], faces: Sequence[Sequence[int]]):
        self._verts: List[Vec3] = [v_norm(v) for v in vertices]
        self._faces = faces
        self._log_created()

    def shared_vertex(self, idx: int) -> Vertex:
        p = self._verts[idx]
        return Vertex(p, p)

    def shared_vertex_count(self) -> int:
        return len(self._verts)

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        a, b, c = self._faces[idx]
        return Triangle(a, b, c)

    def indexed_polygon_count(self) -> int:
        return len(self._faces)


# ------------
# Tetrahedron
# ------------

_TETRA_VERTS: List[Vec3] = [(1.0, 1.0, 1.0), (1.0, -1.0, -1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, 1.0)]
_TETRA_FACES: List[Tri] = [(0, 1, 2), (2, 1, 3), (0, 3, 1), (0, 2, 3)]


class Tetrahedron(_Solid):
    def __init__(self):
        super().__init__(_TETRA_VERTS, _TETRA_FACES)


# -----------
# Octahedron
# -----------

_OCTA_VERTS: List[Vec3] = [
    (-1.0, 0.0, 1.0), (1.0, 0.0, 1.0), (1.0, 0.0, -1.0), (-1.0, 0.0, -1.0),
    (0.0, math.sqrt(2.0), 0.0), (0.0, -math.sqrt(2.0), 0.0),
]
_OCTA_FACES: List[Tri] = [
    (3, 0, 4), (2, 3, 4), (1, 2, 4), (0, 1, 4),
    (3, 2, 5), (0, 3, 5), (2, 1, 5), (1, 0, 5),
]


class Octahedron(_Solid):
    def __init__(self):
        super().__init__(_OCTA_VERTS, _OCTA_FACES)


# -------------
# Dodecahedron
# -------------

_PHI = (1.0 + math.sqrt(5.0)) / 2.0
_CONJ = 1.0 / _PHI

_DODECA_VERTS: List[Vec3] = [
    (-_CONJ, -_PHI, 0.0), (_CONJ, -_PHI, 0.0), (1.0, -1.0, 1.0), (0.0, -_CONJ, _PHI),
    (-1.0, -1.0, 1.0), (-_PHI, 0.0, _CONJ), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0),
    (_PHI, 0.0, _CONJ), (0.0, _CONJ, _PHI), (-1.0, 1.0, 1.0), (-_PHI, 0.0, -_CONJ),
    (0.0, -_CONJ, -_PHI), (_PHI, 0.0, -_CONJ), (1.0, 1.0, 1.0), (_CONJ, _PHI, 0.0),
    (-_CONJ, _PHI, 0.0), (-1.0, 1.0, -1.0), (0.0, _CONJ, -_PHI), (1.0, 1.0, -1.0),
]

_DODECA_FACES: List[Tuple[int, int, int, int, int]] = [
    (0, 1, 2, 3, 4), (1, 0, 6, 12, 7), (2, 1, 7, 13, 8), (3, 2, 8, 14, 9),
    (4, 3, 9, 10, 5), (0, 4, 5, 11, 6), (17, 18, 12, 6, 11), (18, 19, 13, 7, 12),
    (19, 15, 14, 8, 13), (15, 16, 10, 9, 14), (16, 17, 11, 5, 10), (15, 19, 18, 17, 16),
]


class Dodecahedron(_Solid):
    """Twelve pentagons, emitted as 5-corner NGons."""

    def __init__(self):
        super().__init__(_DODECA_VERTS, _DODECA_FACES)

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        return NGon(self._faces[idx])


# ----------
# IcoSphere
# ----------

_ICO_T = (1.0 + math.sqrt(5.0)) / 2.0

_ICO_VERTS: List[Vec3] = [
    (-1, _ICO_T, 0), (1, _ICO_T, 0), (-1, -_ICO_T, 0), (1, -_ICO_T, 0),
    (0, -1, _ICO_T), (0, 1, _ICO_T), (0, -1, -_ICO_T), (0, 1, -_ICO_T),
    (_ICO_T, 0, -1), (_ICO_T, 0, 1), (-_ICO_T, 0, -1), (-_ICO_T, 0, 1),
]

_ICO_FACES: List[Tri] = [
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
]


def _midpoint_cache_key(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a < b else (b, a)


class IcoSphere(_Solid):
    """Icosahedron, optionally subdivided: each pass splits every triangle in four
    and pushes the new midpoints out to the sphere.
    """

    def __init__(self, subdivisions: int = 0):
        require_at_least("subdivisions", subdivisions, 0)
        verts: List[Vec3] = [v_norm(v) for v in _ICO_VERTS]
        faces: List[Tri] = list(_ICO_FACES)
        midpoint_cache: Dict[Tuple[int, int], int] = {}

        def midpoint(i: int, j: int) -> int:
            key = _midpoint_cache_key(i, j)
            if key in midpoint_cache:
                return midpoint_cache[key]
            verts.append(v_norm(v_scale(v_add(verts[i], verts[j]), 0.5)))
            k = len(verts) - 1
            midpoint_cache[key] = k
            return k

        for _ in range(subdivisions):
            new_faces: List[Tri] = []
            for a, b, c in faces:
                ab = midpoint(a, b)
                bc = midpoint(b, c)
                ca = midpoint(c, a)
                new_faces += [
                    (a, ab, ca), (b, bc, ab), (c, ca, bc), (ab, bc, ca)
                ]
            faces = new_faces

        self.subdivisions = subdivisions
        super().__init__(verts, faces)
