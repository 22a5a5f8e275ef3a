"""
Procedural primitives: Circle, Plane, Cube, Cylinder, Cone, SphereUv, Torus.

Every generator is both an iterator of Polygon[Vertex] and an indexed view
(shared_vertex / indexed_polygon). Geometry is unit sized: positions within
[-1, 1] on every axis, z up, faces wound counter-clockwise seen from outside.
Bad subdivision counts raise ValueError at construction.
"""
from __future__ import annotations

import math
from typing import List, Tuple

from .generator import (IndexedGenerator, IndexedPolygon, SharedVertex, require_at_least,
                        require_positive)
from .poly import Polygon, Quad, Triangle
from .stream import StreamOps
from .vertex import Vec3, Vertex, v_norm

_UP: Vec3 = (0.0, 0.0, 1.0)
_DOWN: Vec3 = (0.0, 0.0, -1.0)


def _ring(i: int, segments: int) -> Tuple[float, float]:
    ang = (i % segments) * 2 * math.pi / segments
    return math.cos(ang), math.sin(ang)


# -------
# Circle
# -------

class Circle(IndexedGenerator):
    """A unit disc in the z=0 plane, fanned from its centre (vertex 0)."""

    def __init__(self, u: int):
        require_at_least("u", u, 4)
        self.u = u
        self._log_created()

    def shared_vertex(self, idx: int) -> Vertex:
        if idx == 0:
            return Vertex((0.0, 0.0, 0.0), _UP)
        c, s = _ring(idx - 1, self.u)
        return Vertex((c, s, 0.0), _UP)

    def shared_vertex_count(self) -> int:
        return self.u + 1

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        return Triangle(0, idx + 1, (idx + 1) % self.u + 1)

    def indexed_polygon_count(self) -> int:
        return self.u


# ------
# Plane
# ------

class Plane(SharedVertex[Vertex], IndexedPolygon, StreamOps):
    """A grid of x by y quads covering [-1, 1]^2 at z=0, facing +z."""

    def __init__(self, x: int = 1, y: int = 1):
        require_at_least("x", x, 1)
        require_at_least("y", y, 1)
        self.subdivide_x = x
        self.subdivide_y = y
        self._x = 0
        self._y = 0

    def _vert(self, x: int, y: int) -> Vertex:
        px = -1.0 + 2.0 * x / self.subdivide_x
        py = -1.0 + 2.0 * y / self.subdivide_y
        return Vertex((px, py, 0.0), _UP)

    # ---- streaming ----
    def __iter__(self) -> "Plane":
        return self

    def __next__(self) -> Polygon[Vertex]:
        if self._y >= self.subdivide_y:
            raise StopIteration
        x, y = self._x, self._y
        self._x += 1
        if self._x == self.subdivide_x:
            self._x = 0
            self._y += 1
        return Quad(self._vert(x, y), self._vert(x + 1, y),
                    self._vert(x + 1, y + 1), self._vert(x, y + 1))

    def __length_hint__(self) -> int:
        return self.indexed_polygon_count() - (self._y * self.subdivide_x + self._x)

    # ---- indexed ----
    def shared_vertex(self, idx: int) -> Vertex:
        row = self.subdivide_x + 1
        return self._vert(idx % row, idx // row)

    def shared_vertex_count(self) -> int:
        return (self.subdivide_x + 1) * (self.subdivide_y + 1)

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        y = idx // self.subdivide_x
        x = idx % self.subdivide_x
        base = y * (self.subdivide_x + 1) + x
        return Quad(base, base + 1, base + self.subdivide_x + 2, base + self.subdivide_x + 1)

    def indexed_polygon_count(self) -> int:
        return self.subdivide_x * self.subdivide_y


# -----
# Cube
# -----

# (normal, four corners counter-clockwise seen from outside)
_CUBE_FACES: List[Tuple[Vec3, Tuple[Vec3, Vec3, Vec3, Vec3]]] = [
    ((1.0, 0.0, 0.0), ((1.0, -1.0, -1.0), (1.0, 1.0, -1.0), (1.0, 1.0, 1.0), (1.0, -1.0, 1.0))),
    ((-1.0, 0.0, 0.0), ((-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0))),
    ((0.0, 1.0, 0.0), ((-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (1.0, 1.0, -1.0))),
    ((0.0, -1.0, 0.0), ((-1.0, -1.0, -1.0), (1.0, -1.0, -1.0), (1.0, -1.0, 1.0), (-1.0, -1.0, 1.0))),
    ((0.0, 0.0, 1.0), ((-1.0, -1.0, 1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0), (-1.0, 1.0, 1.0))),
    ((0.0, 0.0, -1.0), ((-1.0, -1.0, -1.0), (-1.0, 1.0, -1.0), (1.0, 1.0, -1.0), (1.0, -1.0, -1.0))),
]


class Cube(SharedVertex[Vertex], IndexedPolygon, StreamOps):
    """Six quads over [-1, 1]^3. Corners are not shared between faces so normals stay flat."""

    def __init__(self):
        self._face = 0

    def _vert(self, face: int, corner: int) -> Vertex:
        normal, corners = _CUBE_FACES[face]
        return Vertex(corners[corner], normal)

    def __iter__(self) -> "Cube":
        return self

    def __next__(self) -> Polygon[Vertex]:
        if self._face >= len(_CUBE_FACES):
            raise StopIteration
        f = self._face
        self._face += 1
        return Quad(self._vert(f, 0), self._vert(f, 1), self._vert(f, 2), self._vert(f, 3))

    def __length_hint__(self) -> int:
        return len(_CUBE_FACES) - self._face

    def shared_vertex(self, idx: int) -> Vertex:
        return self._vert(idx // 4, idx % 4)

    def shared_vertex_count(self) -> int:
        return 4 * len(_CUBE_FACES)

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        base = idx * 4
        return Quad(base, base + 1, base + 2, base + 3)

    def indexed_polygon_count(self) -> int:
        return len(_CUBE_FACES)


# ---------
# Cylinder
# ---------

class Cylinder(IndexedGenerator):
    """Radius 1, z from -1 to 1, u segments around and h bands up the side.

    Vertex pool: bottom centre, bottom cap ring, h+1 side rings, top cap ring,
    top centre. Caps get their own rings so their normals point along the axis.
    """

    def __init__(self, u: int, h: int = 1):
        require_at_least("u", u, 2)
        require_at_least("h", h, 1)
        self.sub_u = u
        self.sub_h = h
        self._log_created()

    def _side(self, ring: int, i: int) -> int:
        return 1 + self.sub_u + ring * self.sub_u + i % self.sub_u

    def _top(self, i: int) -> int:
        return 1 + self.sub_u * (self.sub_h + 2) + i % self.sub_u

    def shared_vertex(self, idx: int) -> Vertex:
        u = self.sub_u
        if idx == 0:
            return Vertex((0.0, 0.0, -1.0), _DOWN)
        if idx <= u:
            c, s = _ring(idx - 1, u)
            return Vertex((c, s, -1.0), _DOWN)
        if idx < 1 + u * (self.sub_h + 2):
            ring, i = divmod(idx - 1 - u, u)
            c, s = _ring(i, u)
            z = -1.0 + 2.0 * ring / self.sub_h
            return Vertex((c, s, z), (c, s, 0.0))
        if idx < self.shared_vertex_count() - 1:
            c, s = _ring(idx - 1 - u * (self.sub_h + 2), u)
            return Vertex((c, s, 1.0), _UP)
        return Vertex((0.0, 0.0, 1.0), _UP)

    def shared_vertex_count(self) -> int:
        return self.sub_u * (self.sub_h + 3) + 2

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        u = self.sub_u
        if idx < u:
            return Triangle(0, 1 + (idx + 1) % u, 1 + idx)
        idx -= u
        if idx < u * self.sub_h:
            ring, i = divmod(idx, u)
            return Quad(self._side(ring, i), self._side(ring, i + 1),
                        self._side(ring + 1, i + 1), self._side(ring + 1, i))
        i = idx - u * self.sub_h
        return Triangle(self.shared_vertex_count() - 1, self._top(i), self._top(i + 1))

    def indexed_polygon_count(self) -> int:
        return self.sub_u * (self.sub_h + 2)


# -----
# Cone
# -----

class Cone(IndexedGenerator):
    """Tip at (0, 0, 1), base a unit circle at z=-1.

    The tip is repeated once per side face so each copy can carry the normal of
    the middle of its face.
    """

    def __init__(self, u: int):
        require_at_least("u", u, 2)
        self.sub_u = u
        self._log_created()

    def _side_normal(self, ang: float) -> Vec3:
        # slope of the side: radius shrinks by 1 per 2 units of height
        return v_norm((2.0 * math.cos(ang), 2.0 * math.sin(ang), 1.0))

    def shared_vertex(self, idx: int) -> Vertex:
        u = self.sub_u
        step = 2 * math.pi / u
        if idx < u:
            return Vertex((0.0, 0.0, 1.0), self._side_normal(step * idx + step / 2))
        if idx < 2 * u:
            c, s = _ring(idx - u, u)
            return Vertex((c, s, -1.0), self._side_normal(step * (idx - u)))
        if idx < 3 * u:
            c, s = _ring(idx - 2 * u, u)
            return Vertex((c, s, -1.0), _DOWN)
        return Vertex((0.0, 0.0, -1.0), _DOWN)

    def shared_vertex_count(self) -> int:
        return self.sub_u * 3 + 1

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        u = self.sub_u
        if idx < u:
            return Triangle(idx, u + idx, u + (idx + 1) % u)
        i = idx - u
        return Triangle(3 * u, 2 * u + (i + 1) % u, 2 * u + i)

    def indexed_polygon_count(self) -> int:
        return self.sub_u * 2


# ---------
# SphereUv
# ---------

class SphereUv(IndexedGenerator):
    """Latitude/longitude unit sphere: u segments around, v rings pole to pole.

    The pole rows are triangle fans, every band in between is quads.
    """

    def __init__(self, u: int, v: int):
        require_at_least("u", u, 2)
        require_at_least("v", v, 2)
        self.sub_u = u
        self.sub_v = v
        self._log_created()

    def _ring_index(self, ring: int, i: int) -> int:
        # ring runs 1..v-1 from the north pole down
        return 1 + (ring - 1) * self.sub_u + i % self.sub_u

    def shared_vertex(self, idx: int) -> Vertex:
        if idx == 0:
            return Vertex(_UP, _UP)
        if idx == self.shared_vertex_count() - 1:
            return Vertex(_DOWN, _DOWN)
        ring, i = divmod(idx - 1, self.sub_u)
        theta = math.pi * (ring + 1) / self.sub_v
        st, ct = math.sin(theta), math.cos(theta)
        c, s = _ring(i, self.sub_u)
        pos = (st * c, st * s, ct)
        return Vertex(pos, pos)

    def shared_vertex_count(self) -> int:
        return (self.sub_v - 1) * self.sub_u + 2

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        u, v = self.sub_u, self.sub_v
        band, i = divmod(idx, u)
        if band == 0:
            return Triangle(0, self._ring_index(1, i), self._ring_index(1, i + 1))
        if band == v - 1:
            south = self.shared_vertex_count() - 1
            return Triangle(south, self._ring_index(v - 1, i + 1), self._ring_index(v - 1, i))
        return Quad(self._ring_index(band, i), self._ring_index(band + 1, i),
                    self._ring_index(band + 1, i + 1), self._ring_index(band, i + 1))

    def indexed_polygon_count(self) -> int:
        return self.sub_u * self.sub_v


# ------
# Torus
# ------

class Torus(IndexedGenerator):
    """A ring torus around the z axis, built entirely from quads."""

    def __init__(self, radius: float = 1.0, tubular_radius: float = 0.3,
                 radial_segments: int = 32, tubular_segments: int = 24):
        require_positive("radius", radius)
        require_positive("tubular_radius", tubular_radius)
        require_at_least("radial_segments", radial_segments, 3)
        require_at_least("tubular_segments", tubular_segments, 3)
        self.radius = radius
        self.tubular_radius = tubular_radius
        self.radial_segments = radial_segments
        self.tubular_segments = tubular_segments
        self._log_created()

    def _index(self, i: int, j: int) -> int:
        return (i % self.radial_segments) * self.tubular_segments + j % self.tubular_segments

    def shared_vertex(self, idx: int) -> Vertex:
        i, j = divmod(idx, self.tubular_segments)
        cu, su = _ring(i, self.radial_segments)
        cv, sv = _ring(j, self.tubular_segments)
        R, r = self.radius, self.tubular_radius
        pos = ((R + r * cv) * cu, (R + r * cv) * su, r * sv)
        return Vertex(pos, (cv * cu, cv * su, sv))

    def shared_vertex_count(self) -> int:
        return self.radial_segments * self.tubular_segments

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        i, j = divmod(idx, self.tubular_segments)
        return Quad(self._index(i, j), self._index(i + 1, j),
                    self._index(i + 1, j + 1), self._index(i, j + 1))

    def indexed_polygon_count(self) -> int:
        return self.radial_segments * self.tubular_segments
