"""
Triangle emission: break any Polygon down into Triangles.

- Triangle: emitted unchanged.
- Quad (x, y, z, w): split on the x-z diagonal into (x, y, z) and (z, w, x).
- NGon v0..vn-1: fan from v0, (v0, vi, vi+1) for i = 1..n-2.

Nothing is checked for convexity or planarity. A concave quad or polygon still comes
out as well-formed triangles, they just may overlap or flip. NGons with fewer than
3 corners emit nothing.
"""
from __future__ import annotations

from typing import Callable, List, Sequence, TypeVar

from .poly import NGon, Polygon, Quad, Triangle, _not_a_shape

T = TypeVar("T")


def fan(verts: Sequence[T], emit: Callable[[Triangle[T]], None]) -> None:
    """Fan-triangulate a convex, consistently wound ring from its first corner."""
    if len(verts) < 3:
        return
    start = verts[0]
    for recent, vert in zip(verts[1:], verts[2:]):
        emit(Triangle(start, recent, vert))


def emit_triangles(p: Polygon[T], emit: Callable[[Triangle[T]], None]) -> None:
    if isinstance(p, Triangle):
        emit(p)
    elif isinstance(p, Quad):
        emit(Triangle(p.x, p.y, p.z))
        emit(Triangle(p.z, p.w, p.x))
    elif isinstance(p, NGon):
        fan(p.verts, emit)
    else:
        raise _not_a_shape(p)


def triangles_of(p: Polygon[T]) -> List[Triangle[T]]:
    out: List[Triangle[T]] = []
    emit_triangles(p, out.append)
    return out
