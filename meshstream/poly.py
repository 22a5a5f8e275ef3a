"""
Polygon shapes and the per-shape emission protocols.

A shape is plain data: the corners of one polygon, in order. Anything can sit at a
corner (a Vertex record, an integer index into a shared-vertex pool, a string in a
test), the shapes never look inside.

    Edge      (x, y)
    Triangle  (x, y, z)
    Quad      (x, y, z, w)   boundary x -> y -> z -> w -> x
    NGon      [v0, v1, ...]  any length

Polygon is the closed union Triangle | Quad | NGon. The protocols below match it
exhaustively, so a Quad is always a Quad and never an NGon of four corners: the two
split into triangles and edges differently.

Protocols:
- emit_vertices(shape, emit)   corners in order
- emit_lines(polygon, emit)    boundary edges (closed for Triangle/Quad, open chain for NGon)
- map_vertex(shape, f)         same variant, same arity, each corner replaced by f(corner)

Triangle emission lives in meshstream.triangulate.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Edge(Generic[T]):
    x: T
    y: T


@dataclass(frozen=True)
class Triangle(Generic[T]):
    x: T
    y: T
    z: T


@dataclass(frozen=True)
class Quad(Generic[T]):
    x: T
    y: T
    z: T
    w: T


@dataclass(init=False)
class NGon(Generic[T]):
    """An arbitrary-length polygon. Fewer than 3 corners is allowed but degenerate."""
    verts: List[T] = field(default_factory=list)

    def __init__(self, verts: Optional[Iterable[T]] = None):
        self.verts = [] if verts is None else list(verts)

    def add_vertex(self, v: T) -> None:
        self.verts.append(v)

    def __len__(self) -> int:
        return len(self.verts)


Polygon = Union[Triangle[T], Quad[T], NGon[T]]


def _not_a_shape(p: object) -> TypeError:
    return TypeError(f"expected Triangle, Quad or NGon, got {type(p).__name__}")


# ---- vertex emission ----

def emit_vertices(p: Union[Edge[T], Polygon[T]], emit: Callable[[T], None]) -> None:
    if isinstance(p, Triangle):
        emit(p.x)
        emit(p.y)
        emit(p.z)
    elif isinstance(p, Quad):
        emit(p.x)
        emit(p.y)
        emit(p.z)
        emit(p.w)
    elif isinstance(p, NGon):
        for v in p.verts:
            emit(v)
    elif isinstance(p, Edge):
        emit(p.x)
        emit(p.y)
    else:
        raise _not_a_shape(p)


def as_vertices(p: Union[Edge[T], Polygon[T]]) -> Iterator[T]:
    """Corners of a single shape, without wrapping it in a stream first."""
    buffer: List[T] = []
    emit_vertices(p, buffer.append)
    return iter(buffer)


# ---- edge emission ----

def emit_lines(p: Polygon[T], emit: Callable[[Edge[T]], None]) -> None:
    if isinstance(p, Triangle):
        emit(Edge(p.x, p.y))
        emit(Edge(p.y, p.z))
        emit(Edge(p.z, p.x))
    elif isinstance(p, Quad):
        emit(Edge(p.x, p.y))
        emit(Edge(p.y, p.z))
        emit(Edge(p.z, p.w))
        emit(Edge(p.w, p.x))
    elif isinstance(p, NGon):
        # open chain: the last corner does not connect back to the first
        for start, end in zip(p.verts, p.verts[1:]):
            emit(Edge(start, end))
    else:
        raise _not_a_shape(p)


# ---- vertex mapping ----

def map_vertex(p: Union[Edge[T], Polygon[T]], f: Callable[[T], U]) -> Union[Edge[U], Polygon[U]]:
    """Apply f to every corner, keeping the variant and the corner order."""
    if isinstance(p, Triangle):
        return Triangle(f(p.x), f(p.y), f(p.z))
    elif isinstance(p, Quad):
        return Quad(f(p.x), f(p.y), f(p.z), f(p.w))
    elif isinstance(p, NGon):
        return NGon(f(v) for v in p.verts)
    elif isinstance(p, Edge):
        return Edge(f(p.x), f(p.y))
    raise _not_a_shape(p)
