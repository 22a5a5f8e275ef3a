"""
Lazy, pull-based pipeline stages over streams of shapes.

    gen = SphereUv(16, 8)
    verts = gen.vertex(shade).triangulate().vertices()

Nothing is materialized up front. The one-to-many stages (vertices, lines,
triangulate) keep a small FIFO: a pull drains it if it holds anything, otherwise it
pulls the next shape from upstream and runs the shape's emission protocol into it.
A shape that emits nothing (a degenerate NGon) is skipped without yielding. Once
upstream is exhausted the stage is exhausted for good; streams are not restartable.
"""
from __future__ import annotations

import operator
from collections import deque
from typing import Any, Callable, Deque, Generic, Iterable, Iterator, TypeVar

from .poly import Edge, emit_lines, emit_vertices, map_vertex
from .triangulate import emit_triangles

T = TypeVar("T")


class StreamOps:
    """Chaining helpers shared by every stage and by the generators."""

    def vertex(self, f: Callable[[Any], Any]) -> "MapVertexStream":
        return MapVertexStream(self, f)

    def vertices(self) -> "VertexStream":
        return VertexStream(self)

    def lines(self) -> "LineStream":
        return LineStream(self)

    def triangulate(self) -> "TriangulateStream":
        return TriangulateStream(self)


class _BufferedStream(StreamOps, Generic[T]):
    """One shape in, zero or more items out, one item per pull."""

    def __init__(self, source: Iterable[Any]):
        self._source: Iterator[Any] = iter(source)
        self._buffer: Deque[T] = deque()
        self._done = False

    def _emit(self, shape: Any, push: Callable[[T], None]) -> None:
        raise NotImplementedError

    def __iter__(self) -> "_BufferedStream[T]":
        return self

    def __next__(self) -> T:
        while True:
            if self._buffer:
                return self._buffer.popleft()
            if self._done:
                raise StopIteration
            try:
                shape = next(self._source)
            except StopIteration:
                self._done = True
                raise
            self._emit(shape, self._buffer.append)

    def __length_hint__(self) -> int:
        # every upstream shape is counted once; the expansion factor is unknown
        if self._done:
            return len(self._buffer)
        return len(self._buffer) + operator.length_hint(self._source)


class VertexStream(_BufferedStream[T]):
    """Flattens shapes (or edges) into their corners."""

    def _emit(self, shape, push):
        emit_vertices(shape, push)


class LineStream(_BufferedStream[Edge[T]]):
    """Breaks polygons into their boundary edges."""

    def _emit(self, shape, push):
        emit_lines(shape, push)


class TriangulateStream(_BufferedStream[Any]):
    """Breaks polygons into triangles."""

    def _emit(self, shape, push):
        emit_triangles(shape, push)


class MapVertexStream(StreamOps):
    """Applies f to every corner of every shape, one shape per pull."""

    def __init__(self, source: Iterable[Any], f: Callable[[Any], Any]):
        self._source: Iterator[Any] = iter(source)
        self._f = f

    def __iter__(self) -> "MapVertexStream":
        return self

    def __next__(self) -> Any:
        return map_vertex(next(self._source), self._f)

    def __length_hint__(self) -> int:
        return operator.length_hint(self._source)


# ---- free-function spelling, for plain iterables ----

def vertices(source: Iterable[Any]) -> VertexStream:
    return VertexStream(source)


def lines(source: Iterable[Any]) -> LineStream:
    return LineStream(source)


def triangulate(source: Iterable[Any]) -> TriangulateStream:
    return TriangulateStream(source)


def map_vertices(source: Iterable[Any], f: Callable[[Any], Any]) -> MapVertexStream:
    return MapVertexStream(source, f)
