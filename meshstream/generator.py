"""
The two capabilities a procedural generator can offer.

Streaming: the generator is an iterator of Polygon[Vertex], finite, ordered, and
spent once exhausted.

Indexed topology: SharedVertex exposes a fixed pool of vertices by dense index,
IndexedPolygon exposes every face as a Polygon[int] into that pool. The two are
independent; a generator may implement either.

When a generator does both, streaming face i must equal
map_vertex(indexed_polygon(i), shared_vertex). IndexedGenerator builds the stream
that way, so the views cannot drift apart.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from .poly import Polygon, map_vertex
from .stream import StreamOps
from .vertex import Vertex

logger = logging.getLogger(__name__)

T = TypeVar("T")


def require_at_least(name: str, n: int, minimum: int) -> None:
    if n < minimum:
        raise ValueError(f"{name} must be >= {minimum} (got {n})")


def require_positive(name: str, x: float) -> None:
    if not x > 0:
        raise ValueError(f"{name} must be > 0 (got {x})")


class SharedVertex(ABC, Generic[T]):
    """A fixed pool of vertices addressed by index."""

    @abstractmethod
    def shared_vertex(self, idx: int) -> T:
        ...

    @abstractmethod
    def shared_vertex_count(self) -> int:
        ...

    def shared_vertex_iter(self) -> Iterator[T]:
        for i in range(self.shared_vertex_count()):
            yield self.shared_vertex(i)


class IndexedPolygon(ABC):
    """Faces as polygons of indices into a SharedVertex pool."""

    @abstractmethod
    def indexed_polygon(self, idx: int) -> Polygon[int]:
        ...

    @abstractmethod
    def indexed_polygon_count(self) -> int:
        ...

    def indexed_polygon_iter(self) -> Iterator[Polygon[int]]:
        for i in range(self.indexed_polygon_count()):
            yield self.indexed_polygon(i)


class IndexedGenerator(SharedVertex[Vertex], IndexedPolygon, StreamOps):
    """Streams its faces by resolving the indexed view through the vertex pool."""

    _face = 0

    def __iter__(self) -> "IndexedGenerator":
        return self

    def __next__(self) -> Polygon[Vertex]:
        if self._face >= self.indexed_polygon_count():
            raise StopIteration
        idx = self._face
        self._face += 1
        return map_vertex(self.indexed_polygon(idx), self.shared_vertex)

    def __length_hint__(self) -> int:
        return max(0, self.indexed_polygon_count() - self._face)

    def _log_created(self) -> None:
        logger.debug(
            "%s: %d shared vertices, %d faces",
            type(self).__name__, self.shared_vertex_count(), self.indexed_polygon_count(),
        )
