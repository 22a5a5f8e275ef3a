"""
Turn a vertex stream into a deduplicated vertex buffer plus an index stream.

    verts = []
    indexer = Indexer(lambda i, v: verts.append(v))
    indices = [indexer.index(v) for v in SphereUv(16, 8).triangulate().vertices()]

Indexer remembers every vertex it has seen, so equal vertices always get the same
index and the buffer never holds a duplicate. LruIndexer only remembers the most
recently used `capacity` vertices: memory stays bounded, but a vertex that comes
back after being evicted is emitted again under a new index.
"""
from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from .generator import require_at_least

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)

Emit = Callable[[int, V], None]


class Indexer(Generic[V]):
    """Unbounded deduplication. `emit(index, vertex)` fires once per new vertex."""

    def __init__(self, emit: Emit):
        self._emit = emit
        self._cache: Dict[V, int] = {}

    def index(self, v: V) -> int:
        if v in self._cache:
            return self._cache[v]
        idx = len(self._cache)
        self._cache[v] = idx
        self._emit(idx, v)
        return idx

    def __len__(self) -> int:
        return len(self._cache)


class LruIndexer(Generic[V]):
    """Deduplication over the `capacity` most recently used vertices.

    Lookups and inserts both count as a use. Indices keep counting up after an
    eviction; an index is never handed out twice.
    """

    def __init__(self, capacity: int, emit: Emit):
        require_at_least("capacity", capacity, 1)
        self.capacity = capacity
        self._emit = emit
        self._cache: "OrderedDict[V, int]" = OrderedDict()
        self._next = 0

    def index(self, v: V) -> int:
        if v in self._cache:
            self._cache.move_to_end(v)
            return self._cache[v]
        if len(self._cache) >= self.capacity:
            _, old_idx = self._cache.popitem(last=False)
            logger.debug("evicted index %d, %d cached", old_idx, len(self._cache))
        idx = self._next
        self._next += 1
        self._cache[v] = idx
        self._emit(idx, v)
        return idx

    def __len__(self) -> int:
        return self._next


def index_vertices(vertices: Iterable[V], capacity: Optional[int] = None) -> Tuple[List[V], List[int]]:
    """Drain a vertex stream into (vertex buffer, indices).

    Uses an LruIndexer when `capacity` is given, a plain Indexer otherwise.
    """
    buffer: List[V] = []

    def emit(idx: int, v: V) -> None:
        buffer.append(v)

    indexer = Indexer(emit) if capacity is None else LruIndexer(capacity, emit)
    indices = [indexer.index(v) for v in vertices]
    return buffer, indices
