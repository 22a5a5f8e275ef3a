"""
Pack vertex and index streams into numpy arrays ready for upload.

Vertex arrays are interleaved float32, one row per vertex: px py pz nx ny nz.
Index arrays are flat, uint16 when every index fits and uint32 otherwise.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence, Tuple

import numpy as np

from .generator import IndexedPolygon, SharedVertex
from .indexer import index_vertices
from .stream import TriangulateStream, VertexStream
from .vertex import Vertex

logger = logging.getLogger(__name__)

_U16_LIMIT = 1 << 16


def vertex_array(vertices: Sequence[Vertex]) -> np.ndarray:
    out = np.empty((len(vertices), 6), dtype=np.float32)
    for row, v in enumerate(vertices):
        out[row, :3] = v.pos
        out[row, 3:] = v.normal
    return out


def index_array(indices: Sequence[int]) -> np.ndarray:
    if len(indices) and max(indices) >= _U16_LIMIT:
        return np.asarray(indices, dtype=np.uint32)
    return np.asarray(indices, dtype=np.uint16)


def stream_buffers(source: Iterable[Any], capacity: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Triangulate a stream of Polygon[Vertex], deduplicate, and pack.

    `capacity` bounds the deduplication cache (see LruIndexer).
    """
    verts, indices = index_vertices(VertexStream(TriangulateStream(source)), capacity)
    logger.debug("packed %d vertices, %d indices", len(verts), len(indices))
    return vertex_array(verts), index_array(indices)


def shared_buffers(generator: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Pack a generator's indexed view directly: its vertex pool and its faces
    triangulated into indices. No deduplication beyond what the pool already has.
    """
    if not isinstance(generator, SharedVertex) or not isinstance(generator, IndexedPolygon):
        raise TypeError(f"{type(generator).__name__} has no indexed topology")
    verts = list(generator.shared_vertex_iter())
    indices = list(VertexStream(TriangulateStream(generator.indexed_polygon_iter())))
    logger.debug("packed %d shared vertices, %d indices", len(verts), len(indices))
    return vertex_array(verts), index_array(indices)
