"""
meshstream: build meshes as lazy streams of polygons.

Generators produce Triangles, Quads and NGons one at a time; pipeline stages
map, triangulate, split into edges, or flatten to vertices without buffering the
whole mesh; the Indexer turns a vertex stream into vertex and index buffers.

    from meshstream import SphereUv, index_vertices

    verts, indices = index_vertices(SphereUv(32, 16).triangulate().vertices())
"""

__version__ = "0.1.0"

from .poly import Edge, Triangle, Quad, NGon, Polygon, emit_vertices, emit_lines, map_vertex, as_vertices
from .triangulate import emit_triangles
from .stream import (StreamOps, VertexStream, LineStream, TriangulateStream, MapVertexStream,
                     vertices, lines, triangulate, map_vertices)
from .generator import SharedVertex, IndexedPolygon, IndexedGenerator
from .indexer import Indexer, LruIndexer, index_vertices
from .vertex import Vertex
from .primitives import Circle, Plane, Cube, Cylinder, Cone, SphereUv, Torus
from .platonic import Tetrahedron, Octahedron, Dodecahedron, IcoSphere
from .buffers import vertex_array, index_array, stream_buffers, shared_buffers

__all__ = [
    "Edge", "Triangle", "Quad", "NGon", "Polygon",
    "emit_vertices", "emit_lines", "emit_triangles", "map_vertex", "as_vertices",
    "StreamOps", "VertexStream", "LineStream", "TriangulateStream", "MapVertexStream",
    "vertices", "lines", "triangulate", "map_vertices",
    "SharedVertex", "IndexedPolygon", "IndexedGenerator",
    "Indexer", "LruIndexer", "index_vertices",
    "Vertex",
    "Circle", "Plane", "Cube", "Cylinder", "Cone", "SphereUv", "Torus",
    "Tetrahedron", "Octahedron", "Dodecahedron", "IcoSphere",
    "vertex_array", "index_array", "stream_buffers", "shared_buffers",
]
