import math
import operator

import pytest

from meshstream import (Circle, Cone, Cube, Cylinder, Dodecahedron, IcoSphere, IndexedGenerator,
                        IndexedPolygon, NGon, Octahedron, Plane, Quad, SharedVertex, SphereUv,
                        Tetrahedron, Torus, Triangle, Vertex, map_vertex)
from meshstream.triangulate import triangles_of
from meshstream.vertex import face_normal, v_dot, v_len

FACTORIES = {
    "circle": lambda: Circle(8),
    "plane": lambda: Plane(),
    "plane_3x2": lambda: Plane(3, 2),
    "cube": lambda: Cube(),
    "cylinder": lambda: Cylinder(8),
    "cylinder_bands": lambda: Cylinder(6, 3),
    "cone": lambda: Cone(8),
    "sphere": lambda: SphereUv(8, 6),
    "sphere_min": lambda: SphereUv(2, 2),
    "torus": lambda: Torus(1.0, 0.25, 8, 6),
    "tetrahedron": lambda: Tetrahedron(),
    "octahedron": lambda: Octahedron(),
    "dodecahedron": lambda: Dodecahedron(),
    "icosahedron": lambda: IcoSphere(),
    "icosphere": lambda: IcoSphere(2),
}

# generators enclosing a volume, for the winding check
CLOSED = ["cube", "cylinder", "cylinder_bands", "cone", "sphere", "tetrahedron",
          "octahedron", "dodecahedron", "icosahedron", "icosphere"]


@pytest.fixture(params=sorted(FACTORIES))
def make(request):
    return FACTORIES[request.param]


def test_streaming_matches_indexed_view(make) -> None:
    gen = make()
    streamed = list(make())
    assert len(streamed) == gen.indexed_polygon_count()
    for i, shape in enumerate(streamed):
        assert shape == map_vertex(gen.indexed_polygon(i), gen.shared_vertex)


def test_indices_stay_inside_the_pool(make) -> None:
    gen = make()
    n = gen.shared_vertex_count()
    for face in gen.indexed_polygon_iter():
        for t in triangles_of(face):
            assert all(0 <= i < n for i in (t.x, t.y, t.z))


def test_every_shared_vertex_is_used(make) -> None:
    gen = make()
    used = set()
    for face in gen.indexed_polygon_iter():
        for t in triangles_of(face):
            used.update((t.x, t.y, t.z))
    assert used == set(range(gen.shared_vertex_count()))


def test_not_restartable(make) -> None:
    gen = make()
    assert len(list(gen)) > 0
    assert list(gen) == []
    with pytest.raises(StopIteration):
        next(gen)


def test_length_hint_counts_down(make) -> None:
    gen = make()
    total = gen.indexed_polygon_count()
    assert operator.length_hint(gen) == total
    next(gen)
    assert operator.length_hint(gen) == total - 1


def test_normals_are_unit_length(make) -> None:
    for v in make().shared_vertex_iter():
        assert v_len(v.normal) == pytest.approx(1.0)


@pytest.mark.parametrize("name", CLOSED)
def test_faces_wind_outward(name) -> None:
    for tri in FACTORIES[name]().triangulate():
        n = face_normal(tri.x.pos, tri.y.pos, tri.z.pos)
        centroid = tuple((a + b + c) / 3 for a, b, c in zip(tri.x.pos, tri.y.pos, tri.z.pos))
        assert v_dot(n, centroid) > 0


@pytest.mark.parametrize("name", ["circle", "plane", "plane_3x2"])
def test_flat_generators_face_up(name) -> None:
    for tri in FACTORIES[name]().triangulate():
        assert face_normal(tri.x.pos, tri.y.pos, tri.z.pos) == pytest.approx((0.0, 0.0, 1.0))


@pytest.mark.parametrize("gen, vertices, faces", [
    (Circle(8), 9, 8),
    (Plane(3, 2), 12, 6),
    (Cube(), 24, 6),
    (Cylinder(8), 34, 24),
    (Cylinder(6, 3), 38, 30),
    (Cone(8), 25, 16),
    (SphereUv(8, 6), 42, 48),
    (Torus(1.0, 0.25, 8, 6), 48, 48),
    (Tetrahedron(), 4, 4),
    (Octahedron(), 6, 8),
    (Dodecahedron(), 20, 12),
    (IcoSphere(), 12, 20),
    (IcoSphere(1), 42, 80),
    (IcoSphere(2), 162, 320),
])
def test_counts(gen, vertices, faces) -> None:
    assert gen.shared_vertex_count() == vertices
    assert gen.indexed_polygon_count() == faces


def test_face_variants() -> None:
    assert all(isinstance(p, Quad) for p in Cube())
    assert all(isinstance(p, Quad) for p in Torus(1.0, 0.25, 4, 4))
    assert all(isinstance(p, Triangle) for p in IcoSphere(1))
    assert all(isinstance(p, NGon) and len(p) == 5 for p in Dodecahedron())
    kinds = [type(p) for p in SphereUv(4, 4)]
    assert kinds == [Triangle] * 4 + [Quad] * 8 + [Triangle] * 4


def test_plane_quad_corners() -> None:
    (quad,) = list(Plane())
    assert [v.pos for v in (quad.x, quad.y, quad.z, quad.w)] == [
        (-1.0, -1.0, 0.0), (1.0, -1.0, 0.0), (1.0, 1.0, 0.0), (-1.0, 1.0, 0.0),
    ]


def test_cone_tip_and_base() -> None:
    gen = Cone(4)
    side = list(gen)[:4]
    assert all(t.x.pos == (0.0, 0.0, 1.0) for t in side)
    base = gen.shared_vertex(gen.shared_vertex_count() - 1)
    assert base == Vertex((0.0, 0.0, -1.0), (0.0, 0.0, -1.0))


def test_solids_sit_on_the_unit_sphere() -> None:
    for gen in (Tetrahedron(), Octahedron(), Dodecahedron(), IcoSphere(2), SphereUv(6, 4)):
        for v in gen.shared_vertex_iter():
            assert v_len(v.pos) == pytest.approx(1.0)


def test_torus_radii() -> None:
    gen = Torus(2.0, 0.5, 12, 8)
    for v in gen.shared_vertex_iter():
        x, y, z = v.pos
        ring = math.hypot(x, y) - 2.0
        assert math.hypot(ring, z) == pytest.approx(0.5)


def test_four_vertex_two_triangle_generator() -> None:
    pool = [Vertex((float(i), 0.0, 0.0), (0.0, 0.0, 1.0)) for i in range(4)]

    class Fan(IndexedGenerator):
        def shared_vertex(self, idx):
            return pool[idx]

        def shared_vertex_count(self):
            return 4

        def indexed_polygon(self, idx):
            return [Triangle(0, 1, 2), Triangle(0, 2, 3)][idx]

        def indexed_polygon_count(self):
            return 2

    assert list(Fan()) == [
        Triangle(pool[0], pool[1], pool[2]),
        Triangle(pool[0], pool[2], pool[3]),
    ]


def test_capabilities_are_independent() -> None:
    class PoolOnly(SharedVertex):
        def shared_vertex(self, idx):
            return idx * 2

        def shared_vertex_count(self):
            return 3

    assert list(PoolOnly().shared_vertex_iter()) == [0, 2, 4]
    assert not isinstance(PoolOnly(), IndexedPolygon)


@pytest.mark.parametrize("factory", [
    lambda: Circle(3),
    lambda: Plane(0, 1),
    lambda: Plane(1, 0),
    lambda: Cylinder(1),
    lambda: Cylinder(4, 0),
    lambda: Cone(1),
    lambda: SphereUv(1, 4),
    lambda: SphereUv(4, 1),
    lambda: Torus(1.0, 0.25, 2, 8),
    lambda: Torus(1.0, 0.25, 8, 2),
    lambda: Torus(0.0, 0.25, 8, 8),
    lambda: Torus(1.0, -1.0, 8, 8),
    lambda: IcoSphere(-1),
])
def test_bad_parameters_fail_at_construction(factory) -> None:
    with pytest.raises(ValueError):
        factory()
