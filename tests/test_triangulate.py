import pytest

from meshstream import Edge, NGon, Quad, Triangle, emit_triangles
from meshstream.triangulate import triangles_of


def test_triangle_passes_through() -> None:
    t = Triangle("a", "b", "c")
    assert triangles_of(t) == [t]


def test_quad_splits_on_fixed_diagonal() -> None:
    assert triangles_of(Quad("A", "B", "C", "D")) == [Triangle("A", "B", "C"), Triangle("C", "D", "A")]


def test_ngon_fans_from_first_corner() -> None:
    assert triangles_of(NGon("abcde")) == [
        Triangle("a", "b", "c"),
        Triangle("a", "c", "d"),
        Triangle("a", "d", "e"),
    ]


@pytest.mark.parametrize("n", range(3, 12))
def test_ngon_yields_n_minus_two(n) -> None:
    assert len(triangles_of(NGon(range(n)))) == n - 2


@pytest.mark.parametrize("n", [0, 1, 2])
def test_degenerate_ngon_yields_nothing(n) -> None:
    assert triangles_of(NGon(range(n))) == []


def test_concave_quad_is_not_rejected() -> None:
    # dart shape: the fixed diagonal lies outside the quad
    quad = Quad((0, 0), (2, 1), (0, 3), (1, 1))
    assert triangles_of(quad) == [Triangle((0, 0), (2, 1), (0, 3)), Triangle((0, 3), (1, 1), (0, 0))]


def test_winding_is_preserved() -> None:
    for tri in triangles_of(NGon([0, 1, 2, 3, 4])):
        assert tri.x < tri.y < tri.z


def test_rejects_edges() -> None:
    with pytest.raises(TypeError):
        emit_triangles(Edge(0, 1), lambda _: None)
