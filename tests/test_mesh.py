import math

import pytest

from tankwars.mesh import DrawMode, Mesh, Vertex, circle_fan_mesh, create_square


def test_filled_square():
    sq = create_square("sun", (0, 0, 0), 45, (1, 1, 0), True)
    assert sq.indices == [0, 1, 2, 3, 0, 2]
    assert sq.draw_mode is DrawMode.TRIANGLES
    assert sq.vertices[2].position == (45.0, 45.0, 0.0)


def test_outline_square():
    sq = create_square("outline", (1, 2, 0), 10, (0, 0, 1), False)
    assert sq.indices == [0, 1, 2, 3]
    assert sq.draw_mode is DrawMode.LINE_LOOP
    assert sq.vertices[0].position == (1.0, 2.0, 0.0)
    assert all(v.color == (0.0, 0.0, 1.0) for v in sq.vertices)


def test_circle_fan():
    mesh = circle_fan_mesh("smoke", 2.5, 20, (0.2, 0.2, 0.2))
    assert len(mesh.vertices) == 21
    assert mesh.indices == list(range(21))
    assert mesh.draw_mode is DrawMode.TRIANGLE_FAN
    assert mesh.vertices[0].position == (0.0, 0.0, 0.0)
    for v in mesh.vertices[1:]:
        assert math.isclose(math.hypot(v.position[0], v.position[1]), 2.5)


def test_circle_fan_closes():
    mesh = circle_fan_mesh("p", 3.0, 40, (1, 0, 0))
    first, last = mesh.vertices[1].position, mesh.vertices[-1].position
    assert math.isclose(first[0], last[0])
    assert math.isclose(first[1], last[1], abs_tol=1e-9)


def test_init_rejects_bad_index():
    mesh = Mesh("m")
    with pytest.raises(ValueError):
        mesh.init_from_data([Vertex((0, 0, 0), (0, 0, 0))], [0, 1])


def test_clear_data():
    mesh = create_square("s", (0, 0, 0), 1, (0, 0, 0), True)
    mesh.clear_data()
    assert mesh.vertices == []
    assert mesh.indices == []


def test_vertex_normalises_to_tuples():
    v = Vertex([1, 2, 3], [0, 1, 0])
    assert v.position == (1.0, 2.0, 3.0)
    assert v.color == (0.0, 1.0, 0.0)