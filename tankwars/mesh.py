"""In-memory mesh data: vertices with colours, indices and a draw mode."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class DrawMode(Enum):
    """How indices are assembled into primitives."""

    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"
    LINE_LOOP = "line_loop"


def _triple(values: Iterable[float]) -> tuple[float, float, float]:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


@dataclass(frozen=True)
class Vertex:
    """A vertex position with its colour."""

    position: tuple[float, float, float]
    color: tuple[float, float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _triple(self.position))
        object.__setattr__(self, "color", _triple(self.color))


class Mesh:
    """Named geometry made of vertices and indices."""

    def __init__(self, name: str, draw_mode: DrawMode = DrawMode.TRIANGLES) -> None:
        self.name = name
        self.draw_mode = draw_mode
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []

    def init_from_data(
        self, vertices: Sequence[Vertex], indices: Sequence[int]
    ) -> None:
        """Replace the mesh data; every index must refer to a vertex."""
        vertices = list(vertices)
        indices = [int(i) for i in indices]
        bad = [i for i in indices if not 0 <= i < len(vertices)]
        if bad:
            raise ValueError(f"mesh {self.name!r}: indices out of range: {bad}")
        self.vertices = vertices
        self.indices = indices

    def clear_data(self) -> None:
        """Drop all vertices and indices."""
        self.vertices = []
        self.indices = []

    def __repr__(self) -> str:
        return (
            f"Mesh({self.name!r}, {self.draw_mode.name}, "
            f"{len(self.vertices)} vertices, {len(self.indices)} indices)"
        )


def create_square(
    name: str,
    left_bottom_corner: Sequence[float],
    length: float,
    color: Sequence[float],
    fill: bool = False,
) -> Mesh:
    """A square; filled as two triangles or outlined as a line loop."""
    cx, cy, cz = _triple(left_bottom_corner)
    vertices = [
        Vertex((cx, cy, cz), color),
        Vertex((cx + length, cy, cz), color),
        Vertex((cx + length, cy + length, cz), color),
        Vertex((cx, cy + length, cz), color),
    ]
    indices = [0, 1, 2, 3]
    square = Mesh(name)
    if fill:
        indices += [0, 2]
    else:
        square.draw_mode = DrawMode.LINE_LOOP
    square.init_from_data(vertices, indices)
    return square


def circle_fan_mesh(
    name: str, radius: float, points: int, color: Sequence[float]
) -> Mesh:
    """A disc drawn as a triangle fan: a centre vertex and `points` rim vertices."""
    vertices = [Vertex((0.0, 0.0, 0.0), color)]
    for i in range(points):
        angle = 2.0 * math.pi * i / (points - 1)
        vertices.append(
            Vertex((radius * math.cos(angle), radius * math.sin(angle), 0.0), color)
        )
    mesh = Mesh(name, DrawMode.TRIANGLE_FAN)
    mesh.init_from_data(vertices, range(points + 1))
    return mesh