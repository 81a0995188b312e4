"""Builders for the scene meshes: sky, trajectory dots, shells, health bars, curtains and terrain."""

from __future__ import annotations

from typing import Sequence

from tankwars.mesh import Mesh, Vertex, circle_fan_mesh
from tankwars.terrain import TerrainManager
from tankwars.utility import BODY_LENGTH, COLOR_DEFAULT_GUN, Projectile, lerp

_QUAD_INDICES = (0, 1, 2, 0, 2, 3)

COLOR_GRASS_DARK = (0.055, 0.349, 0.024)
COLOR_GRASS_LIGHT = (0.161, 1.0, 0.357)
COLOR_GROUND = (0.231, 0.188, 0.008)

TRAJECTORY_POINTS = 40
PROJECTILE_POINTS = 20
HEALTHBAR_HEIGHT = 10.0


def _quad(
    name: str,
    width: float,
    height: float,
    color_bottom: Sequence[float],
    color_top: Sequence[float],
) -> Mesh:
    vertices = [
        Vertex((0, 0, 0), color_bottom),
        Vertex((width, 0, 0), color_bottom),
        Vertex((width, height, 0), color_top),
        Vertex((0, height, 0), color_top),
    ]
    mesh = Mesh(name)
    mesh.init_from_data(vertices, _QUAD_INDICES)
    return mesh


def background_mesh(
    name: str,
    resolution: Sequence[float],
    color_bottom: Sequence[float],
    color_top: Sequence[float],
) -> Mesh:
    """A full-screen sky quad fading from the bottom colour to the top colour."""
    return _quad(name, float(resolution[0]), float(resolution[1]), color_bottom, color_top)


def trajectory_point_mesh(name: str, color: Sequence[float]) -> Mesh:
    """A dot marking the predicted path of a shell."""
    return circle_fan_mesh(
        name, Projectile.PROJECTILE_RADIUS * 1.5, TRAJECTORY_POINTS, color
    )


def projectile_mesh(name: str) -> Mesh:
    """The disc a shell in flight is drawn with."""
    return circle_fan_mesh(
        name, Projectile.PROJECTILE_RADIUS, PROJECTILE_POINTS, COLOR_DEFAULT_GUN
    )


def healthbar_mesh(name: str, color: Sequence[float]) -> Mesh:
    """A flat health bar rectangle."""
    return _quad(name, BODY_LENGTH / 1.5, HEALTHBAR_HEIGHT, color, color)


def black_screen_mesh(name: str, resolution: Sequence[float]) -> Mesh:
    """A black full-screen quad used by the death transition."""
    black = (0.0, 0.0, 0.0)
    return _quad(name, float(resolution[0]), float(resolution[1]), black, black)


def _relative_rise(rise: float, max_height: float) -> float:
    if max_height == 0:
        return 0.0
    return rise / max_height


def terrain_mesh(
    name: str, terrain: TerrainManager, window_size: Sequence[float]
) -> Mesh:
    """A strip of triangles from the height map down to the bottom of the screen."""
    resolution = terrain.resolution
    width = float(window_size[0])
    max_height = terrain.max_height
    vertices: list[Vertex] = []
    indices: list[int] = []

    if resolution != 0:
        vertices.append(Vertex((0, terrain.height(0), 0), COLOR_GRASS_LIGHT))
        vertices.append(Vertex((0, 0, 0), COLOR_GROUND))

        last = resolution + 1
        for i in range(1, last + 1):
            x = i / last * width
            y = terrain.height(i)
            rise_left = _relative_rise(y - terrain.height(i - 1), max_height)
            rise_right = rise_left
            if i < last:
                rise_right = _relative_rise(terrain.height(i + 1) - y, max_height)

            grass = lerp(COLOR_GRASS_LIGHT, COLOR_GRASS_DARK, (rise_left + rise_right) / 2.0)
            vertices.append(Vertex((x, y, 0), grass))
            vertices.append(Vertex((x, 0, 0), COLOR_GROUND))

            top = 2 * i
            indices += [top - 2, top - 1, top, top - 1, top, top + 1]
    else:
        vertices = [
            Vertex((0, terrain.height(0), 0), COLOR_GRASS_LIGHT),
            Vertex((0, 0, 0), COLOR_GROUND),
            Vertex((width, terrain.height(1), 0), COLOR_GRASS_LIGHT),
            Vertex((width, 0, 0), COLOR_GROUND),
        ]
        indices = [0, 1, 2, 1, 2, 3]

    mesh = Mesh(name)
    mesh.init_from_data(vertices, indices)
    return mesh