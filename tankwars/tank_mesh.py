"""Geometry of the tank body and gun, and the origins used to place them."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from tankwars.mesh import Mesh, Vertex
from tankwars.utility import (
    BODY_HEIGHT,
    BODY_LENGTH,
    GUN_HEIGHT,
    GUN_LENGTH,
    SLOPE_WIDTH,
    TURRET_RADIUS,
)

_TURRET_POINTS = 100


def tank_origin() -> np.ndarray:
    """Pivot of the tank body: bottom centre of the tracks."""
    track_height = BODY_HEIGHT / 2.0
    return np.array([SLOPE_WIDTH + BODY_LENGTH / 2.0, -track_height])


def gun_origin() -> np.ndarray:
    """Where the gun attaches, relative to the tank origin."""
    offset = 2.0
    return (
        np.array(
            [SLOPE_WIDTH + BODY_LENGTH / 2.0 + TURRET_RADIUS - offset, BODY_HEIGHT]
        )
        - tank_origin()
    )


def build_tank_mesh(
    name: str, color_tracks: Sequence[float], color_body: Sequence[float]
) -> Mesh:
    """Body trapezoid, tracks trapezoid and a round turret."""
    slope = SLOPE_WIDTH
    track_width = slope / 2.0
    track_length = BODY_LENGTH - 2 * track_width
    track_height = BODY_HEIGHT / 2.0

    vertices = [
        # Body left slope
        Vertex((0, 0, 0), color_tracks),
        Vertex((slope, 0, 0), color_tracks),
        Vertex((slope, BODY_HEIGHT, 0), color_body),
        # Body right slope
        Vertex((slope + BODY_LENGTH, BODY_HEIGHT, 0), color_body),
        Vertex((slope + BODY_LENGTH, 0, 0), color_tracks),
        Vertex((slope + BODY_LENGTH + slope, 0, 0), color_tracks),
        # Tracks left slope
        Vertex((slope, 0, 0), color_tracks),
        Vertex((slope + track_width, 0, 0), color_tracks),
        Vertex((slope + track_width, -track_height, 0), color_tracks),
        # Tracks right slope
        Vertex((slope + track_width + track_length, -track_height, 0), color_tracks),
        Vertex((slope + track_width + track_length, 0, 0), color_tracks),
        Vertex((slope + 2 * track_width + track_length, 0, 0), color_tracks),
        # Turret centre
        Vertex((slope + BODY_LENGTH / 2.0, BODY_HEIGHT, 0), color_tracks),
    ]
    for i in range(_TURRET_POINTS):
        angle = 2.0 * math.pi * i / _TURRET_POINTS
        x = TURRET_RADIUS * math.cos(angle) + slope + BODY_LENGTH / 2.0
        y = TURRET_RADIUS * math.sin(angle) + BODY_HEIGHT + GUN_HEIGHT / 2.0
        vertices.append(Vertex((x, y, 0), color_body))

    indices = [
        0, 1, 2,
        1, 2, 3,
        1, 3, 4,
        3, 4, 5,
        6, 7, 8,
        7, 8, 9,
        7, 9, 10,
        9, 10, 11,
    ]
    for i in range(_TURRET_POINTS - 1):
        indices += [12, i + 13, i + 14]
    indices += [12, _TURRET_POINTS + 11, 13]

    mesh = Mesh(name)
    mesh.init_from_data(vertices, indices)
    return mesh


def build_gun_mesh(name: str, color_gun: Sequence[float]) -> Mesh:
    """A rectangular barrel, slightly darker at the muzzle."""
    darker = tuple(float(c) - 0.1 for c in color_gun)
    vertices = [
        Vertex((0, 0, 0), color_gun),
        Vertex((GUN_LENGTH, 0, 0), darker),
        Vertex((GUN_LENGTH, GUN_HEIGHT, 0), darker),
        Vertex((0, GUN_HEIGHT, 0), color_gun),
    ]
    mesh = Mesh(name)
    mesh.init_from_data(vertices, [0, 1, 2, 0, 2, 3])
    return mesh