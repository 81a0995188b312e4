"""Visual effects: smoke bursts from destroyed tanks and the orbiting sun."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from tankwars.mesh import Mesh, circle_fan_mesh, create_square
from tankwars.utility import (
    COLOR_DEFAULT_GUN,
    RenderData,
    lerp,
    random_double,
    rotate,
    scale,
    translate,
)

SMOKE_MESH_NAME = "smoke"
SUN_MESH_NAME = "sun"
SUN_OUTLINE_MESH_NAME = "sun_outline"

_SHADER = "VertexColor"


def _zero2() -> np.ndarray:
    return np.zeros(2)


@dataclass
class SmokeParticle:
    """One puff of smoke."""

    position: np.ndarray = field(default_factory=_zero2)
    speed: np.ndarray = field(default_factory=_zero2)
    lifetime: float = 0.0
    size_scalar: float = 0.0
    growth_speed: float = 0.0
    fade_speed: float = 0.0


class Smoke:
    """A particle system that bursts smoke where a tank was destroyed."""

    NUM_PARTICLES = 50
    MIN_LIFETIME = 1.0
    MAX_LIFETIME = 3.0
    MIN_SPEED = 10.0
    MAX_SPEED = 50.0
    MIN_SIZE = 2.0
    MAX_SIZE = 8.0
    MIN_GROWTH_SPEED = 2.0
    MAX_GROWTH_SPEED = 5.0
    MIN_FADE_SPEED = 0.5
    MAX_FADE_SPEED = 1.5

    def __init__(self, mesh_name: str = SMOKE_MESH_NAME) -> None:
        self.mesh_name = mesh_name
        self.particles: list[SmokeParticle] = []

    def update(self, delta_time: float) -> list[RenderData]:
        """Age, move and grow the particles; return draw data for the living ones."""
        render_data = []
        for particle in self.particles:
            particle.lifetime -= delta_time
            if particle.lifetime <= 0:
                continue
            particle.position = particle.position + particle.speed * delta_time
            particle.size_scalar += particle.growth_speed * delta_time
            matrix = translate(particle.position) @ scale(
                particle.size_scalar, particle.size_scalar
            )
            render_data.append(RenderData(self.mesh_name, _SHADER, matrix))
        self.particles = [p for p in self.particles if p.lifetime > 0]
        return render_data

    def generate(self, tank_position: Sequence[float]) -> None:
        """Add a burst of particles flying out of the given position."""
        origin = np.array([float(tank_position[0]), float(tank_position[1])])
        for _ in range(self.NUM_PARTICLES):
            angle = 2 * math.pi * random_double(0.0, 1.0)
            speed = lerp(self.MIN_SPEED, self.MAX_SPEED, random_double(0.0, 1.0))
            self.particles.append(
                SmokeParticle(
                    position=origin.copy(),
                    speed=np.array([math.cos(angle), math.sin(angle)]) * speed,
                    lifetime=lerp(
                        self.MIN_LIFETIME, self.MAX_LIFETIME, random_double(0.0, 1.0)
                    ),
                    size_scalar=lerp(
                        self.MIN_SIZE, self.MAX_SIZE, random_double(0.0, 1.0)
                    ),
                    growth_speed=lerp(
                        self.MIN_GROWTH_SPEED,
                        self.MAX_GROWTH_SPEED,
                        random_double(0.0, 1.0),
                    ),
                    fade_speed=lerp(
                        self.MIN_FADE_SPEED,
                        self.MAX_FADE_SPEED,
                        random_double(0.0, 1.0),
                    ),
                )
            )

    def clear(self) -> None:
        """Remove every particle."""
        self.particles.clear()

    def build_mesh(self) -> Mesh:
        """The unit disc each particle is drawn with."""
        return circle_fan_mesh(self.mesh_name, 1.0, 20, COLOR_DEFAULT_GUN)


class Sun:
    """A spinning sun travelling along an elliptical arc over the sky."""

    SUN_RADIUS = 45.0
    SUN_OUTLINE_RADIUS = 60.0
    START_ROTATION = 45.0
    SPEED = 0.05
    ROTATION_SPEED = 0.4

    def __init__(self, window_size: Sequence[int]) -> None:
        width, height = int(window_size[0]), int(window_size[1])
        self.distance_big = width * 1.2
        self.distance_small = height / 1.2
        self.revolution_center = np.array([float(width // 2), -30.0])
        self.rotation = self.START_ROTATION
        self.sun_rotation = 0.0
        self.outline_rotation = 0.0

    def update(self, delta_time: float) -> list[RenderData]:
        """Advance the sun along its path; return the sun and its three outlines."""
        self.rotation += self.SPEED * delta_time
        self.outline_rotation += self.ROTATION_SPEED * 3.0 * delta_time
        self.sun_rotation += self.ROTATION_SPEED * delta_time

        x = self.revolution_center[0] + self.distance_big * math.cos(self.rotation)
        y = self.revolution_center[1] + self.distance_small * math.sin(self.rotation)

        if x < -100:
            self.rotation = self.START_ROTATION

        def placed(angle: float, size: float) -> np.ndarray:
            return (
                translate(x, y)
                @ rotate(angle)
                @ translate(-size / 2, -size / 2)
            )

        outline = self.outline_rotation
        return [
            RenderData(SUN_MESH_NAME, _SHADER, placed(self.sun_rotation, self.SUN_RADIUS)),
            RenderData(
                SUN_OUTLINE_MESH_NAME, _SHADER, placed(outline, self.SUN_OUTLINE_RADIUS)
            ),
            RenderData(
                SUN_OUTLINE_MESH_NAME,
                _SHADER,
                placed(7 + -outline * 1.25, self.SUN_OUTLINE_RADIUS),
            ),
            RenderData(
                SUN_OUTLINE_MESH_NAME,
                _SHADER,
                placed(10 + outline * 1.2, self.SUN_OUTLINE_RADIUS),
            ),
        ]

    def build_meshes(self) -> tuple[Mesh, Mesh]:
        """The filled sun square and its larger outline square."""
        sun = create_square(
            SUN_MESH_NAME, (0, 0, 0), self.SUN_RADIUS, (0.871, 0.835, 0.047), True
        )
        outline = create_square(
            SUN_OUTLINE_MESH_NAME,
            (0, 0, 0),
            self.SUN_OUTLINE_RADIUS,
            (0.871, 0.639, 0.047),
            True,
        )
        return sun, outline