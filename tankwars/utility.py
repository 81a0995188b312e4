"""Shared math helpers, game constants, controls and a keyboard window model."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional

import numpy as np

# Tank geometry
BODY_HEIGHT = 20.0
BODY_LENGTH = 80.0
SLOPE_WIDTH = BODY_HEIGHT / 1.5
GUN_HEIGHT = BODY_HEIGHT / 2.5
GUN_LENGTH = BODY_LENGTH / 1.75
TURRET_RADIUS = BODY_LENGTH / 5.0

# Colours
COLOR_HEALTH_BAR_BACKGROUND = (0.361, 0.176, 0.008)
COLOR_HEALTH_BAR_FOREGROUND = (0.039, 0.51, 0.016)
COLOR_DEFAULT_MAIN = (0.79, 0.68, 0.54)
COLOR_DEFAULT_SECONDARY = (0.45, 0.39, 0.3)
COLOR_DEFAULT_GUN = (0.23, 0.23, 0.23)
COLOR_RED_MAIN = (0.79, 0.3, 0.31)
COLOR_RED_SECONDARY = (0.21, 0.08, 0.08)
COLOR_BLUE_MAIN = (0.31, 0.30, 0.79)
COLOR_BLUE_SECONDARY = (0.08, 0.08, 0.21)

GRAVITY = 300.0


class Key(IntEnum):
    """Keyboard key codes used by the game."""

    SPACE = 32
    A = 65
    B = 66
    C = 67
    D = 68
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    M = 77
    N = 78
    P = 80
    S = 83
    V = 86
    W = 87
    X = 88
    Z = 90
    ENTER = 257
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    LEFT_SHIFT = 340
    RIGHT_SHIFT = 344


@dataclass(frozen=True)
class TankControls:
    """Key bindings for one tank; -1 means unbound."""

    move_left: int = -1
    move_right: int = -1
    rotate_gun_up: int = -1
    rotate_gun_down: int = -1
    accelerate: int = -1
    shoot: int = -1


CONTROLS_LEFT = TankControls(Key.A, Key.D, Key.W, Key.S, Key.LEFT_SHIFT, Key.SPACE)
CONTROLS_RIGHT = TankControls(
    Key.LEFT, Key.RIGHT, Key.DOWN, Key.UP, Key.RIGHT_SHIFT, Key.ENTER
)


@dataclass
class RenderData:
    """A mesh to draw with a shader and a 3x3 model matrix."""

    mesh_name: str
    shader_type: str
    model_matrix: np.ndarray


def _vec2(x: float = 0.0, y: float = 0.0) -> np.ndarray:
    return np.array([x, y], dtype=float)


@dataclass
class Projectile:
    """A shell in flight."""

    INITIAL_PROJECTILE_SPEED: ClassVar[float] = 400.0
    PROJECTILE_RADIUS: ClassVar[float] = GUN_HEIGHT / 2.0 - 1
    MAX_PROJECTILE_COUNT: ClassVar[int] = 2

    previous_position: np.ndarray = field(default_factory=_vec2)
    position: np.ndarray = field(default_factory=_vec2)
    speed: np.ndarray = field(
        default_factory=lambda: _vec2(
            Projectile.INITIAL_PROJECTILE_SPEED, Projectile.INITIAL_PROJECTILE_SPEED
        )
    )


@dataclass
class Healthbar:
    """Health counter; health starts at the maximum unless given."""

    MAX_HEALTH_DEFAULT: ClassVar[int] = 3

    max_health: int = 3
    health: Optional[int] = None

    def __post_init__(self) -> None:
        if self.health is None:
            self.health = self.max_health


class Window:
    """Window state the game reads: resolution and the keys held down."""

    def __init__(self, resolution: tuple[int, int] = (1280, 720)) -> None:
        self.resolution = (int(resolution[0]), int(resolution[1]))
        self._held: set[int] = set()

    def key_hold(self, key: int) -> bool:
        """Whether the key is currently held."""
        return int(key) in self._held

    def press(self, key: int) -> None:
        """Mark the key as held."""
        self._held.add(int(key))

    def release(self, key: int) -> None:
        """Mark the key as no longer held."""
        self._held.discard(int(key))


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit value to [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def clamp_min(value: float, minimum: float) -> float:
    """Limit value from below."""
    return minimum if value < minimum else value


def clamp_max(value: float, maximum: float) -> float:
    """Limit value from above."""
    return maximum if value > maximum else value


def clamp01(x: float) -> float:
    """Limit x to [0, 1]."""
    if x > 1:
        return 1
    if x < 0:
        return 0
    return x


def lerp(a, b, t: float):
    """Linear interpolation between scalars or vectors."""
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a * (1 - t) + b * t
    return np.asarray(a, dtype=float) * (1 - t) + np.asarray(b, dtype=float) * t


def sign(x: float) -> int:
    """Sign of x as -1, 0 or 1."""
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def random_double(minimum: float, maximum: float) -> float:
    """Uniform random value between minimum and maximum."""
    t = random.random()
    return minimum * (1 - t) + maximum * t


def translate(x, y=None) -> np.ndarray:
    """2D homogeneous translation matrix; x may be a 2-vector when y is omitted."""
    if y is None:
        x, y = x
    return np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]])


def scale(x, y=None) -> np.ndarray:
    """2D homogeneous scale matrix; x may be a 2-vector when y is omitted."""
    if y is None:
        x, y = x
    return np.array([[x, 0.0, 0.0], [0.0, y, 0.0], [0.0, 0.0, 1.0]])


def rotate(radians: float) -> np.ndarray:
    """2D homogeneous counter-clockwise rotation matrix."""
    c, s = math.cos(radians), math.sin(radians)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def translation_of(matrix: np.ndarray) -> np.ndarray:
    """The translation part of a 2D homogeneous matrix."""
    return np.array([matrix[0, 2], matrix[1, 2]], dtype=float)