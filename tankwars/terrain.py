"""Procedural terrain: a height map built from random sine waves, with craters and landslides."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from tankwars.utility import BODY_LENGTH, Projectile, clamp, clamp_min, lerp, random_double, sign


@dataclass
class Wave:
    """Sine wave parameters; for random waves these are scalars of a base wave."""

    offset: float
    amplitude: float
    frequency: float


@dataclass
class Stats:
    """Snapshot of the terrain generator settings."""

    resolution: int
    function_start: float
    function_end: float
    floor: float
    height_scalar: float
    randomness_margin: float
    base_bump: Wave
    base_hill: Wave
    bumps_max: float
    hills_max: float
    random_bumps: list[Wave] = field(default_factory=list)
    random_hills: list[Wave] = field(default_factory=list)


class TerrainManager:
    """Generates and deforms the height map the tanks drive on."""

    def __init__(self, resolution: float, window_size: Optional[Sequence[float]] = None) -> None:
        self._resolution = float(resolution)
        self._height_map: list[float] = []

        self.function_start = 0.0
        self.function_end = 9.1
        self.floor = 230.8
        self.height_scalar = 125.4
        self.random_bumps: list[Wave] = []
        self.random_hills: list[Wave] = []
        self.bumps_max = 10.0
        self.hills_max = 10.0

        # A margin of 0.2 lets each random scalar vary from 0.8 to 1.2.
        self.randomness_margin = 0.2

        self.base_bump = Wave(0.5, 0.1, 2.3)
        self.base_hill = Wave(0.5, 0.1, 0.95)

        self._max_height = -1.0
        self._min_height = sys.float_info.max

        self.landslide_depth = 40.0
        self.landslide_maximum_threshold = 50.0
        self.landslide_speed = 0.2
        self.landslide_minimum_threshold = 1.0

    # ------------------------------------------------------------------ access

    @property
    def resolution(self) -> int:
        """Number of interior sample points."""
        return int(self._resolution)

    @property
    def height_map(self) -> tuple[float, ...]:
        """The current heights, left to right."""
        return tuple(self._height_map)

    @property
    def max_height(self) -> float:
        """Highest generated point (never below 0)."""
        return self._max_height

    @property
    def min_height(self) -> float:
        """Lowest generated point."""
        return self._min_height

    def size_height_map(self) -> int:
        """Number of samples: the resolution plus both end points."""
        return int(self._resolution) + 2

    def height(self, index: int) -> float:
        """Height at a sample index."""
        if not 0 <= index < len(self._height_map):
            raise IndexError(f"height map index {index} out of range")
        return self._height_map[index]

    def height_at(self, x: float, window_length: float) -> float:
        """Height of the sample at or left of screen position x."""
        return self.height(int(x / window_length * (self.size_height_map() - 1)))

    def point_on_screen(self, x: float, window_length: float) -> tuple[float, float]:
        """Screen point for position x, snapped as the height lookup does."""
        map_x = int(x / window_length)
        return (map_x * window_length, self.height_at(x, window_length))

    # ---------------------------------------------------------------- sampling

    def _neighbours(self, position_x: float, window_length: float):
        position01 = clamp(position_x / window_length, 0, 1)
        max_index = self.size_height_map() - 1
        t_index = position01 * max_index
        left = int(clamp(int(t_index), 0, max_index - 1))
        right = left + 1
        x_left01 = left / max_index
        x_right01 = right / max_index
        y_left = self.height(left)
        y_right = self.height(right)
        t = (position01 - x_left01) / (x_right01 - x_left01)
        return x_left01 * window_length, x_right01 * window_length, y_left, y_right, t

    def calculate_height_and_angle(
        self, position_x: float, window_length: float
    ) -> tuple[float, float]:
        """Interpolated height and slope angle (radians) at screen position x."""
        x_left, x_right, y_left, y_right, t = self._neighbours(position_x, window_length)
        height = y_left * (1 - t) + y_right * t
        angle = math.atan2(y_right - y_left, x_right - x_left)
        return height, angle

    def calculate_height(self, position_x: float, window_length: float) -> float:
        """Interpolated height at screen position x."""
        _, _, y_left, y_right, t = self._neighbours(position_x, window_length)
        return lerp(y_left, y_right, t)

    # ------------------------------------------------------------- deformation

    def explode(self, center: Sequence[float], radius: float, window_length: float) -> None:
        """Carve a half-depth circular crater around center."""
        cx, cy = float(center[0]), float(center[1])
        left01 = clamp((cx - radius) / window_length, 0, 1)
        right01 = clamp((cx + radius) / window_length, 0, 1)
        max_index = self.size_height_map() - 1
        index_left = int(left01 * max_index)
        index_right = int(right01 * max_index)

        for i in range(index_left, index_right + 1):
            x = i / max_index * window_length - cx
            if radius - x < 0 or radius + x < 0:
                continue
            new_y = cy + 0.5 * -math.sqrt((radius - x) * (radius + x))
            if new_y < self._height_map[i]:
                self._height_map[i] = new_y

    def _local_extreme(self, idx: int, left: bool, map_dx: int) -> float:
        heights = self._height_map
        size = self.size_height_map()
        side = -1 if left else 1

        def inside(j: int) -> bool:
            return 0 < j < size - 1 and idx - map_dx <= j <= idx + map_dx

        j = idx
        trend = 0
        while inside(j):
            trend = sign(heights[j] - heights[j + side])
            if trend != 0:
                break
            j += side
        if trend == 0:
            return heights[idx]

        while inside(j):
            if sign(heights[j] - heights[j + side]) * trend < 0:
                break
            j += side
        return heights[j]

    def level_terrain_region(self, delta_time: float, window_length: float) -> None:
        """Let the terrain slide towards its nearby local extremes."""
        size = self.size_height_map()
        map_dx = int(self.landslide_depth * (size / window_length))
        heights = self._height_map

        for i in range(size):
            left_extreme = self._local_extreme(i, True, map_dx)
            right_extreme = self._local_extreme(i, False, map_dx)
            displacement = (left_extreme - heights[i] + right_extreme - heights[i]) / 2.0

            if abs(displacement) > self.landslide_minimum_threshold:
                heights[i] += displacement * self.landslide_speed * delta_time

            if 0 < i < size - 1 and heights[i - 1] < heights[i] > heights[i + 1]:
                heights[i] += self.landslide_speed * delta_time

    def collides_with_projectile(self, projectile: Projectile, window_length: float) -> bool:
        """Whether the projectile is under ground; if so a crater is carved."""
        x, y = float(projectile.position[0]), float(projectile.position[1])
        if y < self.calculate_height(x, window_length):
            self.explode((x, y), BODY_LENGTH / 2.0, window_length)
            return True
        return False

    # ------------------------------------------------------------- translation

    def translate_resolution(self, value: float) -> None:
        self._resolution = clamp_min(self._resolution + value, 0)
        self.regenerate_height_map()

    def translate_function_start(self, value: float) -> None:
        self.function_start += value
        self.regenerate_height_map()

    def translate_function_end(self, value: float) -> None:
        self.function_end += value
        self.regenerate_height_map()

    def translate_floor(self, value: float) -> None:
        self.floor += value
        self.regenerate_height_map()

    def translate_height_scalar(self, value: float) -> None:
        self.height_scalar += value
        self.regenerate_height_map()

    def translate_waves_offset(self, value: float) -> None:
        self.base_bump.offset += value
        self.base_hill.offset += value
        self.regenerate_height_map()

    def translate_bump_max_count(self, value: float) -> None:
        self.bumps_max = clamp_min(self.bumps_max + value, 3)
        self.regenerate_height_map()

    def translate_hill_max_count(self, value: float) -> None:
        self.hills_max = clamp_min(self.hills_max + value, 3)
        self.regenerate_height_map()

    def translate_bump_amplitude(self, value: float) -> None:
        self.base_bump.amplitude += value
        self.regenerate_height_map()

    def translate_hill_amplitude(self, value: float) -> None:
        self.base_hill.amplitude += value
        self.regenerate_height_map()

    def translate_bump_frequency(self, value: float) -> None:
        self.base_bump.frequency += value
        self.regenerate_height_map()

    def translate_hill_frequency(self, value: float) -> None:
        self.base_hill.frequency += value
        self.regenerate_height_map()

    def translate_randomness(self, value: float) -> None:
        self.randomness_margin += value
        self.regenerate_random_height_map()

    # -------------------------------------------------------------- generation

    def generate_random_scalar(self) -> float:
        """Random factor within one randomness margin of 1."""
        return random_double(1 - self.randomness_margin, 1 + self.randomness_margin)

    def _random_waves(self, count: int) -> list[Wave]:
        return [
            Wave(
                self.generate_random_scalar(),
                self.generate_random_scalar(),
                self.generate_random_scalar(),
            )
            for _ in range(count)
        ]

    def generate_random_height_map(self) -> list[float]:
        """Pick new random bumps and hills (at least two of each) and rebuild."""
        bumps_count = int(2 + random_double(0.0, 1.0) * self.bumps_max)
        hills_count = int(2 + random_double(0.0, 1.0) * self.hills_max)
        self.random_bumps = self._random_waves(bumps_count)
        self.random_hills = self._random_waves(hills_count)
        return self._generate_points()

    def regenerate_height_map(
        self,
        resolution: Optional[float] = None,
        function_start: Optional[float] = None,
        function_end: Optional[float] = None,
    ) -> list[float]:
        """Rebuild with the current waves, optionally changing the sampling."""
        if resolution is not None:
            self._resolution = float(int(resolution))
        if function_start is not None:
            self.function_start = float(function_start)
        if function_end is not None:
            self.function_end = float(function_end)
        return self._generate_points()

    def regenerate_random_height_map(self) -> list[float]:
        """Re-roll the random waves, keeping their counts, and rebuild."""
        self.random_bumps = self._random_waves(len(self.random_bumps))
        self.random_hills = self._random_waves(len(self.random_hills))
        return self._generate_points()

    def _wave_sum(self, x: float, waves: list[Wave], base: Wave) -> float:
        return sum(
            (w.amplitude * base.amplitude)
            * math.sin((w.frequency * base.frequency) * (x + w.offset * base.offset))
            for w in waves
        )

    def _generate_points(self) -> list[float]:
        size = self.size_height_map()
        self._max_height = 0.0
        self._min_height = sys.float_info.max
        heights = []
        for i in range(size):
            x = lerp(self.function_start, self.function_end, i / (size - 1))
            y = self._wave_sum(x, self.random_bumps, self.base_bump)
            y += self._wave_sum(x, self.random_hills, self.base_hill)
            y = y * self.height_scalar + self.floor
            heights.append(y)
            self._max_height = max(self._max_height, y)
            self._min_height = min(self._min_height, y)
        self._height_map = heights
        return list(heights)

    def stats(self) -> Stats:
        """A copy of the generator settings."""
        return Stats(
            resolution=int(self._resolution),
            function_start=self.function_start,
            function_end=self.function_end,
            floor=self.floor,
            height_scalar=self.height_scalar,
            randomness_margin=self.randomness_margin,
            base_bump=replace(self.base_bump),
            base_hill=replace(self.base_hill),
            bumps_max=self.bumps_max,
            hills_max=self.hills_max,
            random_bumps=[replace(w) for w in self.random_bumps],
            random_hills=[replace(w) for w in self.random_hills],
        )