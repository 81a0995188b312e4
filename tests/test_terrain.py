import math
import random

import numpy as np
import pytest

from tankwars.terrain import TerrainManager, Wave
from tankwars.utility import Projectile

FLOOR = 230.8
WINDOW = 1010.0  # 101 intervals of 10 with resolution 100


@pytest.fixture
def flat():
    terrain = TerrainManager(100, (WINDOW, 720))
    terrain.regenerate_height_map()
    return terrain


@pytest.fixture
def rough():
    random.seed(1234)
    terrain = TerrainManager(100, (WINDOW, 720))
    terrain.generate_random_height_map()
    return terrain


def test_flat_terrain_sits_on_floor(flat):
    assert flat.size_height_map() == 102
    assert all(h == pytest.approx(FLOOR) for h in flat.height_map)
    assert flat.max_height == pytest.approx(FLOOR)
    assert flat.min_height == pytest.approx(FLOOR)


def test_default_base_waves():
    terrain = TerrainManager(10)
    assert terrain.base_bump == Wave(0.5, 0.1, 2.3)
    assert terrain.base_hill == Wave(0.5, 0.1, 0.95)


def test_random_height_map_shape_and_extremes(rough):
    heights = rough.height_map
    assert len(heights) == rough.size_height_map() == 102
    assert rough.min_height == pytest.approx(min(heights))
    assert rough.max_height == pytest.approx(max(0.0, max(heights)))
    assert 2 <= len(rough.random_bumps) <= 12
    assert 2 <= len(rough.random_hills) <= 12


def test_random_wave_scalars_within_margin(rough):
    for wave in rough.random_bumps + rough.random_hills:
        for value in (wave.offset, wave.amplitude, wave.frequency):
            assert 0.8 <= value <= 1.2


def test_generate_random_scalar_range():
    terrain = TerrainManager(10)
    values = [terrain.generate_random_scalar() for _ in range(200)]
    assert all(0.8 <= v <= 1.2 for v in values)


def test_regenerate_is_deterministic(rough):
    before = rough.height_map
    assert rough.regenerate_height_map() == list(before)


def test_regenerate_random_keeps_counts(rough):
    bumps, hills = len(rough.random_bumps), len(rough.random_hills)
    rough.regenerate_random_height_map()
    assert len(rough.random_bumps) == bumps
    assert len(rough.random_hills) == hills


def test_regenerate_with_new_resolution(rough):
    heights = rough.regenerate_height_map(20, 1.0, 5.0)
    assert len(heights) == 22
    assert rough.resolution == 20
    assert rough.function_start == 1.0
    assert rough.function_end == 5.0


def test_calculate_height_matches_samples(rough):
    max_index = rough.size_height_map() - 1
    for i in (0, 17, 50, 99):
        x = i / max_index * WINDOW
        assert rough.calculate_height(x, WINDOW) == pytest.approx(rough.height(i))
    assert rough.calculate_height(WINDOW, WINDOW) == pytest.approx(rough.height(max_index))


def test_calculate_height_clamps_outside_window(rough):
    assert rough.calculate_height(-50, WINDOW) == pytest.approx(rough.height(0))
    assert rough.calculate_height(5000, WINDOW) == pytest.approx(rough.height(101))


def test_calculate_height_interpolates_between_samples(rough):
    low, high = sorted((rough.height(10), rough.height(11)))
    h = rough.calculate_height(105, WINDOW)
    assert low - 1e-9 <= h <= high + 1e-9


def test_height_and_angle(rough, flat):
    h, angle = rough.calculate_height_and_angle(333, WINDOW)
    assert h == pytest.approx(rough.calculate_height(333, WINDOW))
    expected_slope = (rough.height(34) - rough.height(33)) / 10.0
    assert math.tan(angle) == pytest.approx(expected_slope)
    assert flat.calculate_height_and_angle(500, WINDOW)[1] == pytest.approx(0.0)


def test_height_index_out_of_range(flat):
    with pytest.raises(IndexError):
        flat.height(102)
    with pytest.raises(IndexError):
        flat.height(-1)


def test_height_before_generation_raises():
    with pytest.raises(IndexError):
        TerrainManager(10).calculate_height(1, 100)


def test_height_at_and_point_on_screen(rough):
    assert rough.height_at(105, WINDOW) == rough.height(10)
    x, y = rough.point_on_screen(105, WINDOW)
    assert x == 0
    assert y == rough.height(10)


def test_explode_carves_symmetric_crater(flat):
    flat.explode((500.0, FLOOR), 30.0, WINDOW)
    heights = flat.height_map
    for i in list(range(0, 48)) + list(range(53, 102)):
        assert heights[i] == pytest.approx(FLOOR)
    for i in range(48, 53):
        assert heights[i] < FLOOR
    assert heights[50] == min(heights)
    assert heights[49] == pytest.approx(heights[51])
    assert heights[48] == pytest.approx(heights[52])


def test_explode_never_raises_terrain(rough):
    before = np.array(rough.height_map)
    rough.explode((400.0, 10000.0), 50.0, WINDOW)
    assert np.allclose(before, rough.height_map)


def test_collides_with_projectile_above_ground(flat):
    projectile = Projectile(position=np.array([500.0, FLOOR + 10]))
    assert flat.collides_with_projectile(projectile, WINDOW) is False
    assert all(h == pytest.approx(FLOOR) for h in flat.height_map)


def test_collides_with_projectile_below_ground(flat):
    projectile = Projectile(position=np.array([500.0, FLOOR - 5]))
    assert flat.collides_with_projectile(projectile, WINDOW) is True
    assert flat.height(50) < FLOOR - 5


def test_level_flat_terrain_is_stable(flat):
    flat.level_terrain_region(0.05, WINDOW)
    assert all(h == pytest.approx(FLOOR) for h in flat.height_map)


def test_level_fills_crater_bottom(flat):
    flat.explode((500.0, FLOOR), 40.0, WINDOW)
    bottom = flat.height(50)
    flat.level_terrain_region(0.05, WINDOW)
    assert flat.height(50) > bottom
    assert flat.height(50) < FLOOR


def test_translate_resolution_clamps_at_zero(flat):
    flat.translate_resolution(-1000)
    assert flat.resolution == 0
    assert len(flat.height_map) == 2


def test_translate_max_counts_clamp(flat):
    flat.translate_bump_max_count(-100)
    flat.translate_hill_max_count(-100)
    assert flat.bumps_max == 3
    assert flat.hills_max == 3


def test_translate_floor_shifts_heights(rough):
    before = np.array(rough.height_map)
    rough.translate_floor(12.5)
    assert np.allclose(np.array(rough.height_map) - before, 12.5)


def test_translate_height_scalar_scales_relief(rough):
    before = np.array(rough.height_map) - FLOOR
    scalar = rough.height_scalar
    rough.translate_height_scalar(scalar)
    assert np.allclose(np.array(rough.height_map) - FLOOR, 2 * before)


def test_translate_wave_parameters(rough):
    rough.translate_waves_offset(0.25)
    rough.translate_bump_amplitude(1.0)
    rough.translate_hill_amplitude(2.0)
    rough.translate_bump_frequency(0.5)
    rough.translate_hill_frequency(-0.5)
    stats = rough.stats()
    assert stats.base_bump.offset == pytest.approx(0.75)
    assert stats.base_hill.offset == pytest.approx(0.75)
    assert stats.base_bump.amplitude == pytest.approx(1.1)
    assert stats.base_hill.amplitude == pytest.approx(2.1)
    assert stats.base_bump.frequency == pytest.approx(2.8)
    assert stats.base_hill.frequency == pytest.approx(0.45)


def test_translate_function_range(rough):
    rough.translate_function_start(1.0)
    rough.translate_function_end(-1.0)
    assert rough.function_start == pytest.approx(1.0)
    assert rough.function_end == pytest.approx(8.1)
    assert len(rough.height_map) == 102


def test_translate_randomness_rerolls_within_margin(rough):
    rough.translate_randomness(-0.2)
    assert rough.randomness_margin == pytest.approx(0.0)
    for wave in rough.random_bumps + rough.random_hills:
        assert wave.amplitude == pytest.approx(1.0)


def test_stats_is_a_copy(rough):
    stats = rough.stats()
    assert stats.resolution == 100
    assert stats.floor == pytest.approx(FLOOR)
    assert len(stats.random_bumps) == len(rough.random_bumps)
    stats.random_bumps.clear()
    stats.base_bump.offset = 99.0
    assert len(rough.random_bumps) >= 2
    assert rough.base_bump.offset == 0.5