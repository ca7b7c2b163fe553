"""Tests for the daily climate simulation."""

import pytest
import numpy as np
from py_climate.core.climate import ClimateOptions, ClimateState
from py_climate.core.exceptions import ConfigurationError
from py_climate.core.grid import Grid


def border_mask(dim_x, dim_y):
    mask = np.ones((dim_x, dim_y), dtype=bool)
    mask[1:-1, 1:-1] = False
    return mask


class TestClimateState:
    """Test climate state setup and the daily update rules."""

    @pytest.fixture
    def rough_terrain(self):
        """Random terrain spanning deep water to high mountains."""
        rng = np.random.default_rng(3)
        heights = rng.uniform(-300, 3700, size=(20, 20))
        return Grid.from_values(heights, 20, 20)

    @pytest.fixture
    def still_plateau(self):
        """3x3 land plateau with a fixed wind one cell out of +x."""
        options = ClimateOptions(fixed_wind_direction=(0.15, 0.0))
        state = ClimateState([500.0] * 9, 3, 3, seed=1, options=options)
        return state

    def test_grid_without_interior_raises(self):
        with pytest.raises(ConfigurationError):
            ClimateState([0.0] * 10, 2, 5)

    def test_heightmap_size_mismatch_raises(self):
        with pytest.raises(ConfigurationError):
            ClimateState([0.0] * 10, 3, 4)

    def test_flat_heightmap_needs_dimensions(self):
        with pytest.raises(ConfigurationError):
            ClimateState([0.0] * 9)

    def test_invalid_options_raise(self):
        with pytest.raises(ConfigurationError):
            ClimateOptions(year_length=0)
        with pytest.raises(ConfigurationError):
            ClimateOptions(offset_rounding="up")

    def test_initial_state_from_elevation(self):
        heights = [100.0, 200.0, 500.0, 1000.0, 200.0, 201.0, 0.0, 1500.0, -50.0]
        state = ClimateState(heights, 3, 3)

        temperature = state.temperature.flat
        humidity = state.humidity.flat

        # At or below sea level
        assert temperature[0] == pytest.approx(0.7)
        assert temperature[1] == pytest.approx(0.7)
        assert humidity[1] == pytest.approx(0.4)
        assert humidity[8] == pytest.approx(0.4)

        # Above sea level
        assert temperature[2] == pytest.approx(0.75)
        assert temperature[3] == pytest.approx(0.5)
        assert humidity[2] == pytest.approx(0.2)
        assert humidity[5] == pytest.approx(0.2)

        assert not state.cloud.values.any()
        assert not state.rain.values.any()

    def test_interior_values_stay_clamped(self, rough_terrain):
        state = ClimateState(rough_terrain, seed=5)
        inner = state.temperature.interior

        for day in range(60):
            state.step(day)

            assert state.temperature.values[inner].min() >= 0
            assert state.temperature.values[inner].max() <= 1
            assert state.humidity.values[inner].min() >= 0
            assert state.humidity.values[inner].max() <= 1

    def test_border_cells_never_change(self, rough_terrain):
        state = ClimateState(rough_terrain, seed=5)
        mask = border_mask(20, 20)

        initial = {
            name: getattr(state, name).values[mask].copy()
            for name in ("temperature", "humidity", "cloud", "rain")
        }

        for day in range(30):
            state.step(day)

        for name, values in initial.items():
            assert np.array_equal(getattr(state, name).values[mask], values), name

    def test_interior_cells_evolve(self, rough_terrain):
        state = ClimateState(rough_terrain, seed=5)
        inner = state.temperature.interior
        before = state.temperature.values[inner].copy()

        state.step(0)

        assert not np.array_equal(state.temperature.values[inner], before)

    def test_heightmap_is_not_modified(self, rough_terrain):
        original = rough_terrain.values.copy()
        state = ClimateState(rough_terrain, seed=2)

        state.run_simulation(10)

        assert np.array_equal(rough_terrain.values, original)

    def test_same_seed_is_deterministic(self, rough_terrain):
        first = ClimateState(rough_terrain, seed=9)
        second = ClimateState(rough_terrain, seed=9)

        first.run_simulation(25)
        second.run_simulation(25)

        assert first.temperature == second.temperature
        assert first.humidity == second.humidity
        assert first.cloud == second.cloud
        assert first.rain == second.rain

    def test_rain_inherits_upwind_cloud(self, still_plateau):
        state = still_plateau
        state.humidity.values[:] = 1.0
        state.temperature.values[:] = 0.0
        state.cloud.values[2, 1] = True
        state.rain.values[2, 1] = True

        state.step(0)

        # (2, 1) is the upwind cell of (1, 1)
        assert state.cloud.values[1, 1]
        assert state.rain.values[1, 1]
        # Border cell keeps its value
        assert state.cloud.values[2, 1]

    def test_rain_drops_local_cloud(self, still_plateau):
        state = still_plateau
        state.humidity.values[:] = 1.0
        state.temperature.values[:] = 0.0
        state.cloud.values[1, 1] = True

        state.step(0)

        assert state.rain.values[1, 1]
        assert not state.cloud.values[1, 1]

    def test_cloudy_cell_carries_upwind_rain(self, still_plateau):
        state = still_plateau
        state.temperature.values[:] = 0.0
        # Between the cloud (0.30) and rain (0.35) thresholds
        state.humidity.values[:] = 0.32
        state.rain.values[2, 1] = True

        state.calc_precipitation()

        assert state.cloud.values[1, 1]
        assert state.rain.values[1, 1]

    def test_cloudy_cell_stops_raining_without_upwind_rain(self, still_plateau):
        state = still_plateau
        state.temperature.values[:] = 0.0
        state.humidity.values[:] = 0.32
        state.rain.values[1, 1] = True

        state.calc_precipitation()

        assert state.cloud.values[1, 1]
        assert not state.rain.values[1, 1]

    def test_dry_air_clears_the_sky(self, still_plateau):
        state = still_plateau
        state.humidity.values[:] = 0.0
        state.cloud.values[:] = True
        state.rain.values[:] = True

        state.calc_precipitation()

        assert not state.cloud.values[1, 1]
        assert not state.rain.values[1, 1]

    def test_calm_flat_world_keeps_border_seeds(self):
        options = ClimateOptions(fixed_wind_direction=(0.0, 0.0))
        state = ClimateState([200.0] * 100, 10, 10, seed=4, options=options)
        mask = border_mask(10, 10)

        state.run_simulation(365)

        assert np.allclose(state.wind_speed.values, 5.0)
        assert np.allclose(state.temperature.values[mask], 0.7)
        assert np.allclose(state.humidity.values[mask], 0.4)
        assert not state.rain.values[mask].any()
        assert not state.cloud.values[mask].any()

        inner = state.temperature.interior
        assert state.temperature.values[inner].min() >= 0
        assert state.humidity.values[inner].max() <= 1

    def test_nearest_rounding_moves_further(self):
        heights = [500.0] * 25
        truncating = ClimateState(
            heights, 5, 5, options=ClimateOptions(fixed_wind_direction=(0.18, 0.0))
        )
        rounding = ClimateState(
            heights,
            5,
            5,
            options=ClimateOptions(
                fixed_wind_direction=(0.18, 0.0), offset_rounding="nearest"
            ),
        )

        src_truncated, _ = truncating._upwind_source()
        src_rounded, _ = rounding._upwind_source()

        assert src_truncated[1, 1] == 2
        assert src_rounded[1, 1] == 3
