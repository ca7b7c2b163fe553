"""Tests for climate averaging and the display run."""

import pytest
import numpy as np
from py_climate.core.averaging import AveragingRun, DisplayRun, compute_averages
from py_climate.core.climate import ClimateOptions
from py_climate.core.exceptions import ConfigurationError
from py_climate.core.fields import ClimateSnapshot, moving_average
from py_climate.core.grid import Grid


class TestMovingAverage:
    """Test the incremental mean."""

    def test_matches_plain_mean(self):
        values = [0.2, 0.5, 0.9, 0.1, 0.3]
        average = 0.0
        for i, value in enumerate(values):
            average = moving_average(average, value, i)

        assert average == pytest.approx(np.mean(values))

    def test_booleans_count_as_fractions(self):
        days = np.array([[True, False], [True, True]])
        average = np.zeros(2)
        for i, value in enumerate(days):
            average = moving_average(average, value.astype(float), i)

        assert np.allclose(average, [1.0, 0.5])


class TestAveragingRun:
    """Test accumulation of long-run means."""

    @pytest.fixture
    def terrain(self):
        rng = np.random.default_rng(11)
        return Grid.from_values(rng.uniform(0, 2500, size=(8, 8)), 8, 8)

    @pytest.fixture
    def short_year(self):
        return ClimateOptions(year_length=20)

    def test_averages_match_daily_log(self, terrain, short_year):
        run = AveragingRun(terrain, seed=6, options=short_year)
        log = {"temperature": [], "humidity": [], "rain": [], "cloud": [], "wind": []}

        for _, simulation in run.iter_days(1):
            log["temperature"].append(simulation.temperature.values.copy())
            log["humidity"].append(simulation.humidity.values.copy())
            log["rain"].append(simulation.rain.values.astype(float))
            log["cloud"].append(simulation.cloud.values.astype(float))
            log["wind"].append(simulation.wind_speed.values.copy())

        averages = run.averages
        assert averages.days == 20
        for name, days in log.items():
            expected = np.mean(days, axis=0)
            assert np.allclose(getattr(averages, name).values, expected, atol=1e-12), name

    def test_interrupted_run_holds_partial_mean(self, terrain, short_year):
        run = AveragingRun(terrain, seed=6, options=short_year)
        temperatures = []

        for i, simulation in run.iter_days(1):
            temperatures.append(simulation.temperature.values.copy())
            if i == 4:
                break

        assert run.averages.days == 5
        assert np.allclose(run.averages.temperature.values, np.mean(temperatures, axis=0))

    def test_averages_stay_in_unit_range(self, terrain, short_year):
        averages = compute_averages(3, terrain, years=2, options=short_year)

        assert averages.days == 40
        for name in ("rain", "cloud"):
            values = getattr(averages, name).values
            assert values.min() >= 0
            assert values.max() <= 1

    def test_same_seed_gives_identical_averages(self, terrain, short_year):
        first = compute_averages(8, terrain, years=1, options=short_year)
        second = compute_averages(8, terrain, years=1, options=short_year)

        for name, values in first.as_arrays().items():
            assert np.array_equal(values, second.as_arrays()[name]), name

    def test_zero_years_leaves_zero_averages(self, terrain, short_year):
        averages = compute_averages(1, terrain, years=0, options=short_year)

        assert averages.days == 0
        assert not averages.temperature.values.any()

    def test_negative_years_raise(self, terrain):
        with pytest.raises(ConfigurationError):
            AveragingRun(terrain, seed=1).run(-1)

    def test_calm_flat_world_stays_dry(self):
        """No wind over flat sea-level terrain never produces rain."""
        flat = Grid.from_values([200.0] * 100, 10, 10)
        options = ClimateOptions(fixed_wind_direction=(0.0, 0.0))

        averages = compute_averages(3, flat, 1, options)
        inner = averages.temperature.interior

        assert averages.days == 365
        assert averages.rain.values.max() == 0
        assert averages.temperature.mean(inner) == pytest.approx(0.7, abs=0.05)
        assert np.allclose(averages.wind.values, 5.0)

    def test_heightmap_is_not_modified(self, terrain, short_year):
        original = terrain.values.copy()
        compute_averages(2, terrain, options=short_year)

        assert np.array_equal(terrain.values, original)


class TestDisplayRun:
    """Test the retained simulation and its replay."""

    @pytest.fixture
    def terrain(self):
        rng = np.random.default_rng(21)
        return Grid.from_values(rng.uniform(-300, 3000, size=(10, 10)), 10, 10)

    @pytest.fixture
    def display(self, terrain):
        return DisplayRun(terrain, seed=4, options=ClimateOptions(year_length=15))

    def test_calc_average_fills_state(self, display):
        averages = display.calc_average(1)

        assert display.averages is averages
        assert averages.days == 15

    def test_replay_follows_averaging_trajectory(self, display, terrain):
        run = AveragingRun(terrain, seed=4, options=display.options)
        expected = [
            simulation.temperature.values.copy()
            for _, simulation in run.iter_days(1)
        ]

        snapshots = list(display.frames())

        assert [snapshot.day for snapshot in snapshots] == list(range(15))
        for snapshot, temperature in zip(snapshots, expected):
            assert np.array_equal(snapshot.temperature, temperature)

    def test_replay_does_not_touch_averages(self, display):
        averages = display.calc_average(1)
        before = averages.temperature.values.copy()

        for _ in display.frames(days=5):
            pass

        assert display.averages is averages
        assert np.array_equal(display.averages.temperature.values, before)

    def test_snapshots_are_read_only(self, display):
        snapshot = next(display.frames(days=1))

        with pytest.raises(ValueError):
            snapshot.temperature[0, 0] = 1.0
        with pytest.raises(ValueError):
            snapshot.rain[0, 0] = True


class TestClimateSnapshot:
    """Test snapshot overlays."""

    def test_precipitation_overlay(self):
        cloud = np.array([[True, False], [True, False]])
        rain = np.array([[False, False], [True, False]])
        zeros = np.zeros((2, 2))
        snapshot = ClimateSnapshot(
            day=0,
            temperature=zeros,
            humidity=zeros,
            cloud=cloud,
            rain=rain,
            wind_speed=zeros,
            wind_direction=(0.0, 0.0),
        )

        frame = snapshot.precipitation_overlay([0.5, 0.5, 0.5, 0.9])

        assert np.allclose(frame, [[0.2, 0.5], [0.7, 0.9]])
