"""
Long-run climate averages.

Two simulation roles are kept apart:
- AveragingRun: an ephemeral simulation stepped day by day from day 0 whose
  fields are folded into running means, then discarded.
- DisplayRun: the retained simulation. It receives the averages and the
  biome classification, and can replay days to emit snapshots for
  inspection. Replayed days never feed back into the averages.

Both start from day 0 with fresh initial conditions, so with the same seed
the replay follows exactly the same trajectory as the averaging run.
"""

import time
import structlog
from typing import Iterator, Optional, Tuple

from .climate import ClimateOptions, ClimateState
from .exceptions import ConfigurationError
from .fields import AverageFields, ClimateSnapshot
from .grid import Grid

logger = structlog.get_logger()


class AveragingRun:
    """Ephemeral simulation that accumulates running means of every field."""

    def __init__(
        self,
        heightmap: Grid,
        seed: int,
        options: Optional[ClimateOptions] = None,
        start_day: int = 0,
    ):
        """
        Initialize averaging run.

        Args:
            heightmap: Elevation grid in meters (read only)
            seed: Simulation seed
            options: Climate simulation options
            start_day: Day the fresh simulation is initialized at
        """
        self.heightmap = heightmap
        self.seed = seed
        self.options = options or ClimateOptions()
        self.start_day = start_day
        self.averages = AverageFields.zeros(heightmap.dim_x, heightmap.dim_y)

    def iter_days(self, years: int = 1) -> Iterator[Tuple[int, ClimateState]]:
        """
        Simulate every day of the given number of years.

        The averages are updated before each yield, so an interrupted run
        still holds a valid mean over the days completed.

        Args:
            years: Number of simulated years

        Yields:
            Tuple of (day index, simulation state after that day)
        """
        if years < 0:
            raise ConfigurationError(f"years must not be negative, got {years}")

        simulation = ClimateState(
            self.heightmap, seed=self.seed, day=self.start_day, options=self.options
        )
        self.averages = AverageFields.zeros(self.heightmap.dim_x, self.heightmap.dim_y)

        for i in range(years * self.options.year_length):
            simulation.calc_wind(i)
            simulation.calc_temperature()
            simulation.calc_humidity()
            simulation.calc_precipitation()

            self.averages.update(simulation, i)
            yield i, simulation

    def run(self, years: int = 1) -> AverageFields:
        """
        Run the full averaging simulation.

        Args:
            years: Number of simulated years

        Returns:
            Averages over all simulated days
        """
        days = years * self.options.year_length
        logger.info("Averaging climate", seed=self.seed, years=years, days=days)
        started = time.perf_counter()

        for _ in self.iter_days(years):
            pass

        logger.info(
            "Climate averaging completed",
            days=self.averages.days,
            elapsed_seconds=round(time.perf_counter() - started, 3),
        )
        return self.averages


def compute_averages(
    seed: int,
    heightmap: Grid,
    years: int = 1,
    options: Optional[ClimateOptions] = None,
) -> AverageFields:
    """
    Compute long-run climate averages for a heightmap.

    Args:
        seed: Simulation seed
        heightmap: Elevation grid in meters
        years: Number of simulated years
        options: Climate simulation options

    Returns:
        AverageFields over years * year_length days
    """
    return AveragingRun(heightmap, seed, options).run(years)


class DisplayRun:
    """Retained simulation exposing averages, biomes and per-day snapshots."""

    def __init__(
        self,
        heightmap: Grid,
        seed: int,
        options: Optional[ClimateOptions] = None,
    ):
        self.heightmap = heightmap
        self.seed = seed
        self.options = options or ClimateOptions()
        self.state = ClimateState(heightmap, seed=seed, day=0, options=self.options)

    @property
    def averages(self) -> AverageFields:
        return self.state.averages

    @property
    def biome(self) -> Optional[Grid]:
        return self.state.biome

    def calc_average(self, years: int = 1) -> AverageFields:
        """Fill the retained state's averages from a fresh averaging run."""
        averaging = AveragingRun(self.heightmap, self.seed, self.options)
        self.state.averages = averaging.run(years)
        return self.state.averages

    def classify(self, classifier) -> Grid:
        """
        Classify biomes from the retained averages.

        Args:
            classifier: BiomeClassifier sized for this heightmap

        Returns:
            Biome grid, also stored on the state
        """
        if self.state.averages.days == 0:
            logger.warning("Classifying biomes without averaged climate data")
        self.state.biome = classifier.classify_grid(self.heightmap, self.state.averages)
        return self.state.biome

    def frames(self, days: Optional[int] = None) -> Iterator[ClimateSnapshot]:
        """
        Replay the daily simulation from a fresh day-0 state.

        Args:
            days: Number of days to replay, defaults to one year

        Yields:
            Snapshot of each simulated day
        """
        days = self.options.year_length if days is None else days
        averages, biome = self.state.averages, self.state.biome

        self.state = ClimateState(
            self.heightmap, seed=self.seed, day=0, options=self.options
        )
        self.state.averages, self.state.biome = averages, biome

        logger.info("Replaying climate", days=days)
        for day in range(days):
            self.state.step(day)
            yield ClimateSnapshot.capture(self.state)
