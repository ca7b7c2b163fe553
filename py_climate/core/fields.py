"""Climate field records handed to downstream consumers."""

import numpy as np
from dataclasses import dataclass, fields
from typing import Dict, Tuple

from .grid import Grid


def moving_average(average, value, i: int):
    """
    Incremental mean after adding the i-th (0-indexed) sample.

    Works on scalars and numpy arrays alike; booleans count as 1 and 0.
    """
    return (average * i + value) / (i + 1)


@dataclass
class AverageFields:
    """Running means of the daily climate fields."""

    rain: Grid
    wind: Grid
    cloud: Grid
    temperature: Grid
    humidity: Grid
    days: int = 0

    @classmethod
    def zeros(cls, dim_x: int, dim_y: int) -> "AverageFields":
        return cls(
            rain=Grid(dim_x, dim_y),
            wind=Grid(dim_x, dim_y),
            cloud=Grid(dim_x, dim_y),
            temperature=Grid(dim_x, dim_y),
            humidity=Grid(dim_x, dim_y),
        )

    def update(self, state, i: int):
        """
        Fold the current fields of a climate state into the averages.

        Args:
            state: ClimateState after day i has been simulated
            i: Number of days already averaged
        """
        self.wind.values = moving_average(self.wind.values, state.wind_speed.values, i)
        self.rain.values = moving_average(
            self.rain.values, state.rain.values.astype(np.float64), i
        )
        self.cloud.values = moving_average(
            self.cloud.values, state.cloud.values.astype(np.float64), i
        )
        self.temperature.values = moving_average(
            self.temperature.values, state.temperature.values, i
        )
        self.humidity.values = moving_average(
            self.humidity.values, state.humidity.values, i
        )
        self.days = i + 1

    def as_arrays(self) -> Dict[str, np.ndarray]:
        """Read-only arrays keyed by field name."""
        return {
            f.name: getattr(self, f.name).read_only()
            for f in fields(self)
            if f.name != "days"
        }


@dataclass(frozen=True, eq=False)
class ClimateSnapshot:
    """Immutable copy of one simulated day, for inspection and debug frames."""

    day: int
    temperature: np.ndarray
    humidity: np.ndarray
    cloud: np.ndarray
    rain: np.ndarray
    wind_speed: np.ndarray
    wind_direction: Tuple[float, float]

    @classmethod
    def capture(cls, state) -> "ClimateSnapshot":
        def frozen(grid: Grid) -> np.ndarray:
            array = grid.values.copy()
            array.flags.writeable = False
            return array

        return cls(
            day=state.day,
            temperature=frozen(state.temperature),
            humidity=frozen(state.humidity),
            cloud=frozen(state.cloud),
            rain=frozen(state.rain),
            wind_speed=frozen(state.wind_speed),
            wind_direction=tuple(state.wind_direction),
        )

    def precipitation_overlay(
        self, base: np.ndarray, cloud_value: float = 0.2, rain_value: float = 0.7
    ) -> np.ndarray:
        """
        Float map showing cloud and rain over a base layer.

        Args:
            base: Background values (e.g. normalized heightmap), same shape
            cloud_value: Value drawn for cloudy cells
            rain_value: Value drawn for raining cells (drawn over clouds)

        Returns:
            New float array
        """
        frame = np.array(base, dtype=np.float64).reshape(self.cloud.shape)
        frame = np.where(self.cloud, cloud_value, frame)
        return np.where(self.rain, rain_value, frame)
