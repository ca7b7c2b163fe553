"""
Wind model.

A single global wind direction is derived for each simulated day from
smooth noise, so the direction drifts over the year. Local wind speed
depends on the terrain: air flowing downhill speeds up, air flowing uphill
slows down.
"""

import numpy as np
from typing import Tuple

from .grid import Grid
from ..utils.random import RandomStream

WindDirection = Tuple[float, float]


class WindModel:
    """Computes the daily wind direction and per-cell wind speed."""

    def __init__(self, heightmap: Grid, stream: RandomStream, options):
        """
        Initialize wind model.

        Args:
            heightmap: Elevation grid in meters (read only)
            stream: Random stream owning the noise source
            options: ClimateOptions with the wind coefficients
        """
        self.heightmap = heightmap
        self.stream = stream
        self.options = options

    def direction(self, day: int) -> WindDirection:
        """
        Get the global wind direction for a day.

        The vector points towards the cell the wind is blowing from. With a
        fixed direction configured the noise is bypassed.
        """
        if self.options.fixed_wind_direction is not None:
            wdx, wdy = self.options.fixed_wind_direction
            return float(wdx), float(wdy)

        time_interval = day / self.options.year_length
        seed = float(self.stream.seed)
        return (
            self.stream.noise2(time_interval, seed),
            self.stream.noise2(time_interval, time_interval + seed),
        )

    def speed(self, direction: WindDirection) -> Grid:
        """
        Calculate local wind speed for every cell.

        Args:
            direction: Global wind direction

        Returns:
            Wind speed grid (unclamped, may be negative on steep climbs)
        """
        distance = self.options.upwind_distance
        offset_x = int(distance * direction[0])
        offset_y = int(distance * direction[1])
        source = self.heightmap.upwind_indices(offset_x, offset_y)

        heights = self.heightmap.values
        slope = (heights - heights[source]) / self.options.slope_scale

        speed = Grid(self.heightmap.dim_x, self.heightmap.dim_y)
        speed.values[:] = self.options.base_wind_speed * (1 - slope)
        return speed

    def compute(self, day: int) -> Tuple[WindDirection, Grid]:
        """Get direction and speed field for a day."""
        direction = self.direction(day)
        return direction, self.speed(direction)


def upwind_offsets(
    wind_speed: Grid, direction: WindDirection, scale: float, rounding: str
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert per-cell transport distances into integer grid offsets.

    Args:
        wind_speed: Local wind speed grid
        direction: Global wind direction
        scale: Transport distance per unit of wind speed
        rounding: "truncate" (toward zero) or "nearest"

    Returns:
        Tuple of (offset_x, offset_y) integer arrays
    """
    dx = scale * wind_speed.values * direction[0]
    dy = scale * wind_speed.values * direction[1]

    if rounding == "nearest":
        return np.rint(dx).astype(np.int64), np.rint(dy).astype(np.int64)
    return np.trunc(dx).astype(np.int64), np.trunc(dy).astype(np.int64)
