"""
Daily climate simulation on a heightmap.

This module implements:
- Climate state seeded from elevation (temperature, humidity, cloud, rain)
- Upwind transport of temperature and humidity followed by neighbor smoothing
- Source and sink terms (rising air, sunshine, evaporation, rain)
- Rain/cloud state machine with transported cloud and rain

The rules are empirically tuned rather than physically exact. Every update
reads only the previous day's fields and writes into a fresh buffer, so the
order in which cells are visited never matters. Within a day the fields are
evaluated in the order wind, temperature, humidity, rain/cloud.

Only interior cells are updated. The outermost ring of cells keeps its
previous values for the whole run, which leaves an unclimated frame around
the map.
"""

import numpy as np
import structlog
from dataclasses import dataclass
from typing import Optional, Tuple, Union, Sequence

from .exceptions import ConfigurationError
from .fields import AverageFields
from .grid import Grid
from .wind import WindDirection, WindModel, upwind_offsets
from ..utils.random import RandomStream

logger = structlog.get_logger()


@dataclass
class ClimateOptions:
    """Climate simulation coefficients."""

    year_length: int = 365  # Simulated days per year
    sea_level: float = 200.0  # Elevation (m) at or below which cells count as water

    # Initial state
    sea_level_temperature: float = 0.7
    temperature_falloff: float = 2000.0  # Elevation (m) at which temperature reaches 0
    water_humidity: float = 0.4
    land_humidity: float = 0.2

    # Wind
    upwind_distance: float = 10.0  # Cells between a cell and its upwind sample
    base_wind_speed: float = 5.0
    slope_scale: float = 1000.0  # Elevation difference that stops the wind
    fixed_wind_direction: Optional[Tuple[float, float]] = None
    transport_scale: float = 2.0  # Cells travelled per unit of wind speed
    offset_rounding: str = "truncate"  # "truncate" or "nearest"

    # Temperature terms
    rising_air_cooling: float = 0.5
    sun_warming: float = 0.008
    rain_cooling: float = 0.01
    warming_weight: float = 0.8
    cooling_weight: float = 0.6

    # Humidity terms
    water_evaporation: float = 0.05  # Multiplied by local temperature
    land_evaporation: float = 0.01
    rain_depletion: float = 0.8

    # Rain/cloud thresholds: humidity >= base + factor * temperature
    rain_threshold_base: float = 0.35
    rain_threshold_factor: float = 0.5
    cloud_threshold_base: float = 0.30
    cloud_threshold_factor: float = 0.3

    def __post_init__(self):
        if self.year_length <= 0:
            raise ConfigurationError(
                f"year_length must be positive, got {self.year_length}"
            )
        if self.offset_rounding not in ("truncate", "nearest"):
            raise ConfigurationError(
                f"Unknown offset rounding '{self.offset_rounding}'"
            )


class ClimateState:
    """Mutable climate state of one simulation instance."""

    def __init__(
        self,
        heightmap: Union[Grid, Sequence[float], np.ndarray],
        dim_x: Optional[int] = None,
        dim_y: Optional[int] = None,
        seed: int = 0,
        day: int = 0,
        options: Optional[ClimateOptions] = None,
    ):
        """
        Initialize climate state.

        Args:
            heightmap: Elevation grid in meters, or row-major values
            dim_x: Grid extent along x (required unless heightmap is a Grid)
            dim_y: Grid extent along y (required unless heightmap is a Grid)
            seed: Seed for the wind noise
            day: Day used to compute the initial wind
            options: Climate simulation options

        Raises:
            ConfigurationError: If the grid has no interior cells or the
                heightmap does not match the dimensions
        """
        if isinstance(heightmap, Grid):
            if (dim_x, dim_y) != (None, None) and (dim_x, dim_y) != heightmap.shape:
                raise ConfigurationError(
                    f"Heightmap is {heightmap.dim_x}x{heightmap.dim_y}, "
                    f"expected {dim_x}x{dim_y}"
                )
            dim_x, dim_y = heightmap.shape
        else:
            if dim_x is None or dim_y is None:
                raise ConfigurationError(
                    "dim_x and dim_y are required for a flat heightmap"
                )
            heightmap = Grid.from_values(heightmap, dim_x, dim_y, dtype=np.float64)

        if dim_x <= 2 or dim_y <= 2:
            raise ConfigurationError(
                f"Climate grid needs interior cells, got {dim_x}x{dim_y}"
            )

        self.dim_x = dim_x
        self.dim_y = dim_y
        self.seed = int(seed)
        self.options = options or ClimateOptions()

        # Borrowed from the caller; the simulation only ever reads it
        self.heightmap = heightmap
        self._heights = heightmap.read_only()

        self.stream = RandomStream(self.seed)
        self.wind = WindModel(heightmap, self.stream, self.options)

        self.temperature = Grid(dim_x, dim_y)
        self.humidity = Grid(dim_x, dim_y)
        self.cloud = Grid(dim_x, dim_y, dtype=np.bool_, fill=False)
        self.rain = Grid(dim_x, dim_y, dtype=np.bool_, fill=False)
        self.wind_speed = Grid(dim_x, dim_y)
        self.wind_direction: WindDirection = (0.0, 0.0)

        # Filled by an averaging run and a classification pass
        self.averages = AverageFields.zeros(dim_x, dim_y)
        self.biome: Optional[Grid] = None

        self.day = day
        self.init(day)

    def init(self, day: int):
        """Seed temperature and humidity from elevation and clear the sky."""
        opts = self.options
        heights = self._heights

        # Temperature falls off with altitude above sea level
        self.temperature.values[:] = np.where(
            heights > opts.sea_level,
            1 - heights / opts.temperature_falloff,
            opts.sea_level_temperature,
        )

        # Humidity is higher above water bodies
        self.humidity.values[:] = np.where(
            heights <= opts.sea_level, opts.water_humidity, opts.land_humidity
        )

        self.cloud.values[:] = False
        self.rain.values[:] = False

        self.calc_wind(day)

    def calc_wind(self, day: int):
        """Set the wind direction and local wind speeds for a day."""
        self.wind_direction, self.wind_speed = self.wind.compute(day)
        self.day = day

    def _upwind_source(self) -> Tuple[np.ndarray, np.ndarray]:
        """Source cell of today's transport for every cell."""
        offset_x, offset_y = upwind_offsets(
            self.wind_speed,
            self.wind_direction,
            self.options.transport_scale,
            self.options.offset_rounding,
        )
        return self.temperature.upwind_indices(offset_x, offset_y)

    def _transport(self, field: Grid, source) -> np.ndarray:
        """Scratch copy of a field with interior cells moved from upwind."""
        inner = field.interior
        scratch = field.values.copy()
        scratch[inner] = field.sample(source)[inner]
        return scratch

    def calc_temperature(self):
        """Advance the temperature field by one day."""
        opts = self.options
        inner = self.temperature.interior
        source = self._upwind_source()
        scratch = self._transport(self.temperature, source)

        # Average with the diagonal neighbors
        smoothed = (
            scratch[:-2, :-2]
            + scratch[2:, :-2]
            + scratch[2:, 2:]
            + scratch[:-2, 2:]
            + scratch[1:-1, 1:-1]
        ) / 5

        wind = self.wind_speed.values[inner]
        heights = self._heights[inner]
        cloudy = self.cloud.values[inner]
        raining = self.rain.values[inner]

        # Rising air cools down
        add_cool = opts.rising_air_cooling * (wind - opts.base_wind_speed)

        # Sunlight on a clear sky warms the surface
        add_sun = np.where(
            cloudy, 0.0, (1 - heights / opts.temperature_falloff) * opts.sun_warming
        )

        # Rain cools
        add_rain = np.where(raining & (smoothed > 0), -opts.rain_cooling, 0.0)

        new_temp = (
            smoothed
            + opts.warming_weight * (1 - smoothed) * add_sun
            + opts.cooling_weight * smoothed * (add_rain + add_cool)
        )

        result = self.temperature.values.copy()
        result[inner] = np.clip(new_temp, 0, 1)
        self.temperature.values = result

    def calc_humidity(self):
        """Advance the humidity field by one day using today's temperature."""
        opts = self.options
        inner = self.humidity.interior
        source = self._upwind_source()
        scratch = self._transport(self.humidity, source)

        # Average with all eight neighbors
        smoothed = (
            scratch[:-2, :-2]
            + scratch[2:, :-2]
            + scratch[2:, 2:]
            + scratch[:-2, 2:]
            + scratch[1:-1, 1:-1]
            + scratch[1:-1, 2:]
            + scratch[1:-1, :-2]
            + scratch[2:, 1:-1]
            + scratch[:-2, 1:-1]
        ) / 9

        heights = self._heights[inner]
        temperature = self.temperature.values[inner]
        cloudy = self.cloud.values[inner]
        raining = self.rain.values[inner]

        # Sunshine over water evaporates more than over land
        evaporation = np.where(
            heights <= opts.sea_level,
            opts.water_evaporation * temperature,
            opts.land_evaporation,
        )
        add_humidity = np.where(cloudy, 0.0, evaporation)

        add_rain = np.where(raining, -smoothed * opts.rain_depletion, 0.0)

        new_humidity = smoothed + smoothed * add_rain + (1 - smoothed) * add_humidity

        result = self.humidity.values.copy()
        result[inner] = np.clip(new_humidity, 0, 1)
        self.humidity.values = result

    def calc_precipitation(self):
        """
        Update the rain and cloud fields from today's humidity and temperature.

        Saturated cells rain and inherit cloud cover from the upwind cell.
        Nearly saturated cells are cloudy and keep raining if the upwind cell
        was raining, so rain drifts away from its moisture source.
        """
        opts = self.options
        inner = self.cloud.interior
        source = self._upwind_source()

        upwind_cloud = self.cloud.sample(source)[inner]
        upwind_rain = self.rain.sample(source)[inner]

        humidity = self.humidity.values[inner]
        temperature = self.temperature.values[inner]

        raining = humidity >= opts.rain_threshold_base + opts.rain_threshold_factor * temperature
        cloudy = ~raining & (
            humidity >= opts.cloud_threshold_base + opts.cloud_threshold_factor * temperature
        )

        cloud = self.cloud.values.copy()
        rain = self.rain.values.copy()
        cloud[inner] = np.where(raining, upwind_cloud, cloudy)
        rain[inner] = raining | (cloudy & upwind_rain)

        self.cloud.values = cloud
        self.rain.values = rain

    def step(self, day: int):
        """Simulate one day."""
        self.calc_wind(day)
        self.calc_temperature()
        self.calc_humidity()
        self.calc_precipitation()
        logger.debug(
            "Simulated climate day",
            day=day,
            wind_direction=self.wind_direction,
            raining=int(np.count_nonzero(self.rain.values)),
        )

    def run_simulation(self, days: int, start_day: int = 0):
        """Simulate consecutive days starting at start_day."""
        for day in range(start_day, start_day + days):
            self.step(day)
