"""
World climate pipeline: heightmap in, averaged climate and biomes out.
"""

import time
import numpy as np
import structlog
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .averaging import DisplayRun
from .biomes import BiomeClassifier, BiomeOptions, BiomeScheme
from .climate import ClimateOptions
from .exceptions import ConfigurationError
from .fields import AverageFields
from .grid import Grid
from ..config import settings

logger = structlog.get_logger()

# Normalized heightmaps span this many meters, starting below sea level
HEIGHT_RANGE_M = 4000.0
HEIGHT_OFFSET_M = -300.0


def scale_heightmap(values: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    """
    Scale a normalized [0, 1] heightmap to meters.

    Args:
        values: Normalized elevations

    Returns:
        New float array of elevations in meters
    """
    return np.asarray(values, dtype=np.float64) * HEIGHT_RANGE_M + HEIGHT_OFFSET_M


@dataclass
class WorldClimate:
    """Result of a world climate run."""

    heightmap: Grid
    averages: AverageFields
    biomes: Grid
    scheme: BiomeScheme
    display: DisplayRun

    @property
    def dim_x(self) -> int:
        return self.heightmap.dim_x

    @property
    def dim_y(self) -> int:
        return self.heightmap.dim_y


def generate_world_climate(
    heightmap: Union[Grid, Sequence[float], np.ndarray],
    dim_x: Optional[int] = None,
    dim_y: Optional[int] = None,
    seed: Optional[int] = None,
    years: Optional[int] = None,
    scheme=None,
    options: Optional[ClimateOptions] = None,
    biome_options: Optional[BiomeOptions] = None,
) -> WorldClimate:
    """
    Average the climate of a heightmap and classify its biomes.

    Args:
        heightmap: Elevation grid in meters, or row-major values
        dim_x: Grid extent along x (required unless heightmap is a Grid)
        dim_y: Grid extent along y (required unless heightmap is a Grid)
        seed: Simulation seed, defaults to settings.default_seed
        years: Simulated years, defaults to settings.default_years
        scheme: Biome scheme, defaults to settings.biome_scheme
        options: Climate simulation options
        biome_options: Biome classification options

    Returns:
        WorldClimate with averages, biomes and the retained display run
    """
    seed = settings.default_seed if seed is None else seed
    years = settings.default_years if years is None else years
    scheme = settings.biome_scheme if scheme is None else scheme
    options = options or ClimateOptions(year_length=settings.year_length)

    if not isinstance(heightmap, Grid):
        if dim_x is None or dim_y is None:
            heightmap = np.asarray(heightmap, dtype=np.float64)
            if heightmap.ndim != 2:
                raise ConfigurationError(
                    "dim_x and dim_y are required for a flat heightmap"
                )
            dim_x, dim_y = heightmap.shape
        heightmap = Grid.from_values(heightmap, dim_x, dim_y, dtype=np.float64)

    logger.info(
        "Generating world climate",
        dim_x=heightmap.dim_x,
        dim_y=heightmap.dim_y,
        seed=seed,
        years=years,
        scheme=getattr(scheme, "value", scheme),
    )
    started = time.perf_counter()

    # Construct the classifier first so a bad scheme fails before simulating
    classifier = BiomeClassifier(
        heightmap.dim_x, heightmap.dim_y, scheme=scheme, options=biome_options, seed=seed
    )
    display = DisplayRun(heightmap, seed, options)
    averages = display.calc_average(years)
    biomes = display.classify(classifier)

    logger.info(
        "World climate generated",
        elapsed_seconds=round(time.perf_counter() - started, 3),
        biomes=classifier.get_biome_statistics(biomes),
    )

    return WorldClimate(
        heightmap=heightmap,
        averages=averages,
        biomes=biomes,
        scheme=classifier.scheme,
        display=display,
    )
