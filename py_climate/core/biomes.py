"""
Biome classification from elevation and long-run climate.

This module implements:
- Elevation-banded terrain classification (water, beaches, plains, hills,
  forests, mountains) with a rain cutoff and seeded spatial jitter
- Whittaker temperature/precipitation lookup (plain and modified tables)
- Redblob elevation/moisture lookup
"""

import structlog
import numpy as np
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional

from .biome_tables import (
    WHITTAKER_MODIFIED_TABLE,
    WHITTAKER_TABLE,
    lookup_redblob,
    lookup_whittaker,
)
from .exceptions import ConfigurationError
from .fields import AverageFields
from .grid import Grid
from ..utils.random import RandomStream

logger = structlog.get_logger()


class BiomeScheme(str, Enum):
    """Interchangeable classification schemes."""

    ELEVATION = "elevation"
    WHITTAKER = "whittaker"
    WHITTAKER_MODIFIED = "whittaker_modified"
    REDBLOB = "redblob"


class TerrainBiome(IntEnum):
    """Surface biomes of the elevation-banded scheme."""

    WATER = 0
    SANDY_BEACH = 1
    GRAVEL_BEACH = 2
    STONE_BEACH_CLIFFS = 3
    WET_PLAINS = 4
    DRY_PLAINS = 5
    ROCKY_HILLS = 6
    TEMPERATE_FOREST = 7
    BOREAL_FOREST = 8
    MOUNTAIN_TUNDRA = 9
    MOUNTAIN_PEAK = 10


class WhittakerBiome(IntEnum):
    """Biomes of the Whittaker lookup table."""

    UNKNOWN = 0x0
    TROPICAL_RAIN_FOREST = 0x1
    TROPICAL_SEASONAL_FOREST_SAVANNA = 0x2
    SUBTROPICAL_DESERT = 0x3
    TEMPERATE_RAIN_FOREST = 0x4
    TEMPERATE_SEASONAL_FOREST = 0x5
    WOODLAND_SHRUBLAND = 0x6
    TEMPERATE_GRASSLAND_DESERT = 0x7
    BOREAL_FOREST_TAIGA = 0x8
    TUNDRA = 0x9


class WhittakerModBiome(IntEnum):
    """Biomes of the modified Whittaker lookup table."""

    UNKNOWN = 0x0
    TROPICAL_RAIN_FOREST = 0x1
    TROPICAL_SEASONAL_FOREST = 0x2
    SUBTROPICAL_DESERT = 0x3
    TEMPERATE_RAIN_FOREST = 0x4
    TEMPERATE_SEASONAL_FOREST = 0x5
    WOODLAND_SHRUBLAND = 0x6
    TEMPERATE_GRASSLAND = 0x7
    BOREAL_FOREST_TAIGA = 0x8
    TUNDRA = 0x9
    COLD_DESERT = 0xA
    SNOW = 0xB
    HOT_SWAMP = 0xC
    WETLANDS = 0xD
    SAVANNAH = 0xE


class RedblobBiome(IntEnum):
    """Biomes of the Redblob elevation/moisture table."""

    UNKNOWN = 0x0
    TUNDRA = 0x1
    TAIGA = 0x2
    SHRUBLAND = 0x3
    TEMPERATE_RAIN_FOREST = 0x4
    TROPICAL_RAIN_FOREST = 0x5
    TROPICAL_SEASONAL_FOREST = 0x6
    SUBTROPICAL_DESERT = 0x7
    TEMPERATE_SEASONAL_FOREST = 0x8
    TEMPERATE_DESERT = 0x9
    GRASSLAND = 0xA
    SNOW = 0xB
    BARE = 0xC
    SCORCHED = 0xD


SCHEME_BIOMES = {
    BiomeScheme.ELEVATION: TerrainBiome,
    BiomeScheme.WHITTAKER: WhittakerBiome,
    BiomeScheme.WHITTAKER_MODIFIED: WhittakerModBiome,
    BiomeScheme.REDBLOB: RedblobBiome,
}

# Biome names for display
BIOME_NAMES = {
    TerrainBiome.WATER: "Water",
    TerrainBiome.SANDY_BEACH: "Sandy Beach",
    TerrainBiome.GRAVEL_BEACH: "Gravel Beach",
    TerrainBiome.STONE_BEACH_CLIFFS: "Stone Beach Cliffs",
    TerrainBiome.WET_PLAINS: "Wet Plains (Grassland)",
    TerrainBiome.DRY_PLAINS: "Dry Plains (Shrubland)",
    TerrainBiome.ROCKY_HILLS: "Rocky Hills",
    TerrainBiome.TEMPERATE_FOREST: "Temperate Forest",
    TerrainBiome.BOREAL_FOREST: "Boreal Forest",
    TerrainBiome.MOUNTAIN_TUNDRA: "Mountain Tundra",
    TerrainBiome.MOUNTAIN_PEAK: "Mountain Peak",
}

# Biome colors for the lookup schemes
BIOME_COLORS = {
    BiomeScheme.WHITTAKER: {
        WhittakerBiome.TROPICAL_RAIN_FOREST: "#9cbba9",
        WhittakerBiome.TROPICAL_SEASONAL_FOREST_SAVANNA: "#a9cca4",
        WhittakerBiome.SUBTROPICAL_DESERT: "#e9ddc7",
        WhittakerBiome.TEMPERATE_RAIN_FOREST: "#a4c4a8",
        WhittakerBiome.TEMPERATE_SEASONAL_FOREST: "#b4c9a9",
        WhittakerBiome.WOODLAND_SHRUBLAND: "#c4ccbb",
        WhittakerBiome.TEMPERATE_GRASSLAND_DESERT: "#e4e8ca",
        WhittakerBiome.BOREAL_FOREST_TAIGA: "#ccd4bb",
        WhittakerBiome.TUNDRA: "#ddddbb",
    },
    BiomeScheme.WHITTAKER_MODIFIED: {
        WhittakerModBiome.TROPICAL_RAIN_FOREST: "#9cbba9",
        WhittakerModBiome.TROPICAL_SEASONAL_FOREST: "#a9cca4",
        WhittakerModBiome.SUBTROPICAL_DESERT: "#fde38d",
        WhittakerModBiome.TEMPERATE_RAIN_FOREST: "#a4c4a8",
        WhittakerModBiome.TEMPERATE_SEASONAL_FOREST: "#b4c9a9",
        WhittakerModBiome.WOODLAND_SHRUBLAND: "#c4ccbb",
        WhittakerModBiome.TEMPERATE_GRASSLAND: "#e4e8ca",
        WhittakerModBiome.BOREAL_FOREST_TAIGA: "#ccd4bb",
        WhittakerModBiome.TUNDRA: "#ddddbb",
        WhittakerModBiome.COLD_DESERT: "#cccccc",
        WhittakerModBiome.HOT_SWAMP: "#964b00",
        WhittakerModBiome.SAVANNAH: "#ffd145",
        WhittakerModBiome.SNOW: "#ffffff",
    },
    BiomeScheme.REDBLOB: {
        RedblobBiome.SNOW: "#ffffff",
        RedblobBiome.TUNDRA: "#ddddbb",
        RedblobBiome.BARE: "#bbbbbb",
        RedblobBiome.SCORCHED: "#999999",
        RedblobBiome.TAIGA: "#ccd4bb",
        RedblobBiome.SHRUBLAND: "#c4ccbb",
        RedblobBiome.TEMPERATE_DESERT: "#e4e8ca",
        RedblobBiome.TEMPERATE_RAIN_FOREST: "#a4c4a8",
        RedblobBiome.TEMPERATE_SEASONAL_FOREST: "#b4c9a9",
        RedblobBiome.TROPICAL_RAIN_FOREST: "#9cbba9",
        RedblobBiome.TROPICAL_SEASONAL_FOREST: "#a9cca4",
        RedblobBiome.GRASSLAND: "#c4d4aa",
        RedblobBiome.SUBTROPICAL_DESERT: "#e9ddc7",
    },
}


@dataclass
class BiomeOptions:
    """Biome classification options."""

    # Elevation bands (m), each the upper bound of its biome
    sea_level: float = 200.0
    sandy_beach_height: float = 204.0
    gravel_beach_height: float = 210.0
    stone_cliffs_height: float = 220.0
    plains_height: float = 600.0
    hills_height: float = 1300.0
    temperate_forest_height: float = 1100.0
    tundra_height: float = 1500.0

    # Average rain cutoffs
    wet_plains_rain: float = 0.02  # Plains at or above this are wet
    rocky_hills_rain: float = 0.001  # Hills below this may be rocky

    # Rocky hills jitter: coord + randint(jitter_range) - jitter_range // 2
    # has to stay strictly inside (jitter_margin, dim - jitter_margin)
    jitter_range: int = 4
    jitter_margin: int = 5

    # Unit conversion for the Whittaker schemes
    min_temperature_c: float = -15.0  # Average temperature 0
    max_temperature_c: float = 30.0  # Average temperature 1
    precipitation_scale_dm: float = 45.0  # Decimeters per unit of average rain

    # Zoning for the Redblob scheme
    redblob_elevation_band: float = 400.0  # Meters per elevation zone
    redblob_moisture_scale: float = 20.0  # Moisture zones per unit of average rain


class BiomeClassifier:
    """Classifies cells into biomes from elevation and averaged climate."""

    def __init__(
        self,
        dim_x: int,
        dim_y: int,
        scheme=BiomeScheme.ELEVATION,
        options: Optional[BiomeOptions] = None,
        seed: int = 0,
    ):
        """
        Initialize biome classifier.

        Args:
            dim_x: Grid extent along x
            dim_y: Grid extent along y
            scheme: BiomeScheme or its string value
            options: Biome classification options
            seed: Seed for the spatial jitter stream

        Raises:
            ConfigurationError: If the scheme is unknown
        """
        try:
            self.scheme = BiomeScheme(scheme)
        except ValueError:
            raise ConfigurationError(f"Unknown biome scheme '{scheme}'") from None

        self.dim_x = dim_x
        self.dim_y = dim_y
        self.options = options or BiomeOptions()
        self.seed = seed
        self.stream = RandomStream(seed)

    @property
    def biome_type(self):
        """IntEnum of the biomes this scheme produces."""
        return SCHEME_BIOMES[self.scheme]

    def classify(
        self,
        elevation: float,
        avg_rain: float,
        avg_temp: Optional[float] = None,
        x: int = 0,
        y: int = 0,
    ) -> int:
        """
        Classify a single cell.

        Args:
            elevation: Elevation in meters
            avg_rain: Average raininess in [0, 1]
            avg_temp: Average temperature in [0, 1], required by the lookup schemes
            x: Cell x coordinate (used by the elevation scheme's jitter)
            y: Cell y coordinate

        Returns:
            Biome id of the selected scheme
        """
        if self.scheme == BiomeScheme.ELEVATION:
            return int(self._classify_elevation(elevation, avg_rain, x, y))

        if elevation <= self.options.sea_level:
            return 0

        if self.scheme == BiomeScheme.REDBLOB:
            return lookup_redblob(*self._redblob_zones(elevation, avg_rain))

        if avg_temp is None:
            raise ValueError(f"{self.scheme.value} scheme requires a temperature")

        temperature, precipitation = self.to_whittaker_units(avg_temp, avg_rain)
        table = (
            WHITTAKER_TABLE
            if self.scheme == BiomeScheme.WHITTAKER
            else WHITTAKER_MODIFIED_TABLE
        )
        return lookup_whittaker(table, temperature, precipitation)

    def to_whittaker_units(self, avg_temp: float, avg_rain: float):
        """Convert averages to whole °C and decimeters per year."""
        opts = self.options
        temperature = opts.min_temperature_c + avg_temp * (
            opts.max_temperature_c - opts.min_temperature_c
        )
        precipitation = avg_rain * opts.precipitation_scale_dm
        return int(temperature), int(precipitation)

    def _redblob_zones(self, elevation: float, avg_rain: float):
        opts = self.options
        height = int((elevation - opts.sea_level) / opts.redblob_elevation_band) + 1
        moisture = int(avg_rain * opts.redblob_moisture_scale) + 1
        return height, moisture

    def _classify_elevation(self, elevation: float, avg_rain: float, x: int, y: int):
        opts = self.options

        if elevation <= opts.sea_level:
            return TerrainBiome.WATER
        if elevation <= opts.sandy_beach_height:
            return TerrainBiome.SANDY_BEACH
        if elevation <= opts.gravel_beach_height:
            return TerrainBiome.GRAVEL_BEACH
        if elevation <= opts.stone_cliffs_height:
            return TerrainBiome.STONE_BEACH_CLIFFS
        if elevation <= opts.plains_height:
            if avg_rain >= opts.wet_plains_rain:
                return TerrainBiome.WET_PLAINS
            return TerrainBiome.DRY_PLAINS
        if elevation <= opts.hills_height:
            if avg_rain < opts.rocky_hills_rain and self._inside_jittered(x, y):
                return TerrainBiome.ROCKY_HILLS
            if elevation <= opts.temperate_forest_height:
                return TerrainBiome.TEMPERATE_FOREST
            return TerrainBiome.BOREAL_FOREST
        if elevation <= opts.tundra_height:
            return TerrainBiome.MOUNTAIN_TUNDRA
        return TerrainBiome.MOUNTAIN_PEAK

    def _jitter(self, coord: int) -> int:
        half = self.options.jitter_range // 2
        return coord + self.stream.randint(self.options.jitter_range) - half

    def _inside_jittered(self, x: int, y: int) -> bool:
        """Jittered margin test; stops drawing at the first failed bound."""
        margin = self.options.jitter_margin
        return (
            self._jitter(x) > margin
            and self._jitter(x) < self.dim_x - margin
            and self._jitter(y) > margin
            and self._jitter(y) < self.dim_y - margin
        )

    def classify_grid(self, heightmap: Grid, averages: AverageFields) -> Grid:
        """
        Classify every cell.

        Args:
            heightmap: Elevation grid in meters
            averages: Long-run climate averages of the same shape

        Returns:
            Integer biome grid
        """
        if heightmap.shape != (self.dim_x, self.dim_y):
            raise ConfigurationError(
                f"Heightmap is {heightmap.dim_x}x{heightmap.dim_y}, "
                f"classifier expects {self.dim_x}x{self.dim_y}"
            )

        logger.info("Classifying biomes", scheme=self.scheme.value)

        # Restart the jitter stream so classification is repeatable
        self.stream = RandomStream(self.seed)

        biomes = Grid(self.dim_x, self.dim_y, dtype=np.int32)
        heights = heightmap.values
        rain = averages.rain.values
        temperature = averages.temperature.values

        for x in range(self.dim_x):
            for y in range(self.dim_y):
                biomes.values[x, y] = self.classify(
                    heights[x, y], rain[x, y], temperature[x, y], x, y
                )

        logger.info(
            "Biome classification completed",
            unique_biomes=len(np.unique(biomes.values)),
        )
        return biomes

    def get_biome_name(self, biome_id: int) -> str:
        biome = self.biome_type(biome_id)
        if self.scheme == BiomeScheme.ELEVATION:
            return BIOME_NAMES[biome]
        return biome.name.replace("_", " ").title()

    def get_biome_colors(self) -> Dict[int, str]:
        """
        Get color mapping for the biome types of the lookup schemes.

        Returns:
            Dictionary mapping biome to hex color string (empty for the
            elevation scheme, which is rendered from the heightmap)
        """
        return dict(BIOME_COLORS.get(self.scheme, {}))

    def get_biome_statistics(self, biomes: Grid) -> Dict[str, int]:
        """
        Get statistics about biome distribution.

        Returns:
            Dictionary with biome names and cell counts
        """
        stats = {}
        unique_biomes, counts = np.unique(biomes.values, return_counts=True)

        for biome_id, count in zip(unique_biomes, counts):
            stats[self.get_biome_name(int(biome_id))] = int(count)

        return stats
