"""Tests for biome classification."""

import pytest
import numpy as np
from py_climate.core.biomes import (
    BiomeClassifier,
    BiomeScheme,
    RedblobBiome,
    TerrainBiome,
    WhittakerBiome,
    WhittakerModBiome,
)
from py_climate.core.exceptions import ConfigurationError
from py_climate.core.fields import AverageFields
from py_climate.core.grid import Grid


def make_averages(rain, temperature, dim_x, dim_y):
    averages = AverageFields.zeros(dim_x, dim_y)
    averages.rain.values[:] = rain
    averages.temperature.values[:] = temperature
    averages.days = 1
    return averages


class TestElevationScheme:
    """Test the elevation-banded biome scheme."""

    @pytest.fixture
    def classifier(self):
        return BiomeClassifier(100, 100, scheme=BiomeScheme.ELEVATION, seed=1)

    @pytest.mark.parametrize(
        "elevation, rain, expected",
        [
            (-100, 0.5, TerrainBiome.WATER),
            (200, 0.5, TerrainBiome.WATER),
            (203, 0.5, TerrainBiome.SANDY_BEACH),
            (208, 0.5, TerrainBiome.GRAVEL_BEACH),
            (215, 0.5, TerrainBiome.STONE_BEACH_CLIFFS),
            (400, 0.05, TerrainBiome.WET_PLAINS),
            (400, 0.0, TerrainBiome.DRY_PLAINS),
            (1000, 0.5, TerrainBiome.TEMPERATE_FOREST),
            (1200, 0.5, TerrainBiome.BOREAL_FOREST),
            (1400, 0.5, TerrainBiome.MOUNTAIN_TUNDRA),
            (2000, 0.5, TerrainBiome.MOUNTAIN_PEAK),
        ],
    )
    def test_elevation_bands(self, classifier, elevation, rain, expected):
        assert classifier.classify(elevation, rain, x=50, y=50) == expected

    def test_dry_hills_are_rocky_away_from_edges(self, classifier):
        assert classifier.classify(1000, 0.0, x=50, y=50) == TerrainBiome.ROCKY_HILLS
        assert classifier.classify(1250, 0.0, x=50, y=50) == TerrainBiome.ROCKY_HILLS

    def test_dry_hills_near_edge_fall_back_to_forest(self, classifier):
        assert classifier.classify(1000, 0.0, x=1, y=50) == TerrainBiome.TEMPERATE_FOREST
        assert classifier.classify(1250, 0.0, x=50, y=98) == TerrainBiome.BOREAL_FOREST

    def test_jitter_drawn_only_for_dry_hills(self, classifier):
        classifier.classify(1000, 0.5, x=50, y=50)
        classifier.classify(400, 0.0, x=50, y=50)
        assert classifier.stream.call_count == 0

        # First bound already fails, so only one draw is taken
        classifier.classify(1000, 0.0, x=1, y=50)
        assert classifier.stream.call_count == 1

        classifier.classify(1000, 0.0, x=50, y=50)
        assert classifier.stream.call_count == 5

    def test_classify_grid_is_repeatable(self):
        rng = np.random.default_rng(5)
        heightmap = Grid.from_values(rng.uniform(0, 1200, size=(20, 20)), 20, 20)
        averages = make_averages(0.0, 0.5, 20, 20)

        classifier = BiomeClassifier(20, 20, seed=3)
        first = classifier.classify_grid(heightmap, averages)
        second = classifier.classify_grid(heightmap, averages)
        other = BiomeClassifier(20, 20, seed=3).classify_grid(heightmap, averages)

        assert first == second
        assert first == other
        assert first.values.dtype == np.int32

    def test_classify_grid_shape_mismatch_raises(self, classifier):
        heightmap = Grid(10, 10)
        with pytest.raises(ConfigurationError):
            classifier.classify_grid(heightmap, make_averages(0, 0, 10, 10))

    def test_statistics(self):
        heights = [100.0] * 3 + [400.0] * 3 + [2000.0] * 3
        heightmap = Grid.from_values(heights, 3, 3)
        classifier = BiomeClassifier(3, 3)

        biomes = classifier.classify_grid(heightmap, make_averages(0.05, 0.5, 3, 3))
        stats = classifier.get_biome_statistics(biomes)

        assert stats == {
            "Water": 3,
            "Wet Plains (Grassland)": 3,
            "Mountain Peak": 3,
        }

    def test_no_colors_for_elevation_scheme(self, classifier):
        assert classifier.get_biome_colors() == {}


class TestLookupSchemes:
    """Test the Whittaker and Redblob schemes."""

    def test_scheme_from_string(self):
        classifier = BiomeClassifier(10, 10, scheme="whittaker")
        assert classifier.scheme is BiomeScheme.WHITTAKER
        assert classifier.biome_type is WhittakerBiome

    def test_unknown_scheme_raises(self):
        with pytest.raises(ConfigurationError):
            BiomeClassifier(10, 10, scheme="koppen")

    def test_water_is_unknown(self):
        for scheme in (BiomeScheme.WHITTAKER, BiomeScheme.WHITTAKER_MODIFIED, BiomeScheme.REDBLOB):
            classifier = BiomeClassifier(10, 10, scheme=scheme)
            assert classifier.classify(150, 0.5, 0.5) == 0
            assert classifier.classify(200, 0.5, 0.5) == 0

    def test_whittaker_requires_temperature(self):
        classifier = BiomeClassifier(10, 10, scheme=BiomeScheme.WHITTAKER)
        with pytest.raises(ValueError):
            classifier.classify(500, 0.5)

    def test_whittaker_unit_conversion(self):
        classifier = BiomeClassifier(10, 10, scheme=BiomeScheme.WHITTAKER)

        assert classifier.to_whittaker_units(0.0, 0.0) == (-15, 0)
        assert classifier.to_whittaker_units(1.0, 1.0) == (30, 45)
        assert classifier.classify(500, 0.0, 1.0) == WhittakerBiome.SUBTROPICAL_DESERT

    def test_whittaker_clamps_out_of_range_averages(self):
        classifier = BiomeClassifier(10, 10, scheme=BiomeScheme.WHITTAKER)

        assert classifier.classify(500, -1.0, 2.0) == classifier.classify(500, 0.0, 1.0)
        assert classifier.classify(500, 5.0, -1.0) == classifier.classify(500, 1.0, 0.0)

    def test_modified_whittaker(self):
        classifier = BiomeClassifier(10, 10, scheme=BiomeScheme.WHITTAKER_MODIFIED)

        assert classifier.classify(500, 0.0, 0.0) == WhittakerModBiome.TUNDRA
        assert classifier.get_biome_name(WhittakerModBiome.COLD_DESERT) == "Cold Desert"

    def test_redblob_zones(self):
        classifier = BiomeClassifier(10, 10, scheme=BiomeScheme.REDBLOB)

        assert classifier.classify(300, 0.0) == RedblobBiome.SUBTROPICAL_DESERT
        assert classifier.classify(5000, 1.0) == RedblobBiome.SNOW

    def test_lookup_names_and_colors(self):
        classifier = BiomeClassifier(10, 10, scheme=BiomeScheme.WHITTAKER)

        assert classifier.get_biome_name(WhittakerBiome.TUNDRA) == "Tundra"
        assert classifier.get_biome_name(8) == "Boreal Forest Taiga"
        assert classifier.get_biome_colors()[WhittakerBiome.TUNDRA] == "#ddddbb"
