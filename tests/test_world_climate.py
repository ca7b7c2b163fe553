"""Integration tests for the world climate pipeline."""

import pytest
import numpy as np
from py_climate.core.biomes import BiomeScheme, TerrainBiome, WhittakerBiome
from py_climate.core.climate import ClimateOptions
from py_climate.core.exceptions import ConfigurationError
from py_climate.core.world_climate import generate_world_climate, scale_heightmap


class TestWorldClimate:
    """Test heightmap to biomes generation."""

    @pytest.fixture
    def heightmap(self):
        rng = np.random.default_rng(17)
        return scale_heightmap(rng.random((12, 12)))

    @pytest.fixture
    def options(self):
        return ClimateOptions(year_length=30)

    def test_scale_heightmap(self):
        scaled = scale_heightmap([0.0, 0.5, 1.0])

        assert np.allclose(scaled, [-300.0, 1700.0, 3700.0])

    def test_generates_averages_and_biomes(self, heightmap, options):
        world = generate_world_climate(heightmap, seed=7, years=1, options=options)

        assert (world.dim_x, world.dim_y) == (12, 12)
        assert world.averages.days == 30
        assert world.biomes.shape == (12, 12)
        assert world.display.averages is world.averages
        assert world.display.biome is world.biomes
        assert set(np.unique(world.biomes.values)) <= set(TerrainBiome)

    def test_water_cells_classified_as_water(self, heightmap, options):
        world = generate_world_climate(heightmap, seed=7, years=1, options=options)

        water = heightmap <= 200
        assert np.all(world.biomes.values[water] == TerrainBiome.WATER)

    def test_flat_input_with_dimensions(self, heightmap, options):
        from_flat = generate_world_climate(
            heightmap.reshape(-1).tolist(), 12, 12, seed=7, years=1, options=options
        )
        from_array = generate_world_climate(heightmap, seed=7, years=1, options=options)

        assert from_flat.biomes == from_array.biomes

    def test_flat_input_without_dimensions_raises(self, heightmap, options):
        with pytest.raises(ConfigurationError):
            generate_world_climate(
                heightmap.reshape(-1).tolist(), seed=7, years=1, options=options
            )

    def test_same_seed_is_deterministic(self, heightmap, options):
        first = generate_world_climate(heightmap, seed=2, years=1, options=options)
        second = generate_world_climate(heightmap, seed=2, years=1, options=options)

        assert first.biomes == second.biomes
        assert first.averages.temperature == second.averages.temperature
        assert first.averages.rain == second.averages.rain

    def test_whittaker_scheme(self, heightmap, options):
        world = generate_world_climate(
            heightmap, seed=7, years=1, scheme="whittaker", options=options
        )

        assert world.scheme is BiomeScheme.WHITTAKER
        assert set(np.unique(world.biomes.values)) <= set(WhittakerBiome)

    def test_unknown_scheme_raises(self, heightmap, options):
        with pytest.raises(ConfigurationError):
            generate_world_climate(heightmap, seed=7, scheme="koppen", options=options)

    def test_heightmap_is_not_modified(self, heightmap, options):
        original = heightmap.copy()
        generate_world_climate(heightmap, seed=7, years=1, options=options)

        assert np.array_equal(heightmap, original)
