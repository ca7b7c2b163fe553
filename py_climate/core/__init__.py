"""
Core climate simulation and biome classification.
"""

from .exceptions import ConfigurationError
from .grid import Grid
from .wind import WindModel
from .climate import ClimateOptions, ClimateState
from .fields import AverageFields, ClimateSnapshot, moving_average
from .averaging import AveragingRun, DisplayRun, compute_averages
from .biomes import (
    BiomeClassifier, BiomeOptions, BiomeScheme,
    TerrainBiome, WhittakerBiome, WhittakerModBiome, RedblobBiome,
)
from .world_climate import WorldClimate, generate_world_climate, scale_heightmap

__all__ = ['ConfigurationError', 'Grid', 'WindModel',
           'ClimateOptions', 'ClimateState',
           'AverageFields', 'ClimateSnapshot', 'moving_average',
           'AveragingRun', 'DisplayRun', 'compute_averages',
           'BiomeClassifier', 'BiomeOptions', 'BiomeScheme',
           'TerrainBiome', 'WhittakerBiome', 'WhittakerModBiome', 'RedblobBiome',
           'WorldClimate', 'generate_world_climate', 'scale_heightmap']
