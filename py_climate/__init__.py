"""
Procedural climate simulation and biome classification for heightmaps.
"""

__version__ = "0.1.0"
