"""
Random number generation utilities.

Each simulation instance and each biome classifier owns its own
RandomStream, built once from the run seed. Nothing in the package uses a
module-level generator, so two simulations with the same seed never share
or race on generator state.
"""

import numpy as np
from opensimplex import OpenSimplex


class RandomStream:
    """
    Seeded pseudo-random stream plus a smooth 2D noise source.

    The noise source drives the daily wind direction; the integer stream
    drives the spatial jitter of the elevation-banded biome scheme.
    """

    def __init__(self, seed: int):
        """
        Initialize the stream.

        Args:
            seed: Integer seed shared by the noise function and the generator
        """
        self.seed = int(seed)
        self.call_count = 0
        self._rng = np.random.default_rng(self.seed)
        self._noise = OpenSimplex(seed=self.seed)

    def noise2(self, x: float, y: float) -> float:
        """Continuous, deterministic noise in roughly [-1, 1]."""
        return float(self._noise.noise2(x, y))

    def randint(self, high: int) -> int:
        """Generate next random integer in [0, high)."""
        self.call_count += 1
        return int(self._rng.integers(0, high))

