"""
Dense per-cell field storage for the climate simulation.

Every climate field (temperature, humidity, cloud cover, rain, wind speed
and the running averages) lives in a Grid. Cells are addressed by (x, y)
and stored row-major, so the flat index of a cell is ``x * dim_y + y``.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple, Union

from .exceptions import ConfigurationError

Offset = Union[int, np.ndarray]


class Grid:
    """A 2D field backed by a contiguous numpy buffer of shape (dim_x, dim_y)."""

    def __init__(self, dim_x: int, dim_y: int, dtype=np.float64, fill=0):
        if dim_x <= 0 or dim_y <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {dim_x}x{dim_y}"
            )
        self.dim_x = dim_x
        self.dim_y = dim_y
        self.values = np.full((dim_x, dim_y), fill, dtype=dtype)

    @classmethod
    def from_values(
        cls, values: Union[Sequence[float], np.ndarray], dim_x: int, dim_y: int, dtype=None
    ) -> "Grid":
        """
        Build a grid from a flat row-major sequence or a (dim_x, dim_y) array.

        Args:
            values: Cell values, either flat (length dim_x * dim_y) or 2D
            dim_x: Grid extent along x
            dim_y: Grid extent along y
            dtype: Optional dtype override

        Returns:
            New Grid owning a copy of the values

        Raises:
            ConfigurationError: If the number of values does not match the extent
        """
        array = np.array(values, dtype=dtype)
        if array.size != dim_x * dim_y:
            raise ConfigurationError(
                f"Expected {dim_x * dim_y} values for a {dim_x}x{dim_y} grid, "
                f"got {array.size}"
            )
        grid = cls(dim_x, dim_y, dtype=array.dtype)
        grid.values[:] = array.reshape(dim_x, dim_y)
        return grid

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    @property
    def size(self) -> int:
        return self.values.size

    @property
    def flat(self) -> np.ndarray:
        """Row-major flat view of the buffer."""
        return self.values.reshape(-1)

    @property
    def interior(self) -> Tuple[slice, slice]:
        """Index expression selecting every cell except the outermost ring."""
        return (slice(1, self.dim_x - 1), slice(1, self.dim_y - 1))

    def index(self, x: int, y: int) -> int:
        return x * self.dim_y + y

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.dim_x and 0 <= y < self.dim_y

    def _check(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) outside {self.dim_x}x{self.dim_y} grid"
            )

    def get(self, x: int, y: int):
        self._check(x, y)
        return self.values[x, y]

    def set(self, x: int, y: int, value):
        self._check(x, y)
        self.values[x, y] = value

    def neighbors(
        self, x: int, y: int, diagonal: bool = True, orthogonal: bool = True
    ) -> List[Tuple[int, int]]:
        """
        Get the in-bounds neighbors of a cell.

        Args:
            x: Cell x coordinate
            y: Cell y coordinate
            diagonal: Include the four diagonal neighbors
            orthogonal: Include the four edge-sharing neighbors

        Returns:
            List of (x, y) coordinates
        """
        offsets = []
        if diagonal:
            offsets.extend([(-1, -1), (1, -1), (1, 1), (-1, 1)])
        if orthogonal:
            offsets.extend([(0, 1), (0, -1), (1, 0), (-1, 0)])

        return [
            (x + dx, y + dy)
            for dx, dy in offsets
            if self.in_bounds(x + dx, y + dy)
        ]

    def upwind_indices(
        self, offset_x: Offset, offset_y: Offset
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Get the source coordinates of every cell shifted by an offset.

        Wind does not wrap around the map. Each axis is handled on its own:
        if the shifted coordinate falls outside the grid, that axis falls
        back to the cell's own coordinate.

        Args:
            offset_x: Integer offset along x, scalar or per-cell array
            offset_y: Integer offset along y, scalar or per-cell array

        Returns:
            Tuple of (source_x, source_y) integer arrays of the grid's shape
        """
        xs, ys = np.indices(self.shape)
        src_x = xs + np.asarray(offset_x, dtype=np.int64)
        src_y = ys + np.asarray(offset_y, dtype=np.int64)

        src_x = np.where((src_x < 0) | (src_x >= self.dim_x), xs, src_x)
        src_y = np.where((src_y < 0) | (src_y >= self.dim_y), ys, src_y)
        return src_x, src_y

    def sample(self, source: Tuple[np.ndarray, np.ndarray]) -> np.ndarray:
        """Gather values at the given (source_x, source_y) coordinates."""
        return self.values[source]

    def copy(self) -> "Grid":
        grid = Grid(self.dim_x, self.dim_y, dtype=self.values.dtype)
        grid.values[:] = self.values
        return grid

    def read_only(self) -> np.ndarray:
        """Non-writable view of the buffer for downstream consumers."""
        view = self.values.view()
        view.flags.writeable = False
        return view

    def mean(self, region: Optional[Tuple[slice, slice]] = None) -> float:
        values = self.values if region is None else self.values[region]
        return float(np.mean(values))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.values, other.values)

    def __repr__(self) -> str:
        return f"Grid({self.dim_x}x{self.dim_y}, dtype={self.values.dtype})"
