import math
import os
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PuzzleConfig:
    """Puzzle dimensions and input layout"""
    size: int = 9           # Edge length of puzzle
    block_size: int = 3     # Edge length of a sub-grid, sqrt(size)
    unknown_value: int = 0  # Value of squares not yet filled
    num_spaces: int = 1     # Separator characters between values in a file

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Puzzle size must be positive, got {self.size}")
        if self.block_size * self.block_size != self.size:
            raise ValueError(
                f"Block size {self.block_size} does not match puzzle size {self.size} "
                f"(expected block_size * block_size == size)")
        if self.num_spaces < 0:
            raise ValueError(f"num_spaces must be non-negative, got {self.num_spaces}")

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from SUDOKU_SIZE / SUDOKU_NUM_SPACES"""
        environ = os.environ if environ is None else environ

        size = _int_setting(environ, "SUDOKU_SIZE", cls.size)
        num_spaces = _int_setting(environ, "SUDOKU_NUM_SPACES", cls.num_spaces)

        return cls(size=size, block_size=math.isqrt(max(size, 0)), num_spaces=num_spaces)


def _int_setting(environ, name, default):
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Grid:
    """Square grid of puzzle values, 0 marks an unknown square"""

    def __init__(self, config=None):
        self.config = config or PuzzleConfig()
        self.cells = np.full((self.config.size, self.config.size),
                             self.config.unknown_value, dtype=np.int64)

    @classmethod
    def from_rows(cls, rows, config=None):
        """Create a grid from nested lists of values"""
        grid = cls(config)
        values = np.asarray(rows, dtype=np.int64)

        if values.shape != grid.cells.shape:
            raise ValueError(f"Expected a {grid.size}x{grid.size} grid, got shape {values.shape}")

        unknown = grid.config.unknown_value
        bad = (values != unknown) & ((values < 1) | (values > grid.size))
        if bad.any():
            r, c = np.argwhere(bad)[0]
            raise ValueError(f"Value {values[r, c]} at ({r}, {c}) is outside 1..{grid.size}")

        grid.cells[:, :] = values
        return grid

    @property
    def size(self):
        return self.config.size

    @property
    def block_size(self):
        return self.config.block_size

    def in_bounds(self, r, c):
        return 0 <= r < self.size and 0 <= c < self.size

    def get(self, r, c):
        return int(self.cells[r, c])

    def set(self, r, c, value):
        self.cells[r, c] = value

    def __getitem__(self, pos):
        r, c = pos
        return self.get(r, c)

    def __setitem__(self, pos, value):
        r, c = pos
        self.set(r, c, value)

    def is_filled(self, r, c):
        return self.get(r, c) != self.config.unknown_value

    def empty_cells(self):
        """Number of squares still unknown"""
        return int(np.count_nonzero(self.cells == self.config.unknown_value))

    def copy(self):
        other = Grid(self.config)
        other.cells = self.cells.copy()
        return other

    def to_list(self):
        return self.cells.tolist()

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        # File layout (num_spaces) is not part of a grid's identity
        return (self.block_size == other.block_size
                and self.config.unknown_value == other.config.unknown_value
                and np.array_equal(self.cells, other.cells))

    def __repr__(self):
        return f"Grid(size={self.size}, empty={self.empty_cells()})"
