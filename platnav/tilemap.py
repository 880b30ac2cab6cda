"""
Tile map container supplying walkable cells and solidity queries.
"""

import math
from dataclasses import dataclass
from typing import Set, Tuple

import numpy as np

from .config import normalize_grid_geometry
from .constants import EMPTY_TILE, TILE_PIXEL_SIZE
from .graph.common import Cell, Point


@dataclass
class TileMap:
    """
    Row-major grid of tile ids.

    tiles[row, col] holds a tile id; EMPTY_TILE marks empty space and any
    other id is ground. Cell coordinates are (col, row) like the graph's.
    """

    tiles: np.ndarray
    cell_size: Tuple[float, float] = (TILE_PIXEL_SIZE, TILE_PIXEL_SIZE)
    origin: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        self.tiles = np.asarray(self.tiles, dtype=np.int32)
        if self.tiles.ndim != 2:
            raise ValueError(f"tiles must be 2D, got shape {self.tiles.shape}")
        self.cell_size, self.origin = normalize_grid_geometry(
            self.cell_size, self.origin
        )

    @property
    def width(self) -> int:
        return self.tiles.shape[1]

    @property
    def height(self) -> int:
        return self.tiles.shape[0]

    def in_bounds(self, cell: Cell) -> bool:
        col, row = cell
        return 0 <= col < self.width and 0 <= row < self.height

    def is_solid_cell(self, cell: Cell) -> bool:
        """Out-of-bounds cells are empty."""
        if not self.in_bounds(cell):
            return False
        col, row = cell
        return bool(self.tiles[row, col] != EMPTY_TILE)

    def world_to_cell(self, position: Point) -> Cell:
        return (
            int(math.floor((position[0] - self.origin[0]) / self.cell_size[0])),
            int(math.floor((position[1] - self.origin[1]) / self.cell_size[1])),
        )

    def is_solid_at(self, position: Point) -> bool:
        return self.is_solid_cell(self.world_to_cell(position))

    def solid_cells(self) -> Set[Cell]:
        """(col, row) coordinates of every non-empty tile."""
        rows, cols = np.nonzero(self.tiles != EMPTY_TILE)
        return {(int(c), int(r)) for r, c in zip(rows, cols)}
