"""
Loading of ASCII tile maps.

Maps are plain text, one character per cell:

    #  ground tile (id 1)
    =  one-way / platform tile (id 2)
    E  agent spawn marker (empty cell)
    P  target spawn marker (empty cell)
    .  or space: empty cell

Short lines are padded with empty cells.
"""

import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

import numpy as np

from .constants import EMPTY_TILE, TILE_PIXEL_SIZE
from .graph.common import Cell
from .tilemap import TileMap

logger = logging.getLogger(__name__)

TILE_IDS = {"#": 1, "=": 2}
MARKER_CHARS = "EP"


def _map_lines(text: str) -> List[str]:
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    while lines and not lines[0].strip():
        lines.pop(0)
    return lines


def parse_ascii_map(text: str) -> np.ndarray:
    """
    Convert an ASCII map to a row-major tile id array.

    Unknown characters are treated as empty and logged once each.
    """
    lines = _map_lines(text)
    if not lines:
        return np.zeros((0, 0), dtype=np.int32)

    width = max(len(line) for line in lines)
    tiles = np.full((len(lines), width), EMPTY_TILE, dtype=np.int32)
    unknown = set()

    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            tile_id = TILE_IDS.get(char)
            if tile_id is not None:
                tiles[row, col] = tile_id
            elif char not in ". " and char not in MARKER_CHARS:
                unknown.add(char)

    if unknown:
        logger.warning(f"Treating unknown map characters as empty: {sorted(unknown)}")
    return tiles


def find_markers(text: str) -> Dict[str, List[Cell]]:
    """Cells of every spawn marker, keyed by marker character."""
    markers: Dict[str, List[Cell]] = {char: [] for char in MARKER_CHARS}
    for row, line in enumerate(_map_lines(text)):
        for col, char in enumerate(line):
            if char in markers:
                markers[char].append((col, row))
    return markers


def load_level(
    path: Union[str, Path], cell_size=TILE_PIXEL_SIZE
) -> Tuple[TileMap, Dict[str, List[Cell]]]:
    """Read a map file into a TileMap plus its spawn markers."""
    text = Path(path).read_text()
    tilemap = TileMap(parse_ascii_map(text), cell_size=cell_size)
    logger.info(f"Loaded {tilemap.width}x{tilemap.height} map from {path}")
    return tilemap, find_markers(text)


def load_tilemap(path: Union[str, Path], cell_size=TILE_PIXEL_SIZE) -> TileMap:
    tilemap, _ = load_level(path, cell_size)
    return tilemap
