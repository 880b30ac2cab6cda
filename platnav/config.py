"""
Configuration classes for platnav.

This module provides structured configuration for the navigation graph,
path followers and ground probes, replacing loose keyword arguments.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import logging

from .constants import (
    TILE_PIXEL_SIZE,
    FOLLOWER_SPEED,
    PATH_UPDATE_INTERVAL,
    DETECTION_RANGE,
    WAYPOINT_DISTANCE,
    JUMP_DIRECTION_THRESHOLD,
    FACING_DEADZONE,
    LEDGE_CHECK_DISTANCE,
    LEDGE_CHECK_DEPTH,
)


def normalize_grid_geometry(
    cell_size, origin
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Coerce a cell size and grid origin to float pairs.

    A scalar cell_size means square cells. Raises ValueError when either
    cell_size component is not positive.
    """
    if isinstance(cell_size, (int, float)):
        cell_size = (cell_size, cell_size)
    cell_size = (float(cell_size[0]), float(cell_size[1]))
    origin = (float(origin[0]), float(origin[1]))

    if cell_size[0] <= 0 or cell_size[1] <= 0:
        raise ValueError("cell_size components must be positive")
    return cell_size, origin


@dataclass
class GraphConfig:
    """Configuration for navigation graph construction.

    cell_size is the (width, height) of one grid cell in world units and
    origin is the world position of the top-left corner of cell (0, 0).
    """

    cell_size: Tuple[float, float] = (TILE_PIXEL_SIZE, TILE_PIXEL_SIZE)
    origin: Tuple[float, float] = (0.0, 0.0)
    debug: bool = False

    def __post_init__(self):
        """Validate graph configuration."""
        self.cell_size, self.origin = normalize_grid_geometry(
            self.cell_size, self.origin
        )

        if self.debug:
            logging.info("Navigation graph debug mode enabled")


@dataclass
class FollowerConfig:
    """Configuration for a path-following agent."""

    speed: float = FOLLOWER_SPEED
    replan_interval: float = PATH_UPDATE_INTERVAL
    detection_range: float = DETECTION_RANGE
    waypoint_distance: float = WAYPOINT_DISTANCE
    jump_direction_threshold: float = JUMP_DIRECTION_THRESHOLD
    # None disables the cap on how high a waypoint may be to trigger a jump
    max_jump_height: Optional[float] = None
    facing_deadzone: float = FACING_DEADZONE

    def __post_init__(self):
        """Validate follower configuration."""
        if self.speed < 0:
            raise ValueError("speed must be non-negative")

        if self.replan_interval < 0:
            raise ValueError("replan_interval must be non-negative")

        if self.detection_range <= 0:
            raise ValueError("detection_range must be positive")

        if self.waypoint_distance <= 0:
            raise ValueError("waypoint_distance must be positive")

        if not 0.0 <= self.jump_direction_threshold <= 1.0:
            raise ValueError("jump_direction_threshold must be between 0.0 and 1.0")

        if self.max_jump_height is not None and self.max_jump_height <= 0:
            raise ValueError("max_jump_height must be positive when set")

        if not 0.0 <= self.facing_deadzone < 1.0:
            raise ValueError("facing_deadzone must be in [0.0, 1.0)")


@dataclass
class GroundProbeConfig:
    """Configuration for the forward ledge probe."""

    check_distance: float = LEDGE_CHECK_DISTANCE
    probe_depth: float = LEDGE_CHECK_DEPTH

    def __post_init__(self):
        """Validate ground probe configuration."""
        if self.check_distance < 0:
            raise ValueError("check_distance must be non-negative")

        if self.probe_depth <= 0:
            raise ValueError("probe_depth must be positive")
