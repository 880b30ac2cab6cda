# This file makes this a Python package

from .config import GraphConfig, FollowerConfig, GroundProbeConfig
from .tilemap import TileMap
from .graph import (
    GraphNode,
    NavigationGraph,
    PathfindingAlgorithm,
    PathfindingEngine,
    PathResult,
)
from .agents import (
    GroundProbe,
    TileGroundProbe,
    LocomotionCommand,
    PathFollower,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "GraphConfig",
    "FollowerConfig",
    "GroundProbeConfig",
    # Terrain
    "TileMap",
    # Graph
    "GraphNode",
    "NavigationGraph",
    "PathfindingAlgorithm",
    "PathfindingEngine",
    "PathResult",
    # Agents
    "GroundProbe",
    "TileGroundProbe",
    "LocomotionCommand",
    "PathFollower",
]
