"""
Grid-derived navigation graphs and shortest-path search.
"""

from .common import GraphNode, Cell, Point
from .navigation_graph import NavigationGraph
from .pathfinding import (
    PathfindingAlgorithm,
    PathfindingEngine,
    PathResult,
)

__all__ = [
    "GraphNode",
    "Cell",
    "Point",
    "NavigationGraph",
    "PathfindingAlgorithm",
    "PathfindingEngine",
    "PathResult",
]
