"""
Graph-navigating agent logic: path following, jump decisions and ledge probes.
"""

from .ground_probe import GroundProbe, TileGroundProbe
from .path_follower import LocomotionCommand, PathFollower

__all__ = [
    "GroundProbe",
    "TileGroundProbe",
    "LocomotionCommand",
    "PathFollower",
]
