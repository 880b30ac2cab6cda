"""
Forward ground probes used by path followers to spot ledges.

A probe answers one question: is there supporting ground a short distance
ahead of and below the agent? PathFollower only consumes the boolean, so
any implementation with a probe_ground_ahead() method (or a plain callable
with the same signature) can be used.
"""

import math
from typing import Optional, Protocol, Tuple, runtime_checkable

from ..config import GroundProbeConfig
from ..graph.common import Point


@runtime_checkable
class GroundProbe(Protocol):
    def probe_ground_ahead(
        self, from_position: Point, direction: Tuple[float, float]
    ) -> bool:
        ...


class TileGroundProbe:
    """
    Ledge check against a TileMap.

    Casts a vertical segment starting check_distance ahead of the agent (in
    the sign of direction.x) and reaching probe_depth downward, sampling it
    at half-cell steps. Any solid sample counts as ground.
    """

    def __init__(self, tilemap, config: Optional[GroundProbeConfig] = None):
        self.tilemap = tilemap
        self.config = config or GroundProbeConfig()

    def probe_ground_ahead(
        self, from_position: Point, direction: Tuple[float, float]
    ) -> bool:
        dir_x = direction[0]
        sign = 0.0 if dir_x == 0 else math.copysign(1.0, dir_x)

        start_x = from_position[0] + sign * self.config.check_distance
        start_y = from_position[1]
        depth = self.config.probe_depth

        step = min(self.tilemap.cell_size[1] / 2.0, depth)
        samples = int(math.ceil(depth / step))
        for i in range(samples + 1):
            y = start_y + min(i * step, depth)
            if self.tilemap.is_solid_at((start_x, y)):
                return True
        return False

    def __call__(self, from_position: Point, direction: Tuple[float, float]) -> bool:
        return self.probe_ground_ahead(from_position, direction)
