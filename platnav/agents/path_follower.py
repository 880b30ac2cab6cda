"""
Path-following locomotion for graph-navigating agents.

A PathFollower owns one agent's current path and turns it into a per-tick
LocomotionCommand: a desired horizontal velocity plus a jump-now flag. It
does not integrate motion; a physics step consumes the command.

Tick order:
    1. no target, or target beyond detection range -> stand still; the
       replan timer is left untouched
    2. a path planned against an older graph generation is dropped and a
       replan is forced
    3. the timer counts down; a replan runs when it expires or when the
       cursor has reached the end of the path (an empty path included)
    4. the current waypoint yields the command and the jump decision
    5. the cursor advances if the waypoint is within waypoint_distance
"""

import math
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from ..config import FollowerConfig
from ..graph.common import Point
from ..graph.navigation_graph import NavigationGraph
from ..graph.pathfinding import PathfindingAlgorithm
from .ground_probe import GroundProbe

logger = logging.getLogger(__name__)

ProbeLike = Union[GroundProbe, Callable[[Point, Tuple[float, float]], bool]]


@dataclass
class LocomotionCommand:
    """Movement request handed to the physics integrator."""

    velocity_x: float = 0.0
    jump: bool = False
    facing: int = 1  # +1 right, -1 left

    @classmethod
    def idle(cls, facing: int = 1) -> "LocomotionCommand":
        return cls(velocity_x=0.0, jump=False, facing=facing)


class PathFollower:
    """
    Per-agent path state and locomotion decisions.

    The graph and the ground probe are injected; the target position is
    passed to every tick().
    """

    def __init__(
        self,
        graph: NavigationGraph,
        config: Optional[FollowerConfig] = None,
        ground_probe: Optional[ProbeLike] = None,
        algorithm: PathfindingAlgorithm = PathfindingAlgorithm.A_STAR,
    ):
        self.graph = graph
        self.config = config or FollowerConfig()
        self.ground_probe = ground_probe
        self.algorithm = algorithm
        self.reset()

    def reset(self):
        """Forget the current path; the next in-range tick replans."""
        self._path: Tuple[int, ...] = ()
        self._path_index = 0
        self._path_generation = self.graph.generation
        self._replan_timer = 0.0
        self.facing = 1
        self.replan_count = 0

    # ------------------------------------------------------------------
    # State inspection
    # ------------------------------------------------------------------

    @property
    def path(self) -> Tuple[int, ...]:
        return self._path

    @property
    def waypoint_index(self) -> int:
        return self._path_index

    @property
    def replan_timer(self) -> float:
        return self._replan_timer

    @property
    def is_path_exhausted(self) -> bool:
        return self._path_index >= len(self._path)

    @property
    def current_waypoint(self) -> Optional[int]:
        if self.is_path_exhausted:
            return None
        return self._path[self._path_index]

    def waypoint_position(self) -> Optional[Point]:
        """Position of the current waypoint, None if exhausted or stale."""
        return self.graph.position_of(self.current_waypoint, self._path_generation)

    # ------------------------------------------------------------------
    # Per-tick update
    # ------------------------------------------------------------------

    def tick(
        self,
        self_position: Point,
        target_position: Optional[Point],
        delta_time: float,
        grounded: bool = True,
    ) -> LocomotionCommand:
        """
        Advance one physics step.

        Args:
            self_position: Agent world position
            target_position: Pursued world position, or None for no target
            delta_time: Step duration in seconds
            grounded: Whether the agent currently stands on ground

        Returns:
            LocomotionCommand for this step
        """
        if target_position is None:
            return LocomotionCommand.idle(self.facing)

        if _distance(self_position, target_position) > self.config.detection_range:
            return LocomotionCommand.idle(self.facing)

        if self._path and self._path_generation != self.graph.generation:
            logger.debug(
                f"Dropping path from graph generation {self._path_generation} "
                f"(current {self.graph.generation})"
            )
            self._clear_path()
            self._replan_timer = 0.0

        self._replan_timer -= delta_time
        if self._replan_timer <= 0 or self.is_path_exhausted:
            self.replan(self_position, target_position)
            self._replan_timer = self.config.replan_interval

        if self.is_path_exhausted:
            return LocomotionCommand.idle(self.facing)

        return self._follow_path(self_position, grounded)

    def replan(self, self_position: Point, target_position: Point) -> bool:
        """
        Replace the path with a fresh shortest path to the target.

        Returns:
            True if a non-empty path was assigned.
        """
        self.replan_count += 1
        start = self.graph.nearest_node(self_position)
        goal = self.graph.nearest_node(target_position)

        if start is None or goal is None or start == goal:
            self._clear_path()
            return False

        result = self.graph.find_path(start, goal, self.algorithm)
        self._path = tuple(result.path)
        self._path_index = 0
        self._path_generation = result.generation

        if not result.success:
            logger.debug(f"Target unreachable from node {start} to node {goal}")
        return result.success

    def _clear_path(self):
        self._path = ()
        self._path_index = 0
        self._path_generation = self.graph.generation

    def _follow_path(self, self_position: Point, grounded: bool) -> LocomotionCommand:
        waypoint = self.waypoint_position()
        if waypoint is None:
            self._clear_path()
            return LocomotionCommand.idle(self.facing)

        dx = waypoint[0] - self_position[0]
        dy = waypoint[1] - self_position[1]
        distance = math.hypot(dx, dy)
        if distance > 0:
            direction = (dx / distance, dy / distance)
        else:
            direction = (0.0, 0.0)

        velocity_x = direction[0] * self.config.speed
        self._update_facing(direction)
        jump = grounded and self._should_jump(self_position, direction, dy)

        if distance < self.config.waypoint_distance:
            self._path_index += 1

        return LocomotionCommand(velocity_x=velocity_x, jump=jump, facing=self.facing)

    def _update_facing(self, direction: Tuple[float, float]):
        if abs(direction[0]) > self.config.facing_deadzone:
            self.facing = 1 if direction[0] > 0 else -1

    def _should_jump(
        self, self_position: Point, direction: Tuple[float, float], vertical_gap: float
    ) -> bool:
        # y grows downward: a negative direction.y means the waypoint is above
        if direction[1] < -self.config.jump_direction_threshold:
            max_height = self.config.max_jump_height
            if max_height is None or -vertical_gap <= max_height:
                return True
        return not self._has_ground_ahead(self_position)

    def _has_ground_ahead(self, self_position: Point) -> bool:
        probe = self.ground_probe
        if probe is None:
            return True
        direction = (float(self.facing), 0.0)
        if isinstance(probe, GroundProbe):
            return bool(probe.probe_ground_ahead(self_position, direction))
        return bool(probe(self_position, direction))


def _distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])
