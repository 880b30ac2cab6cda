"""
Pathfinding algorithms for navigation graphs.

This module provides A* and Dijkstra searches over a NavigationGraph. Edges
join 4-adjacent cells of uniform size and cost the Euclidean distance
between node centers, so the straight-line heuristic used by A* is both
admissible and consistent: a node is final once popped and is never
re-expanded.
"""

import heapq
import math
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional, Set

from .common import Point

logger = logging.getLogger(__name__)


class PathfindingAlgorithm(IntEnum):
    """
    Available pathfinding algorithms.

    A_STAR (1) is the default used by path followers. DIJKSTRA (0) runs the
    same search with a zero heuristic and is useful to validate A* costs.
    """

    DIJKSTRA = 0
    A_STAR = 1


@dataclass
class PathResult:
    """Result of pathfinding operation."""

    path: List[int]  # Node ids from start to goal, empty on failure
    total_cost: float
    success: bool
    nodes_explored: int
    path_coordinates: List[Point] = field(default_factory=list)
    generation: int = -1  # Graph generation the ids belong to

    def __len__(self) -> int:
        return len(self.path)

    @classmethod
    def failure(cls, nodes_explored: int = 0, generation: int = -1) -> "PathResult":
        return cls(
            path=[],
            total_cost=float("inf"),
            success=False,
            nodes_explored=nodes_explored,
            path_coordinates=[],
            generation=generation,
        )


@dataclass
class PathNode:
    """Frontier entry in the search.

    Ordered by f_cost, then by insertion sequence so that entries with equal
    priority pop in FIFO order.
    """

    node_id: int
    g_cost: float  # Cost from start
    h_cost: float  # Heuristic cost to goal
    f_cost: float  # Total cost (g + h)
    sequence: int

    def __lt__(self, other):
        return (self.f_cost, self.sequence) < (other.f_cost, other.sequence)


def euclidean(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


class PathfindingEngine:
    """
    Shortest-path search over a NavigationGraph.

    The engine is stateless between calls; every query reads the graph's
    live nodes directly, so results are always consistent with the graph
    generation current at the time of the call.

    Example Usage:
        engine = PathfindingEngine()
        result = engine.find_shortest_path(graph, start_id, goal_id)
        if result.success:
            waypoints = result.path_coordinates
    """

    def __init__(self, heuristic_weight: float = 1.0):
        """
        Initialize pathfinding engine.

        Args:
            heuristic_weight: Multiplier applied to the A* heuristic. Values
                above 1.0 trade optimality for speed.
        """
        if heuristic_weight < 0:
            raise ValueError("heuristic_weight must be non-negative")
        self.heuristic_weight = heuristic_weight

    def find_shortest_path(
        self,
        graph,
        start_node: Optional[int],
        goal_node: Optional[int],
        algorithm: PathfindingAlgorithm = PathfindingAlgorithm.A_STAR,
    ) -> PathResult:
        """
        Find shortest path between two nodes.

        Args:
            graph: NavigationGraph to search
            start_node: Starting node id
            goal_node: Goal node id
            algorithm: A_STAR (default) or DIJKSTRA

        Returns:
            PathResult. An unknown or stale endpoint and an unreachable goal
            both produce an unsuccessful result with an empty path.
        """
        generation = graph.generation
        if start_node is None or goal_node is None:
            logger.debug(
                f"Pathfinding called with null start/end points: "
                f"{start_node} -> {goal_node}"
            )
            return PathResult.failure(generation=generation)
        if not graph.is_live(start_node) or not graph.is_live(goal_node):
            logger.debug(
                f"Pathfinding called with stale or unknown endpoints: "
                f"{start_node} -> {goal_node}"
            )
            return PathResult.failure(generation=generation)

        if start_node == goal_node:
            return PathResult(
                path=[start_node],
                total_cost=0.0,
                success=True,
                nodes_explored=1,
                path_coordinates=[graph.node(start_node).position],
                generation=generation,
            )

        weight = (
            self.heuristic_weight if algorithm == PathfindingAlgorithm.A_STAR else 0.0
        )
        return self._search(graph, start_node, goal_node, weight)

    def _search(
        self, graph, start_node: int, goal_node: int, heuristic_weight: float
    ) -> PathResult:
        """Best-first search keyed by g + heuristic_weight * h."""
        generation = graph.generation
        goal_pos = graph.node(goal_node).position
        start_pos = graph.node(start_node).position

        sequence = 0
        h_cost = heuristic_weight * euclidean(start_pos, goal_pos)
        open_set = [PathNode(start_node, 0.0, h_cost, h_cost, sequence)]
        g_costs: Dict[int, float] = {start_node: 0.0}
        parent_map: Dict[int, int] = {}
        closed_set: Set[int] = set()
        nodes_explored = 0

        while open_set:
            current = heapq.heappop(open_set)
            current_id = current.node_id

            if current_id in closed_set:
                continue

            closed_set.add(current_id)
            nodes_explored += 1

            # Only a popped goal is final; cheaper routes may still be queued
            if current_id == goal_node:
                path = self._reconstruct_path(parent_map, start_node, goal_node)
                return PathResult(
                    path=path,
                    total_cost=current.g_cost,
                    success=True,
                    nodes_explored=nodes_explored,
                    path_coordinates=[graph.node(n).position for n in path],
                    generation=generation,
                )

            current_node = graph.node(current_id)
            for neighbor_id in sorted(current_node.neighbors):
                if neighbor_id in closed_set or not graph.is_live(neighbor_id):
                    continue

                neighbor_pos = graph.node(neighbor_id).position
                tentative_g_cost = current.g_cost + euclidean(
                    current_node.position, neighbor_pos
                )

                if tentative_g_cost < g_costs.get(neighbor_id, float("inf")):
                    g_costs[neighbor_id] = tentative_g_cost
                    parent_map[neighbor_id] = current_id

                    h_cost = heuristic_weight * euclidean(neighbor_pos, goal_pos)
                    sequence += 1
                    heapq.heappush(
                        open_set,
                        PathNode(
                            node_id=neighbor_id,
                            g_cost=tentative_g_cost,
                            h_cost=h_cost,
                            f_cost=tentative_g_cost + h_cost,
                            sequence=sequence,
                        ),
                    )

        logger.debug(f"No valid path found from {start_node} to {goal_node}")
        return PathResult.failure(nodes_explored=nodes_explored, generation=generation)

    def _reconstruct_path(
        self, parent_map: Dict[int, int], start_node: int, goal_node: int
    ) -> List[int]:
        """Reconstruct path from parent map."""
        path = [goal_node]
        current = goal_node

        while current != start_node:
            current = parent_map[current]
            path.append(current)

        path.reverse()
        return path
