"""
Common graph components for platnav navigation graphs.

This module contains the node type shared by the graph builder, the
pathfinding engine and the debug export.
"""

from dataclasses import dataclass, field
from typing import Set, Tuple

Cell = Tuple[int, int]  # (column, row) grid coordinate
Point = Tuple[float, float]  # World-space position, y grows downward


@dataclass(eq=False)
class GraphNode:
    """A navigation vertex at the center of a walkable cell.

    Neighbors are stored as node ids into the owning graph's arena rather
    than as object references. Adjacency is kept symmetric by link().
    """

    node_id: int
    position: Point
    cell: Cell
    neighbors: Set[int] = field(default_factory=set)

    def link(self, other: "GraphNode") -> bool:
        """Connect this node and other in both directions.

        Returns True if a new edge was created, False for a self-link or an
        already connected pair.
        """
        if other is None or other.node_id == self.node_id:
            return False
        if other.node_id in self.neighbors:
            return False

        self.neighbors.add(other.node_id)
        other.neighbors.add(self.node_id)
        return True

    def is_linked(self, other_id: int) -> bool:
        return other_id in self.neighbors

    @property
    def degree(self) -> int:
        return len(self.neighbors)
