"""
Navigation graph built from a snapshot of walkable grid cells.

Every walkable cell becomes one GraphNode at the cell's center and nodes of
cells that touch up, down, left or right are linked. Nodes live in an arena
keyed by integer ids; ids come from a counter that is never reset, so an id
handed out before a rebuild can never name a node of the new generation.
"""

import math
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import networkx as nx
import numpy as np

from ..config import GraphConfig
from ..constants import CARDINAL_DIRECTIONS
from .common import Cell, GraphNode, Point
from .pathfinding import PathfindingAlgorithm, PathfindingEngine, PathResult

logger = logging.getLogger(__name__)


class NavigationGraph:
    """
    Grid-derived navigation graph with nearest-node and shortest-path queries.

    The graph is rebuilt wholesale by build(); each build increments
    `generation`. Consumers that store node ids should keep the generation
    they were obtained under and pass it to is_live() before reuse.

    Queries never raise on an empty graph or unknown ids: nearest_node()
    returns None and find_path() returns an unsuccessful PathResult.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self.config = config or GraphConfig()
        self.generation = 0
        self._nodes: Dict[int, GraphNode] = {}
        self._cell_to_node: Dict[Cell, int] = {}
        self._node_order: List[int] = []
        self._positions = np.zeros((0, 2), dtype=np.float64)
        self._next_node_id = 0
        self._engine = PathfindingEngine()

    @classmethod
    def from_cells(
        cls,
        walkable_cells: Iterable[Cell],
        cell_size=None,
        origin: Tuple[float, float] = (0.0, 0.0),
    ) -> "NavigationGraph":
        """Create a graph and build it from walkable cells."""
        if cell_size is None:
            config = GraphConfig(origin=origin)
        else:
            config = GraphConfig(cell_size=cell_size, origin=origin)
        graph = cls(config)
        graph.build(walkable_cells)
        return graph

    @classmethod
    def from_tilemap(cls, tilemap) -> "NavigationGraph":
        """Create a graph whose nodes sit on the tilemap's ground tiles."""
        graph = cls(GraphConfig(cell_size=tilemap.cell_size, origin=tilemap.origin))
        graph.build(tilemap.solid_cells())
        return graph

    # ------------------------------------------------------------------
    # Coordinate mapping
    # ------------------------------------------------------------------

    @property
    def cell_size(self) -> Tuple[float, float]:
        return self.config.cell_size

    @property
    def origin(self) -> Tuple[float, float]:
        return self.config.origin

    def cell_to_world(self, cell: Cell) -> Point:
        """World position of the center of a cell."""
        width, height = self.cell_size
        return (
            self.origin[0] + cell[0] * width + width / 2.0,
            self.origin[1] + cell[1] * height + height / 2.0,
        )

    def world_to_cell(self, position: Point) -> Cell:
        width, height = self.cell_size
        return (
            int(math.floor((position[0] - self.origin[0]) / width)),
            int(math.floor((position[1] - self.origin[1]) / height)),
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def build(self, walkable_cells: Iterable[Cell]) -> "NavigationGraph":
        """
        Discard any previous state and build nodes and edges from cells.

        Args:
            walkable_cells: Integer (column, row) coordinates of traversable
                cells. Duplicates are ignored; unlisted cells are treated as
                non-traversable.

        Returns:
            self, to allow chaining.

        Raises:
            ValueError, TypeError: If a cell is not a pair of integers. The
                previous graph is left untouched.
        """
        cells = {(int(col), int(row)) for col, row in walkable_cells}

        self._clear()
        self.generation += 1

        # Row-major order keeps node creation and nearest-node ties deterministic
        for cell in sorted(cells, key=lambda c: (c[1], c[0])):
            self._create_node(cell)

        if not self._nodes:
            logger.error("No valid navigation points generated!")
            return self

        num_edges = self._connect_all_nodes()
        self._positions = np.array(
            [self._nodes[node_id].position for node_id in self._node_order],
            dtype=np.float64,
        )
        logger.info(
            f"Generated {len(self._nodes)} navigation points and {num_edges} edges "
            f"(generation {self.generation})"
        )
        if self.config.debug:
            logger.debug(f"Cell map: {sorted(self._cell_to_node)}")
        return self

    def _clear(self):
        self._nodes.clear()
        self._cell_to_node.clear()
        self._node_order = []
        self._positions = np.zeros((0, 2), dtype=np.float64)

    def _create_node(self, cell: Cell) -> GraphNode:
        node = GraphNode(
            node_id=self._next_node_id,
            position=self.cell_to_world(cell),
            cell=cell,
        )
        self._next_node_id += 1
        self._nodes[node.node_id] = node
        self._cell_to_node[cell] = node.node_id
        self._node_order.append(node.node_id)
        return node

    def _connect_all_nodes(self) -> int:
        """Link every node to its 4-adjacent neighbors. Returns edge count."""
        num_edges = 0
        for node_id in self._node_order:
            node = self._nodes.get(node_id)
            if node is None:
                continue

            col, row = node.cell
            for dx, dy in CARDINAL_DIRECTIONS:
                neighbor_id = self._cell_to_node.get((col + dx, row + dy))
                if neighbor_id is None or not self.is_live(neighbor_id):
                    continue
                if node.link(self._nodes[neighbor_id]):
                    num_edges += 1
        return num_edges

    # ------------------------------------------------------------------
    # Node access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    @property
    def num_edges(self) -> int:
        return sum(node.degree for node in self._nodes.values()) // 2

    def is_live(self, node_id: Optional[int], generation: Optional[int] = None) -> bool:
        """
        Check that a node id belongs to the current graph.

        Args:
            node_id: Node id to check
            generation: Generation the id was obtained under. When given, a
                mismatch with the current generation marks the id as stale.
        """
        if node_id is None:
            return False
        if generation is not None and generation != self.generation:
            return False
        return node_id in self._nodes

    def node(self, node_id: int) -> Optional[GraphNode]:
        """Borrowed read access to a live node, or None."""
        return self._nodes.get(node_id)

    def node_at_cell(self, cell: Cell) -> Optional[int]:
        return self._cell_to_node.get(cell)

    def position_of(
        self, node_id: Optional[int], generation: Optional[int] = None
    ) -> Optional[Point]:
        """World position of a node, or None if the id is stale or unknown."""
        if not self.is_live(node_id, generation):
            return None
        return self._nodes[node_id].position

    def neighbors(self, node_id: int) -> List[int]:
        node = self._nodes.get(node_id)
        if node is None:
            return []
        return sorted(n for n in node.neighbors if n in self._nodes)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def nearest_node(self, position: Point) -> Optional[int]:
        """
        Find the node closest to a world position.

        Scans every live node; ties go to the node created first (row-major
        cell order).

        Returns:
            Node id, or None when the graph has no nodes.
        """
        if not self._node_order:
            logger.debug("No navigation points available!")
            return None

        offsets = self._positions - np.asarray(position, dtype=np.float64)
        squared = np.einsum("ij,ij->i", offsets, offsets)
        return self._node_order[int(np.argmin(squared))]

    def find_path(
        self,
        start_node: Optional[int],
        goal_node: Optional[int],
        algorithm: PathfindingAlgorithm = PathfindingAlgorithm.A_STAR,
    ) -> PathResult:
        """Shortest path between two node ids (see PathfindingEngine)."""
        return self._engine.find_shortest_path(self, start_node, goal_node, algorithm)

    def find_path_between(
        self,
        start_position: Point,
        goal_position: Point,
        algorithm: PathfindingAlgorithm = PathfindingAlgorithm.A_STAR,
    ) -> PathResult:
        """Shortest path between the nodes nearest to two world positions."""
        return self.find_path(
            self.nearest_node(start_position),
            self.nearest_node(goal_position),
            algorithm,
        )

    # ------------------------------------------------------------------
    # Debug enumeration
    # ------------------------------------------------------------------

    def iter_nodes(self) -> Iterator[GraphNode]:
        """Live nodes in build order."""
        for node_id in self._node_order:
            node = self._nodes.get(node_id)
            if node is not None:
                yield node

    def iter_edges(self) -> Iterator[Tuple[GraphNode, GraphNode]]:
        """Each undirected edge between live nodes exactly once."""
        for node in self.iter_nodes():
            for neighbor_id in sorted(node.neighbors):
                if neighbor_id > node.node_id and neighbor_id in self._nodes:
                    yield node, self._nodes[neighbor_id]

    def to_networkx(self) -> nx.Graph:
        """Export the graph for visualization or ad-hoc analysis."""
        graph = nx.Graph(generation=self.generation, cell_size=self.cell_size)
        for node in self.iter_nodes():
            graph.add_node(node.node_id, pos=node.position, cell=node.cell)
        for a, b in self.iter_edges():
            graph.add_edge(
                a.node_id,
                b.node_id,
                weight=math.hypot(
                    b.position[0] - a.position[0], b.position[1] - a.position[1]
                ),
            )
        return graph
