#!/usr/bin/env python3
"""Plan a path across an ASCII tile map.

Builds the navigation graph for a map file, finds the shortest path between
two world positions and prints it cell by cell.

Usage:
    platnav-plan level.txt
    platnav-plan level.txt --start 8,40 --goal 200,40 --algorithm dijkstra

Without --start/--goal the agent marker (E) and target marker (P) of the map
are used; each marker resolves to its nearest ground node.
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from platnav.graph import NavigationGraph, PathfindingAlgorithm
from platnav.map_loader import load_level

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

ALGORITHMS = {
    "astar": PathfindingAlgorithm.A_STAR,
    "dijkstra": PathfindingAlgorithm.DIJKSTRA,
}


def parse_point(value: str) -> Tuple[float, float]:
    """Parse an 'X,Y' command line value."""
    try:
        x, y = value.split(",")
        return float(x), float(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {value!r}")


def marker_position(
    graph: NavigationGraph, markers: dict, char: str
) -> Optional[Tuple[float, float]]:
    cells = markers.get(char) or []
    if not cells:
        return None
    if len(cells) > 1:
        logger.warning(f"Map has {len(cells)} '{char}' markers, using the first")
    return graph.cell_to_world(cells[0])


def format_path(graph: NavigationGraph, path: List[int]) -> List[str]:
    lines = []
    for step, node_id in enumerate(path):
        node = graph.node(node_id)
        lines.append(
            f"{step:4d}  cell={node.cell}  pos=({node.position[0]:.1f}, {node.position[1]:.1f})"
        )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Plan a shortest path on an ASCII tile map"
    )
    parser.add_argument("map", help="Path to an ASCII map file")
    parser.add_argument(
        "--start", type=parse_point, help="Start world position as X,Y"
    )
    parser.add_argument("--goal", type=parse_point, help="Goal world position as X,Y")
    parser.add_argument(
        "--cell-size", type=float, default=16.0, help="Tile size in world units"
    )
    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default="astar",
        help="Search algorithm",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    tilemap, markers = load_level(args.map, cell_size=args.cell_size)
    graph = NavigationGraph.from_tilemap(tilemap)
    print(f"Graph: {len(graph)} nodes, {graph.num_edges} edges")

    start = args.start or marker_position(graph, markers, "E")
    goal = args.goal or marker_position(graph, markers, "P")
    if start is None or goal is None:
        logger.error("Start and goal are required (pass --start/--goal or add E/P markers)")
        return 2

    result = graph.find_path_between(start, goal, ALGORITHMS[args.algorithm])
    if not result.success:
        print(f"No path from {start} to {goal}")
        return 1

    print(
        f"Path: {len(result.path)} nodes, cost {result.total_cost:.2f}, "
        f"{result.nodes_explored} nodes explored"
    )
    for line in format_path(graph, result.path):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
