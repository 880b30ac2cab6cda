#!/usr/bin/env python3
"""
Unit tests for pathfinding functionality to ensure it works correctly.
"""

import math
import unittest

import networkx as nx
import numpy as np

from platnav.graph import (
    NavigationGraph,
    PathfindingAlgorithm,
    PathfindingEngine,
)


def path_length(graph, path):
    total = 0.0
    for a, b in zip(path, path[1:]):
        pa = graph.node(a).position
        pb = graph.node(b).position
        total += math.hypot(pb[0] - pa[0], pb[1] - pa[1])
    return total


class TestPathfindingFunctionality(unittest.TestCase):
    """Test cases for pathfinding on small hand-built graphs."""

    def setUp(self):
        """Set up test fixtures."""
        self.line = NavigationGraph.from_cells({(0, 0), (1, 0), (2, 0)}, 16)
        self.n0 = self.line.node_at_cell((0, 0))
        self.n1 = self.line.node_at_cell((1, 0))
        self.n2 = self.line.node_at_cell((2, 0))

    def test_path_along_a_line(self):
        result = self.line.find_path(self.n0, self.n2)

        self.assertTrue(result.success)
        self.assertEqual(result.path, [self.n0, self.n1, self.n2])
        self.assertAlmostEqual(result.total_cost, 32.0)
        self.assertAlmostEqual(path_length(self.line, result.path), 32.0)
        self.assertEqual(
            result.path_coordinates, [(8.0, 8.0), (24.0, 8.0), (40.0, 8.0)]
        )
        self.assertEqual(result.generation, self.line.generation)

    def test_path_is_reversible(self):
        forward = self.line.find_path(self.n0, self.n2)
        backward = self.line.find_path(self.n2, self.n0)
        self.assertEqual(backward.path, list(reversed(forward.path)))

    def test_pathfinding_to_same_node_succeeds_immediately(self):
        result = self.line.find_path(self.n1, self.n1)

        self.assertTrue(result.success)
        self.assertEqual(result.path, [self.n1])
        self.assertEqual(result.total_cost, 0.0)
        self.assertEqual(result.nodes_explored, 1)

    def test_trivial_path_on_larger_graph(self):
        graph = NavigationGraph.from_cells(
            [(x, y) for x in range(6) for y in range(6)], 16
        )
        node_id = graph.node_at_cell((3, 3))
        self.assertEqual(graph.find_path(node_id, node_id).path, [node_id])

    def test_disconnected_graph_returns_empty_path(self):
        graph = NavigationGraph.from_cells({(0, 0), (5, 5)}, 16)
        result = graph.find_path(
            graph.node_at_cell((0, 0)), graph.node_at_cell((5, 5))
        )

        self.assertFalse(result.success)
        self.assertEqual(result.path, [])
        self.assertEqual(result.total_cost, float("inf"))
        self.assertEqual(len(result), 0)

    def test_missing_endpoints_return_empty_path(self):
        self.assertFalse(self.line.find_path(None, self.n0).success)
        self.assertFalse(self.line.find_path(self.n0, None).success)
        self.assertFalse(self.line.find_path(self.n0, 12345).success)

    def test_missing_endpoints_are_logged(self):
        with self.assertLogs("platnav.graph.pathfinding", level="DEBUG") as logs:
            self.line.find_path(None, self.n0)
        self.assertIn("null start/end points", logs.output[0])

    def test_empty_graph_returns_empty_path(self):
        graph = NavigationGraph()
        result = graph.find_path(graph.nearest_node((0, 0)), graph.nearest_node((5, 5)))
        self.assertFalse(result.success)
        self.assertEqual(result.path, [])

    def test_stale_endpoint_after_rebuild(self):
        old_start = self.n0
        self.line.build({(0, 0), (1, 0), (2, 0)})
        new_goal = self.line.node_at_cell((2, 0))

        result = self.line.find_path(old_start, new_goal)
        self.assertFalse(result.success)
        self.assertEqual(result.path, [])

    def test_path_detours_around_hole(self):
        cells = {(x, y) for x in range(3) for y in range(3)}
        cells.discard((1, 1))
        graph = NavigationGraph.from_cells(cells, 16)

        result = graph.find_path(graph.node_at_cell((0, 1)), graph.node_at_cell((2, 1)))

        self.assertTrue(result.success)
        self.assertEqual(len(result.path), 5)
        self.assertAlmostEqual(result.total_cost, 64.0)

    def test_astar_explores_fewer_nodes_than_dijkstra(self):
        graph = NavigationGraph.from_cells([(x, 0) for x in range(10)], 16)
        start = graph.node_at_cell((4, 0))
        goal = graph.node_at_cell((6, 0))

        astar = graph.find_path(start, goal, PathfindingAlgorithm.A_STAR)
        dijkstra = graph.find_path(start, goal, PathfindingAlgorithm.DIJKSTRA)

        self.assertEqual(astar.path, dijkstra.path)
        self.assertEqual(astar.nodes_explored, 3)
        self.assertEqual(dijkstra.nodes_explored, 5)

    def test_find_path_between_world_positions(self):
        result = self.line.find_path_between((1.0, 1.0), (45.0, 10.0))
        self.assertEqual(result.path, [self.n0, self.n1, self.n2])

    def test_negative_heuristic_weight_rejected(self):
        with self.assertRaises(ValueError):
            PathfindingEngine(heuristic_weight=-1.0)


class TestPathOptimality(unittest.TestCase):
    """Compare search costs against networkx on a random cave layout."""

    def setUp(self):
        rng = np.random.default_rng(7)
        mask = rng.random((14, 14)) < 0.7
        cells = {(int(c), int(r)) for r, c in zip(*np.nonzero(mask))}
        self.graph = NavigationGraph.from_cells(cells, 16)
        self.reference = self.graph.to_networkx()

        ids = sorted(self.reference.nodes)
        picks = rng.choice(len(ids), size=(25, 2))
        self.pairs = [(ids[a], ids[b]) for a, b in picks]

    def test_astar_cost_matches_reference(self):
        for start, goal in self.pairs:
            result = self.graph.find_path(start, goal)
            if not nx.has_path(self.reference, start, goal):
                self.assertFalse(result.success)
                self.assertEqual(result.path, [])
                continue

            expected = nx.dijkstra_path_length(self.reference, start, goal)
            self.assertTrue(result.success)
            self.assertAlmostEqual(result.total_cost, expected, places=6)
            self.assertAlmostEqual(
                path_length(self.graph, result.path), expected, places=6
            )

    def test_paths_only_use_existing_edges(self):
        for start, goal in self.pairs:
            path = self.graph.find_path(start, goal).path
            if not path:
                continue
            self.assertEqual(path[0], start)
            self.assertEqual(path[-1], goal)
            for a, b in zip(path, path[1:]):
                self.assertIn(b, self.graph.node(a).neighbors)

    def test_astar_and_dijkstra_find_same_optimal_cost(self):
        for start, goal in self.pairs:
            astar = self.graph.find_path(start, goal, PathfindingAlgorithm.A_STAR)
            dijkstra = self.graph.find_path(start, goal, PathfindingAlgorithm.DIJKSTRA)
            self.assertEqual(astar.success, dijkstra.success)
            if astar.success:
                self.assertAlmostEqual(astar.total_cost, dijkstra.total_cost, places=6)

    def test_search_is_deterministic(self):
        for start, goal in self.pairs:
            first = self.graph.find_path(start, goal)
            second = self.graph.find_path(start, goal)
            self.assertEqual(first.path, second.path)


if __name__ == "__main__":
    unittest.main()
