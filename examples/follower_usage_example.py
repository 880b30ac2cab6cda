#!/usr/bin/env python3
"""
Example driving a PathFollower across the staircase level.

The agent is moved with a crude kinematic stand-in (horizontal velocity
only, snapping onto the ground below) purely to show the tick loop; a real
game hands each LocomotionCommand to its physics step instead.
"""

from pathlib import Path

from platnav import FollowerConfig, NavigationGraph, PathFollower, TileGroundProbe
from platnav.map_loader import load_level

LEVEL = Path(__file__).parent / "levels" / "staircase.txt"
DT = 1.0 / 60.0


def main():
    tilemap, markers = load_level(LEVEL)
    graph = NavigationGraph.from_tilemap(tilemap)
    print(f"Graph: {len(graph)} nodes, {graph.num_edges} edges")

    follower = PathFollower(
        graph,
        FollowerConfig(speed=120.0),
        ground_probe=TileGroundProbe(tilemap),
    )

    agent = graph.cell_to_world(markers["E"][0])
    target = graph.cell_to_world(markers["P"][0])

    for frame in range(240):
        command = follower.tick(agent, target, DT)
        if frame % 30 == 0:
            print(
                f"frame {frame:3d}  pos=({agent[0]:6.1f}, {agent[1]:6.1f})  "
                f"vx={command.velocity_x:7.2f}  jump={command.jump}  "
                f"waypoint={follower.waypoint_index}/{len(follower.path)}"
            )
        agent = (agent[0] + command.velocity_x * DT, agent[1])
        if command.jump:
            agent = (agent[0], agent[1] - tilemap.cell_size[1])


if __name__ == "__main__":
    main()
