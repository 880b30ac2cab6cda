"""
Centralized navigation constants for platnav.
All tunable defaults should be defined here to avoid duplication.
"""

# === GRID CONSTANTS ===
TILE_PIXEL_SIZE = 16  # Default tile width/height in pixels
EMPTY_TILE = 0  # Tile id marking an empty (non-ground) cell

# 4-connectivity: up, down, left, right (y grows downward)
CARDINAL_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))

# === FOLLOWER CONSTANTS ===
FOLLOWER_SPEED = 120.0  # Horizontal pursuit speed in pixels/second
PATH_UPDATE_INTERVAL = 0.3  # Seconds between replans
DETECTION_RANGE = 400.0  # Beyond this distance the target is ignored
WAYPOINT_DISTANCE = 8.0  # Waypoint counts as reached inside this radius

# Jump when the normalized direction to the waypoint points up more than this
JUMP_DIRECTION_THRESHOLD = 0.3
# Facing only flips when |direction.x| exceeds this
FACING_DEADZONE = 0.1

# === GROUND PROBE CONSTANTS ===
LEDGE_CHECK_DISTANCE = 24.0  # Forward offset of the ledge probe in pixels
LEDGE_CHECK_DEPTH = 24.0  # Downward reach of the ledge probe in pixels
