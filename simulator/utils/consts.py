# IN THIS FILE: ALL CONSTANTS (LOOKUP TABLES + RUNTIME SETTINGS)
import os

from simulator.utils.enums import Direction, Instruction

# -----------------------------------------------------------------------------
# 1. ORIENTATION
# -----------------------------------------------------------------------------
# Canonical clockwise ordering. Rotation is index arithmetic modulo 4.
DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

# Index steps added to the current direction index
TURN_RIGHT_STEP = 1
TURN_LEFT_STEP = 3      # same as -1 mod 4

# -----------------------------------------------------------------------------
# 2. MOVEMENT
# -----------------------------------------------------------------------------
# One grid cell per advance. North is y+, east is x+.
MOVE_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}

# -----------------------------------------------------------------------------
# 3. INSTRUCTION LANGUAGE
# -----------------------------------------------------------------------------
COMMANDS = {
    "A": Instruction.ADVANCE,
    "L": Instruction.TURN_LEFT,
    "R": Instruction.TURN_RIGHT,
}

# -----------------------------------------------------------------------------
# 4. RUNTIME SETTINGS (overridable from the environment)
# -----------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("ROBOT_SIM_LOG_LEVEL", "INFO").upper()

SERVER_HOST = os.environ.get("ROBOT_SIM_HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("ROBOT_SIM_PORT", "5000"))

# Half-width of the window the dashboard draws around the origin (cells)
DASHBOARD_GRID_SIZE = 10
