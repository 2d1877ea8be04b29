# IN THIS FILE: DIRECTIONS and INSTRUCTIONS
from enum import Enum


class Direction(str, Enum):
    """
    Robot facing direction.
    Values are the exact orientation names accepted on input.
    """
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def __str__(self):
        return self.value


class Instruction(Enum):
    """
    Decoded robot operations.
    Value is the command character that produces the instruction.
    """
    ADVANCE = "A"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"
