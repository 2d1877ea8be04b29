# IN THIS FILE: ROBOTSTATE, COORDINATES

from typing import Tuple

from simulator.utils.enums import Direction

# (x, y) on the unbounded integer grid
Coordinates = Tuple[int, int]


class RobotState:
    """
    A placed robot's position and orientation on the grid.
    Instances are never mutated; every move produces a new state.
    """

    __slots__ = ("_x", "_y", "_direction")

    def __init__(self, x: int, y: int, direction: Direction):
        self._x = x
        self._y = y
        self._direction = direction

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def coordinates(self) -> Coordinates:
        return (self._x, self._y)

    def moved(self, dx: int, dy: int) -> "RobotState":
        """New state shifted by (dx, dy), same direction"""
        return RobotState(self._x + dx, self._y + dy, self._direction)

    def facing(self, direction: Direction) -> "RobotState":
        """New state at the same cell, new direction"""
        return RobotState(self._x, self._y, direction)

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "x": self._x,
            "y": self._y,
            "d": self._direction.value,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RobotState):
            return False
        return (self._x == other._x and
                self._y == other._y and
                self._direction == other._direction)

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._direction))

    def __repr__(self) -> str:
        return f"RobotState(x={self._x}, y={self._y}, d={self._direction.name})"
