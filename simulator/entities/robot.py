# IN THIS FILE: TRACKING ROBOT'S CURRENT STATE & MOVEMENT HISTORY

import math
from numbers import Integral
from typing import List, Optional

from simulator.commands.decoder import decode
from simulator.utils.consts import (
    DIRECTIONS,
    MOVE_DELTAS,
    TURN_LEFT_STEP,
    TURN_RIGHT_STEP,
)
from simulator.utils.enums import Direction, Instruction
from simulator.utils.errors import InvalidInputError
from simulator.utils.logger import log_debug
from simulator.utils.types import Coordinates, RobotState
from simulator.utils.validators import (
    is_valid_number,
    is_valid_placement,
    is_valid_text,
)

_DIRECTIONS_BY_NAME = {d.value: d for d in DIRECTIONS}


def _parse_direction(direction) -> Direction:
    if isinstance(direction, Direction):
        return direction
    if is_valid_text(direction) and direction in _DIRECTIONS_BY_NAME:
        return _DIRECTIONS_BY_NAME[direction]
    raise InvalidInputError("Must enter a valid orientation")


def _parse_coordinate(value) -> int:
    # Grid cells are integers; 3.0 is accepted, 3.5 and inf are not
    if not is_valid_number(value):
        raise InvalidInputError("Must enter valid coordinates")
    if isinstance(value, Integral):
        return int(value)
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = True
    if not finite or value != int(value):
        raise InvalidInputError("Must enter valid coordinates")
    return int(value)


def _rotate(direction: Direction, step: int) -> Direction:
    index = DIRECTIONS.index(direction)
    return DIRECTIONS[(index + step) % len(DIRECTIONS)]


class Robot:
    """
    Toy robot on an unbounded integer grid.

    Starts unplaced: bearing and coordinates are None and every movement
    raises InvalidInputError until place() succeeds. All inputs are checked
    before the state is replaced, so a rejected call leaves the robot as it was.
    """

    def __init__(self):
        self._state: Optional[RobotState] = None
        self._path_history: List[RobotState] = []

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def is_placed(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> Optional[RobotState]:
        return self._state

    @property
    def bearing(self) -> Optional[Direction]:
        """Current facing direction, None before placement"""
        if self._state is None:
            return None
        return self._state.direction

    @property
    def coordinates(self) -> Optional[Coordinates]:
        """Current (x, y), None before placement"""
        if self._state is None:
            return None
        return self._state.coordinates

    @property
    def history(self) -> List[RobotState]:
        """Every state held since the last placement, oldest first"""
        return list(self._path_history)

    # -------------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------------

    def place(self, x: int, y: int, direction) -> None:
        """
        Put the robot at (x, y) facing `direction`.

        Args:
            x, y: Grid coordinates (whole numbers, may be negative)
            direction: Direction or one of "north", "east", "south", "west"

        Raises:
            InvalidInputError: on a non-numeric coordinate or unknown direction
        """
        new_x = _parse_coordinate(x)
        new_y = _parse_coordinate(y)
        new_direction = _parse_direction(direction)

        self._state = RobotState(new_x, new_y, new_direction)
        self._path_history = [self._state]
        log_debug(f"Robot placed at {self._state}")

    def place_from(self, placement: dict) -> None:
        """Place from a record such as {"x": 0, "y": 0, "direction": "north"}"""
        if not is_valid_placement(placement):
            raise InvalidInputError("Invalid placement data type")
        if not placement:
            raise InvalidInputError("Placement data must not be empty")

        self.place(
            placement.get("x"),
            placement.get("y"),
            placement.get("direction"),
        )

    def at(self, x: int, y: int) -> None:
        """Move a placed robot to (x, y) without changing its direction"""
        new_x = _parse_coordinate(x)
        new_y = _parse_coordinate(y)
        current = self._require_placed("be moved")
        self._update(RobotState(new_x, new_y, current.direction))

    # -------------------------------------------------------------------------
    # Movement
    # -------------------------------------------------------------------------

    def orient(self, direction) -> None:
        new_direction = _parse_direction(direction)
        self._update(self._require_placed("orient").facing(new_direction))

    def turn_right(self) -> None:
        current = self._require_placed("turn right")
        self.orient(_rotate(current.direction, TURN_RIGHT_STEP))

    def turn_left(self) -> None:
        current = self._require_placed("turn left")
        self.orient(_rotate(current.direction, TURN_LEFT_STEP))

    def advance(self) -> None:
        """Move one cell forward: north y+1, east x+1, south y-1, west x-1"""
        current = self._require_placed("advance")
        dx, dy = MOVE_DELTAS[current.direction]
        self._update(current.moved(dx, dy))

    def evaluate(self, instructions: str) -> None:
        """
        Run a command string such as "RAALAL".

        The string is decoded in full first; if it contains an illegal
        character nothing runs and the decoder's InvalidInputError propagates.
        """
        decoded = decode(instructions)
        self._require_placed("evaluate instructions")

        log_debug(f"Evaluating {len(decoded)} instructions from {self._state}")
        for instruction in decoded:
            if instruction is Instruction.ADVANCE:
                self.advance()
            elif instruction is Instruction.TURN_LEFT:
                self.turn_left()
            elif instruction is Instruction.TURN_RIGHT:
                self.turn_right()
            else:
                raise AssertionError(f"Unhandled instruction {instruction!r}")
        log_debug(f"Robot now at {self._state}")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _require_placed(self, action: str) -> RobotState:
        if self._state is None:
            raise InvalidInputError(f"Robot must be placed before it can {action}")
        return self._state

    def _update(self, new_state: RobotState) -> None:
        self._state = new_state
        self._path_history.append(new_state)
