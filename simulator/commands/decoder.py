# simulator/commands/decoder.py
import re
from typing import Tuple

from simulator.utils.consts import COMMANDS
from simulator.utils.enums import Instruction
from simulator.utils.errors import InvalidInputError
from simulator.utils.validators import is_valid_text

# Whole-string check, built from the command table
_VALID_COMMANDS = re.compile("[" + "".join(COMMANDS) + "]+")

INVALID_COMMANDS_MESSAGE = (
    'Must enter a valid instruction command string. Allowed characters are "L", "R" and "A"'
)


def decode(instructions: str) -> Tuple[Instruction, ...]:
    """
    Translate a command string into the ordered instructions it encodes.

    The whole string is validated before anything is produced: a non-str,
    an empty string or any character outside A/L/R (either case) raises
    InvalidInputError and nothing is returned.

    Example:
        decode("LAAR") -> (TURN_LEFT, ADVANCE, ADVANCE, TURN_RIGHT)
    """
    if not is_valid_text(instructions):
        raise InvalidInputError(INVALID_COMMANDS_MESSAGE)

    normalized = instructions.upper()
    if not _VALID_COMMANDS.fullmatch(normalized):
        raise InvalidInputError(INVALID_COMMANDS_MESSAGE)

    return tuple(COMMANDS[char] for char in normalized)
