import pytest

from simulator.commands.decoder import decode
from simulator.utils.enums import Instruction
from simulator.utils.errors import InvalidInputError


def test_decode_laar():
    assert decode("LAAR") == (
        Instruction.TURN_LEFT,
        Instruction.ADVANCE,
        Instruction.ADVANCE,
        Instruction.TURN_RIGHT,
    )


def test_decode_single_characters():
    assert decode("A") == (Instruction.ADVANCE,)
    assert decode("L") == (Instruction.TURN_LEFT,)
    assert decode("R") == (Instruction.TURN_RIGHT,)


def test_decode_lowercase():
    assert decode("lar") == (
        Instruction.TURN_LEFT,
        Instruction.ADVANCE,
        Instruction.TURN_RIGHT,
    )


def test_decode_returns_immutable_sequence():
    assert isinstance(decode("AL"), tuple)


@pytest.mark.parametrize("instructions", [
    "XYZ",
    "",
    "AALX",
    " A",
    "A\n",
    "ä",
])
def test_decode_rejects_bad_strings(instructions):
    with pytest.raises(InvalidInputError, match="Allowed characters"):
        decode(instructions)


@pytest.mark.parametrize("instructions", [None, 7, ["A"], b"A"])
def test_decode_rejects_non_text(instructions):
    with pytest.raises(InvalidInputError):
        decode(instructions)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        decode("Q")
