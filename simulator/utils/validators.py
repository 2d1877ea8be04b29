# IN THIS FILE: INPUT PREDICATES (pure, never raise)
import math
from numbers import Integral, Real


def is_valid_number(value) -> bool:
    """True for any real number except NaN. bool is rejected."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, Integral):
        return True
    try:
        return not math.isnan(value)
    except OverflowError:
        # Too large for a float, so certainly not NaN
        return True


def is_valid_text(value) -> bool:
    """True for any str, empty included. Callers check emptiness themselves."""
    return isinstance(value, str)


def is_valid_placement(value) -> bool:
    """True only for a plain dict (not a list, primitive or other object)."""
    return type(value) is dict
