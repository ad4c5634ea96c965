"""Half-up rounding used for every displayed metric."""
import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from negative infinity (2.5 -> 3, -2.5 -> -2).

    Python's built-in round() uses banker's rounding, which would turn a
    generated 12.5 points into 12.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
