"""Rounding helpers shared by the stats and goal calculations."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up."""
    return math.floor(value + 0.5)
