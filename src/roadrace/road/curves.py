"""
Curve policies - Ready-made curve probability functions.

A curve policy maps the length of the current straight run (in blocks)
to the probability that the road turns at the next block.
"""

from typing import Callable

CurveProbability = Callable[[int], float]


def constant_curve_probability(probability: float) -> CurveProbability:
    """Curve with the same probability on every block.

    Args:
        probability: Chance of curving per block

    Returns:
        Curve policy
    """
    def policy(run: int) -> float:
        return probability

    return policy


def linear_curve_probability(slope: float, offset: float = 0.0) -> CurveProbability:
    """Curve more often the longer the current straight gets.

    Args:
        slope: Probability added per block of straight
        offset: Probability at a run length of zero

    Returns:
        Curve policy, capped at 1.0
    """
    def policy(run: int) -> float:
        return min(1.0, offset + slope * run)

    return policy


def min_straight_curve_probability(min_run: int, probability: float) -> CurveProbability:
    """Never curve before the straight reaches ``min_run`` blocks."""
    def policy(run: int) -> float:
        if run < min_run:
            return 0.0
        return probability

    return policy
