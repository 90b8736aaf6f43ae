"""
Road module - Procedural block road generation and queries.

This module contains:
- Road: Generated road with finish flags, goal distance and on-road checks
- RoadGenerator: Seedable road factory
- Curve policies: Ready-made curve probability functions
"""

from roadrace.road.road import Road, generate_segments
from roadrace.road.generator import RoadGenerator, GeneratorConfig
from roadrace.road.curves import (
    constant_curve_probability,
    linear_curve_probability,
    min_straight_curve_probability,
)

__all__ = [
    "Road",
    "generate_segments",
    "RoadGenerator",
    "GeneratorConfig",
    "constant_curve_probability",
    "linear_curve_probability",
    "min_straight_curve_probability",
]
