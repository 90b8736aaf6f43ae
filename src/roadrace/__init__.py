"""
RoadRace - Procedural block roads for a racing game.

This package provides:
- Random walk generation of winding, fixed-width roads
- Finish line flag positions and goal distance
- On-road checks and finish detection for cars
"""

__version__ = "0.1.0"

from roadrace.config import RoadConfig
from roadrace.road.road import Road
from roadrace.road.generator import RoadGenerator

__all__ = ["Road", "RoadConfig", "RoadGenerator", "__version__"]
