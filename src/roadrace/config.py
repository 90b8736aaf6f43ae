"""
Road configuration - Constants shared by road generation and geometry.

Contains:
- Block width (world size of one road block)
- Car start position (anchors the goal distance)
"""

from dataclasses import dataclass, field
from typing import Tuple
import numpy as np


@dataclass
class RoadConfig:
    """Road configuration passed to every road explicitly."""
    # World size of one square road block
    block_width: float = 10.0

    # Car spawn point (x, y, z); only x and z matter for the goal
    car_start_position: Tuple[float, float, float] = field(
        default_factory=lambda: (5.0, 0.0, 5.0)
    )

    def __post_init__(self):
        """Normalize configuration values."""
        self.block_width = float(self.block_width)
        self.car_start_position = np.asarray(self.car_start_position, dtype=float)

    def get_state(self) -> dict:
        """Get configuration for serialization."""
        return {
            "block_width": self.block_width,
            "car_start_position": self.car_start_position.tolist(),
        }
