"""
Road generator - Seedable factory for procedural roads.

Generates:
- Roads of a configured length and curve policy
- Reproducible roads from a seed
"""

import logging
from dataclasses import dataclass, field
from typing import Optional
import numpy as np

from roadrace.config import RoadConfig
from roadrace.road.curves import CurveProbability, constant_curve_probability
from roadrace.road.road import Road

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration for procedural road generation."""
    # Approximate road length in blocks
    length: float = 100.0

    # Curve policy (current straight run -> probability of curving)
    curve_probability: CurveProbability = field(
        default_factory=lambda: constant_curve_probability(0.2)
    )

    # Block width and car start position
    road_config: RoadConfig = field(default_factory=RoadConfig)

    # Random seed (None for random)
    seed: int | None = None


class RoadGenerator:
    """Procedural road generator.

    Usage:
        generator = RoadGenerator(GeneratorConfig(length=150))
        road = generator.generate()
        same_road = generator.generate_with_seed(42)
    """

    def __init__(self, config: GeneratorConfig | None = None):
        """Initialize generator with optional configuration.

        Args:
            config: Generator configuration. Uses defaults if None.
        """
        self.config = config or GeneratorConfig()
        self._rng = np.random.default_rng(self.config.seed)

    def generate(self, length: Optional[float] = None) -> Road:
        """Generate a new random road.

        Args:
            length: Road length in blocks. Uses the configured length if None.

        Returns:
            Generated Road
        """
        if length is None:
            length = self.config.length

        road = Road(
            length,
            self.config.curve_probability,
            config=self.config.road_config,
            rng=self._rng,
        )
        logger.info("Road generated with %d segments", road.num_segments)
        return road

    def generate_with_seed(self, seed: int, length: Optional[float] = None) -> Road:
        """Generate road with specific seed.

        Args:
            seed: Random seed
            length: Road length in blocks

        Returns:
            Generated road
        """
        self._rng = np.random.default_rng(seed)
        return self.generate(length)
