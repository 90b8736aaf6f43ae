"""
Road - Winding block road with a finish line.

Contains:
- Random walk segment generation
- Road class with finish flags, goal distance and on-road checks
"""

import logging
from typing import Any, List, Optional, Sequence
import numpy as np

from roadrace.config import RoadConfig
from roadrace.road import geometry
from roadrace.road.curves import CurveProbability

logger = logging.getLogger(__name__)

# Blocks reserved before the start and past the finish line
HEAD_BUFFER_BLOCKS = 2
TAIL_BUFFER_BLOCKS = 2


def generate_segments(
    length: float,
    curve_probability: CurveProbability,
    rng: Any,
) -> List[int]:
    """Generate the straight segments of a road.

    Walks the road block by block; at each block the curve policy
    decides, given the current straight run, whether the road turns.

    Args:
        length: Approximate road length in blocks
        curve_probability: Maps current run length to a curve probability
        rng: Random source with a ``random()`` method returning [0, 1)

    Returns:
        Segment lengths in blocks, alternating forward/rightward
    """
    segments: List[int] = []

    current_length = 1
    current_run = 1

    while current_length < length - 4:
        probability = curve_probability(current_run)

        if rng.random() < probability:
            segments.append(current_run)
            current_run = 1
        else:
            current_run += 1
        current_length += 1

    segments.append(current_run + TAIL_BUFFER_BLOCKS)
    segments[0] += HEAD_BUFFER_BLOCKS

    return segments


class Road:
    """Procedurally generated block road.

    The road is a chain of straight runs that alternate between the
    forward (+z) and rightward (+x) directions, starting forward.
    Everything except the segments is derived from them and the
    road configuration at construction time.

    Usage:
        road = Road(100, constant_curve_probability(0.2))

        if not road.contains(car_position, road.config.block_width):
            ...
        if road.is_car_finished(dist_forward, dist_rightward):
            ...
    """

    def __init__(
        self,
        length: float,
        curve_probability: CurveProbability,
        config: Optional[RoadConfig] = None,
        rng: Any = None,
    ):
        """Generate a road.

        Args:
            length: Approximate road length in blocks
            curve_probability: Maps current run length to a curve probability
            config: Road configuration. Uses defaults if None.
            rng: Random source. Uses a fresh numpy generator if None.
        """
        self.length = length
        self.curve_probability = curve_probability
        self.config = config or RoadConfig()

        if rng is None:
            rng = np.random.default_rng()

        self._segments = generate_segments(length, curve_probability, rng)
        self._derive_geometry()

    @classmethod
    def from_segments(
        cls,
        segments: Sequence[int],
        config: Optional[RoadConfig] = None,
    ) -> "Road":
        """Build a road from known segments instead of generating them.

        Args:
            segments: Segment lengths in blocks
            config: Road configuration. Uses defaults if None.

        Returns:
            Road with the given layout
        """
        road = cls.__new__(cls)
        road.length = sum(segments)
        road.curve_probability = None
        road.config = config or RoadConfig()
        road._segments = list(segments)
        road._derive_geometry()
        return road

    def _derive_geometry(self) -> None:
        """Calculate end direction, goal distance and finish flags."""
        width = self.config.block_width

        self._is_end_forward = geometry.is_end_forward(self._segments)
        self._goal_distance = geometry.goal_distance(
            self._segments, width, self.config.car_start_position
        )
        self._left_end_flag_pos, self._right_end_flag_pos = (
            geometry.end_flag_positions(self._segments, width)
        )

        logger.debug(
            "Generated road: length=%s segments=%d end=%s goal=%.2f",
            self.length,
            len(self._segments),
            "forward" if self._is_end_forward else "rightward",
            self._goal_distance,
        )

    @property
    def segments(self) -> List[int]:
        """Segment lengths in blocks."""
        return list(self._segments)

    @property
    def num_segments(self) -> int:
        """Number of straight runs."""
        return len(self._segments)

    @property
    def is_end_forward(self) -> bool:
        """True if the finish line lies in the forward direction."""
        return self._is_end_forward

    @property
    def goal_distance(self) -> float:
        """Travel distance in the ending direction needed to finish."""
        return self._goal_distance

    @property
    def left_end_flag_pos(self) -> np.ndarray:
        """Left finish line flag (x, 0, z)."""
        return self._left_end_flag_pos.copy()

    @property
    def right_end_flag_pos(self) -> np.ndarray:
        """Right finish line flag (x, 0, z)."""
        return self._right_end_flag_pos.copy()

    def contains(self, point: Sequence[float], road_width: float) -> bool:
        """Check if the road contains a point.

        Args:
            point: World position (x, y, z)
            road_width: Width of one road block

        Returns:
            True if the point is on the road
        """
        return geometry.road_contains(self._segments, point, road_width)

    def is_car_finished(self, car_dist_forward: float, car_dist_rightward: float) -> bool:
        """Check if a car has finished the road.

        Args:
            car_dist_forward: Car travel distance in forward direction
            car_dist_rightward: Car travel distance in rightward direction

        Returns:
            True if the car crossed the finish line
        """
        if self._is_end_forward:
            return car_dist_forward >= self._goal_distance
        return car_dist_rightward >= self._goal_distance

    def get_state(self) -> dict:
        """Get road state for serialization.

        Returns:
            Dictionary containing road data
        """
        return {
            "length": self.length,
            "num_segments": len(self._segments),
            "segments": list(self._segments),
            "is_end_forward": self._is_end_forward,
            "goal_distance": self._goal_distance,
            "left_end_flag_pos": self._left_end_flag_pos.tolist(),
            "right_end_flag_pos": self._right_end_flag_pos.tolist(),
            "block_width": self.config.block_width,
        }
