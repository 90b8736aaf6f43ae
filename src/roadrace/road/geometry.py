"""
Road geometry - Derived values of a block road.

Computes:
- End direction and goal distance
- Finish line flag positions
- Axis-aligned block runs for containment checks

Segments alternate direction by index: even = forward (+z),
odd = rightward (+x). All functions are pure.
"""

from functools import reduce
from typing import Iterator, Sequence, Tuple
import numpy as np


def is_forward_index(index: int) -> bool:
    """Whether the segment at ``index`` runs forward."""
    return index % 2 == 0


def is_end_forward(segments: Sequence[int]) -> bool:
    """Check if the last segment of the road runs forward.

    Args:
        segments: Segment lengths in blocks

    Returns:
        True if the finish line lies in the forward direction
    """
    return len(segments) % 2 == 1


def goal_distance(
    segments: Sequence[int],
    block_width: float,
    start_position: Sequence[float],
) -> float:
    """Get the travel distance a car needs to finish the road.

    Only runs in the ending direction count. The final block is
    left out since it is reserved for deceleration.

    Args:
        segments: Segment lengths in blocks
        block_width: World size of one block
        start_position: Car start position (x, y, z)

    Returns:
        Goal distance in the ending direction
    """
    if is_end_forward(segments):
        distance = -float(start_position[2])
        first_index = 0
    else:
        distance = -float(start_position[0])
        first_index = 1

    for segment in segments[first_index::2]:
        distance += segment * block_width

    return distance - block_width


def _flag_steps(
    segments: Sequence[int],
    block_width: float,
) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
    """Yield (left, right) offsets for every segment after the first."""
    w = block_width
    last = len(segments) - 1

    for i in range(1, len(segments)):
        s = segments[i]
        if is_forward_index(i):
            if i == last:
                yield (np.array([0.0, 0.0, (s - 2) * w]),
                       np.array([w, 0.0, (s - 1) * w]))
            else:
                yield (np.array([0.0, 0.0, (s - 1) * w]),
                       np.array([w, 0.0, s * w]))
        else:
            if i == last:
                yield (np.array([(s - 1) * w, 0.0, w]),
                       np.array([(s - 2) * w, 0.0, 0.0]))
            else:
                yield (np.array([s * w, 0.0, w]),
                       np.array([(s - 1) * w, 0.0, 0.0]))


def end_flag_positions(
    segments: Sequence[int],
    block_width: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Get the left and right finish line flag positions.

    The last segment keeps its final block for deceleration, so the
    flags stop one block short of the road end. The left and right
    flags end up one block apart across the lane.

    Args:
        segments: Segment lengths in blocks
        block_width: World size of one block

    Returns:
        Tuple of (left_flag, right_flag) as (x, 0, z) arrays
    """
    start_z = segments[0] * block_width
    initial = (
        np.array([0.0, 0.0, start_z]),
        np.array([block_width, 0.0, start_z]),
    )

    return reduce(
        lambda flags, step: (flags[0] + step[0], flags[1] + step[1]),
        _flag_steps(segments, block_width),
        initial,
    )


def iter_block_runs(
    segments: Sequence[int],
    road_width: float,
) -> Iterator[Tuple[float, float, float, float]]:
    """Iterate over the rectangles covered by each straight run.

    Args:
        segments: Segment lengths in blocks
        road_width: Width of one block in world units

    Yields:
        Tuple of (min_x, max_x, min_z, max_z) per segment, in road order
    """
    offset_x = 0
    offset_z = 0
    direction_is_right = False

    for segment in segments:
        if direction_is_right:
            x_length = road_width * segment
            z_length = road_width
        else:
            x_length = road_width
            z_length = road_width * segment

        min_x = offset_x * road_width
        min_z = offset_z * road_width
        yield (min_x, min_x + x_length, min_z, min_z + z_length)

        if direction_is_right:
            offset_x += segment
        else:
            offset_z += segment
        direction_is_right = not direction_is_right


def road_contains(
    segments: Sequence[int],
    point: Sequence[float],
    road_width: float,
) -> bool:
    """Check if a point lies on the road.

    Runs are visited in order; a point behind the near corner of the
    current run can never be on a later run.

    Args:
        segments: Segment lengths in blocks
        point: World position (x, y, z); y is ignored
        road_width: Width of one block in world units

    Returns:
        True if the point is inside the road corridor
    """
    x = point[0]
    z = point[2]

    for min_x, max_x, min_z, max_z in iter_block_runs(segments, road_width):
        if x < min_x or z < min_z:
            return False
        if x <= max_x and z <= max_z:
            return True

    return False
