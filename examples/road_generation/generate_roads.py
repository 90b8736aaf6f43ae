#!/usr/bin/env python3
"""
Road Generation Example

This example demonstrates how to:
1. Generate roads with different curve policies
2. Use seeds for reproducible roads
3. Inspect finish flags and goal distance
4. Check car positions against the road

Run with: python generate_roads.py
"""

import logging

from roadrace import RoadConfig
from roadrace.road import (
    Road,
    RoadGenerator,
    GeneratorConfig,
    constant_curve_probability,
    linear_curve_probability,
    min_straight_curve_probability,
)


def describe_road(name: str, road: Road):
    """Print a short summary of a road."""
    print(f"\nRoad: {name}")
    print(f"Segments ({road.num_segments}): {road.segments}")
    print(f"Ends: {'forward' if road.is_end_forward else 'rightward'}")
    print(f"Goal distance: {road.goal_distance:.1f}")
    print(f"Left flag: {road.left_end_flag_pos}")
    print(f"Right flag: {road.right_end_flag_pos}")


def generate_policy_roads():
    """Generate roads with each curve policy."""
    print("=" * 60)
    print("1. Curve Policies")
    print("=" * 60)

    policies = {
        "Constant 20%": constant_curve_probability(0.2),
        "Longer straights curve more": linear_curve_probability(0.05),
        "At least 4 blocks straight": min_straight_curve_probability(4, 0.5),
    }

    for name, policy in policies.items():
        describe_road(name, Road(60, policy))


def generate_seeded_roads():
    """Generate reproducible roads using seeds."""
    print("\n" + "=" * 60)
    print("2. Seeded Road Generation (Reproducible)")
    print("=" * 60)

    generator = RoadGenerator(GeneratorConfig(length=80))

    road1 = generator.generate_with_seed(12345)
    road2 = generator.generate_with_seed(12345)

    print(f"\nRoad A segments: {road1.segments}")
    print(f"Road B segments: {road2.segments}")
    print(f"Same layout: {road1.segments == road2.segments}")


def drive_along_road():
    """Check a few car positions against a road."""
    print("\n" + "=" * 60)
    print("3. On-Road Checks")
    print("=" * 60)

    config = RoadConfig(block_width=10.0, car_start_position=(5.0, 0.0, 5.0))
    road = Road(40, constant_curve_probability(0.3), config=config)
    width = config.block_width

    for z in (5.0, 25.0, 55.0, 400.0):
        position = (5.0, 0.0, z)
        print(f"Car at {position}: on road = {road.contains(position, width)}")

    print(f"Finished after {road.goal_distance:.0f} units: "
          f"{road.is_car_finished(road.goal_distance, road.goal_distance)}")


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    generate_policy_roads()
    generate_seeded_roads()
    drive_along_road()

    print("\n" + "=" * 60)
    print("Road generation examples complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
