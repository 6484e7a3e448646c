"""
Shared test fixtures.

Locations are around Koramangala, Bengaluru; all legs are a few km.
"""

import pytest

from delivery_planner.domain.entities import Location, PlanningInputs

DRIVER = Location(12.9716, 77.5946)


@pytest.fixture
def scenario1_inputs() -> PlanningInputs:
    """Restaurant 1 / consumer 1 first is faster."""
    return PlanningInputs(
        driver=DRIVER,
        restaurant1=Location(12.9321, 77.6101),
        restaurant2=Location(12.9343, 77.6214),
        consumer1=Location(12.9352, 77.6245),
        consumer2=Location(12.9279, 77.6271),
        preparation_time1=15,
        preparation_time2=20,
        travel_speed=20,
    )


@pytest.fixture
def scenario2_inputs() -> PlanningInputs:
    """Consumer 1 is farther from restaurant 1, so C2 first is faster."""
    return PlanningInputs(
        driver=DRIVER,
        restaurant1=Location(12.9343, 77.6214),
        restaurant2=Location(12.9321, 77.6101),
        consumer1=Location(12.9500, 77.6000),
        consumer2=Location(12.9279, 77.6271),
        preparation_time1=15,
        preparation_time2=20,
        travel_speed=20,
    )
