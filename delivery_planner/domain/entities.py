"""
Domain value objects and exceptions.

All objects are frozen: a planning call reads its inputs and produces a
fresh ``Route`` without mutating anything, so planners may be shared
across threads.

``Location`` performs no range checking.  Out-of-range or NaN coordinates
flow straight into the distance calculation; bounds are enforced at the
CLI boundary (see ``delivery_planner.cli.schemas``).
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DeliveryOrder, TimeUnit


class PlannerError(Exception):
    """Base exception for delivery planning errors."""


class InvalidPlanningInput(PlannerError):
    """Raised when planning inputs make the time estimate meaningless."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class PlanningInputs:
    driver: Location
    restaurant1: Location
    restaurant2: Location
    consumer1: Location
    consumer2: Location
    preparation_time1: float  # minutes
    preparation_time2: float  # minutes
    travel_speed: float  # km/h


@dataclass(frozen=True)
class ScenarioEstimate:
    delivery_order: DeliveryOrder
    total_time: float


@dataclass(frozen=True)
class Route:
    total_time: float
    delivery_order: DeliveryOrder
    time_unit: TimeUnit = TimeUnit.HOURS
