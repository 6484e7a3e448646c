"""Pydantic request / response schemas for the command-line interface."""

from __future__ import annotations

from pydantic import BaseModel, Field

from delivery_planner.domain.entities import (
    Location,
    PlanningInputs,
    Route,
    ScenarioEstimate,
)


# ── Requests ──────────────────────────────────────────────────────────


class Coordinate(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def to_location(self) -> Location:
        return Location(self.latitude, self.longitude)


class PlanRequest(BaseModel):
    driver: Coordinate
    restaurant1: Coordinate
    restaurant2: Coordinate
    consumer1: Coordinate
    consumer2: Coordinate
    preparation_time1: float = Field(..., description="Minutes at restaurant 1.")
    preparation_time2: float = Field(..., description="Minutes at restaurant 2.")
    travel_speed: float = Field(..., gt=0, description="Average speed in km/h.")
    normalize_units: bool = False

    def to_inputs(self) -> PlanningInputs:
        return PlanningInputs(
            driver=self.driver.to_location(),
            restaurant1=self.restaurant1.to_location(),
            restaurant2=self.restaurant2.to_location(),
            consumer1=self.consumer1.to_location(),
            consumer2=self.consumer2.to_location(),
            preparation_time1=self.preparation_time1,
            preparation_time2=self.preparation_time2,
            travel_speed=self.travel_speed,
        )


# ── Responses ─────────────────────────────────────────────────────────


class ScenarioResponse(BaseModel):
    delivery_order: str
    total_time: float


class RouteResponse(BaseModel):
    delivery_order: str
    total_time: float
    time_unit: str
    scenarios: list[ScenarioResponse] = []

    @classmethod
    def from_domain(
        cls, route: Route, scenarios: tuple[ScenarioEstimate, ...] = ()
    ) -> "RouteResponse":
        return cls(
            delivery_order=route.delivery_order.value,
            total_time=route.total_time,
            time_unit=route.time_unit.value,
            scenarios=[
                ScenarioResponse(
                    delivery_order=s.delivery_order.value,
                    total_time=s.total_time,
                )
                for s in scenarios
            ],
        )
