"""
Command-line entry point.

* Builds a ``PlanRequest`` from flags (falling back to the demo fixture
  and to ``settings`` for speed / preparation times).
* Runs ``DeliveryPlanner.find_best_route``.
* Prints the winning ordering and its total time, or a JSON document
  with ``--json``.

Exit status: 0 on success, 2 on invalid input.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional, Sequence, get_args

from pydantic import ValidationError

from delivery_planner.cli.schemas import Coordinate, PlanRequest, RouteResponse
from delivery_planner.config import LogLevel, settings
from delivery_planner.domain.entities import PlannerError, Route
from delivery_planner.domain.planner import DeliveryPlanner

logger = logging.getLogger(__name__)

# Koramangala, Bengaluru demo run
DEFAULT_DRIVER = (12.9716, 77.5946)
DEFAULT_RESTAURANT1 = (12.9343, 77.6214)
DEFAULT_RESTAURANT2 = (12.9321, 77.6101)
DEFAULT_CONSUMER1 = (12.9352, 77.6245)
DEFAULT_CONSUMER2 = (12.9279, 77.6271)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def format_total_time(total_time: float) -> str:
    """Round half-up to two decimals using the shortest repr of the float."""
    if not math.isfinite(total_time):
        return str(total_time)
    value = Decimal(repr(total_time))
    with localcontext() as ctx:
        # integer digits plus two decimals must fit in the context precision
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def render_text(route: Route) -> str:
    return (
        f"Best Route: {route.delivery_order.value}\n"
        f"Total Time: {format_total_time(route.total_time)} {route.time_unit.value}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delivery-planner",
        description=(
            "Pick the faster of two fixed pickup-and-delivery orderings for "
            "one driver, two restaurants and two consumers."
        ),
    )
    point = dict(nargs=2, type=float, metavar=("LAT", "LNG"))
    parser.add_argument("--driver", default=DEFAULT_DRIVER, **point)
    parser.add_argument("--restaurant1", default=DEFAULT_RESTAURANT1, **point)
    parser.add_argument("--restaurant2", default=DEFAULT_RESTAURANT2, **point)
    parser.add_argument("--consumer1", default=DEFAULT_CONSUMER1, **point)
    parser.add_argument("--consumer2", default=DEFAULT_CONSUMER2, **point)
    parser.add_argument(
        "--prep1", type=float, default=settings.default_preparation_time1_min,
        help="preparation time at restaurant 1 (minutes)",
    )
    parser.add_argument(
        "--prep2", type=float, default=settings.default_preparation_time2_min,
        help="preparation time at restaurant 2 (minutes)",
    )
    parser.add_argument(
        "--speed", type=float, default=settings.default_travel_speed_kmh,
        help="average travel speed (km/h)",
    )
    parser.add_argument(
        "--normalize-units",
        action=argparse.BooleanOptionalAction,
        default=settings.normalize_units,
        help="convert travel hours to minutes before adding preparation time",
    )
    parser.add_argument("--json", action="store_true", help="print a JSON document")
    parser.add_argument(
        "--log-level", type=str.upper, default=settings.log_level,
        choices=get_args(LogLevel),
    )
    return parser


def _coordinate(pair: Sequence[float]) -> Coordinate:
    lat, lng = pair
    return Coordinate(latitude=lat, longitude=lng)


def request_from_args(args: argparse.Namespace) -> PlanRequest:
    return PlanRequest(
        driver=_coordinate(args.driver),
        restaurant1=_coordinate(args.restaurant1),
        restaurant2=_coordinate(args.restaurant2),
        consumer1=_coordinate(args.consumer1),
        consumer2=_coordinate(args.consumer2),
        preparation_time1=args.prep1,
        preparation_time2=args.prep2,
        travel_speed=args.speed,
        normalize_units=args.normalize_units,
    )


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        request = request_from_args(args)
        planner = DeliveryPlanner(
            request.to_inputs(), normalize_units=request.normalize_units
        )
    except (ValidationError, PlannerError) as exc:
        logger.debug("Rejected planning input", exc_info=True)
        print(f"Invalid input: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    route = planner.find_best_route()
    if args.json:
        print(RouteResponse.from_domain(route, planner.scenarios()).model_dump_json())
    else:
        print(render_text(route))
    return EXIT_OK


def main() -> None:
    sys.exit(run())
