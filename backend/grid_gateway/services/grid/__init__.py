"""
Canonical grid: date axis, field resolution and booking projection.
Every adapter builds its response from these pieces so the front-end sees one shape.
"""
from grid_gateway.services.grid.dates import calendar_bounds, generate_date_range, parse_calendar_date, parse_timestamp
from grid_gateway.services.grid.fields import (
    ALIASES,
    coerce_price,
    coerce_text,
    resolve,
    resolve_by_alias,
    resolve_field,
)
from grid_gateway.services.grid.projection import apply_overrides, baseline, build_interval, group_by_unit, project
from grid_gateway.services.grid.types import BookingInterval, DayAvailability, GridItem, GridResponse

__all__ = [
    "ALIASES",
    "BookingInterval",
    "DayAvailability",
    "GridItem",
    "GridResponse",
    "apply_overrides",
    "baseline",
    "build_interval",
    "calendar_bounds",
    "coerce_price",
    "coerce_text",
    "generate_date_range",
    "group_by_unit",
    "parse_calendar_date",
    "parse_timestamp",
    "project",
    "resolve",
    "resolve_by_alias",
    "resolve_field",
]
