from restaurant_hours.catalog import Catalog, Restaurant, parse_catalog
from restaurant_hours.context import Context, ErrorPolicy
from restaurant_hours.matcher import find_open, is_open_at
from restaurant_hours.model import ClockTime, TimeRange, Weekday, shift_compare
from restaurant_hours.parser import parse_schedule
from restaurant_hours.query import (
    DateTimeQuery,
    DayTimeQuery,
    find_open_restaurants,
    resolve_query,
)
from restaurant_hours.reader import load_catalog, read_rows
from restaurant_hours.render import render_weekly_table
from restaurant_hours.schedule import WeeklySchedule
from restaurant_hours.util import (
    EmptyCatalog,
    InvalidQuery,
    MalformedScheduleSegment,
    ScheduleError,
)

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "ClockTime",
    "Context",
    "DateTimeQuery",
    "DayTimeQuery",
    "EmptyCatalog",
    "ErrorPolicy",
    "InvalidQuery",
    "MalformedScheduleSegment",
    "Restaurant",
    "ScheduleError",
    "TimeRange",
    "WeeklySchedule",
    "Weekday",
    "find_open",
    "find_open_restaurants",
    "is_open_at",
    "load_catalog",
    "parse_catalog",
    "parse_schedule",
    "read_rows",
    "render_weekly_table",
    "resolve_query",
    "shift_compare",
]
