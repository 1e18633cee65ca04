from restaurant_hours.model import day, time  # noqa: F401
from restaurant_hours.model.day import DAY_INDEX, DAYS_PER_WEEK, Weekday
from restaurant_hours.model.time import (
    SHIFT_END_HOUR,
    ClockTime,
    Meridiem,
    TimeRange,
    shift_compare,
)

__all__ = [
    "DAY_INDEX",
    "DAYS_PER_WEEK",
    "SHIFT_END_HOUR",
    "ClockTime",
    "Meridiem",
    "TimeRange",
    "Weekday",
    "shift_compare",
]
