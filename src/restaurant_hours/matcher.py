from typing import TYPE_CHECKING, Iterable

from restaurant_hours.model.day import Weekday
from restaurant_hours.model.time import SHIFT_END_HOUR, ClockTime
from restaurant_hours.schedule import WeeklySchedule

if TYPE_CHECKING:
    from restaurant_hours.catalog import Restaurant


def lookup_day(day: int, time: ClockTime) -> Weekday:
    """
    Day whose opening hours apply at `time`: before 05:00 the query belongs
    to the shift that opened on the previous day.
    """
    wday = Weekday(day)
    if time.hour < SHIFT_END_HOUR:
        return wday.prev()
    return wday


def is_open_at(schedule: WeeklySchedule, day: int, time: ClockTime) -> bool:
    time_range = schedule[lookup_day(day, time)]
    if time_range is None:
        return False
    return time_range.contains(time)


def find_open(
    restaurants: Iterable["Restaurant"], day: int, time: ClockTime
) -> list[str]:
    """Names of the restaurants open at the given time, in catalog order."""
    return [r.name for r in restaurants if is_open_at(r.schedule, day, time)]
