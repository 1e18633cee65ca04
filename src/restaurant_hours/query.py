from typing import Iterable, Self, Union
from dataclasses import dataclass
import datetime

from restaurant_hours.catalog import Restaurant
from restaurant_hours.matcher import find_open
from restaurant_hours.model.day import Weekday, weekday_from_name
from restaurant_hours.model.time import ClockTime
from restaurant_hours.util import InvalidQuery


@dataclass(frozen=True)
class DayTimeQuery:
    """A day abbreviation (`Sat`) or `Weekday` and a 24-hour `HH:MM` time (`17:30`)."""

    day: str | Weekday
    time: str


@dataclass(frozen=True)
class DateTimeQuery:
    moment: datetime.datetime

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse an ISO-8601 date and time, eg. `2020-05-23T01:35:00`."""
        if not isinstance(text, str):
            raise InvalidQuery(f"expected an ISO date string, got {text!r}")
        try:
            return cls(datetime.datetime.fromisoformat(text.strip()))
        except ValueError as err:
            raise InvalidQuery(f"invalid date {text!r}: {err}") from err


Query = Union[DayTimeQuery, DateTimeQuery]


def parse_24h_time(text: str) -> ClockTime:
    if not isinstance(text, str):
        raise InvalidQuery(f"expected a time string, got {text!r}")
    try:
        parsed = datetime.datetime.strptime(text.strip(), "%H:%M")
    except ValueError as err:
        raise InvalidQuery(f"invalid time {text!r}, expected HH:MM") from err
    return ClockTime(parsed.hour, parsed.minute)


def parse_day(day: str | Weekday) -> Weekday:
    if isinstance(day, Weekday):
        return day
    if not isinstance(day, str):
        raise InvalidQuery(f"expected a day name, got {day!r}")
    try:
        return weekday_from_name(day)
    except ValueError as err:
        raise InvalidQuery(str(err)) from err


def resolve_query(query: Query) -> tuple[Weekday, ClockTime]:
    """Reduce a query to the day of week (Monday = 0) and clock time it asks about."""
    match query:
        case DayTimeQuery(day=day, time=time):
            return parse_day(day), parse_24h_time(time)
        case DateTimeQuery(moment=moment):
            if not isinstance(moment, datetime.datetime):
                raise InvalidQuery(f"expected a date and time, got {moment!r}")
            # datetime.weekday() counts from Monday = 0, like Weekday
            return Weekday(moment.weekday()), ClockTime.from_sys(moment.time())
        case _:
            raise InvalidQuery(f"unsupported query: {query!r}")


def find_open_restaurants(catalog: Iterable[Restaurant], query: Query) -> list[str]:
    day, time = resolve_query(query)
    return find_open(catalog, day, time)
