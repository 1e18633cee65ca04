from typing import Mapping, Self
from types import MappingProxyType
import enum

DAYS_PER_WEEK = 7


class Weekday(enum.IntEnum):
    Mon = 0
    Tue = 1
    Wed = 2
    Thu = 3
    Fri = 4
    Sat = 5
    Sun = 6

    def next(self) -> Self:
        return type(self)((self + 1) % DAYS_PER_WEEK)

    def prev(self) -> Self:
        return type(self)((self - 1) % DAYS_PER_WEEK)

    def __str__(self) -> str:
        return self.name


DAY_INDEX: Mapping[str, Weekday] = MappingProxyType({wd.name: wd for wd in Weekday})


def weekday_from_name(name: str) -> Weekday:
    """Case-insensitive lookup of a three-letter day abbreviation."""
    wday = DAY_INDEX.get(name.strip().capitalize())
    if wday is None:
        raise ValueError(f"unknown day of week: {name!r}")
    return wday


def weekday_range(start: Weekday, end: Weekday) -> list[Weekday]:
    """
    All days from `start` to `end` inclusive, walking forward through the
    week. `Sat-Mon` wraps over the weekend and `Mon-Mon` is a single day.
    """
    days = [start]
    while days[-1] != end:
        days.append(days[-1].next())
    return days
