from typing import Iterable, Optional
from dataclasses import dataclass

from restaurant_hours.catalog import Restaurant
from restaurant_hours.model.time import TimeRange

CLOSED_PLACEHOLDER = "--:--/--:--"
NAME_WIDTH = 15
SEPARATOR = "-" * 123


@dataclass(frozen=True)
class WeeklyRow:
    name: str
    days: tuple[str, ...]


def format_day(time_range: Optional[TimeRange]) -> str:
    if time_range is None:
        return CLOSED_PLACEHOLDER
    return str(time_range)


def render_weekly_table(catalog: Iterable[Restaurant]) -> list[WeeklyRow]:
    """One row per restaurant with the hours of each day, Monday first."""
    return [
        WeeklyRow(r.name, tuple(format_day(slot) for slot in r.schedule))
        for r in catalog
    ]


def format_row(row: WeeklyRow, width: int = NAME_WIDTH) -> str:
    res = row.name[:width].ljust(width) + "\t"
    for day in row.days:
        res += day + "\t"
    return res
