from typing import Iterable, Iterator, Optional, Self
from dataclasses import dataclass
import logging

from restaurant_hours.context import Context, ErrorPolicy
from restaurant_hours.matcher import find_open, is_open_at
from restaurant_hours.model.time import ClockTime
from restaurant_hours.parser import parse_schedule
from restaurant_hours.schedule import WeeklySchedule
from restaurant_hours.util import EmptyCatalog, MalformedScheduleSegment

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Restaurant:
    name: str
    schedule: WeeklySchedule
    hours: str = ""

    @classmethod
    def parse(cls, name: str, hours: str) -> Self:
        return cls(name, parse_schedule(name, hours), hours)

    def is_open_at(self, day: int, time: ClockTime) -> bool:
        return is_open_at(self.schedule, day, time)


@dataclass(frozen=True)
class Catalog:
    """Restaurants in input order. Built once, never modified."""

    restaurants: tuple[Restaurant, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "restaurants", tuple(self.restaurants))

    def names(self) -> list[str]:
        return [r.name for r in self.restaurants]

    def find_open(self, day: int, time: ClockTime) -> list[str]:
        return find_open(self.restaurants, day, time)

    def __getitem__(self, index: int) -> Restaurant:
        return self.restaurants[index]

    def __iter__(self) -> Iterator[Restaurant]:
        return iter(self.restaurants)

    def __len__(self) -> int:
        return len(self.restaurants)


def parse_catalog(
    rows: Iterable[tuple[str, str]], ctx: Optional[Context] = None
) -> Catalog:
    """
    Build a catalog from raw `(name, hours)` rows.

    Rows without a name are ignored. A row whose hours cannot be parsed is
    dropped with a warning, or aborts the load when `ctx.on_error` is
    `ErrorPolicy.FAIL`. Raises `EmptyCatalog` if no restaurant is left.
    """
    ctx = ctx or Context()
    restaurants = []
    skipped = 0

    for name, hours in rows:
        name = (name or "").strip()
        if not name:
            continue

        try:
            restaurants.append(Restaurant.parse(name, hours or ""))
        except MalformedScheduleSegment as err:
            if ctx.on_error == ErrorPolicy.FAIL:
                raise
            log.warning(f"Skipping restaurant {err}")
            skipped += 1

    if not restaurants:
        raise EmptyCatalog(f"no valid restaurant found ({skipped} skipped)")

    log.debug(f"Loaded {len(restaurants)} restaurants, skipped {skipped}")
    return Catalog(tuple(restaurants))
