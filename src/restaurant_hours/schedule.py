from typing import Iterator, Mapping, Optional, Self
from dataclasses import dataclass

from restaurant_hours.model.day import DAYS_PER_WEEK, Weekday
from restaurant_hours.model.time import TimeRange
from restaurant_hours.model.util import fmt_selector


@dataclass(frozen=True)
class DaySpan:
    """A run of consecutive days sharing the same opening hours."""

    start: Weekday
    end: Weekday

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class WeeklySchedule:
    """
    Opening hours for each day of the week, Monday first.

    Each slot holds at most one `TimeRange`; `None` means closed that day.
    """

    slots: tuple[Optional[TimeRange], ...] = (None,) * DAYS_PER_WEEK

    def __post_init__(self):
        slots = tuple(self.slots)
        if len(slots) != DAYS_PER_WEEK:
            raise ValueError(f"expected {DAYS_PER_WEEK} days, got {len(slots)}")
        object.__setattr__(self, "slots", slots)

    @classmethod
    def from_days(cls, days: Mapping[Weekday, TimeRange]) -> Self:
        return cls(tuple(days.get(wday) for wday in Weekday))

    def is_closed_all_week(self) -> bool:
        return all(slot is None for slot in self.slots)

    def items(self) -> Iterator[tuple[Weekday, Optional[TimeRange]]]:
        return zip(Weekday, self.slots)

    def spans(self) -> Iterator[tuple[DaySpan, TimeRange]]:
        """Group consecutive open days with identical hours."""
        current: Optional[tuple[DaySpan, TimeRange]] = None

        for wday, slot in self.items():
            if current is not None and current[1] == slot:
                current = DaySpan(current[0].start, wday), slot
                continue
            if current is not None:
                yield current
            current = (DaySpan(wday, wday), slot) if slot is not None else None

        if current is not None:
            yield current

    def __getitem__(self, day: int) -> Optional[TimeRange]:
        return self.slots[day]

    def __iter__(self) -> Iterator[Optional[TimeRange]]:
        return iter(self.slots)

    def __len__(self) -> int:
        return DAYS_PER_WEEK

    def __str__(self) -> str:
        """Render the schedule back into hours text, eg. `Mon-Fri 9 am - 5 pm / Sat 10 am - 2 pm`."""
        if self.is_closed_all_week():
            return "closed"

        segments: dict[TimeRange, list[DaySpan]] = {}
        for span, time_range in self.spans():
            segments.setdefault(time_range, []).append(span)

        return " / ".join(
            f"{fmt_selector(spans)} {time_range.to_12h()}"
            for time_range, spans in segments.items()
        )
