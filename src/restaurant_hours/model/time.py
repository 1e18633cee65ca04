from typing import Self
from dataclasses import dataclass
import datetime
import enum

from restaurant_hours.model.util import ModelBase
from restaurant_hours.util import InvalidClockTime

SHIFT_END_HOUR = 5
"""Every establishment is assumed to be closed by 05:00."""


class Meridiem(enum.StrEnum):
    AM = "am"
    PM = "pm"


@dataclass(frozen=True, order=True, repr=False)
class ClockTime(ModelBase):
    hour: int
    minute: int = 0

    def __post_init__(self):
        if self.hour > 23 or self.hour < 0:
            raise InvalidClockTime(f"hour out of range: {self.hour}")
        if self.minute > 59 or self.minute < 0:
            raise InvalidClockTime(f"minute out of range: {self.minute}")

    @classmethod
    def from_sys(cls, time: datetime.time) -> Self:
        return cls(time.hour, time.minute)

    @classmethod
    def from_12h(cls, hour: int, minute: int, meridiem: Meridiem) -> Self:
        """Convert a 12-hour clock reading, `12 am` being midnight and `12 pm` noon."""
        if hour > 12 or hour < 1:
            raise InvalidClockTime(f"hour out of range for a 12-hour clock: {hour}")

        if meridiem == Meridiem.PM and hour < 12:
            hour += 12
        elif meridiem == Meridiem.AM and hour == 12:
            hour = 0

        return cls(hour, minute)

    def to_12h(self) -> str:
        meridiem = Meridiem.AM if self.hour < 12 else Meridiem.PM
        hour = self.hour % 12 or 12
        if self.minute:
            return f"{hour}:{self.minute:02} {meridiem}"
        return f"{hour} {meridiem}"

    def mins_from_midnight(self) -> int:
        """Get the total number of minutes from *00:00*."""
        return self.minute + 60 * self.hour

    def mins_from_shift_start(self) -> int:
        """
        Minutes from *00:00* on the day the shift started: the early morning
        hours up to `SHIFT_END_HOUR` are counted as hours 24 to 29 of the
        previous evening.
        """
        if self.hour <= SHIFT_END_HOUR:
            return self.mins_from_midnight() + 24 * 60
        return self.mins_from_midnight()

    def __str__(self) -> str:
        return f"{self.hour:02}:{self.minute:02}"


def shift_compare(left: ClockTime, right: ClockTime) -> int:
    """
    Compare two clock times on the timeline of a single shift.

    Returns a negative number when `left` comes first, zero when both are the
    same instant and a positive number otherwise. Hours up to 05:00 fold onto
    the end of the previous evening, so that 23:00 comes before 00:30.
    """
    return left.mins_from_shift_start() - right.mins_from_shift_start()


@dataclass(frozen=True, repr=False)
class TimeRange(ModelBase):
    """
    Half-open interval `[open, close)`.

    `close` may be earlier than `open` on the clock, in which case the range
    ends on the following morning.
    """

    open: ClockTime
    close: ClockTime

    def wraps_midnight(self) -> bool:
        return self.close < self.open

    def contains(self, time: ClockTime) -> bool:
        return shift_compare(self.open, time) <= 0 and shift_compare(time, self.close) < 0

    def to_12h(self) -> str:
        return f"{self.open.to_12h()} - {self.close.to_12h()}"

    def __str__(self) -> str:
        return f"{self.open}-{self.close}"
