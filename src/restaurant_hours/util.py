from typing import Optional, TypeVar, Callable


class ScheduleError(Exception):
    """Base class for every error raised by restaurant_hours."""


class MalformedScheduleSegment(ScheduleError, ValueError):
    """A segment of an hours description does not match the grammar."""

    def __init__(self, name: Optional[str], segment: str, reason: str) -> None:
        self.name = name
        self.segment = segment
        self.reason = reason

        msg = f'cannot parse "{segment}": {reason}'
        if name is not None:
            msg = f'"{name}": {msg}'
        super().__init__(msg)


class EmptyCatalog(ScheduleError):
    """No restaurant could be loaded."""


class InvalidQuery(ScheduleError, ValueError):
    """The day, time or date of a query could not be understood."""


class InvalidClockTime(ValueError):
    pass


_T = TypeVar("_T")
_To = TypeVar("_To")


def map_opt(val: Optional[_T], mapper: Callable[[_T], _To]) -> Optional[_To]:
    if val is None:
        return None
    return mapper(val)
