from restaurant_hours.model.time import ClockTime, TimeRange

SUDACHI_HOURS = (
    "Mon-Wed, Sat 5 pm - 12:30 am / Thu-Fri 5 pm - 1:30 am / Sun 3 pm - 11:30 pm"
)


def hm(value: str) -> ClockTime:
    """Shorthand for a 24-hour clock time, eg. `hm("17:30")`."""
    hour, minute = value.split(":")
    return ClockTime(int(hour), int(minute))


def span(open_time: str, close_time: str) -> TimeRange:
    return TimeRange(hm(open_time), hm(close_time))
