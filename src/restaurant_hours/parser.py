from typing import Iterator, Optional
import importlib.resources
import logging
import enum
import re

import lark

from restaurant_hours.model.day import DAY_INDEX, DAYS_PER_WEEK, Weekday, weekday_range
from restaurant_hours.model.time import ClockTime, Meridiem, TimeRange
from restaurant_hours.schedule import WeeklySchedule
from restaurant_hours.util import (
    InvalidClockTime,
    MalformedScheduleSegment,
    ScheduleError,
    map_opt,
)

log = logging.getLogger(__name__)

SEGMENT_SEPARATOR = re.compile(r"\s+/\s+")


class Rules(enum.StrEnum):
    segment = enum.auto()
    day_spec = enum.auto()
    day_range = enum.auto()
    timespan = enum.auto()
    time = enum.auto()


class Tokens(enum.StrEnum):
    @staticmethod
    def _generate_next_value_(name, start, count, last_values) -> str:
        return name

    WDAY = enum.auto()
    HOUR = enum.auto()
    MINUTE = enum.auto()
    MERIDIEM = enum.auto()


def get_parser():
    grammar = (
        importlib.resources.files("restaurant_hours")
        .joinpath("schedule_hours.lark")
        .read_text(encoding="utf-8")
    )
    return lark.Lark(
        grammar,
        start=[str(Rules.segment), str(Rules.day_spec), str(Rules.time)],
        parser="earley",
    )


PARSER = get_parser()


def split_segments(raw_hours: str) -> list[str]:
    """Split an hours description on the `" / "` delimiter."""
    raw_hours = raw_hours.strip()
    if not raw_hours:
        return []
    return [segment.strip() for segment in SEGMENT_SEPARATOR.split(raw_hours)]


def parse_schedule(name: str, raw_hours: str) -> WeeklySchedule:
    """
    Parse the opening hours of one restaurant, eg.
    `Mon-Wed, Sat 5 pm - 12:30 am / Sun 3 pm - 11:30 pm`.

    When several segments name the same day, the last one wins. Any segment
    that does not match the grammar rejects the whole description with a
    `MalformedScheduleSegment`.
    """
    segments = split_segments(raw_hours)
    if not segments:
        raise MalformedScheduleSegment(name, raw_hours, "no opening hours")

    slots: list[Optional[TimeRange]] = [None] * DAYS_PER_WEEK

    for segment in segments:
        days, time_range = parse_segment(segment, name)
        for wday in days:
            if slots[wday] is not None and slots[wday] != time_range:
                log.debug(
                    f'"{name}": {wday} hours {slots[wday]} replaced by {time_range}'
                )
            slots[wday] = time_range

    return WeeklySchedule(tuple(slots))


def parse_segment(
    segment: str, name: Optional[str] = None
) -> tuple[list[Weekday], TimeRange]:
    tree = _parse_tree(segment, Rules.segment, name)
    return _build_or_reject(build_segment, tree, segment, name)


def parse_day_spec(text: str) -> list[Weekday]:
    """Parse a day list such as `Mon-Wed, Sat`."""
    tree = _parse_tree(text, Rules.day_spec)
    return _build_or_reject(build_day_spec, tree, text)


def parse_time(text: str) -> ClockTime:
    """Parse a 12-hour clock expression such as `5 pm` or `12:30 am`."""
    tree = _parse_tree(text, Rules.time)
    return _build_or_reject(build_time, tree, text)


def _parse_tree(text: str, start: Rules, name: Optional[str] = None) -> lark.Tree:
    try:
        return PARSER.parse(text, start=str(start))
    except lark.UnexpectedInput as err:
        raise MalformedScheduleSegment(name, text, describe_error(err)) from err


def _build_or_reject(builder, tree: lark.Tree, text: str, name: Optional[str] = None):
    try:
        return builder(tree)
    except InvalidClockTime as err:
        raise MalformedScheduleSegment(name, text, str(err)) from err


def describe_error(err: lark.UnexpectedInput) -> str:
    if isinstance(err, lark.UnexpectedEOF):
        return "unexpected end of input"
    if isinstance(err, lark.UnexpectedCharacters):
        return f"unexpected character {err.char!r} at column {err.column}"
    if isinstance(err, lark.UnexpectedToken):
        return f"unexpected {err.token!r} at column {err.column}"
    return "does not match the expected format"


def build_segment(tree: lark.Tree) -> tuple[list[Weekday], TimeRange]:
    st = SubtreeProcessor(tree, Rules.segment)
    days = build_day_spec(st.get_subtree(Rules.day_spec))
    time_range = build_timespan(st.get_subtree(Rules.timespan))
    return days, time_range


# Days


def build_day_spec(tree: lark.Tree) -> list[Weekday]:
    st = SubtreeProcessor(tree, Rules.day_spec)
    res = []
    for child in st.iter_subtree(Rules.day_range):
        res.extend(build_day_range(child))
    return res


def build_day_range(tree: lark.Tree) -> list[Weekday]:
    st = SubtreeProcessor(tree, Rules.day_range)
    wd_start = DAY_INDEX[st.get_token(Tokens.WDAY)]

    wd_end = wd_start
    tk_end = st.get_token_opt(Tokens.WDAY)
    if tk_end is not None:
        wd_end = DAY_INDEX[tk_end]

    return weekday_range(wd_start, wd_end)


# Times


def build_timespan(tree: lark.Tree) -> TimeRange:
    st = SubtreeProcessor(tree, Rules.timespan)
    open_time = build_time(st.get_subtree(Rules.time))
    close_time = build_time(st.get_subtree(Rules.time))
    return TimeRange(open_time, close_time)


def build_time(tree: lark.Tree) -> ClockTime:
    st = SubtreeProcessor(tree, Rules.time)
    hour = int(st.get_token(Tokens.HOUR))
    minute = map_opt(st.get_token_opt(Tokens.MINUTE), int)
    meridiem = Meridiem(st.get_token(Tokens.MERIDIEM))
    return ClockTime.from_12h(hour, minute if minute is not None else 0, meridiem)


# utils


class SubtreeProcessor:
    def __init__(self, tree: lark.Tree, expect: Optional[Rules] = None) -> None:
        if expect is not None and tree.data != expect:
            raise ScheduleError(f"Grammar error: expected {expect}; got {tree.data}")
        self.tree = tree
        self.offset = 0

    def get_subtree_opt(self, rule: Rules) -> Optional[lark.Tree]:
        i = self.offset
        while i < len(self.tree.children):
            child = self.tree.children[i]
            i += 1
            if isinstance(child, lark.Tree) and child.data == rule:
                self.offset = i
                return child
        return None

    def get_subtree(self, rule: Rules) -> lark.Tree:
        child = self.get_subtree_opt(rule)
        if child is None:
            raise ScheduleError(f"{self.tree.data} has no {rule}")
        return child

    def iter_subtree(self, rule: Rules) -> Iterator[lark.Tree]:
        i = self.offset
        while i < len(self.tree.children):
            child = self.tree.children[i]
            i += 1
            if isinstance(child, lark.Tree) and child.data == rule:
                self.offset = i
                yield child

    def get_token_opt(self, token: Tokens) -> Optional[str]:
        i = self.offset
        while i < len(self.tree.children):
            child = self.tree.children[i]
            i += 1
            if isinstance(child, lark.Token) and child.type == token:
                self.offset = i
                return child.value
        return None

    def get_token(self, token: Tokens) -> str:
        child = self.get_token_opt(token)
        if child is None:
            raise ScheduleError(f"{self.tree.data} has no {token}")
        return child

    def __repr__(self) -> str:
        return f"{self.tree.data} {self.tree.children}"
