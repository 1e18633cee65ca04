import datetime

import pytest

from restaurant_hours.catalog import parse_catalog
from restaurant_hours.model.day import Weekday
from restaurant_hours.query import (
    DateTimeQuery,
    DayTimeQuery,
    find_open_restaurants,
    parse_24h_time,
    resolve_query,
)
from restaurant_hours.util import InvalidQuery

from tests import SUDACHI_HOURS, hm


@pytest.mark.parametrize(
    "query,expected",
    [
        (DayTimeQuery("Sat", "17:30"), (Weekday.Sat, hm("17:30"))),
        (DayTimeQuery("sat", "00:05"), (Weekday.Sat, hm("00:05"))),
        (DayTimeQuery("MON", "23:59"), (Weekday.Mon, hm("23:59"))),
        (DayTimeQuery(Weekday.Sat, "17:30"), (Weekday.Sat, hm("17:30"))),
        (DateTimeQuery(datetime.datetime(2020, 5, 25, 12, 0)), (Weekday.Mon, hm("12:00"))),
        (DateTimeQuery(datetime.datetime(2020, 5, 24, 9, 15)), (Weekday.Sun, hm("09:15"))),
        (DateTimeQuery(datetime.datetime(2020, 5, 23, 1, 35, 59)), (Weekday.Sat, hm("01:35"))),
    ],
)
def test_resolve_query(query, expected):
    assert resolve_query(query) == expected


@pytest.mark.parametrize(
    "query",
    [
        pytest.param(DayTimeQuery("Saturday", "17:30"), id="long_day_name"),
        pytest.param(DayTimeQuery("", "17:30"), id="no_day"),
        pytest.param(DayTimeQuery("Sat", "5:30 pm"), id="12h_time"),
        pytest.param(DayTimeQuery("Sat", "24:00"), id="hour_out_of_range"),
        pytest.param(DayTimeQuery("Sat", "17:60"), id="minute_out_of_range"),
        pytest.param(DayTimeQuery("Sat", ""), id="no_time"),
        pytest.param(DayTimeQuery(None, "17:30"), id="day_is_none"),  # type: ignore[arg-type]
        pytest.param(DayTimeQuery(5, "17:30"), id="day_is_int"),  # type: ignore[arg-type]
        pytest.param(DayTimeQuery("Sat", None), id="time_is_none"),  # type: ignore[arg-type]
        pytest.param(DayTimeQuery("Sat", 1730), id="time_is_int"),  # type: ignore[arg-type]
        pytest.param(DateTimeQuery(datetime.date(2020, 5, 23)), id="date_without_time"),  # type: ignore[arg-type]
        pytest.param("Sat 17:30", id="plain_string"),
    ],
)
def test_resolve_query_fail(query):
    with pytest.raises(InvalidQuery):
        resolve_query(query)


def test_invalid_query_is_value_error():
    with pytest.raises(ValueError):
        parse_24h_time("noon")


def test_parse_date():
    query = DateTimeQuery.parse(" 2020-05-23T01:35:00 ")
    assert query.moment == datetime.datetime(2020, 5, 23, 1, 35)
    assert DateTimeQuery.parse("2020-05-23").moment == datetime.datetime(2020, 5, 23)


@pytest.mark.parametrize(
    "value", ["", "yesterday", "2020-13-01T10:00:00", "23/05/2020", None, 20200523]
)
def test_parse_date_fail(value):
    with pytest.raises(InvalidQuery):
        DateTimeQuery.parse(value)


def test_find_open_restaurants():
    catalog = parse_catalog(
        [
            ("Kushi Tsuru", "Mon-Sun 11:30 am - 9 pm"),
            ("Sudachi", SUDACHI_HOURS),
        ]
    )

    assert find_open_restaurants(catalog, DayTimeQuery("Sat", "17:30")) == [
        "Kushi Tsuru",
        "Sudachi",
    ]
    # 2020-05-23 is a Saturday; 01:15 still belongs to Friday night
    assert find_open_restaurants(catalog, DateTimeQuery.parse("2020-05-23T01:15:00")) == [
        "Sudachi"
    ]
    assert find_open_restaurants(catalog, DateTimeQuery.parse("2020-05-23T01:35:00")) == []
