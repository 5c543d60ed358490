from datetime import datetime, timedelta, timezone

import pytest

from pkgchangelog.dates import format_debian_date, format_rpm_date, parse_date
from pkgchangelog.errors import DateFormatError, ParseError

from .conftest import set_timezone


def test_parse_date():
    date = parse_date("2024-01-05 10:00:00 +0000")

    assert date == datetime(2024, 1, 5, 10, 0, 0, tzinfo=timezone.utc)
    assert date.utcoffset() == timedelta(0)


def test_parse_date_converts_to_local_zone(monkeypatch):
    set_timezone(monkeypatch, "JST-9")

    date = parse_date("2024-01-05 10:00:00 +0200")

    assert date.utcoffset() == timedelta(hours=9)
    assert (date.hour, date.minute) == (17, 0)
    assert date == datetime(2024, 1, 5, 8, 0, 0, tzinfo=timezone.utc)


def test_parse_date_negative_offset():
    date = parse_date("2023-12-31 23:30:00 -0130")

    assert date == datetime(2024, 1, 1, 1, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "text",
    [
        "2024/01/05",
        "2024/01/05 10:00:00 +0000",
        "2024-01-05",
        "2024-01-05 10:00:00",
        "2024-1-05 10:00:00 +0000",
        "2024-01-05T10:00:00 +0000",
        "2024-01-05 10:00:00 +00:00",
        "2024-01-05 10:00:00 UTC",
        "2024-01-05  10:00:00 +0000",
        "2024-13-05 10:00:00 +0000",
        "2024-02-30 10:00:00 +0000",
        " 2024-01-05 10:00:00 +0000",
        "\u0662\u0660\u0662\u0664-01-05 10:00:00 +0000",
        "9999-12-31 23:59:59 -2359",
        "0001-01-01 00:00:00 +0100",
        "",
    ],
)
def test_parse_date_invalid(text):
    with pytest.raises(DateFormatError) as error:
        parse_date(text)
    assert error.value.value == text


def test_parse_date_not_text():
    with pytest.raises(DateFormatError):
        parse_date(20240105)


def test_parse_date_error_location():
    with pytest.raises(ParseError) as error:
        parse_date("2024/01/05", "changelog[2].date")
    assert isinstance(error.value, ValueError)
    assert error.value.location == "changelog[2].date"
    assert str(error.value).startswith("changelog[2].date: invalid date '2024/01/05'")


def test_format_debian_date():
    date = parse_date("2024-01-05 10:00:00 +0000")

    assert format_debian_date(date) == "Fri, 05 Jan 2024 10:00:00 +0000"


def test_format_debian_date_local_zone(monkeypatch):
    set_timezone(monkeypatch, "JST-9")
    date = parse_date("2024-01-05 20:00:00 +0000")

    assert format_debian_date(date) == "Sat, 06 Jan 2024 05:00:00 +0900"


def test_format_rpm_date():
    assert format_rpm_date(parse_date("2024-01-05 10:00:00 +0000")) == "Fri Jan 5 2024"
    assert format_rpm_date(parse_date("2024-01-15 10:00:00 +0000")) == "Mon Jan 15 2024"
    assert format_rpm_date(parse_date("2023-12-31 23:59:59 +0000")) == "Sun Dec 31 2023"


def test_parse_date_upper_limit():
    assert parse_date("9999-12-31 23:59:59 +0000") == datetime(
        9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc
    )


def test_parse_date_out_of_range_chains_cause():
    with pytest.raises(DateFormatError) as error:
        parse_date("9999-12-31 23:59:59 -2359", "changelog[0].date")
    assert isinstance(error.value.__cause__, OverflowError)
    assert error.value.location == "changelog[0].date"
