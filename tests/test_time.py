from datetime import date, datetime, timedelta, timezone

import pytest

from geomag.exceptions import DateTimeErrorCode, InvalidDateTimeError
from geomag.utils.time import (
    datetime_from_fractional_years,
    fractional_years,
    parse_datetime,
    to_fractional_years,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2020-01-01", datetime(2020, 1, 1, tzinfo=timezone.utc)),
        ("2020-01-01T00:00:00Z", datetime(2020, 1, 1, tzinfo=timezone.utc)),
        ("2022-07-01T12:30", datetime(2022, 7, 1, 12, 30, tzinfo=timezone.utc)),
        ("2015-03-04T05:06:07.25Z", datetime(2015, 3, 4, 5, 6, 7, 250000, tzinfo=timezone.utc)),
        ("2015-03-04T05:06:07.123456", datetime(2015, 3, 4, 5, 6, 7, 123456, tzinfo=timezone.utc)),
        ("2020-01-01T09:00:00+09:00", datetime(2020, 1, 1, tzinfo=timezone.utc)),
        ("2019-12-31T19:00:00-05:00", datetime(2020, 1, 1, tzinfo=timezone.utc)),
        ("2024-02-29", datetime(2024, 2, 29, tzinfo=timezone.utc)),
    ],
)
def test_parse_datetime(text, expected):
    parsed = parse_datetime(text)
    assert parsed == expected
    assert parsed.utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    "text, code",
    [
        ("2020/01/01", DateTimeErrorCode.INVALID_ISO8601_FORMAT),
        ("yesterday", DateTimeErrorCode.INVALID_ISO8601_FORMAT),
        ("2020-01-01T", DateTimeErrorCode.INVALID_ISO8601_FORMAT),
        ("0000-01-01", DateTimeErrorCode.INVALID_YEAR),
        ("2020-13-01", DateTimeErrorCode.INVALID_MONTH),
        ("2020-00-10", DateTimeErrorCode.INVALID_MONTH),
        ("2021-02-29", DateTimeErrorCode.INVALID_DAY),
        ("2020-04-31", DateTimeErrorCode.INVALID_DAY),
        ("2020-01-01T24:00:00Z", DateTimeErrorCode.INVALID_HOUR),
        ("2020-01-01T12:60:00Z", DateTimeErrorCode.INVALID_MINUTE),
        ("2020-01-01T12:00:61Z", DateTimeErrorCode.INVALID_SECOND),
        ("2020-01-01T12:00:00.1234567Z", DateTimeErrorCode.INVALID_MICROSECOND),
    ],
)
def test_parse_datetime_rejects(text, code):
    with pytest.raises(InvalidDateTimeError) as excinfo:
        parse_datetime(text)
    assert excinfo.value.code is code
    assert excinfo.value.text == text


def test_invalid_datetime_is_value_error():
    with pytest.raises(ValueError):
        parse_datetime("not a date")


def test_fractional_years():
    assert fractional_years(datetime(2020, 1, 1, tzinfo=timezone.utc)) == 2020.0
    # 2020 is a leap year: 183 of 366 days elapsed on 2 July
    assert fractional_years(datetime(2020, 7, 2, tzinfo=timezone.utc)) == pytest.approx(2020.5)
    assert fractional_years(datetime(2022, 7, 1, tzinfo=timezone.utc)) == pytest.approx(2022 + 181 / 365)


def test_fractional_years_naive_is_utc():
    naive = datetime(2010, 6, 15, 12)
    aware = datetime(2010, 6, 15, 12, tzinfo=timezone.utc)
    assert fractional_years(naive) == fractional_years(aware)


def test_fractional_years_other_timezone():
    jst = timezone(timedelta(hours=9))
    assert fractional_years(datetime(2020, 1, 1, 9, tzinfo=jst)) == 2020.0


def test_datetime_from_fractional_years():
    dt = datetime_from_fractional_years(2020.5)
    assert dt == datetime(2020, 7, 2, tzinfo=timezone.utc)
    original = datetime(1987, 3, 14, 15, 9, 26, tzinfo=timezone.utc)
    back = datetime_from_fractional_years(fractional_years(original))
    assert abs((back - original).total_seconds()) < 1e-3


def test_to_fractional_years():
    assert to_fractional_years(2017.25) == 2017.25
    assert to_fractional_years(1990) == 1990.0
    assert to_fractional_years(date(2000, 1, 1)) == 2000.0
    assert to_fractional_years(datetime(2000, 1, 1)) == 2000.0
