import re
from datetime import date, datetime, timedelta, timezone
from typing import Union

from geomag.exceptions import DateTimeErrorCode, InvalidDateTimeError

_ISO8601 = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?"
    r"(?P<tz>Z|[+-]\d{2}:?\d{2})?)?$"
)

EpochLike = Union[datetime, date, float, int]


def parse_datetime(text: str) -> datetime:
    """
    Parse an ISO-8601 date or date-time string.

    Args:
        text: e.g. '2020-01-01', '2020-01-01T12:30:00Z' or
            '2020-01-01T12:30:00.250+09:00'

    Returns:
        Timezone-aware datetime in UTC
    """
    match = _ISO8601.match(text.strip())
    if match is None:
        raise InvalidDateTimeError(DateTimeErrorCode.INVALID_ISO8601_FORMAT, text)

    year = int(match.group("year"))
    month = int(match.group("month"))
    day = int(match.group("day"))
    hour = int(match.group("hour") or 0)
    minute = int(match.group("minute") or 0)
    second = int(match.group("second") or 0)
    fraction = match.group("fraction") or ""

    if year < 1:
        raise InvalidDateTimeError(DateTimeErrorCode.INVALID_YEAR, text)
    if not 1 <= month <= 12:
        raise InvalidDateTimeError(DateTimeErrorCode.INVALID_MONTH, text)
    if not 1 <= day <= _days_in_month(year, month):
        raise InvalidDateTimeError(DateTimeErrorCode.INVALID_DAY, text)
    if hour > 23:
        raise InvalidDateTimeError(DateTimeErrorCode.INVALID_HOUR, text)
    if minute > 59:
        raise InvalidDateTimeError(DateTimeErrorCode.INVALID_MINUTE, text)
    if second > 59:
        raise InvalidDateTimeError(DateTimeErrorCode.INVALID_SECOND, text)
    if len(fraction) > 6:
        raise InvalidDateTimeError(DateTimeErrorCode.INVALID_MICROSECOND, text)
    microsecond = int(fraction.ljust(6, "0")) if fraction else 0

    tzinfo = timezone.utc
    tz = match.group("tz")
    if tz and tz != "Z":
        sign = -1 if tz[0] == "-" else 1
        digits = tz[1:].replace(":", "")
        tz_hours, tz_minutes = int(digits[:2]), int(digits[2:])
        if tz_hours > 23:
            raise InvalidDateTimeError(DateTimeErrorCode.INVALID_HOUR, text)
        if tz_minutes > 59:
            raise InvalidDateTimeError(DateTimeErrorCode.INVALID_MINUTE, text)
        tzinfo = timezone(sign * timedelta(hours=tz_hours, minutes=tz_minutes))

    parsed = datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tzinfo)
    return parsed.astimezone(timezone.utc)


def fractional_years(dt: datetime) -> float:
    """Convert a datetime to a fractional year, e.g. 2020-07-02T12:00Z -> 2020.5."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    start = datetime(dt.year, 1, 1, tzinfo=timezone.utc)
    end = datetime(dt.year + 1, 1, 1, tzinfo=timezone.utc)
    return dt.year + (dt - start).total_seconds() / (end - start).total_seconds()


def datetime_from_fractional_years(value: float) -> datetime:
    """Inverse of fractional_years."""
    year = int(value // 1)
    start = datetime(year, 1, 1, tzinfo=timezone.utc)
    end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    return start + (end - start) * (value - year)


def to_fractional_years(value: EpochLike) -> float:
    """Accept a datetime, a date or a fractional year and return a fractional year."""
    if isinstance(value, datetime):
        return fractional_years(value)
    if isinstance(value, date):
        return fractional_years(datetime(value.year, value.month, value.day))
    return float(value)


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    return (date(year, month + 1, 1) - date(year, month, 1)).days
