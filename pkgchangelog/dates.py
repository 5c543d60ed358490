import re
from datetime import datetime
from email.utils import format_datetime
from typing import Optional

from pkgchangelog.errors import DateFormatError

__all__ = [
    "DATE_FORMAT",
    "parse_date",
    "format_debian_date",
    "format_rpm_date",
]

DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

# strptime alone accepts unpadded fields and "+HH:MM" zones
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}", re.ASCII)

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def parse_date(text: str, location: Optional[str] = None) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS ±ZZZZ`` into an aware datetime.

    The result is converted to the local time zone of the process, so the
    offset written in the source is not preserved.

    :param text: Date text
    :param location: Position of the value in the document, used in errors
    :raises DateFormatError: If text does not match the format
    """
    if not isinstance(text, str) or not _DATE_PATTERN.fullmatch(text):
        raise DateFormatError(text, location)
    try:
        # instants near year 1 or 9999 do not fit a datetime once shifted
        return datetime.strptime(text, DATE_FORMAT).astimezone()
    except (ValueError, OverflowError, OSError) as error:
        raise DateFormatError(text, location) from error


def format_debian_date(date: datetime) -> str:
    """RFC 1123 with numeric zone, e.g. ``Fri, 05 Jan 2024 10:00:00 +0000``"""
    return format_datetime(date)


def format_rpm_date(date: datetime) -> str:
    """e.g. ``Fri Jan 5 2024``, independent of the current locale"""
    return "%s %s %d %04d" % (
        _WEEKDAYS[date.weekday()],
        _MONTHS[date.month - 1],
        date.day,
        date.year,
    )
