"""RFC-822 date normalization for RSS pubDate/lastBuildDate values."""

import re
import warnings
from datetime import date, datetime, time, timezone, tzinfo
from email.utils import format_datetime
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser
from dateutil.parser import UnknownTimezoneWarning

from rssfeed.config import get_settings
from rssfeed.errors import InvalidDateError

DateInput = str | int | float | date | datetime

_NUMERIC = re.compile(r"^[+-]?\d+(\.\d+)?$")

# Zone names allowed by RFC 822, as UTC offsets in seconds
RFC822_ZONES = {
    "UT": 0,
    "GMT": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}


def _default_tz() -> tzinfo:
    return ZoneInfo(get_settings().default_timezone)


def _parse_string(text: str) -> datetime:
    with warnings.catch_warnings():
        warnings.simplefilter("error", UnknownTimezoneWarning)
        try:
            return date_parser.parse(text, tzinfos=RFC822_ZONES)
        except UnknownTimezoneWarning as e:
            raise ValueError(f"unknown timezone in {text!r}") from e


def to_datetime(value: DateInput, default_tz: tzinfo | None = None) -> datetime:
    """Convert a flexible date representation to an aware datetime.

    Accepts datetimes, dates, Unix timestamps and any string python-dateutil
    can parse. Numbers and strings made only of digits (optionally signed,
    with a fractional part) are always Unix timestamps, so a compact date
    such as ``"20240115"`` means 1970-08-23, not 2024-01-15. RFC-822 zone
    names (``UT``, ``GMT``, ``EST`` ... ``PDT``) are honoured; any other zone
    name is rejected rather than ignored. Naive values are interpreted in
    ``default_tz``, falling back to the configured default timezone.

    Raises:
        InvalidDateError: If the value cannot be turned into a timestamp
    """
    if isinstance(value, bool) or value is None:
        raise InvalidDateError(value, "unsupported type")

    try:
        if isinstance(value, datetime):
            dt = value
        elif isinstance(value, date):
            dt = datetime.combine(value, time.min)
        elif isinstance(value, (int, float)):
            dt = datetime.fromtimestamp(value, tz=timezone.utc)
        elif isinstance(value, str):
            text = value.strip()
            if not text:
                raise InvalidDateError(value, "empty string")
            if _NUMERIC.match(text):
                dt = datetime.fromtimestamp(float(text), tz=timezone.utc)
            else:
                dt = _parse_string(text)
        else:
            raise InvalidDateError(value, "unsupported type")
    except (ValueError, OverflowError, OSError) as e:
        if isinstance(e, InvalidDateError):
            raise
        raise InvalidDateError(value, str(e)) from e

    if dt.tzinfo is None or dt.utcoffset() is None:
        dt = dt.replace(tzinfo=default_tz or _default_tz())
    return dt


def normalize_date(value: DateInput, default_tz: tzinfo | None = None) -> str:
    """Render a date as an RFC-822 string in GMT.

    Example output: ``"Mon, 15 Jan 2024 10:30:00 GMT"``. Normalizing an
    already normalized string returns it unchanged.
    """
    dt = to_datetime(value, default_tz)
    try:
        return format_datetime(dt.astimezone(timezone.utc), usegmt=True)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(value, str(e)) from e
