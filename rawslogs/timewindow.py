"""
Turn human durations ("1 hour ago", "90m", "2 days") into an absolute window
of epoch seconds measured back from now.
"""
import re
import time
import datetime
from typing import Optional

from .config import ONE_HOUR_IN_SECONDS, log
from .models import TimeWindow

_SECOND = 1000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR

UNIT_MS = {
    "ms": 1, "msec": 1, "msecs": 1, "millisecond": 1, "milliseconds": 1,
    "s": _SECOND, "sec": _SECOND, "secs": _SECOND, "second": _SECOND, "seconds": _SECOND,
    "m": _MINUTE, "min": _MINUTE, "mins": _MINUTE, "minute": _MINUTE, "minutes": _MINUTE,
    "h": _HOUR, "hr": _HOUR, "hrs": _HOUR, "hour": _HOUR, "hours": _HOUR,
    "d": _DAY, "day": _DAY, "days": _DAY,
    "w": 7 * _DAY, "week": 7 * _DAY, "weeks": 7 * _DAY,
    "y": 365.25 * _DAY, "yr": 365.25 * _DAY, "yrs": 365.25 * _DAY,
    "year": 365.25 * _DAY, "years": 365.25 * _DAY,
}

DURATION_PATTERN = re.compile(
    r"^\s*(?P<value>[-+]?(?:\d+(?:\.\d*)?|\.\d+))\s*(?P<unit>[a-z]+)?(?:\s+ago)?\s*$",
    re.IGNORECASE,
)


def parse_duration(text: str) -> int:
    """
    Parse a duration and return it in whole seconds. A bare number is taken as
    milliseconds. Raises ValueError if the text is not a duration.
    """
    match = DURATION_PATTERN.match(text or "")
    if not match:
        raise ValueError(f"not a duration: {text!r}")
    unit = (match.group("unit") or "ms").lower()
    if unit not in UNIT_MS:
        raise ValueError(f"unknown unit {unit!r} in {text!r}")
    try:
        millis = int(float(match.group("value")) * UNIT_MS[unit])
    except OverflowError:
        raise ValueError(f"duration out of range: {text!r}") from None
    return millis // 1000


def _resolve(expr: Optional[str], default: int) -> int:
    if not expr:
        return default
    try:
        return parse_duration(expr)
    except (ValueError, OverflowError):
        return default


def _gmt(ts: int) -> str:
    try:
        return datetime.datetime.fromtimestamp(ts, tz=datetime.timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, OverflowError, OSError):
        # outside what datetime can represent
        return str(ts)


def resolve_window(start: Optional[str] = None, end: Optional[str] = None, now: Optional[int] = None) -> TimeWindow:
    """
    start defaults to one hour ago and end to now. Expressions that don't parse
    fall back to those defaults without complaint.
    """
    if now is None:
        now = int(time.time())
    window = TimeWindow(
        start=now - _resolve(start, ONE_HOUR_IN_SECONDS),
        end=now - _resolve(end, 0),
        now=now,
    )
    log.info(
        f"Listing events between {_gmt(window.start)} GMT and {_gmt(window.end)} GMT "
        f"and now is {_gmt(now)} GMT"
    )
    return window
