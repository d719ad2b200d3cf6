"""Parsing of human-readable token lifetimes such as ``"7d"`` or ``"12h"``."""

import re
from datetime import timedelta

_SECOND = 1.0
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_YEAR = 365.25 * _DAY

_UNIT_SECONDS: dict[str, float] = {
    "ms": 0.001,
    "msec": 0.001,
    "msecs": 0.001,
    "millisecond": 0.001,
    "milliseconds": 0.001,
    "s": _SECOND,
    "sec": _SECOND,
    "secs": _SECOND,
    "second": _SECOND,
    "seconds": _SECOND,
    "m": _MINUTE,
    "min": _MINUTE,
    "mins": _MINUTE,
    "minute": _MINUTE,
    "minutes": _MINUTE,
    "h": _HOUR,
    "hr": _HOUR,
    "hrs": _HOUR,
    "hour": _HOUR,
    "hours": _HOUR,
    "d": _DAY,
    "day": _DAY,
    "days": _DAY,
    "w": _WEEK,
    "week": _WEEK,
    "weeks": _WEEK,
    "y": _YEAR,
    "yr": _YEAR,
    "yrs": _YEAR,
    "year": _YEAR,
    "years": _YEAR,
}

_DURATION_PATTERN = re.compile(r"^(?P<amount>\d+(?:\.\d+)?)\s*(?P<unit>[a-z]*)$")


def parse_duration(value: str | int) -> timedelta:
    """Parse a token lifetime into a ``timedelta``.

    Parameters
    ----------
    value
        Either a number of seconds (``3600`` or ``"3600"``) or a number
        followed by a unit (``"90m"``, ``"7 days"``, ``"1y"``).

    Returns
    -------
    The lifetime as a positive ``timedelta``

    Raises
    ------
    ValueError
        If the value is empty, unparseable, or not positive
    """
    if isinstance(value, bool):
        msg = f"Invalid duration: {value!r}"
        raise ValueError(msg)

    if isinstance(value, int):
        seconds = float(value)
    else:
        match = _DURATION_PATTERN.match(str(value).strip().lower())
        if match is None:
            msg = f"Invalid duration: {value!r}"
            raise ValueError(msg)

        unit = match.group("unit") or "s"
        if unit not in _UNIT_SECONDS:
            msg = f"Unknown duration unit {unit!r} in {value!r}"
            raise ValueError(msg)
        seconds = float(match.group("amount")) * _UNIT_SECONDS[unit]

    if seconds <= 0:
        msg = f"Duration must be positive: {value!r}"
        raise ValueError(msg)

    return timedelta(seconds=seconds)
