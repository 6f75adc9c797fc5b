"""
Timestamp formatting for served book fields
"""

import math

# Largest absolute millisecond offset a timestamp may carry (100,000,000 days)
MAX_TIMESTAMP_MS = 8.64e15

MS_PER_DAY = 86_400_000


class InvalidDateError(ValueError):
    """Raised when a timestamp cannot be represented as a calendar date."""

    pass


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a proleptic Gregorian (year, month, day)."""
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def _format_year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "-" if year < 0 else "+"
    return f"{sign}{abs(year):06d}"


def format_timestamp(value: int | float) -> str:
    """
    Format an epoch-millisecond timestamp as an ISO-8601 UTC string.

    The output always has millisecond precision and a ``Z`` suffix, e.g.
    ``458295425`` -> ``"1970-01-06T07:18:15.425Z"``. Fractional milliseconds
    are truncated toward zero. Years 0000-9999 use four digits; other years
    use a sign and six digits (``+010000-01-01T00:00:00.000Z``).

    Raises:
        InvalidDateError: If the value is not finite or its magnitude
            exceeds 8.64e15 milliseconds
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidDateError(f"Timestamp is not a finite number: {value}")
    if abs(value) > MAX_TIMESTAMP_MS:
        raise InvalidDateError(f"Timestamp out of range: {value}")

    days, ms_of_day = divmod(int(value), MS_PER_DAY)
    year, month, day = civil_from_days(days)

    seconds, millis = divmod(ms_of_day, 1000)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)

    return (
        f"{_format_year(year)}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}.{millis:03d}Z"
    )
