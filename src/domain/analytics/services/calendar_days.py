"""Calendar day helpers for day-grouped analytics."""

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple

from ..exceptions import InvalidDateFormatError

DEFAULT_DAY_FORMAT = "%d.%m.%Y"
SUNDAY = 6


def format_day(
    timestamp: datetime, day_format: str = DEFAULT_DAY_FORMAT, tz: Optional[tzinfo] = None
) -> str:
    """Format the local calendar day of a timestamp.

    Aware timestamps are converted to `tz` first (the system zone when `tz` is
    None); naive timestamps are taken to be local already.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(tz)

    return timestamp.strftime(day_format)


def parse_day(value: str, day_format: str = DEFAULT_DAY_FORMAT) -> date:
    """Parse a formatted day back into a calendar date."""
    try:
        return datetime.strptime(value, day_format).date()
    except (TypeError, ValueError):
        raise InvalidDateFormatError(
            f"Invalid day {value!r}, expected format {day_format!r}",
            context={"value": value, "format": day_format},
        )


def compare_days(first: str, second: str, day_format: str = DEFAULT_DAY_FORMAT) -> int:
    """Compare two formatted days chronologically, returning -1, 0 or 1."""
    first_day = parse_day(first, day_format)
    second_day = parse_day(second, day_format)

    return (first_day > second_day) - (first_day < second_day)


def _local_midnight(day: date, tz: Optional[tzinfo]) -> datetime:
    midnight = datetime(day.year, day.month, day.day)
    if tz is not None:
        return midnight.replace(tzinfo=tz)

    return midnight.astimezone()


def day_to_iso(
    value: str, day_format: str = DEFAULT_DAY_FORMAT, tz: Optional[tzinfo] = None
) -> str:
    """Convert a formatted day to the ISO-8601 UTC instant of its local midnight."""
    midnight = _local_midnight(parse_day(value, day_format), tz)
    utc_instant = midnight.astimezone(timezone.utc)

    return utc_instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def iso_to_day(
    value: str, day_format: str = DEFAULT_DAY_FORMAT, tz: Optional[tzinfo] = None
) -> str:
    """Convert an ISO-8601 instant to its formatted local calendar day."""
    try:
        instant = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        raise InvalidDateFormatError(
            f"Invalid ISO-8601 instant {value!r}", context={"value": value}
        )

    return format_day(instant, day_format, tz)


def start_of_week(day: date, week_starts_on: int = SUNDAY) -> date:
    """First day of the calendar week containing `day`.

    `week_starts_on` uses `date.weekday()` numbering (Monday is 0).
    """
    offset = (day.weekday() - week_starts_on) % 7
    return day - timedelta(days=offset)


def month_bounds(moment: datetime) -> Tuple[datetime, datetime]:
    """First and last millisecond of the calendar month containing `moment`."""
    start = moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)

    return start, next_month - timedelta(milliseconds=1)
