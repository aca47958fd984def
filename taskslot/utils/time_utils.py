"""Date and time utilities."""

import re
from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def time_to_minutes(time_str: str) -> int:
    """Convert an HH:MM string to minutes since midnight.

    The input is not validated; callers pass well-formed times.
    """
    hours, minutes = time_str.split(':')
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """Convert minutes since midnight to a zero-padded HH:MM string."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def parse_time(value: Any) -> Optional[str]:
    """Normalize an H:MM or HH:MM time of day to HH:MM; anything else is None."""
    if not isinstance(value, str):
        return None
    match = TIME_PATTERN.match(value.strip())
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def format_time12(time_str: str) -> str:
    """Format an HH:MM string as '2:30 PM', or '2 PM' on the hour."""
    if not time_str:
        return ''

    hours, minutes = divmod(time_to_minutes(time_str), 60)
    period = 'PM' if hours >= 12 else 'AM'
    hour12 = hours % 12 or 12

    if minutes == 0:
        return f"{hour12} {period}"
    return f"{hour12}:{minutes:02d} {period}"


def round_up_to_step(minutes: int, step: int = 30) -> int:
    """Round minutes up to the next multiple of step."""
    return -(-minutes // step) * step


def minutes_of_day(moment: datetime) -> int:
    """Minutes elapsed since midnight for a datetime."""
    return moment.hour * 60 + moment.minute


def format_date(day: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return day.strftime('%Y-%m-%d')


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Parse a YYYY-MM-DD string; dates pass through, blanks become None."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, '%Y-%m-%d').date()


def is_today(day: date, now: datetime) -> bool:
    """Check if a date is the same calendar day as now."""
    return day == now.date()


def is_tomorrow(day: date, now: datetime) -> bool:
    """Check if a date is the calendar day after now."""
    return day == now.date() + timedelta(days=1)


def format_slot_description(day: date, time_str: str, now: datetime) -> str:
    """Describe a slot relative to now, e.g. 'tomorrow at 1 PM'."""
    if not day or not time_str:
        return ''

    if is_today(day, now):
        context = 'today'
    elif is_tomorrow(day, now):
        context = 'tomorrow'
    else:
        context = f"{day.strftime('%A, %b')} {day.day}"

    return f"{context} at {format_time12(time_str)}"


def format_duration(minutes: int) -> str:
    """Format a minute count as '1h 30m'."""
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"
