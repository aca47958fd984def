"""Availability window resolution."""

import logging
from datetime import date, datetime

from ..models.slot import AvailabilityHours, AvailabilityWindow
from ..utils.time_utils import is_today, minutes_of_day, round_up_to_step, time_to_minutes

logger = logging.getLogger(__name__)


def resolve_window(
    day: date,
    hours: AvailabilityHours,
    now: datetime,
    step_minutes: int = 30,
) -> AvailabilityWindow:
    """Resolve the minute range to search on a day.

    On the current day the search start moves past the current time,
    rounded up to the next step boundary, so no slot lands in the past.
    """
    window_start = time_to_minutes(hours.start)
    window_end = time_to_minutes(hours.end)
    search_start = window_start

    if is_today(day, now):
        now_minutes = minutes_of_day(now)
        if now_minutes > window_start:
            search_start = round_up_to_step(now_minutes, step_minutes)

    logger.debug(
        "Window for %s: %d-%d, searching from %d",
        day, window_start, window_end, search_start,
    )

    return AvailabilityWindow(
        window_start=window_start,
        window_end=window_end,
        search_start=search_start,
    )
