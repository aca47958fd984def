"""Free slot enumeration for a single day."""

import logging
from datetime import date, datetime
from functools import reduce
from typing import Iterable, List, NamedTuple, Tuple

from ..models.slot import AvailabilityHours, Slot
from ..models.task import DEFAULT_DURATION_MINUTES, Task
from ..utils.time_utils import minutes_to_time, round_up_to_step, time_to_minutes
from .availability import resolve_window

logger = logging.getLogger(__name__)


class _Cursor(NamedTuple):
    """Accumulator carried across obstacles while walking a day."""

    position: int
    slots: Tuple[Slot, ...]


def find_obstacles(tasks: Iterable[Task], task: Task, day: date) -> List[Task]:
    """Timed, open tasks on the day other than the task itself, earliest first."""
    obstacles = [other for other in tasks if other.blocks(task, day)]
    return sorted(obstacles, key=lambda other: time_to_minutes(other.due_time))


def _fill_gap(
    day: date,
    gap_start: int,
    gap_end: int,
    task_duration: int,
    step_minutes: int,
) -> List[Slot]:
    """Every step-aligned start in [gap_start, gap_end) that fits the task."""
    slots = []
    start = round_up_to_step(gap_start, step_minutes)

    while start + task_duration <= gap_end:
        slots.append(Slot(
            date=day,
            start_time=minutes_to_time(start),
            end_time=minutes_to_time(start + task_duration),
            duration=gap_end - start,
        ))
        start += step_minutes

    return slots


def find_available_slots(
    task: Task,
    day: date,
    tasks: Iterable[Task],
    hours: AvailabilityHours,
    now: datetime,
    step_minutes: int = 30,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> List[Slot]:
    """Find free slots for a task on one day.

    Gaps are the stretches between the search start, each obstacle and
    the window end. A slot's ``duration`` is the room left before the
    next obstacle, which may exceed what the task needs.
    """
    task_duration = task.get_duration(default_duration)
    window = resolve_window(day, hours, now, step_minutes)
    obstacles = find_obstacles(tasks, task, day)

    # (gap end, minutes the obstacle occupies); the window end closes the day
    boundaries = [
        (time_to_minutes(other.due_time), other.get_duration(default_duration))
        for other in obstacles
    ]
    boundaries.append((window.window_end, 0))

    def advance(cursor: _Cursor, boundary: Tuple[int, int]) -> _Cursor:
        obstacle_start, occupied = boundary
        gap_end = min(obstacle_start, window.window_end)
        slots = _fill_gap(day, cursor.position, gap_end, task_duration, step_minutes)
        return _Cursor(
            position=max(cursor.position, obstacle_start + occupied),
            slots=cursor.slots + tuple(slots),
        )

    initial = _Cursor(position=max(window.window_start, window.search_start), slots=())
    result = reduce(advance, boundaries, initial)

    logger.debug(
        "Task %s on %s: %d obstacles, %d slots",
        task.task_id, day, len(obstacles), len(result.slots),
    )

    return list(result.slots)
