"""Overdue and upcoming task classification."""

from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional

from ..models.task import Task, coerce_duration


def get_due_datetime(task: Task) -> Optional[datetime]:
    """Due moment of a task; midnight of the due date when untimed."""
    if task.due_date is None:
        return None
    if not task.due_time:
        return datetime.combine(task.due_date, time.min)
    hours, minutes = task.due_time.split(':')
    return datetime.combine(task.due_date, time(int(hours), int(minutes)))


def is_overdue(task: Task, now: datetime) -> bool:
    """Check whether an open task has run past its due moment.

    Untimed tasks are overdue once their day is over. Timed tasks with a
    usable duration are overdue once that duration has elapsed.
    """
    if task.is_completed or task.due_date is None:
        return False

    if not task.due_time:
        day_end = datetime.combine(task.due_date, time(23, 59, 59))
        return now > day_end

    start = get_due_datetime(task)
    duration = coerce_duration(task.estimated_duration, default=0)
    if duration <= 0:
        return now > start

    return now > start + timedelta(minutes=duration)


def get_overdue_tasks(tasks: Iterable[Task], now: datetime) -> List[Task]:
    return [task for task in tasks if is_overdue(task, now)]


def get_upcoming_tasks(tasks: Iterable[Task], now: datetime, window_hours: int = 24) -> List[Task]:
    """Open tasks due between now and the end of the window."""
    horizon = now + timedelta(hours=window_hours)
    upcoming = []

    for task in tasks:
        if task.is_completed or task.due_date is None:
            continue
        due = get_due_datetime(task)
        if now <= due <= horizon:
            upcoming.append(task)

    return upcoming
