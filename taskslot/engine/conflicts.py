"""Time-overlap conflict detection."""

import logging
from datetime import date
from typing import Iterable, List, Tuple

from ..models.task import DEFAULT_DURATION_MINUTES, Task
from ..utils.time_utils import time_to_minutes

logger = logging.getLogger(__name__)


def intervals_overlap(first: Tuple[int, int], second: Tuple[int, int]) -> bool:
    """Half-open overlap test: [a0, a1) and [b0, b1) overlap iff a0 < b1 and b0 < a1."""
    return first[0] < second[1] and second[0] < first[1]


def task_interval(task: Task, default_duration: int = DEFAULT_DURATION_MINUTES) -> Tuple[int, int]:
    """Minute interval a timed task occupies on its due date."""
    start = time_to_minutes(task.due_time)
    return start, start + task.get_duration(default_duration)


def check_conflicts(
    task: Task,
    proposed_date: date,
    proposed_time: str,
    tasks: Iterable[Task],
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> List[Task]:
    """Return every open task on the date whose interval overlaps the proposal."""
    proposed_start = time_to_minutes(proposed_time)
    proposed = (proposed_start, proposed_start + task.get_duration(default_duration))

    conflicts = [
        other for other in tasks
        if other.blocks(task, proposed_date)
        and intervals_overlap(proposed, task_interval(other, default_duration))
    ]

    if conflicts:
        logger.debug(
            "Task %s at %s %s conflicts with %s",
            task.task_id, proposed_date, proposed_time,
            [other.task_id for other in conflicts],
        )

    return conflicts
