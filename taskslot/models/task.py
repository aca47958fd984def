"""Task data models."""

import math
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from ..utils.time_utils import format_date, parse_date, parse_time

DEFAULT_DURATION_MINUTES = 60


class Priority(Enum):
    """Task priority levels."""

    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'
    UNKNOWN = 'unknown'

    @classmethod
    def parse(cls, value: Any) -> 'Priority':
        """Map an exact priority string to a level, UNKNOWN otherwise."""
        if isinstance(value, Priority):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.UNKNOWN


def coerce_duration(value: Any, default: int = DEFAULT_DURATION_MINUTES) -> int:
    """Return a positive minute count, or the default when missing or invalid."""
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default
    if isinstance(value, (int, float)) and math.isfinite(value) and value > 0:
        return int(value)
    return default


@dataclass(frozen=True)
class AssignedSlot:
    """A suggestion the user has already accepted."""

    date: date
    time: str

    def to_dict(self) -> Dict[str, str]:
        return {'date': format_date(self.date), 'time': self.time}


@dataclass(frozen=True)
class Task:
    """A task record as read from the application's task store."""

    task_id: str
    title: str = ''
    due_date: Optional[date] = None
    due_time: Optional[str] = None
    estimated_duration: Any = None
    priority: Priority = Priority.UNKNOWN
    is_completed: bool = False
    assigned_slot: Optional[AssignedSlot] = None
    tags: List[str] = field(default_factory=list)

    def get_duration(self, default: int = DEFAULT_DURATION_MINUTES) -> int:
        """Estimated duration in minutes, falling back to the default."""
        return coerce_duration(self.estimated_duration, default)

    @property
    def is_timed(self) -> bool:
        return self.due_date is not None and bool(self.due_time)

    def blocks(self, task: 'Task', day: date) -> bool:
        """Whether this is an open, timed commitment on the day other than task."""
        return (
            self.is_timed
            and self.due_date == day
            and not self.is_completed
            and self.task_id != task.task_id
        )

    def with_slot(self, day: date, time_str: str) -> 'Task':
        """Return a copy moved to the given slot and marked as assigned."""
        return replace(
            self,
            due_date=day,
            due_time=time_str,
            assigned_slot=AssignedSlot(date=day, time=time_str),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        """Build a task from a camelCase or snake_case record.

        Only the id is required; everything else falls back to defaults.
        """
        task_id = data.get('id', data.get('task_id'))
        if task_id is None or task_id == '':
            raise ValueError(f"Task record has no id: {data!r}")

        slot_data = data.get('assignedSlot', data.get('assigned_slot'))
        assigned_slot = None
        if slot_data and slot_data.get('date') and parse_time(slot_data.get('time')):
            assigned_slot = AssignedSlot(
                date=parse_date(slot_data['date']),
                time=parse_time(slot_data['time']),
            )

        tags = data.get('tags')

        return cls(
            task_id=str(task_id),
            title=data.get('title') or '',
            due_date=parse_date(data.get('dueDate', data.get('due_date'))),
            due_time=parse_time(data.get('dueTime', data.get('due_time'))),
            estimated_duration=data.get('estimatedDuration', data.get('estimated_duration')),
            priority=Priority.parse(data.get('priority')),
            is_completed=bool(data.get('isCompleted', data.get('is_completed', False))),
            assigned_slot=assigned_slot,
            tags=list(tags) if isinstance(tags, (list, tuple)) else [],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase record for the task store."""
        return {
            'id': self.task_id,
            'title': self.title,
            'dueDate': format_date(self.due_date) if self.due_date else None,
            'dueTime': self.due_time,
            'estimatedDuration': self.estimated_duration,
            'priority': self.priority.value,
            'isCompleted': self.is_completed,
            'assignedSlot': self.assigned_slot.to_dict() if self.assigned_slot else None,
            'tags': list(self.tags),
        }
