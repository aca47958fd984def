"""Schedule review models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from ..utils.time_utils import format_duration, format_slot_description
from .slot import AvailabilityHours, Suggestion
from .task import Task


@dataclass
class ReviewItem:
    """A task the advisor recommends moving, with its candidate slots."""

    kind: str
    task: Task
    reason: str
    suggestions: List[Suggestion] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.kind,
            'task': self.task.to_dict(),
            'reason': self.reason,
            'suggestions': [s.to_dict() for s in self.suggestions],
        }


@dataclass
class ScheduleReview:
    """Complete result of one review pass."""

    run_id: str
    timestamp: datetime
    availability: AvailabilityHours
    items: List[ReviewItem]
    overdue_count: int = 0
    upcoming_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert review to dictionary for JSON export."""
        return {
            'runId': self.run_id,
            'timestamp': self.timestamp.isoformat(),
            'availability': {'start': self.availability.start, 'end': self.availability.end},
            'overdueCount': self.overdue_count,
            'upcomingCount': self.upcoming_count,
            'items': [item.to_dict() for item in self.items],
        }

    def to_human_readable(self) -> str:
        """Generate human-readable review."""
        lines = [
            f"=== Schedule Review: {self.run_id} ===",
            f"Timestamp: {self.timestamp}",
            f"Availability: {self.availability.start}-{self.availability.end}",
            f"Overdue tasks: {self.overdue_count}",
            f"Upcoming tasks: {self.upcoming_count}",
            "",
            "Suggestions:",
        ]

        if not self.items:
            lines.append("  (none)")

        for item in self.items:
            lines.append(f"  [{item.kind}] {item.task.title or item.task.task_id} ({item.task.priority.value} priority)")
            lines.append(f"    Reason: {item.reason}")
            for suggestion in item.suggestions:
                description = format_slot_description(suggestion.date, suggestion.start_time, self.timestamp)
                lines.append(
                    f"    Score {suggestion.score}: {description}, "
                    f"{format_duration(suggestion.duration)} available"
                )

        lines.append("=" * 50)

        return "\n".join(lines)
