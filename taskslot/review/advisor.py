"""Periodic schedule review.

Scans the task snapshot for overdue work and poorly placed high
priority tasks, and proposes slots for them through the scheduler.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Union

from ..engine.scheduler import TaskScheduler
from ..models.review import ReviewItem, ScheduleReview
from ..models.slot import AvailabilityHours, Slot, Suggestion
from ..models.task import Priority, Task
from .status import get_due_datetime, get_overdue_tasks, get_upcoming_tasks, is_overdue

logger = logging.getLogger(__name__)

RESCHEDULE = 'reschedule'
OPTIMIZE = 'optimize'


def accept_suggestion(task: Task, suggestion: Union[Slot, Suggestion]) -> Task:
    """Return a copy of the task placed in the accepted slot.

    The caller writes the copy back to its task store.
    """
    return task.with_slot(suggestion.date, suggestion.start_time)


class ScheduleAdvisor:
    """Builds reschedule and optimization suggestions for a task snapshot."""

    def __init__(self, scheduler: TaskScheduler, config: dict):
        """Initialize advisor with a scheduler and the 'review' configuration."""
        self.scheduler = scheduler
        self.review_config = config.get('review', {})
        self.due_soon = timedelta(minutes=self.review_config.get('due_soon_minutes', 120))
        self.optimize_threshold = self.review_config.get('optimize_score_threshold', 80)
        self.auto_optimize_threshold = self.review_config.get('auto_optimize_score_threshold', 70)
        self.excluded_tags = set(self.review_config.get('excluded_tags', []))
        self.upcoming_window_hours = self.review_config.get('upcoming_window_hours', 24)

    def review(
        self,
        tasks: Iterable[Task],
        availability: AvailabilityHours,
        now: Optional[datetime] = None,
    ) -> ScheduleReview:
        """Suggest new slots for overdue tasks and urgent high priority tasks."""
        now = now or datetime.now()
        snapshot = tuple(tasks)
        items = []

        for task in snapshot:
            if task.is_completed or task.due_date is None or task.assigned_slot:
                continue

            if is_overdue(task, now):
                suggestions = self.scheduler.suggest_optimal_slots(task, snapshot, availability, 1, now)
                if suggestions:
                    items.append(ReviewItem(RESCHEDULE, task, "Task is overdue", suggestions))

            due_soon = get_due_datetime(task) - now < self.due_soon
            if due_soon and task.priority is Priority.HIGH:
                suggestions = self.scheduler.suggest_optimal_slots(task, snapshot, availability, 3, now)
                if suggestions and suggestions[0].score > self.optimize_threshold:
                    items.append(ReviewItem(
                        OPTIMIZE, task, "High priority task could be better scheduled", suggestions
                    ))

        logger.debug("Review produced %d items for %d tasks", len(items), len(snapshot))

        return self._build_review(snapshot, availability, now, items)

    def optimize(
        self,
        tasks: Iterable[Task],
        availability: AvailabilityHours,
        now: Optional[datetime] = None,
    ) -> ScheduleReview:
        """Propose a best slot for every unassigned task worth placing."""
        now = now or datetime.now()
        snapshot = tuple(tasks)
        items = []

        for task in self.get_unscheduled_tasks(snapshot):
            suggestions = self.scheduler.suggest_optimal_slots(task, snapshot, availability, 1, now)
            if suggestions and suggestions[0].score > self.auto_optimize_threshold:
                items.append(ReviewItem(OPTIMIZE, task, "Automatic schedule optimization", suggestions))

        logger.info("Found %d optimization suggestions", len(items))

        return self._build_review(snapshot, availability, now, items)

    def get_unscheduled_tasks(self, tasks: Iterable[Task]) -> List[Task]:
        """Open, dated, unassigned tasks without an excluded tag."""
        return [
            task for task in tasks
            if not task.is_completed
            and task.due_date is not None
            and not task.assigned_slot
            and not self.excluded_tags.intersection(task.tags)
        ]

    def _build_review(
        self,
        tasks: tuple,
        availability: AvailabilityHours,
        now: datetime,
        items: List[ReviewItem],
    ) -> ScheduleReview:
        return ScheduleReview(
            run_id=str(uuid.uuid4())[:8],
            timestamp=now,
            availability=availability,
            items=items,
            overdue_count=len(get_overdue_tasks(tasks, now)),
            upcoming_count=len(get_upcoming_tasks(tasks, now, self.upcoming_window_hours)),
        )
