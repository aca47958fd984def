"""Core scheduling engine."""

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

from ..models.slot import AvailabilityHours, RescheduledSlot, RescheduleResult, Slot, Suggestion
from ..models.task import DEFAULT_DURATION_MINUTES, Task
from ..policies.base import SlotScoringPolicy, rank_suggestions
from ..utils.time_utils import format_slot_description, parse_date
from .conflicts import check_conflicts
from .slot_finder import find_available_slots

logger = logging.getLogger(__name__)


class TaskScheduler:
    """Suggests, checks and reschedules slots for single tasks.

    Every query receives the current task snapshot and availability
    hours; the scheduler keeps no state between calls beyond its policy
    and configuration.
    """

    def __init__(self, policy: SlotScoringPolicy, config: dict):
        """Initialize scheduler with policy and configuration."""
        self.policy = policy
        self.config = config
        self.scheduling_config = config.get('scheduling', {})
        self.horizon_days = self.scheduling_config.get('horizon_days', 7)
        self.step_minutes = self.scheduling_config.get('slot_step_minutes', 30)
        self.default_duration = self.scheduling_config.get(
            'default_duration_minutes', DEFAULT_DURATION_MINUTES
        )
        self.max_suggestions = self.scheduling_config.get('max_suggestions', 3)
        self.alternatives_pool = self.scheduling_config.get('alternatives_pool', 5)
        self.alternatives_limit = self.scheduling_config.get('alternatives_limit', 3)

    def get_search_start(self, task: Task, now: datetime) -> date:
        """First day of the horizon: a future due date, otherwise today."""
        today = now.date()
        if task.due_date is not None and task.due_date > today:
            return task.due_date
        return today

    def find_available_slots(
        self,
        task: Task,
        day: date,
        tasks: Iterable[Task],
        availability: AvailabilityHours,
        now: Optional[datetime] = None,
    ) -> List[Slot]:
        """Free slots for a task on one day."""
        return find_available_slots(
            task,
            day,
            tasks,
            availability,
            now or datetime.now(),
            step_minutes=self.step_minutes,
            default_duration=self.default_duration,
        )

    def suggest_optimal_slots(
        self,
        task: Task,
        tasks: Iterable[Task],
        availability: AvailabilityHours,
        max_suggestions: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[Suggestion]:
        """Rank free slots across the horizon and return the best ones."""
        now = now or datetime.now()
        snapshot = tuple(tasks)
        limit = self.max_suggestions if max_suggestions is None else max_suggestions
        start_day = self.get_search_start(task, now)

        suggestions = []
        for day_offset in range(self.horizon_days):
            day = start_day + timedelta(days=day_offset)
            for slot in self.find_available_slots(task, day, snapshot, availability, now):
                suggestions.append(self.policy.build_suggestion(slot, task, day_offset))

        ranked = rank_suggestions(suggestions, limit)

        logger.debug(
            "Task %s: %d candidate slots from %s, returning %d",
            task.task_id, len(suggestions), start_day, len(ranked),
        )

        return ranked

    def auto_reschedule(
        self,
        task: Task,
        tasks: Iterable[Task],
        availability: AvailabilityHours,
        now: Optional[datetime] = None,
    ) -> RescheduleResult:
        """Pick the single best slot for a task."""
        now = now or datetime.now()
        suggestions = self.suggest_optimal_slots(task, tasks, availability, 1, now)

        if not suggestions:
            logger.info("No available slots found for task %s", task.task_id)
            return RescheduleResult(
                success=False,
                reason="No available slots found for rescheduling",
            )

        best = suggestions[0]
        description = format_slot_description(best.date, best.start_time, now)
        return RescheduleResult(
            success=True,
            reason=f"Automatically rescheduled to {description}",
            new_slot=RescheduledSlot(date=best.date, time=best.start_time),
        )

    def check_conflicts(
        self,
        task: Task,
        proposed_date: Union[date, str],
        proposed_time: str,
        tasks: Iterable[Task],
    ) -> List[Task]:
        """All open tasks overlapping the proposed placement."""
        return check_conflicts(
            task,
            parse_date(proposed_date),
            proposed_time,
            tasks,
            default_duration=self.default_duration,
        )

    def suggest_alternatives(
        self,
        task: Task,
        conflicting_date: Union[date, str],
        conflicting_time: str,
        tasks: Iterable[Task],
        availability: AvailabilityHours,
        limit: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[Suggestion]:
        """Best suggestions other than the conflicting placement."""
        conflicting_day = parse_date(conflicting_date)
        limit = self.alternatives_limit if limit is None else limit

        candidates = self.suggest_optimal_slots(
            task, tasks, availability, self.alternatives_pool, now
        )
        alternatives = [
            s for s in candidates
            if not (s.date == conflicting_day and s.start_time == conflicting_time)
        ]

        return alternatives[:max(limit, 0)]
