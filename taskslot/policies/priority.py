"""Priority and proximity slot scoring policy."""

import math
from typing import Dict

from ..models.slot import Slot
from ..models.task import DEFAULT_DURATION_MINUTES, Priority, Task
from ..utils.time_utils import time_to_minutes
from .base import SlotScoringPolicy

DEFAULT_PRIORITY_WEIGHTS = {
    'high': 3,
    'medium': 2,
    'low': 1,
}


class PriorityProximityPolicy(SlotScoringPolicy):
    """Favours sooner days, priority-appropriate times of day and slack.

    Scores are raw ranking values and may go negative for deep day
    offsets; they are not clamped.
    """

    def __init__(self, config: dict):
        """Initialize policy from the 'scoring' and 'scheduling' sections."""
        super().__init__(config)
        scoring = config.get('scoring', {})
        self.base_score = scoring.get('base_score', 100)
        self.high_morning_bonus = scoring.get('high_morning_bonus', 20)
        self.morning_cutoff = time_to_minutes(scoring.get('morning_cutoff', '12:00'))
        self.low_afternoon_bonus = scoring.get('low_afternoon_bonus', 10)
        self.afternoon_start = time_to_minutes(scoring.get('afternoon_start', '14:00'))
        self.day_offset_penalty = scoring.get('day_offset_penalty', 5)
        self.slack_bonus = scoring.get('slack_bonus', 10)
        self.slack_threshold = scoring.get('slack_threshold_minutes', 30)
        self.default_duration = config.get('scheduling', {}).get(
            'default_duration_minutes', DEFAULT_DURATION_MINUTES
        )
        self.priority_weights = self._build_weights(
            scoring.get('priority_weights', DEFAULT_PRIORITY_WEIGHTS),
            scoring.get('unknown_priority_weight', 1),
        )

    @staticmethod
    def _build_weights(weights: Dict[str, float], unknown_weight: float) -> Dict[Priority, float]:
        """Map every priority level to a multiplier."""
        return {
            Priority.HIGH: weights.get('high', DEFAULT_PRIORITY_WEIGHTS['high']),
            Priority.MEDIUM: weights.get('medium', DEFAULT_PRIORITY_WEIGHTS['medium']),
            Priority.LOW: weights.get('low', DEFAULT_PRIORITY_WEIGHTS['low']),
            Priority.UNKNOWN: unknown_weight,
        }

    def score_slot(self, slot: Slot, task: Task, day_offset: int) -> int:
        """Score a slot for a task."""
        score = self.base_score
        start = time_to_minutes(slot.start_time)

        if task.priority is Priority.HIGH and start < self.morning_cutoff:
            score += self.high_morning_bonus

        if task.priority is Priority.LOW and start >= self.afternoon_start:
            score += self.low_afternoon_bonus

        score -= day_offset * self.day_offset_penalty

        extra_time = slot.duration - task.get_duration(self.default_duration)
        if extra_time > self.slack_threshold:
            score += self.slack_bonus

        score *= self.priority_weights[task.priority]

        # Half-up rounding
        return int(math.floor(score + 0.5))

    def get_policy_name(self) -> str:
        """Return policy name."""
        return "PRIORITY-PROXIMITY"
