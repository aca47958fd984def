"""Base slot scoring policy interface."""

from abc import ABC, abstractmethod
from typing import List

from ..models.slot import Slot, Suggestion
from ..models.task import Task


class SlotScoringPolicy(ABC):
    """Abstract base class for slot scoring policies."""

    def __init__(self, config: dict):
        """Initialize policy with configuration."""
        self.config = config

    @abstractmethod
    def score_slot(self, slot: Slot, task: Task, day_offset: int) -> int:
        """Score a slot for a task; higher is more desirable."""
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """Return the name of this policy."""
        pass

    def build_suggestion(self, slot: Slot, task: Task, day_offset: int) -> Suggestion:
        """Wrap a slot with its score and day offset."""
        return Suggestion(slot=slot, score=self.score_slot(slot, task, day_offset), day_offset=day_offset)


def rank_suggestions(suggestions: List[Suggestion], limit: int) -> List[Suggestion]:
    """Sort by score, highest first, and keep the top entries.

    The sort is stable, so equal scores keep their generation order
    (earlier day, then earlier time).
    """
    return sorted(suggestions, key=lambda s: -s.score)[:max(limit, 0)]
