"""Slot scoring policy implementations."""

from .base import SlotScoringPolicy, rank_suggestions
from .priority import PriorityProximityPolicy

POLICIES = {
    'priority-proximity': PriorityProximityPolicy,
}


def create_policy(name: str, config: dict) -> SlotScoringPolicy:
    """Create a scoring policy by name."""
    try:
        policy_class = POLICIES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown policy: {name}") from None
    return policy_class(config)


__all__ = ['SlotScoringPolicy', 'PriorityProximityPolicy', 'POLICIES', 'create_policy', 'rank_suggestions']
