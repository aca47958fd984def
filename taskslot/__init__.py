"""Adaptive slot-scheduling engine for a personal task manager."""

from .engine.scheduler import TaskScheduler
from .models.slot import AvailabilityHours, RescheduleResult, Slot, Suggestion
from .models.task import Priority, Task
from .policies import PriorityProximityPolicy, create_policy

__version__ = '0.1.0'

__all__ = [
    'TaskScheduler',
    'AvailabilityHours',
    'RescheduleResult',
    'Slot',
    'Suggestion',
    'Priority',
    'Task',
    'PriorityProximityPolicy',
    'create_policy',
]
