"""Task, slot and review data models."""

from .review import ReviewItem, ScheduleReview
from .slot import AvailabilityHours, AvailabilityWindow, RescheduleResult, RescheduledSlot, Slot, Suggestion
from .task import AssignedSlot, Priority, Task

__all__ = [
    'ReviewItem',
    'ScheduleReview',
    'AvailabilityHours',
    'AvailabilityWindow',
    'RescheduleResult',
    'RescheduledSlot',
    'Slot',
    'Suggestion',
    'AssignedSlot',
    'Priority',
    'Task',
]
