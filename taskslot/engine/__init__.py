"""Slot search, conflict detection and the scheduling facade."""

from .availability import resolve_window
from .conflicts import check_conflicts, intervals_overlap
from .scheduler import TaskScheduler
from .slot_finder import find_available_slots, find_obstacles

__all__ = [
    'resolve_window',
    'check_conflicts',
    'intervals_overlap',
    'TaskScheduler',
    'find_available_slots',
    'find_obstacles',
]
