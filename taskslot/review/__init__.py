"""Overdue classification and periodic schedule review."""

from .advisor import ScheduleAdvisor, accept_suggestion
from .status import get_overdue_tasks, get_upcoming_tasks, is_overdue

__all__ = ['ScheduleAdvisor', 'accept_suggestion', 'get_overdue_tasks', 'get_upcoming_tasks', 'is_overdue']
