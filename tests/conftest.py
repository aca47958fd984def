"""Shared test fixtures for taskslot tests.

This module provides common fixtures used across all test modules:
- A fixed "now" (Sunday 2026-10-18, 09:00) so searches are deterministic
- Default availability hours and configuration
- A task factory accepting the same records the task store produces

Usage:
    def test_something(make_task, scheduler, now):
        task = make_task("a", dueDate="2026-10-20", estimatedDuration=30)
        ...
"""

from datetime import date, datetime

import pytest

from taskslot.engine.scheduler import TaskScheduler
from taskslot.models.slot import AvailabilityHours
from taskslot.models.task import Task
from taskslot.policies.priority import PriorityProximityPolicy
from taskslot.utils.config import get_default_config


# ─────────────────────────────────────────────────────────────────────────────
# Time Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def now() -> datetime:
    """Sunday morning, before the default availability window opens."""
    return datetime(2026, 10, 18, 9, 0)


@pytest.fixture
def future_day() -> date:
    """A Tuesday two days after `now`."""
    return date(2026, 10, 20)


# ─────────────────────────────────────────────────────────────────────────────
# Engine Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def config() -> dict:
    return get_default_config()


@pytest.fixture
def availability() -> AvailabilityHours:
    return AvailabilityHours(start="13:00", end="22:00")


@pytest.fixture
def policy(config) -> PriorityProximityPolicy:
    return PriorityProximityPolicy(config)


@pytest.fixture
def scheduler(policy, config) -> TaskScheduler:
    return TaskScheduler(policy, config)


# ─────────────────────────────────────────────────────────────────────────────
# Task Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def make_task():
    """Build a Task from a camelCase record, defaulting the title to the id."""

    def _make(task_id: str, **fields) -> Task:
        record = {"id": task_id, "title": f"Task {task_id}"}
        record.update(fields)
        return Task.from_dict(record)

    return _make
