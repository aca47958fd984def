"""Tests for taskslot/models/task.py

Task records arrive from the task store with optional and sometimes
malformed fields; the model must fall back to documented defaults.
"""

from datetime import date

import pytest

from taskslot.models.task import AssignedSlot, Priority, Task, coerce_duration


class TestCoerceDuration:
    """Tests for duration defaults."""

    @pytest.mark.parametrize("value", [None, 0, -15, "abc", "", True, float("nan")])
    def test_invalid_values_default_to_60(self, value):
        assert coerce_duration(value) == 60

    def test_valid_values(self):
        assert coerce_duration(30) == 30
        assert coerce_duration("45") == 45
        assert coerce_duration(90.0) == 90


class TestPriority:
    """Tests for priority parsing."""

    def test_known_levels(self):
        assert Priority.parse("high") is Priority.HIGH
        assert Priority.parse("medium") is Priority.MEDIUM
        assert Priority.parse("low") is Priority.LOW

    def test_unrecognized_levels(self):
        assert Priority.parse("urgent") is Priority.UNKNOWN
        assert Priority.parse(None) is Priority.UNKNOWN
        assert Priority.parse(3) is Priority.UNKNOWN

    def test_matching_is_exact(self):
        assert Priority.parse("High") is Priority.UNKNOWN
        assert Priority.parse(" low ") is Priority.UNKNOWN


class TestFromDict:
    """Tests for building tasks from store records."""

    def test_camel_case_record(self):
        task = Task.from_dict({
            "id": 7,
            "title": "Write report",
            "dueDate": "2026-10-20",
            "dueTime": "15:00",
            "estimatedDuration": 45,
            "priority": "high",
            "isCompleted": False,
            "assignedSlot": {"date": "2026-10-20", "time": "15:00"},
            "tags": ["work"],
        })

        assert task.task_id == "7"
        assert task.due_date == date(2026, 10, 20)
        assert task.due_time == "15:00"
        assert task.get_duration() == 45
        assert task.priority is Priority.HIGH
        assert task.assigned_slot == AssignedSlot(date=date(2026, 10, 20), time="15:00")
        assert task.tags == ["work"]

    def test_snake_case_record(self):
        task = Task.from_dict({"task_id": "a", "due_date": "2026-10-20", "is_completed": True})

        assert task.task_id == "a"
        assert task.is_completed is True

    def test_minimal_record_defaults(self):
        task = Task.from_dict({"id": "a"})

        assert task.due_date is None
        assert task.due_time is None
        assert task.get_duration() == 60
        assert task.priority is Priority.UNKNOWN
        assert task.assigned_slot is None
        assert not task.is_timed

    def test_blank_time_is_untimed(self):
        task = Task.from_dict({"id": "a", "dueDate": "2026-10-20", "dueTime": ""})

        assert task.due_date == date(2026, 10, 20)
        assert not task.is_timed

    @pytest.mark.parametrize("value", ["3pm", "15", "24:00", "12:60", "1:2:3", 1500, None])
    def test_malformed_time_is_untimed(self, value):
        task = Task.from_dict({"id": "a", "dueDate": "2026-10-20", "dueTime": value})

        assert task.due_time is None
        assert not task.is_timed

    def test_time_is_normalized(self):
        task = Task.from_dict({"id": "a", "dueDate": "2026-10-20", "dueTime": "9:05"})

        assert task.due_time == "09:05"

    def test_malformed_assigned_slot_is_dropped(self):
        task = Task.from_dict({"id": "a", "assignedSlot": {"date": "2026-10-20", "time": "noon"}})

        assert task.assigned_slot is None

    def test_missing_id(self):
        with pytest.raises(ValueError, match="no id"):
            Task.from_dict({"title": "orphan"})

    def test_to_dict_is_camel_case(self):
        record = {"id": "a", "dueDate": "2026-10-20", "dueTime": "13:00", "priority": "low"}

        data = Task.from_dict(record).to_dict()

        assert data["dueDate"] == "2026-10-20"
        assert data["dueTime"] == "13:00"
        assert data["priority"] == "low"
        assert data["assignedSlot"] is None


class TestWithSlot:
    """Tests for placing a task in a slot."""

    def test_returns_moved_copy(self, make_task):
        task = make_task("a", dueDate="2026-10-15", dueTime="09:00")

        moved = task.with_slot(date(2026, 10, 20), "14:00")

        assert moved.due_date == date(2026, 10, 20)
        assert moved.due_time == "14:00"
        assert moved.assigned_slot == AssignedSlot(date=date(2026, 10, 20), time="14:00")
        assert task.due_time == "09:00"
        assert task.assigned_slot is None


class TestBlocks:
    """Tests for deciding which tasks occupy a day."""

    def test_open_timed_task_on_the_day_blocks(self, make_task):
        me = make_task("me")
        other = make_task("b", dueDate="2026-10-20", dueTime="14:00")

        assert other.blocks(me, date(2026, 10, 20))
        assert not other.blocks(me, date(2026, 10, 21))

    def test_self_completed_and_untimed_do_not_block(self, make_task):
        me = make_task("me", dueDate="2026-10-20", dueTime="14:00")
        day = date(2026, 10, 20)

        assert not me.blocks(me, day)
        assert not make_task("done", dueDate="2026-10-20", dueTime="14:00", isCompleted=True).blocks(me, day)
        assert not make_task("untimed", dueDate="2026-10-20").blocks(me, day)
