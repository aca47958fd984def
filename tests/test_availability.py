"""Tests for taskslot/engine/availability.py"""

from datetime import date, datetime

from taskslot.engine.availability import resolve_window
from taskslot.models.slot import AvailabilityHours


class TestResolveWindow:
    """Tests for availability window resolution."""

    def test_other_day_uses_configured_start(self, availability, now, future_day):
        window = resolve_window(future_day, availability, now)

        assert window.window_start == 13 * 60
        assert window.window_end == 22 * 60
        assert window.search_start == 13 * 60

    def test_today_before_window_opens(self, availability, now):
        window = resolve_window(now.date(), availability, now)

        assert window.search_start == 13 * 60

    def test_today_inside_window_rounds_up(self, availability):
        now = datetime(2026, 10, 18, 14, 10)

        window = resolve_window(now.date(), availability, now)

        assert window.search_start == 14 * 60 + 30

    def test_today_on_boundary_is_not_pushed(self, availability):
        now = datetime(2026, 10, 18, 14, 30)

        window = resolve_window(now.date(), availability, now)

        assert window.search_start == 14 * 60 + 30

    def test_custom_hours(self, now):
        hours = AvailabilityHours(start="08:15", end="12:45")

        window = resolve_window(date(2026, 10, 21), hours, now)

        assert (window.window_start, window.window_end) == (495, 765)


class TestAvailabilityHours:
    """Tests for per-call availability configuration."""

    def test_defaults(self):
        assert AvailabilityHours.from_dict(None) == AvailabilityHours("13:00", "22:00")

    def test_each_side_defaults_independently(self):
        assert AvailabilityHours.from_dict({"start": "09:00"}) == AvailabilityHours("09:00", "22:00")
        assert AvailabilityHours.from_dict({"end": "18:00"}) == AvailabilityHours("13:00", "18:00")
