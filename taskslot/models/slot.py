"""Availability and slot data models."""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..utils.time_utils import format_date

DEFAULT_START = '13:00'
DEFAULT_END = '22:00'


@dataclass(frozen=True)
class AvailabilityHours:
    """Daily start/end bounds within which scheduling is permitted."""

    start: str = DEFAULT_START
    end: str = DEFAULT_END

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'AvailabilityHours':
        """Build from a {start, end} mapping, defaulting each side independently."""
        data = data or {}
        return cls(
            start=data.get('start') or DEFAULT_START,
            end=data.get('end') or DEFAULT_END,
        )


@dataclass(frozen=True)
class AvailabilityWindow:
    """Resolved minute range to search on one day."""

    window_start: int
    window_end: int
    search_start: int


@dataclass(frozen=True)
class Slot:
    """A free interval on a given date.

    ``duration`` is the room up to the next obstacle (or the window end),
    not the requested task duration.
    """

    date: date
    start_time: str
    end_time: str
    duration: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': format_date(self.date),
            'startTime': self.start_time,
            'endTime': self.end_time,
            'duration': self.duration,
        }


@dataclass(frozen=True)
class Suggestion:
    """A scored slot within the search horizon."""

    slot: Slot
    score: int
    day_offset: int

    @property
    def date(self) -> date:
        return self.slot.date

    @property
    def start_time(self) -> str:
        return self.slot.start_time

    @property
    def end_time(self) -> str:
        return self.slot.end_time

    @property
    def duration(self) -> int:
        return self.slot.duration

    @property
    def is_today(self) -> bool:
        return self.day_offset == 0

    @property
    def is_tomorrow(self) -> bool:
        return self.day_offset == 1

    def to_dict(self) -> Dict[str, Any]:
        data = self.slot.to_dict()
        data.update({
            'score': self.score,
            'dayOffset': self.day_offset,
            'isToday': self.is_today,
            'isTomorrow': self.is_tomorrow,
        })
        return data


@dataclass(frozen=True)
class RescheduledSlot:
    """Target of an automatic reschedule."""

    date: date
    time: str


@dataclass(frozen=True)
class RescheduleResult:
    """Outcome of an automatic reschedule attempt."""

    success: bool
    reason: str
    new_slot: Optional[RescheduledSlot] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['newSlot'] = data.pop('new_slot')
        if self.new_slot is not None:
            data['newSlot'] = {'date': format_date(self.new_slot.date), 'time': self.new_slot.time}
        return data
