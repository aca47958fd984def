"""Utility functions."""

from .config import get_default_config, load_config, merge_config
from .time_utils import (
    format_slot_description,
    format_time12,
    minutes_to_time,
    time_to_minutes,
)

__all__ = [
    'get_default_config',
    'load_config',
    'merge_config',
    'format_slot_description',
    'format_time12',
    'minutes_to_time',
    'time_to_minutes',
]
