"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file, merged over the defaults."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            overrides = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            overrides = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    return merge_config(get_default_config(), overrides or {})


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge overrides into a copy of base."""
    merged = copy.deepcopy(base)

    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value

    return merged


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'availability': {
            'start': '13:00',
            'end': '22:00',
        },
        'scheduling': {
            'horizon_days': 7,
            'slot_step_minutes': 30,
            'default_duration_minutes': 60,
            'max_suggestions': 3,
            'alternatives_pool': 5,
            'alternatives_limit': 3,
        },
        'scoring': {
            'base_score': 100,
            'high_morning_bonus': 20,
            'morning_cutoff': '12:00',
            'low_afternoon_bonus': 10,
            'afternoon_start': '14:00',
            'day_offset_penalty': 5,
            'slack_bonus': 10,
            'slack_threshold_minutes': 30,
            'priority_weights': {
                'high': 3,
                'medium': 2,
                'low': 1,
            },
            'unknown_priority_weight': 1,
        },
        'review': {
            'interval_minutes': 5,
            'due_soon_minutes': 120,
            'optimize_score_threshold': 80,
            'auto_optimize_score_threshold': 70,
            'excluded_tags': ['lecture', 'section', 'meeting', 'deadline', 'course'],
            'upcoming_window_hours': 24,
        },
        'logging': {
            'level': 'INFO',
        },
    }
