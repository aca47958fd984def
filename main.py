"""Main entry point for the task slot scheduler."""

import argparse
import json
import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List

from taskslot.engine.scheduler import TaskScheduler
from taskslot.models.slot import AvailabilityHours
from taskslot.models.task import Task
from taskslot.policies import POLICIES, create_policy
from taskslot.review import ScheduleAdvisor
from taskslot.utils.config import get_default_config, load_config

logger = logging.getLogger("taskslot")


def load_tasks(tasks_path: str) -> List[Task]:
    """Load already-parsed task records from a JSON list."""
    path = Path(tasks_path)
    if not path.exists():
        raise FileNotFoundError(f"Task file not found: {tasks_path}")

    with open(path, 'r') as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Task file must contain a JSON list: {tasks_path}")

    return [Task.from_dict(record) for record in records]


def find_task(tasks: List[Task], task_id: str) -> Task:
    for task in tasks:
        if task.task_id == task_id:
            return task
    raise ValueError(f"Unknown task id: {task_id}")


def emit(payload, fmt: str, text: str = None):
    """Print a result as JSON or as text."""
    if fmt == 'text' and text is not None:
        print(text)
    else:
        print(json.dumps(payload, indent=2, default=str))


def run_suggest(scheduler, tasks, availability, args, now):
    task = find_task(tasks, args.task_id)
    suggestions = scheduler.suggest_optimal_slots(task, tasks, availability, args.max, now)
    lines = [
        f"{s.date} {s.start_time}-{s.end_time}  score {s.score}  ({s.duration} min free)"
        for s in suggestions
    ]
    emit([s.to_dict() for s in suggestions], args.format, "\n".join(lines) or "No available slots")


def run_reschedule(scheduler, tasks, availability, args, now):
    task = find_task(tasks, args.task_id)
    result = scheduler.auto_reschedule(task, tasks, availability, now)
    emit(result.to_dict(), args.format, result.reason)


def run_conflicts(scheduler, tasks, availability, args, now):
    task = find_task(tasks, args.task_id)
    conflicts = scheduler.check_conflicts(task, args.date, args.time, tasks)
    lines = [f"{t.task_id}: {t.title} at {t.due_time}" for t in conflicts]
    emit([t.to_dict() for t in conflicts], args.format, "\n".join(lines) or "No conflicts")


def run_alternatives(scheduler, tasks, availability, args, now):
    task = find_task(tasks, args.task_id)
    alternatives = scheduler.suggest_alternatives(
        task, args.date, args.time, tasks, availability, args.limit, now
    )
    lines = [f"{s.date} {s.start_time}  score {s.score}" for s in alternatives]
    emit([s.to_dict() for s in alternatives], args.format, "\n".join(lines) or "No alternatives")


def run_review(scheduler, config, availability, args):
    """Run one review pass, or keep polling with --watch."""
    advisor = ScheduleAdvisor(scheduler, config)
    interval_seconds = config.get('review', {}).get('interval_minutes', 5) * 60

    while True:
        tasks = load_tasks(args.tasks)
        now = parse_now(args.now)
        if args.optimize:
            review = advisor.optimize(tasks, availability, now)
        else:
            review = advisor.review(tasks, availability, now)
        emit(review.to_dict(), args.format, review.to_human_readable())

        if not args.watch:
            return
        logger.debug("Next review in %d seconds", interval_seconds)
        time.sleep(interval_seconds)


def parse_now(value: str) -> datetime:
    """Parse --now as a naive local time; any UTC offset is dropped."""
    if not value:
        return datetime.now()
    return datetime.fromisoformat(value).replace(tzinfo=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Task Slot Scheduler"
    )
    parser.add_argument(
        'command',
        choices=['suggest', 'reschedule', 'conflicts', 'alternatives', 'review'],
        help='Command to run'
    )
    parser.add_argument(
        '--tasks',
        type=str,
        required=True,
        help='Path to a JSON list of task records'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--policy',
        type=str,
        choices=sorted(POLICIES),
        default='priority-proximity',
        help='Slot scoring policy to use (default: priority-proximity)'
    )
    parser.add_argument('--task-id', type=str, help='Task to schedule')
    parser.add_argument('--date', type=str, help='Proposed date (YYYY-MM-DD)')
    parser.add_argument('--time', type=str, help='Proposed time (HH:MM)')
    parser.add_argument('--max', type=int, default=None, help='Maximum suggestions')
    parser.add_argument('--limit', type=int, default=None, help='Maximum alternatives')
    parser.add_argument('--now', type=str, default=None, help='Override the current time (ISO format)')
    parser.add_argument('--optimize', action='store_true', help='Review: propose slots for all unassigned tasks')
    parser.add_argument('--watch', action='store_true', help='Review: repeat every review interval')
    parser.add_argument('--format', choices=['json', 'text'], default='json', help='Output format')
    parser.add_argument('--log-level', type=str, default=None, help='Logging level')
    return parser


def main():
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if args.command in ('suggest', 'reschedule', 'conflicts', 'alternatives') and not args.task_id:
        parser.error(f"{args.command} requires --task-id")
    if args.command in ('conflicts', 'alternatives') and not (args.date and args.time):
        parser.error(f"{args.command} requires --date and --time")

    try:
        config = load_config(args.config) if Path(args.config).exists() else get_default_config()
        logging.basicConfig(
            level=(args.log_level or config.get('logging', {}).get('level', 'INFO')).upper(),
            format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        )

        policy = create_policy(args.policy, config)
        scheduler = TaskScheduler(policy, config)
        availability = AvailabilityHours.from_dict(config.get('availability'))

        if args.command == 'review':
            run_review(scheduler, config, availability, args)
            return

        tasks = load_tasks(args.tasks)
        now = parse_now(args.now)
        commands = {
            'suggest': run_suggest,
            'reschedule': run_reschedule,
            'conflicts': run_conflicts,
            'alternatives': run_alternatives,
        }
        commands[args.command](scheduler, tasks, availability, args, now)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
