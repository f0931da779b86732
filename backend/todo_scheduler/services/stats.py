"""Progress figures derived from a user's task list."""

import datetime as dt
from dataclasses import dataclass
from typing import Iterable, Optional

from todo_scheduler.models import Task, TaskStatus


@dataclass(frozen=True)
class TaskStats:
    total: int = 0
    completed: int = 0
    pending: int = 0
    overdue: int = 0
    important: int = 0
    completion_rate: int = 0
    average_progress: int = 0


def is_overdue(task: Task, today: dt.date) -> bool:
    """Marked overdue, or still open with a date already in the past."""
    if task.status == TaskStatus.overdue:
        return True
    return task.status != TaskStatus.completed and task.date < today


def _percent(part: float, whole: int) -> int:
    if whole <= 0:
        return 0
    return round(part * 100 / whole)


def summarize(tasks: Iterable[Task], today: Optional[dt.date] = None) -> TaskStats:
    if today is None:
        today = dt.datetime.now(dt.timezone.utc).date()

    total = completed = pending = overdue = important = progress_sum = 0
    for task in tasks:
        total += 1
        progress_sum += task.progress or 0
        if task.status == TaskStatus.completed:
            completed += 1
        elif task.status == TaskStatus.pending:
            pending += 1
        if is_overdue(task, today):
            overdue += 1
        if task.is_important:
            important += 1

    return TaskStats(
        total=total,
        completed=completed,
        pending=pending,
        overdue=overdue,
        important=important,
        completion_rate=_percent(completed, total),
        average_progress=round(progress_sum / total) if total else 0,
    )
