"""Progress statistics and the composite productivity score."""

from __future__ import annotations

from datetime import datetime

import numpy as np

from task_insights.config import DEFAULT_POLICY, InsightPolicy
from task_insights.schema import PRIORITIES, StatsRecord, Task
from task_insights.utils import day_ages, round_half_up, utcnow


def average_task_age(tasks: list[Task], now: datetime) -> int:
    """Mean floored day age, rounded; 0 for an empty collection."""

    if not tasks:
        return 0
    return round_half_up(float(day_ages(tasks, now).mean()))


def productivity_score(tasks: list[Task], now: datetime, policy: InsightPolicy = DEFAULT_POLICY) -> int:
    """Weighted, capped 0-100 blend of completion, high-priority completion and recency.

    A collection without high-priority tasks earns full high-priority credit.
    """

    if not tasks:
        return 0

    completed = np.asarray([task.completed for task in tasks], dtype=bool)
    high = np.asarray([task.priority == "high" for task in tasks], dtype=bool)
    ages = day_ages(tasks, now)

    completion_rate = completed.sum() / len(tasks)
    high_priority_rate = (completed & high).sum() / high.sum() if high.any() else 1.0
    recent_completions = (completed & (ages <= policy.recency_window_days)).sum()
    recency_bonus = (recent_completions / len(tasks)) * policy.recency_weight

    score = (
        completion_rate * policy.completion_weight
        + high_priority_rate * policy.high_priority_weight
        + recency_bonus
    )
    return round_half_up(min(float(score), 1.0) * 100)


def compute_progress_stats(
    tasks: list[Task], now: datetime | None = None, policy: InsightPolicy = DEFAULT_POLICY
) -> StatsRecord:
    """Compute completion, priority, age and productivity statistics."""

    now = now or utcnow()
    total = len(tasks)
    completed = sum(1 for task in tasks if task.completed)

    return StatsRecord(
        total_tasks=total,
        completed_tasks=completed,
        pending_tasks=total - completed,
        completion_rate=(completed / total) * 100 if total else 0.0,
        priority_distribution={
            priority: sum(1 for task in tasks if task.priority == priority) for priority in PRIORITIES
        },
        completion_by_priority={
            priority: sum(1 for task in tasks if task.priority == priority and task.completed)
            for priority in PRIORITIES
        },
        average_task_age=average_task_age(tasks, now),
        productivity_score=productivity_score(tasks, now, policy),
    )
