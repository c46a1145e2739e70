"""Aggregate patterns over a task collection."""

from __future__ import annotations

from collections import Counter

import numpy as np

from task_insights.schema import Task, TaskPatterns
from task_insights.text_classifier import categorize
from task_insights.utils import round_half_up
from task_insights.vocabulary import DEFAULT_VOCABULARY, Vocabulary


def has_deadline(description: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> bool:
    lowered = description.lower()
    return any(marker in lowered for marker in vocabulary.deadline_markers)


def category_counts(tasks: list[Task], vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Counter:
    """Count tasks per category, keyed in order of first appearance."""

    return Counter(categorize(task.description, vocabulary) for task in tasks)


def analyze_patterns(tasks: list[Task], vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> TaskPatterns:
    """Extract category, description-length and deadline patterns."""

    if not tasks:
        return TaskPatterns(
            total_tasks=0,
            completed_tasks=0,
            high_priority_tasks=0,
            category_counts={},
            average_description_length=0,
            tasks_without_deadlines=0,
            completion_rate=0.0,
        )

    lengths = np.asarray([len(task.description) for task in tasks], dtype=float)
    completed = sum(1 for task in tasks if task.completed)

    return TaskPatterns(
        total_tasks=len(tasks),
        completed_tasks=completed,
        high_priority_tasks=sum(1 for task in tasks if task.priority == "high"),
        category_counts=dict(category_counts(tasks, vocabulary)),
        average_description_length=round_half_up(float(lengths.mean())),
        tasks_without_deadlines=sum(1 for task in tasks if not has_deadline(task.description, vocabulary)),
        completion_rate=completed / len(tasks),
    )
