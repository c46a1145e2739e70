"""Public entry points: analyze, suggest, summarize.

Each call is a synchronous pure computation over its arguments; the task
collection is only read.
"""

from __future__ import annotations

from datetime import datetime

from task_insights.config import DEFAULT_POLICY, InsightPolicy
from task_insights.narrator import summarize_progress
from task_insights.schema import Analysis, ProgressSummary, Suggestion, Task
from task_insights.suggestions import generate_suggestions
from task_insights.text_classifier import analyze_description
from task_insights.vocabulary import DEFAULT_VOCABULARY, Vocabulary


def analyze(description: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY, logger=None) -> Analysis:
    return analyze_description(description, vocabulary, logger=logger)


def suggest(
    tasks: list[Task],
    now: datetime | None = None,
    policy: InsightPolicy = DEFAULT_POLICY,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    logger=None,
    pending_only: bool = False,
) -> list[Suggestion]:
    """Suggestions for ``tasks``; with ``pending_only`` completed tasks are left out first."""

    selected = [task for task in tasks if not task.completed] if pending_only else list(tasks)
    return generate_suggestions(selected, now=now, policy=policy, vocabulary=vocabulary, logger=logger)


def summarize(
    tasks: list[Task],
    now: datetime | None = None,
    policy: InsightPolicy = DEFAULT_POLICY,
    logger=None,
) -> ProgressSummary:
    return summarize_progress(list(tasks), now=now, policy=policy, logger=logger)


def build_report(tasks: list[Task], now: datetime | None = None, policy: InsightPolicy = DEFAULT_POLICY, logger=None) -> dict:
    """JSON-ready report combining per-task analyses, suggestions and the summary."""

    tasks = list(tasks)
    return {
        "analyses": [
            {"taskId": task.task_id, "title": task.title, "analysis": analyze(task.description, logger=logger).to_dict()}
            for task in tasks
        ],
        "suggestions": [item.to_dict() for item in suggest(tasks, now=now, policy=policy, logger=logger)],
        "summary": summarize(tasks, now=now, policy=policy, logger=logger).to_dict(),
    }
