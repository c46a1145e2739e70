"""Rule-based suggestions over a task collection.

Rule groups run in a fixed order: priority, productivity, organization,
time-management. Each group emits at most two suggestions.
"""

from __future__ import annotations

from datetime import datetime

from task_insights.config import DEFAULT_POLICY, InsightPolicy
from task_insights.logging_config import get_logger
from task_insights.patterns import analyze_patterns, category_counts
from task_insights.schema import Suggestion, Task, TaskPatterns
from task_insights.utils import age_in_days, round_half_up, utcnow
from task_insights.vocabulary import DEFAULT_VOCABULARY, Vocabulary


def priority_suggestions(tasks: list[Task], now: datetime, policy: InsightPolicy = DEFAULT_POLICY) -> list[Suggestion]:
    suggestions = []

    high_incomplete = [task for task in tasks if task.priority == "high" and not task.completed]
    if len(high_incomplete) > policy.high_priority_overload:
        suggestions.append(
            Suggestion(
                type="priority",
                level="warning",
                title="High Priority Task Overload",
                message=(
                    f"You have {len(high_incomplete)} high-priority tasks. "
                    "Consider reviewing if all are truly urgent."
                ),
                action="Review and potentially downgrade some tasks to medium priority",
            )
        )

    stale_low = [
        task
        for task in tasks
        if task.priority == "low"
        and not task.completed
        and age_in_days(task.created_at, now) > policy.stale_low_priority_days
    ]
    if stale_low:
        suggestions.append(
            Suggestion(
                type="priority",
                level="info",
                title="Stale Low Priority Tasks",
                message=f"You have {len(stale_low)} low-priority tasks older than a week.",
                action="Consider completing or removing these tasks to maintain focus",
            )
        )

    return suggestions


def productivity_suggestions(patterns: TaskPatterns, policy: InsightPolicy = DEFAULT_POLICY) -> list[Suggestion]:
    suggestions = []

    if patterns.completion_rate < policy.min_completion_rate:
        suggestions.append(
            Suggestion(
                type="productivity",
                level="warning",
                title="Low Task Completion Rate",
                message=(
                    f"Your completion rate is {round_half_up(patterns.completion_rate * 100)}%. "
                    "This might indicate task overload."
                ),
                action="Consider breaking large tasks into smaller, manageable chunks",
            )
        )

    if patterns.average_description_length < policy.brief_description_length:
        suggestions.append(
            Suggestion(
                type="productivity",
                level="info",
                title="Task Descriptions Too Brief",
                message="Your task descriptions are quite short, which might lead to unclear objectives.",
                action="Add more detail to task descriptions for better clarity",
            )
        )

    if patterns.tasks_without_deadlines > patterns.total_tasks * policy.missing_deadline_ratio:
        suggestions.append(
            Suggestion(
                type="productivity",
                level="info",
                title="Missing Deadlines",
                message="Most of your tasks don't have deadlines, which can hurt prioritization.",
                action="Consider adding target completion dates to your tasks",
            )
        )

    return suggestions


def organization_suggestions(
    tasks: list[Task],
    policy: InsightPolicy = DEFAULT_POLICY,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[Suggestion]:
    suggestions = []
    counts = category_counts(tasks, vocabulary)

    if len(counts) > policy.many_categories:
        suggestions.append(
            Suggestion(
                type="organization",
                level="info",
                title="Many Task Categories",
                message=f"You have tasks across {len(counts)} different categories.",
                action="Consider using tags or projects to better organize related tasks",
            )
        )

    # most_common keeps first-seen order among equal counts
    dominant = counts.most_common(1)
    if dominant and dominant[0][1] > len(tasks) * policy.dominant_category_share:
        category = dominant[0][0]
        suggestions.append(
            Suggestion(
                type="organization",
                level="info",
                title=f"{category} Task Focus",
                message=f"Most of your tasks are {category}-related.",
                action="Consider batching similar tasks for more efficient workflow",
            )
        )

    return suggestions


def time_management_suggestions(
    tasks: list[Task], now: datetime, policy: InsightPolicy = DEFAULT_POLICY
) -> list[Suggestion]:
    suggestions = []

    recent = [task for task in tasks if age_in_days(task.created_at, now) <= policy.creation_burst_days]
    if len(recent) > policy.creation_burst_tasks:
        suggestions.append(
            Suggestion(
                type="time-management",
                level="warning",
                title="High Task Creation Rate",
                message=f"You've created {len(recent)} tasks in the last day.",
                action="Consider if you're taking on too much or if tasks should be combined",
            )
        )

    old_incomplete = [
        task for task in tasks if not task.completed and age_in_days(task.created_at, now) > policy.old_task_days
    ]
    if old_incomplete:
        suggestions.append(
            Suggestion(
                type="time-management",
                level="info",
                title="Old Incomplete Tasks",
                message=f"You have {len(old_incomplete)} tasks older than 2 weeks that are still incomplete.",
                action="Review these tasks - they might need to be updated, delegated, or removed",
            )
        )

    return suggestions


def generate_suggestions(
    tasks: list[Task],
    now: datetime | None = None,
    policy: InsightPolicy = DEFAULT_POLICY,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    logger=None,
) -> list[Suggestion]:
    """Run all rule groups and concatenate their suggestions."""

    now = now or utcnow()
    patterns = analyze_patterns(tasks, vocabulary)

    suggestions: list[Suggestion] = []
    suggestions.extend(priority_suggestions(tasks, now, policy))
    suggestions.extend(productivity_suggestions(patterns, policy))
    suggestions.extend(organization_suggestions(tasks, policy, vocabulary))
    suggestions.extend(time_management_suggestions(tasks, now, policy))

    get_logger(logger).info("suggestions_generated", count=len(suggestions), task_count=len(tasks))
    return suggestions
