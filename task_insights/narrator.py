"""Prose progress summaries built on top of the progress statistics."""

from __future__ import annotations

from datetime import datetime

from task_insights.config import DEFAULT_POLICY, InsightPolicy
from task_insights.logging_config import get_logger
from task_insights.metrics import compute_progress_stats
from task_insights.schema import ProgressSummary, Recommendation, StatsRecord, Task, TrendRecord
from task_insights.utils import age_in_days, round_half_up, utcnow

GENERIC_NEXT_STEPS = (
    "Review and update task priorities",
    "Consider breaking down complex tasks into subtasks",
)


def performance_label(productivity_score: int) -> str:
    if productivity_score >= 80:
        return "excellent"
    if productivity_score >= 60:
        return "good"
    if productivity_score < 40:
        return "needs improvement"
    return "average"


def generate_overview(stats: StatsRecord) -> str:
    return (
        f"You have completed {stats.completed_tasks} out of {stats.total_tasks} tasks "
        f"({round_half_up(stats.completion_rate)}% completion rate). "
        f"Your current productivity score is {stats.productivity_score}/100, "
        f"indicating {performance_label(stats.productivity_score)} task management performance."
    )


def generate_insights(stats: StatsRecord) -> list[str]:
    insights = []

    if stats.completion_rate > 80:
        insights.append("🎉 Excellent completion rate! You're consistently finishing your tasks.")
    elif stats.completion_rate < 30:
        insights.append("⚠️ Low completion rate detected. Consider breaking tasks into smaller, manageable pieces.")

    high_pending = stats.priority_distribution["high"] - stats.completion_by_priority["high"]
    if high_pending > 3:
        insights.append(f"🔥 You have {high_pending} pending high-priority tasks. Focus on these first.")

    if stats.average_task_age > 14:
        insights.append("📅 Your tasks are staying open for a long time on average. Consider setting deadlines.")
    elif stats.average_task_age < 3:
        insights.append("⚡ You're completing tasks quickly! Great momentum.")

    if stats.productivity_score > 85:
        insights.append("🚀 Outstanding productivity! You're managing tasks very effectively.")
    elif stats.productivity_score < 40:
        insights.append("💡 Productivity could be improved. Try prioritizing high-impact tasks.")

    return insights


def generate_recommendations(stats: StatsRecord) -> list[Recommendation]:
    recommendations = []

    if stats.completion_rate < 50:
        recommendations.append(
            Recommendation(
                category="Completion",
                suggestion="Focus on completing existing tasks before adding new ones",
                priority="high",
            )
        )

    high_ratio = stats.priority_distribution["high"] / stats.total_tasks if stats.total_tasks else 0.0
    if high_ratio > 0.4:
        recommendations.append(
            Recommendation(
                category="Priority Management",
                suggestion="Too many high-priority tasks. Re-evaluate and redistribute priorities",
                priority="medium",
            )
        )

    if stats.average_task_age > 10:
        recommendations.append(
            Recommendation(
                category="Time Management",
                suggestion="Set specific deadlines for tasks to maintain momentum",
                priority="medium",
            )
        )

    if stats.productivity_score < 60:
        recommendations.append(
            Recommendation(
                category="Productivity",
                suggestion="Consider using time-blocking or the Pomodoro technique",
                priority="low",
            )
        )

    return recommendations


def analyze_trends(tasks: list[Task], now: datetime, policy: InsightPolicy = DEFAULT_POLICY) -> TrendRecord:
    ages = [age_in_days(task.created_at, now) for task in tasks]
    last_week = [task for task, age in zip(tasks, ages) if age <= policy.trend_recent_days]
    last_month = [task for task, age in zip(tasks, ages) if age <= policy.trend_monthly_days]

    if len(last_week) > policy.trend_increasing_above:
        trend = "increasing"
    elif len(last_week) < policy.trend_decreasing_below:
        trend = "decreasing"
    else:
        trend = "stable"

    return TrendRecord(
        recent_activity=len(last_week),
        monthly_activity=len(last_month),
        recent_completions=sum(1 for task in last_week if task.completed),
        trend=trend,
    )


def generate_next_steps(tasks: list[Task], policy: InsightPolicy = DEFAULT_POLICY) -> list[str]:
    """Pending high-priority task, oldest pending task, then generic reminders."""

    pending = [task for task in tasks if not task.completed]
    high_pending = [task for task in pending if task.priority == "high"]

    selected = high_pending[0] if high_pending else None

    steps = []
    if selected is not None:
        steps.append(f'Complete high-priority task: "{selected.title}"')

    if pending:
        oldest = min(pending, key=lambda task: task.created_at)
        if oldest is not selected:
            steps.append(f'Address oldest pending task: "{oldest.title}"')

    steps.extend(GENERIC_NEXT_STEPS)
    return steps[: policy.max_next_steps]


def summarize_progress(
    tasks: list[Task],
    now: datetime | None = None,
    policy: InsightPolicy = DEFAULT_POLICY,
    logger=None,
) -> ProgressSummary:
    """Compute statistics and narrate them."""

    now = now or utcnow()
    stats = compute_progress_stats(tasks, now, policy)

    summary = ProgressSummary(
        overview=generate_overview(stats),
        key_metrics=stats,
        insights=generate_insights(stats),
        recommendations=generate_recommendations(stats),
        trend_analysis=analyze_trends(tasks, now, policy),
        next_steps=generate_next_steps(tasks, policy),
    )

    get_logger(logger).info(
        "progress_summarized",
        task_count=stats.total_tasks,
        productivity_score=stats.productivity_score,
        trend=summary.trend_analysis.trend,
    )
    return summary
