from datetime import datetime, timedelta

from task_insights.narrator import (
    analyze_trends,
    generate_insights,
    generate_next_steps,
    generate_overview,
    generate_recommendations,
    performance_label,
    summarize_progress,
)
from task_insights.metrics import compute_progress_stats
from task_insights.schema import StatsRecord, Task

NOW = datetime(2025, 1, 15, 12, 0)


def task(task_id, priority="medium", completed=False, age=timedelta(0)):
    created = NOW - age
    return Task(task_id, f"Task {task_id}", "Write the quarterly report", priority, completed, created, created)


def stats(**overrides):
    values = {
        "total_tasks": 10,
        "completed_tasks": 5,
        "pending_tasks": 5,
        "completion_rate": 50.0,
        "priority_distribution": {"low": 3, "medium": 4, "high": 3},
        "completion_by_priority": {"low": 1, "medium": 2, "high": 2},
        "average_task_age": 5,
        "productivity_score": 70,
    }
    values.update(overrides)
    return StatsRecord(**values)


def test_performance_label_thresholds():
    assert performance_label(80) == "excellent"
    assert performance_label(79) == "good"
    assert performance_label(60) == "good"
    assert performance_label(59) == "average"
    assert performance_label(40) == "average"
    assert performance_label(39) == "needs improvement"


def test_overview_text():
    assert generate_overview(stats(completion_rate=66.5)) == (
        "You have completed 5 out of 10 tasks (67% completion rate). "
        "Your current productivity score is 70/100, indicating good task management performance."
    )


def test_insights_emitted_in_check_order():
    insights = generate_insights(
        stats(
            completion_rate=90.0,
            priority_distribution={"low": 0, "medium": 0, "high": 10},
            completion_by_priority={"low": 0, "medium": 0, "high": 5},
            average_task_age=1,
            productivity_score=90,
        )
    )
    assert len(insights) == 4
    assert insights[0].startswith("🎉")
    assert insights[1] == "🔥 You have 5 pending high-priority tasks. Focus on these first."
    assert insights[2].startswith("⚡")
    assert insights[3].startswith("🚀")


def test_insights_for_struggling_collection():
    insights = generate_insights(stats(completion_rate=10.0, average_task_age=20, productivity_score=20))
    assert len(insights) == 3
    assert insights[0].startswith("⚠️")
    assert insights[1].startswith("📅")
    assert insights[2].startswith("💡")


def test_no_insights_for_middling_collection():
    assert generate_insights(stats()) == []


def test_recommendations():
    recommendations = generate_recommendations(
        stats(
            completion_rate=20.0,
            priority_distribution={"low": 2, "medium": 3, "high": 5},
            average_task_age=12,
            productivity_score=30,
        )
    )
    assert [(item.category, item.priority) for item in recommendations] == [
        ("Completion", "high"),
        ("Priority Management", "medium"),
        ("Time Management", "medium"),
        ("Productivity", "low"),
    ]


def test_recommendations_on_empty_collection():
    recommendations = generate_recommendations(compute_progress_stats([], now=NOW))
    assert [item.category for item in recommendations] == ["Completion", "Productivity"]


def test_trend_labels():
    assert analyze_trends([task(str(i)) for i in range(6)], NOW).trend == "increasing"
    assert analyze_trends([task(str(i)) for i in range(5)], NOW).trend == "stable"
    assert analyze_trends([task(str(i)) for i in range(2)], NOW).trend == "stable"
    assert analyze_trends([task("a")], NOW).trend == "decreasing"
    assert analyze_trends([], NOW).trend == "decreasing"


def test_trend_counts():
    tasks = [
        task("a", completed=True, age=timedelta(days=2)),
        task("b", age=timedelta(days=7, hours=12)),
        task("c", completed=True, age=timedelta(days=20)),
        task("d", age=timedelta(days=31)),
    ]
    trend = analyze_trends(tasks, NOW)
    assert trend.recent_activity == 2
    assert trend.monthly_activity == 3
    assert trend.recent_completions == 1


def test_next_steps_high_priority_then_oldest():
    tasks = [
        task("recent", priority="high", age=timedelta(days=1)),
        task("oldest", age=timedelta(days=9)),
        task("done", completed=True, age=timedelta(days=20)),
    ]
    assert generate_next_steps(tasks) == [
        'Complete high-priority task: "Task recent"',
        'Address oldest pending task: "Task oldest"',
        "Review and update task priorities",
    ]


def test_next_steps_skip_oldest_when_already_selected():
    tasks = [task("urgent", priority="high", age=timedelta(days=9)), task("other", age=timedelta(days=1))]
    assert generate_next_steps(tasks) == [
        'Complete high-priority task: "Task urgent"',
        "Review and update task priorities",
        "Consider breaking down complex tasks into subtasks",
    ]


def test_next_steps_without_pending_tasks():
    assert generate_next_steps([task("a", completed=True)]) == [
        "Review and update task priorities",
        "Consider breaking down complex tasks into subtasks",
    ]


def test_summarize_all_completed_high_priority():
    tasks = [task(str(i), priority="high", completed=True) for i in range(3)]
    summary = summarize_progress(tasks, now=NOW)
    assert summary.key_metrics.completion_rate == 100
    assert summary.key_metrics.productivity_score == 100
    assert "excellent" in summary.overview
    payload = summary.to_dict()
    assert set(payload) == {"overview", "keyMetrics", "insights", "recommendations", "trendAnalysis", "nextSteps"}
    assert len(payload["nextSteps"]) <= 3
