from datetime import datetime, timedelta

from task_insights.metrics import average_task_age, compute_progress_stats, productivity_score
from task_insights.schema import Task

NOW = datetime(2025, 1, 15, 12, 0)


def task(task_id, priority="medium", completed=False, age=timedelta(0)):
    created = NOW - age
    return Task(task_id, f"Task {task_id}", "Write the quarterly report", priority, completed, created, created)


def test_empty_collection_stats():
    stats = compute_progress_stats([], now=NOW)
    assert stats.total_tasks == 0
    assert stats.completion_rate == 0
    assert stats.average_task_age == 0
    assert stats.productivity_score == 0
    assert stats.priority_distribution == {"low": 0, "medium": 0, "high": 0}


def test_all_completed_high_priority_caps_at_100():
    tasks = [task(str(i), priority="high", completed=True) for i in range(5)]
    stats = compute_progress_stats(tasks, now=NOW)
    assert stats.completion_rate == 100
    assert stats.productivity_score == 100


def test_no_high_priority_tasks_earn_full_high_priority_credit():
    tasks = [task("a", age=timedelta(days=30)), task("b", age=timedelta(days=30))]
    # 0 * 0.6 + 1 * 0.3 + 0
    assert productivity_score(tasks, NOW) == 30


def test_high_priority_completion_rate():
    tasks = [
        task("a", priority="high", completed=True, age=timedelta(days=30)),
        task("b", priority="high", age=timedelta(days=30)),
    ]
    # 0.5 * 0.6 + 0.5 * 0.3
    assert productivity_score(tasks, NOW) == 45


def test_recency_bonus_counts_completions_within_window():
    old = [task(str(i), completed=True, age=timedelta(days=8)) for i in range(2)]
    recent = [task(str(i), completed=True, age=timedelta(days=7, hours=20)) for i in range(2)]
    assert productivity_score(old, NOW) == 90
    assert productivity_score(recent, NOW) == 100


def test_score_monotonic_in_completion_rate():
    scores = []
    for done in range(5):
        tasks = [task(str(i), completed=i < done, age=timedelta(days=30)) for i in range(4)]
        scores.append(productivity_score(tasks, NOW))
    assert scores == sorted(scores)
    assert scores[0] == 30
    assert scores[-1] == 90
    assert all(0 <= score <= 100 for score in scores)


def test_average_task_age_rounds_half_up():
    tasks = [task("a", age=timedelta(days=1, hours=5)), task("b", age=timedelta(days=2, hours=1))]
    assert average_task_age(tasks, NOW) == 2


def test_priority_breakdown():
    tasks = [
        task("a", priority="high", completed=True),
        task("b", priority="high"),
        task("c", priority="low", completed=True),
        task("d"),
    ]
    stats = compute_progress_stats(tasks, now=NOW)
    assert stats.pending_tasks == 2
    assert stats.completion_rate == 50
    assert stats.priority_distribution == {"low": 1, "medium": 1, "high": 2}
    assert stats.completion_by_priority == {"low": 1, "medium": 0, "high": 1}
    assert stats.to_dict()["completionByPriority"]["high"] == 1
