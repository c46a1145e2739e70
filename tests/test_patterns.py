from datetime import datetime

from task_insights.patterns import analyze_patterns
from task_insights.schema import Task
from task_insights.text_classifier import categorize

NOW = datetime(2025, 1, 15, 12, 0)


def task(task_id, description, priority="medium", completed=False):
    return Task(task_id, task_id, description, priority, completed, NOW, NOW)


def test_empty_collection_has_defined_values():
    patterns = analyze_patterns([])
    assert patterns.to_dict() == {
        "totalTasks": 0,
        "completedTasks": 0,
        "highPriorityTasks": 0,
        "categoryCounts": {},
        "averageDescriptionLength": 0,
        "tasksWithoutDeadlines": 0,
        "completionRate": 0.0,
    }


def test_patterns_over_collection():
    tasks = [
        task("a", "Fix bug in api", priority="high", completed=True),
        task("b", "Design mockup due Monday"),
        task("c", "Team meeting"),
    ]
    patterns = analyze_patterns(tasks)
    assert patterns.total_tasks == 3
    assert patterns.completed_tasks == 1
    assert patterns.high_priority_tasks == 1
    assert patterns.category_counts == {"development": 1, "design": 1, "meeting": 1}
    assert patterns.average_description_length == 17
    assert patterns.tasks_without_deadlines == 2
    assert abs(patterns.completion_rate - 1 / 3) < 1e-9


def test_average_description_length_rounds_half_up():
    assert analyze_patterns([task("a", "a"), task("b", "ab")]).average_description_length == 2


def test_category_counts_reproducible_from_classifier():
    tasks = [
        task("a", "Fix bug"),
        task("b", "write code"),
        task("c", "standup"),
        task("d", "groceries"),
        task("e", "Deploy release"),
    ]
    patterns = analyze_patterns(tasks)

    recount = {}
    for item in tasks:
        category = categorize(item.description)
        recount[category] = recount.get(category, 0) + 1

    assert patterns.category_counts == recount
    assert analyze_patterns(tasks).category_counts == patterns.category_counts
