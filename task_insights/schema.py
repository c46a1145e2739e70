"""Core data schema for tasks and insight records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

PRIORITIES = ("low", "medium", "high")


@dataclass(frozen=True)
class Task:
    """Task record as supplied by the persistence layer."""

    task_id: str
    title: str
    description: str
    priority: str
    completed: bool
    created_at: datetime
    updated_at: datetime
    ai_processed: bool = False


@dataclass
class Analysis:
    """Classification result for a single task description."""

    sentiment: str
    priority: str
    category: str
    estimated_time: str
    complexity: str
    keywords: list[str]
    suggestions: list[str]

    def to_dict(self) -> dict:
        return {
            "sentiment": self.sentiment,
            "priority": self.priority,
            "category": self.category,
            "estimatedTime": self.estimated_time,
            "complexity": self.complexity,
            "keywords": list(self.keywords),
            "suggestions": list(self.suggestions),
        }


@dataclass
class Suggestion:
    type: str
    level: str
    title: str
    message: str
    action: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "level": self.level,
            "title": self.title,
            "message": self.message,
            "action": self.action,
        }


@dataclass
class TaskPatterns:
    """Aggregate patterns over a task collection."""

    total_tasks: int
    completed_tasks: int
    high_priority_tasks: int
    category_counts: dict[str, int]
    average_description_length: int
    tasks_without_deadlines: int
    completion_rate: float

    def to_dict(self) -> dict:
        return {
            "totalTasks": self.total_tasks,
            "completedTasks": self.completed_tasks,
            "highPriorityTasks": self.high_priority_tasks,
            "categoryCounts": dict(self.category_counts),
            "averageDescriptionLength": self.average_description_length,
            "tasksWithoutDeadlines": self.tasks_without_deadlines,
            "completionRate": self.completion_rate,
        }


@dataclass
class StatsRecord:
    """Progress statistics; completion_rate is a percentage in [0, 100]."""

    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    completion_rate: float
    priority_distribution: dict[str, int]
    completion_by_priority: dict[str, int]
    average_task_age: int
    productivity_score: int

    def to_dict(self) -> dict:
        return {
            "totalTasks": self.total_tasks,
            "completedTasks": self.completed_tasks,
            "pendingTasks": self.pending_tasks,
            "completionRate": self.completion_rate,
            "priorityDistribution": dict(self.priority_distribution),
            "completionByPriority": dict(self.completion_by_priority),
            "averageTaskAge": self.average_task_age,
            "productivityScore": self.productivity_score,
        }


@dataclass
class Recommendation:
    category: str
    suggestion: str
    priority: str

    def to_dict(self) -> dict:
        return {"category": self.category, "suggestion": self.suggestion, "priority": self.priority}


@dataclass
class TrendRecord:
    recent_activity: int
    monthly_activity: int
    recent_completions: int
    trend: str

    def to_dict(self) -> dict:
        return {
            "recentActivity": self.recent_activity,
            "monthlyActivity": self.monthly_activity,
            "recentCompletions": self.recent_completions,
            "trend": self.trend,
        }


@dataclass
class ProgressSummary:
    """Narrated progress summary for a task collection."""

    overview: str
    key_metrics: StatsRecord
    insights: list[str]
    recommendations: list[Recommendation]
    trend_analysis: TrendRecord
    next_steps: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "overview": self.overview,
            "keyMetrics": self.key_metrics.to_dict(),
            "insights": list(self.insights),
            "recommendations": [item.to_dict() for item in self.recommendations],
            "trendAnalysis": self.trend_analysis.to_dict(),
            "nextSteps": list(self.next_steps),
        }
