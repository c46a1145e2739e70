"""Batch analysis of task collections.

Selection and analysis only; the caller persists the results.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from task_insights.logging_config import get_logger
from task_insights.schema import Analysis, Task
from task_insights.text_classifier import analyze_description
from task_insights.vocabulary import DEFAULT_VOCABULARY, Vocabulary


@dataclass
class BatchResult:
    task_id: str
    title: str
    analysis: Analysis

    def to_dict(self) -> dict:
        return {"taskId": self.task_id, "title": self.title, "analysis": self.analysis.to_dict()}


@dataclass
class BatchReport:
    results: list[BatchResult] = field(default_factory=list)
    skipped: int = 0
    failures: dict[str, str] = field(default_factory=dict)

    @property
    def processed(self) -> int:
        return len(self.results)

    def analyses_by_id(self) -> dict[str, dict]:
        return {result.task_id: result.analysis.to_dict() for result in self.results}

    def to_dict(self) -> dict:
        return {
            "analyzed": self.processed,
            "skipped": self.skipped,
            "failures": dict(self.failures),
            "results": [result.to_dict() for result in self.results],
        }


def _analyze_into(report: BatchReport, task: Task, vocabulary: Vocabulary, log) -> None:
    try:
        analysis = analyze_description(task.description, vocabulary, logger=log)
    except Exception as exc:  # noqa: BLE001
        log.error("task_analysis_failed", task_id=task.task_id, error=str(exc))
        report.failures[task.task_id] = str(exc)
        return
    report.results.append(BatchResult(task_id=task.task_id, title=task.title, analysis=analysis))


def analyze_pending(
    tasks: list[Task],
    limit: int | None = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    logger=None,
) -> BatchReport:
    """Analyze tasks whose ``ai_processed`` flag is not set, up to ``limit``."""

    log = get_logger(logger)
    pending = [task for task in tasks if not task.ai_processed]
    selected = pending if limit is None else pending[:limit]

    report = BatchReport(skipped=len(tasks) - len(selected))
    if not selected:
        log.info("no_pending_tasks", task_count=len(tasks))
        return report

    log.info("batch_analysis_started", pending=len(selected))
    for task in selected:
        _analyze_into(report, task, vocabulary, log)

    log.info("batch_analysis_finished", analyzed=report.processed, failed=len(report.failures))
    return report


def batch_analyze(
    tasks: list[Task],
    task_ids: list[str],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    logger=None,
) -> BatchReport:
    """Analyze the listed tasks in the given order; unknown ids are skipped."""

    if not isinstance(task_ids, list):
        raise ValueError("Task IDs array is required")

    log = get_logger(logger)
    by_id = {task.task_id: task for task in tasks}

    report = BatchReport()
    for task_id in task_ids:
        task = by_id.get(task_id)
        if task is None:
            report.skipped += 1
            continue
        _analyze_into(report, task, vocabulary, log)

    log.info("batch_analyzed", analyzed=report.processed, skipped=report.skipped)
    return report
