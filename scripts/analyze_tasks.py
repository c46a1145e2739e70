"""Analyze unprocessed tasks in a JSON task file and store the results in it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import structlog

from task_insights.adapters import json_adapter
from task_insights.batch import analyze_pending
from task_insights.logging_config import setup_logging

log = structlog.get_logger("task_insights.scripts.analyze_tasks")


def main() -> int:
    parser = argparse.ArgumentParser(description="Batch-analyze pending tasks")
    parser.add_argument("--data", required=True, help="Path to JSON tasks file")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of tasks to analyze")
    args = parser.parse_args()

    setup_logging()

    try:
        tasks = json_adapter.parse(args.data)
    except (OSError, ValueError) as exc:
        log.error("task_file_invalid", path=args.data, error=str(exc))
        return 1

    report = analyze_pending(tasks, limit=args.limit, logger=log)
    if not report.processed:
        return 0

    for result in report.results:
        analysis = result.analysis
        print(
            f"\"{result.title}\": priority={analysis.priority} category={analysis.category} "
            f"complexity={analysis.complexity} estimated={analysis.estimated_time}"
        )

    updated = json_adapter.store_analyses(args.data, report.analyses_by_id())
    log.info("analyses_stored", path=args.data, updated=updated)
    return 1 if report.failures else 0


if __name__ == "__main__":
    sys.exit(main())
