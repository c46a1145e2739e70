"""Run the insight engine over a CSV/JSON task file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_insights.adapters.records import load_tasks
from task_insights.config import load_policy
from task_insights.engine import analyze, build_report, suggest, summarize
from task_insights.logging_config import setup_logging


def _run(mode: str, tasks: list, pending_only: bool = False) -> dict:
    policy = load_policy()
    if mode == "analyze":
        return {
            "analyses": [
                {"taskId": task.task_id, "title": task.title, "analysis": analyze(task.description).to_dict()}
                for task in tasks
            ]
        }
    if mode == "suggest":
        suggestions = suggest(tasks, policy=policy, pending_only=pending_only)
        return {"taskCount": len(tasks), "suggestions": [item.to_dict() for item in suggestions]}
    if mode == "summary":
        summary = summarize(tasks, policy=policy)
        return {
            "totalTasks": len(tasks),
            "completedTasks": summary.key_metrics.completed_tasks,
            "pendingTasks": summary.key_metrics.pending_tasks,
            "summary": summary.to_dict(),
        }
    return build_report(tasks, policy=policy)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run task-insights over a task file")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON tasks file")
    parser.add_argument("--mode", choices=["analyze", "suggest", "summary", "all"], default="all")
    parser.add_argument("--output", default="outputs/insights_report.json", help="Where to save the report")
    parser.add_argument(
        "--pending-only",
        action="store_true",
        help="Run the suggestion rules over incomplete tasks only (default: the whole collection)",
    )
    parser.add_argument("--log-format", choices=["dev", "json"], default=None)
    args = parser.parse_args()

    setup_logging(log_format=args.log_format)

    tasks = load_tasks(args.data)
    report = _run(args.mode, tasks, pending_only=args.pending_only)

    print(json.dumps(report, indent=2, ensure_ascii=False))

    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Saved insights report to {out_path}")


if __name__ == "__main__":
    main()
