"""Demo script for task-insights."""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from task_insights.adapters.csv_adapter import parse
from task_insights.engine import analyze, suggest, summarize
from task_insights.logging_config import setup_logging


def main() -> None:
    setup_logging()
    tasks = parse("examples/sample_tasks.csv")
    print("Analysis:", json.dumps(analyze(tasks[0].description).to_dict(), indent=2))
    for suggestion in suggest(tasks):
        print(f"[{suggestion.level}] {suggestion.title}: {suggestion.message}")
    summary = summarize(tasks)
    print("Overview:", summary.overview)
    print("Next steps:", summary.next_steps)


if __name__ == "__main__":
    main()
