"""CSV adapter for task records."""

from __future__ import annotations

import csv

from task_insights.adapters.records import parse_record
from task_insights.schema import Task


def parse(file_path: str) -> list[Task]:
    """Parse CSV file into a list of tasks."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        tasks: list[Task] = []
        for row_number, row in enumerate(reader, start=2):
            tasks.append(parse_record(row, f"Row {row_number}"))
        return tasks
