"""JSON adapter for task records."""

from __future__ import annotations

import json

from task_insights.adapters.records import parse_record
from task_insights.schema import Task


def parse_payload(payload) -> list[Task]:
    """Validate an already-decoded JSON payload."""

    if isinstance(payload, dict) and isinstance(payload.get("tasks"), list):
        payload = payload["tasks"]

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [parse_record(item, f"Item {i}") for i, item in enumerate(payload, start=1)]


def parse(file_path: str) -> list[Task]:
    """Parse JSON file into tasks."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    return parse_payload(payload)


def store_analyses(file_path: str, analyses: dict[str, dict]) -> int:
    """Attach analyses to the matching records of a JSON task file.

    Records are updated in place, so previously stored analyses and unknown
    fields survive. Returns the number of records updated.
    """

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    tasks = parse_payload(payload)
    items = payload["tasks"] if isinstance(payload, dict) else payload

    updated = 0
    for item, task in zip(items, tasks):
        if task.task_id in analyses:
            item["ai_processed"] = True
            item["ai_analysis"] = analyses[task.task_id]
            updated += 1

    with open(file_path, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
        handle.write("\n")
    return updated
