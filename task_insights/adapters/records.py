"""Validation of raw task records into Task objects."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from task_insights.schema import PRIORITIES, Task

_REQUIRED_FIELDS = ("id", "title", "created_at")
_ALIASES = {
    "id": ("id", "task_id", "taskId"),
    "title": ("title",),
    "description": ("description",),
    "priority": ("priority",),
    "completed": ("completed",),
    "created_at": ("created_at", "createdAt"),
    "updated_at": ("updated_at", "updatedAt"),
    "ai_processed": ("ai_processed", "aiProcessed"),
}
_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no", ""}


def _lookup(record: dict, field: str):
    for key in _ALIASES[field]:
        if key in record and record[key] is not None:
            return record[key]
    return None


def _parse_timestamp(value, field: str, label: str) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValueError(f"{label}: malformed timestamp in '{field}'") from exc

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _parse_bool(value, field: str, label: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{label}: invalid boolean in '{field}'")


def parse_record(record: dict, label: str) -> Task:
    """Validate one raw mapping; ``label`` prefixes error messages."""

    if not isinstance(record, dict):
        raise ValueError(f"{label}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if _lookup(record, field) in (None, "")]
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")

    priority = str(_lookup(record, "priority") or "medium").strip().lower()
    if priority not in PRIORITIES:
        raise ValueError(f"{label}: invalid priority '{priority}'")

    created_at = _parse_timestamp(_lookup(record, "created_at"), "created_at", label)
    updated_raw = _lookup(record, "updated_at")
    updated_at = _parse_timestamp(updated_raw, "updated_at", label) if updated_raw not in (None, "") else created_at

    description = _lookup(record, "description")
    return Task(
        task_id=str(_lookup(record, "id")).strip(),
        title=str(_lookup(record, "title")).strip(),
        description="" if description is None else str(description),
        priority=priority,
        completed=_parse_bool(_lookup(record, "completed"), "completed", label),
        created_at=created_at,
        updated_at=updated_at,
        ai_processed=_parse_bool(_lookup(record, "ai_processed"), "ai_processed", label),
    )


def load_tasks(file_path: str) -> list[Task]:
    """Dispatch to the CSV or JSON adapter by file suffix."""

    from task_insights.adapters import csv_adapter, json_adapter

    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(file_path))
    if suffix == ".json":
        return json_adapter.parse(str(file_path))
    raise ValueError("Unsupported input format, expected .csv or .json")
