"""Clock and rounding helpers shared by the aggregation modules."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

import numpy as np

_ONE_DAY = timedelta(days=1)


def utcnow() -> datetime:
    """Current time as naive UTC, matching the normalised task timestamps."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


def age_in_days(created_at: datetime, now: datetime) -> int:
    """Whole days elapsed since ``created_at``, floored."""

    return (now - created_at) // _ONE_DAY


def day_ages(tasks: list, now: datetime) -> np.ndarray:
    """Vector of floored day ages, aligned with ``tasks``."""

    return np.asarray([age_in_days(task.created_at, now) for task in tasks], dtype=int)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""

    return int(math.floor(value + 0.5))
