"""Policy constants for suggestion, scoring and narration rules.

The defaults reproduce the established heuristics. Each value can be
overridden through a ``TASK_INSIGHTS_<FIELD>`` environment variable, e.g.
``TASK_INSIGHTS_RECENCY_WINDOW_DAYS=10``.
"""

from __future__ import annotations

import os

import structlog
from pydantic import BaseModel, Field, ValidationError

log = structlog.get_logger(__name__)

ENV_PREFIX = "TASK_INSIGHTS_"


class InsightPolicy(BaseModel):
    """Tuning constants shared by the aggregation and narration layers."""

    model_config = {"frozen": True}

    # productivity score
    completion_weight: float = Field(default=0.6, ge=0.0)
    high_priority_weight: float = Field(default=0.3, ge=0.0)
    recency_weight: float = Field(default=0.2, ge=0.0)
    recency_window_days: int = Field(default=7, ge=0)

    # suggestion rules
    high_priority_overload: int = Field(default=3, ge=0)
    stale_low_priority_days: int = Field(default=7, ge=0)
    min_completion_rate: float = Field(default=0.3, ge=0.0, le=1.0)
    brief_description_length: int = Field(default=20, ge=0)
    missing_deadline_ratio: float = Field(default=0.7, ge=0.0, le=1.0)
    many_categories: int = Field(default=5, ge=0)
    dominant_category_share: float = Field(default=0.6, ge=0.0, le=1.0)
    creation_burst_tasks: int = Field(default=10, ge=0)
    creation_burst_days: int = Field(default=1, ge=0)
    old_task_days: int = Field(default=14, ge=0)

    # narration
    trend_recent_days: int = Field(default=7, ge=0)
    trend_monthly_days: int = Field(default=30, ge=0)
    trend_increasing_above: int = Field(default=5, ge=0)
    trend_decreasing_below: int = Field(default=2, ge=0)
    max_next_steps: int = Field(default=3, ge=0)


DEFAULT_POLICY = InsightPolicy()


def load_policy(environ: dict | None = None) -> InsightPolicy:
    """Build a policy from ``TASK_INSIGHTS_*`` environment variables.

    Unparseable values are logged and replaced by the default.
    """

    environ = os.environ if environ is None else environ
    kwargs: dict = {}

    for name, info in InsightPolicy.model_fields.items():
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is None or raw == "":
            continue
        try:
            InsightPolicy(**{name: raw})
        except ValidationError:
            log.warning(
                "invalid_policy_config",
                env_var=ENV_PREFIX + name.upper(),
                value=raw,
                fallback=info.default,
            )
            continue
        kwargs[name] = raw

    return InsightPolicy(**kwargs)
