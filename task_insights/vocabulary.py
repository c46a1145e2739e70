"""Keyword tables used by the text classifier."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class Vocabulary:
    """Versionable keyword tables.

    ``categories`` and ``complexity`` are ordered: the first entry with a
    matching keyword wins.
    """

    positive_words: frozenset[str]
    negative_words: frozenset[str]
    high_priority_words: tuple[str, ...]
    low_priority_words: tuple[str, ...]
    categories: tuple[tuple[str, tuple[str, ...]], ...]
    complexity: tuple[tuple[str, tuple[str, ...]], ...]
    quick_words: tuple[str, ...]
    long_words: tuple[str, ...]
    stop_words: frozenset[str]
    action_verbs: tuple[str, ...]
    deadline_markers: tuple[str, ...]


DEFAULT_VOCABULARY = Vocabulary(
    positive_words=frozenset({"easy", "simple", "fun", "exciting", "quick", "straightforward"}),
    negative_words=frozenset({"difficult", "complex", "urgent", "critical", "challenging", "hard"}),
    high_priority_words=("urgent", "critical", "asap", "emergency", "deadline"),
    low_priority_words=("someday", "maybe", "eventually", "nice to have"),
    categories=(
        ("development", ("code", "programming", "development", "bug", "feature", "api")),
        ("design", ("design", "ui", "ux", "mockup", "wireframe", "prototype")),
        ("meeting", ("meeting", "call", "discussion", "standup", "review")),
        ("documentation", ("documentation", "docs", "readme", "guide", "manual")),
        ("testing", ("test", "testing", "qa", "quality", "validation")),
        ("deployment", ("deploy", "deployment", "release", "publish", "production")),
    ),
    complexity=(
        ("low", ("simple", "easy", "quick", "basic")),
        ("medium", ("moderate", "standard", "normal")),
        ("high", ("complex", "difficult", "advanced", "comprehensive", "integration", "critical")),
    ),
    quick_words=("quick", "simple", "easy", "small"),
    long_words=("complex", "difficult", "large", "comprehensive"),
    stop_words=frozenset(
        {"the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by", "is", "are", "was", "were"}
    ),
    action_verbs=("create", "build", "design", "implement", "fix", "update", "review"),
    deadline_markers=("deadline", "due"),
)

FALLBACK_CATEGORY = "general"


def category_names(vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Return the closed category vocabulary, fallback last."""

    return [name for name, _ in vocabulary.categories] + [FALLBACK_CATEGORY]


def _coerce_words(key: str, value) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"Vocabulary key '{key}' must be a list of strings")
    return tuple(item.lower() for item in value)


def _coerce_table(key: str, value) -> tuple[tuple[str, tuple[str, ...]], ...]:
    if isinstance(value, dict):
        items = list(value.items())
    elif isinstance(value, list) and all(isinstance(item, list) and len(item) == 2 for item in value):
        items = [(item[0], item[1]) for item in value]
    else:
        raise ValueError(f"Vocabulary key '{key}' must be an ordered mapping of label to keywords")
    return tuple((str(label), _coerce_words(f"{key}.{label}", words)) for label, words in items)


def load_vocabulary(file_path: str, base: Vocabulary = DEFAULT_VOCABULARY) -> Vocabulary:
    """Load a JSON override file on top of ``base``."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise ValueError("Vocabulary file must contain a JSON object")

    known = {f.name for f in fields(Vocabulary)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ValueError(f"Unknown vocabulary keys {unknown}")

    overrides = {}
    for key, value in payload.items():
        if key in ("categories", "complexity"):
            overrides[key] = _coerce_table(key, value)
        elif key in ("positive_words", "negative_words", "stop_words"):
            overrides[key] = frozenset(_coerce_words(key, value))
        else:
            overrides[key] = _coerce_words(key, value)

    return replace(base, **overrides)
