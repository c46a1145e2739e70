"""Completion-time estimation from description text."""

from __future__ import annotations

from task_insights.utils import round_half_up
from task_insights.vocabulary import DEFAULT_VOCABULARY, Vocabulary

MINUTES_PER_WORD = 5
MINIMUM_MINUTES = 30


def estimate_minutes(description: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> float:
    """Return the unrounded estimate in minutes."""

    lowered = description.lower()
    word_count = len(description.split())

    minutes = float(max(MINIMUM_MINUTES, word_count * MINUTES_PER_WORD))
    if any(word in lowered for word in vocabulary.quick_words):
        minutes *= 0.5
    if any(word in lowered for word in vocabulary.long_words):
        minutes *= 2
    return minutes


def estimate_time(description: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Format the estimate as ``"<n> minutes"``."""

    return f"{round_half_up(estimate_minutes(description, vocabulary))} minutes"
