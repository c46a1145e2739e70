"""Keyword-based classification of task descriptions."""

from __future__ import annotations

import re

from task_insights.logging_config import get_logger
from task_insights.schema import Analysis
from task_insights.time_estimator import estimate_time
from task_insights.vocabulary import DEFAULT_VOCABULARY, FALLBACK_CATEGORY, Vocabulary

MAX_KEYWORDS = 5
MIN_DETAIL_LENGTH = 20
MAX_DESCRIPTION_LENGTH = 200

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)


def _contains_any(text: str, words) -> bool:
    return any(word in text for word in words)


def analyze_sentiment(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Net count of positive vs negative whole words."""

    score = 0
    for word in text.lower().split():
        if word in vocabulary.positive_words:
            score += 1
        if word in vocabulary.negative_words:
            score -= 1

    if score > 0:
        return "positive"
    if score < 0:
        return "negative"
    return "neutral"


def estimate_priority(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """High-priority markers take precedence over low-priority ones."""

    lowered = text.lower()
    if _contains_any(lowered, vocabulary.high_priority_words):
        return "high"
    if _contains_any(lowered, vocabulary.low_priority_words):
        return "low"
    return "medium"


def categorize(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Return the first category, in declared order, with a matching keyword."""

    lowered = text.lower()
    for category, keywords in vocabulary.categories:
        if _contains_any(lowered, keywords):
            return category
    return FALLBACK_CATEGORY


def assess_complexity(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    lowered = text.lower()
    for level, indicators in vocabulary.complexity:
        if _contains_any(lowered, indicators):
            return level

    if len(text) < 50:
        return "low"
    if len(text) < 150:
        return "medium"
    return "high"


def extract_keywords(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """First five content words, in order of appearance."""

    words = _NON_WORD.sub("", text.lower()).split()
    keywords = [word for word in words if len(word) > 2 and word not in vocabulary.stop_words]
    return keywords[:MAX_KEYWORDS]


def improvement_suggestions(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    lowered = text.lower()
    suggestions = []

    if len(text) < MIN_DETAIL_LENGTH:
        suggestions.append("Consider adding more details to better understand the task scope")

    # case-sensitive here; the collection-level deadline count lowercases
    if not _contains_any(text, vocabulary.deadline_markers):
        suggestions.append("Consider adding a deadline or target completion date")

    if len(text) > MAX_DESCRIPTION_LENGTH:
        suggestions.append("Consider breaking this into smaller, more manageable sub-tasks")

    if not _contains_any(lowered, vocabulary.action_verbs):
        suggestions.append("Consider starting with an action verb (create, build, fix, etc.) for clarity")

    return suggestions


def analyze_description(description: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY, logger=None) -> Analysis:
    """Run every classifier over ``description`` and assemble an Analysis."""

    analysis = Analysis(
        sentiment=analyze_sentiment(description, vocabulary),
        priority=estimate_priority(description, vocabulary),
        category=categorize(description, vocabulary),
        estimated_time=estimate_time(description, vocabulary),
        complexity=assess_complexity(description, vocabulary),
        keywords=extract_keywords(description, vocabulary),
        suggestions=improvement_suggestions(description, vocabulary),
    )

    get_logger(logger).info(
        "description_analyzed",
        preview=description[:30],
        priority=analysis.priority,
        category=analysis.category,
    )
    return analysis
