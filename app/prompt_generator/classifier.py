"""Stage 1: Input Classifier.

Derives a ``Profile`` from free-form user text using fixed lexicons and
word-count thresholds. Each axis is computed independently; within an axis
the first matching lexicon wins. Pure function of the text: no I/O, no state.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from app.prompt_generator.lexicons import (
    COMPLEXITY_PATTERNS,
    COMPLEXITY_THRESHOLDS,
    DOMAIN_PATTERNS,
    INTENT_PATTERNS,
    MAX_KEYWORDS,
    MIN_KEYWORD_LENGTH,
    SPECIFICITY_PATTERNS,
    SPECIFICITY_THRESHOLDS,
    STOP_WORDS,
    TOPIC_ELLIPSIS,
    TOPIC_MAX_CHARS,
    URGENCY_PATTERNS,
)
from app.prompt_generator.types import (
    Complexity,
    Domain,
    Intent,
    Profile,
    Specificity,
    Urgency,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def tokenize(text: str) -> list[str]:
    """Split on runs of whitespace. Empty or blank input yields no tokens."""
    return text.split()


def match_first(text: str, patterns: Sequence[tuple[E, re.Pattern[str]]], default: E) -> E:
    """Return the label of the first pattern found in ``text``, else ``default``."""
    for label, pattern in patterns:
        if pattern.search(text):
            return label
    return default


def detect_intent(text: str) -> Intent:
    return match_first(text, INTENT_PATTERNS, Intent.CREATE)


def detect_specificity(text: str, word_count: int) -> Specificity:
    """DETAILED > 25 words or detail cue; MODERATE > 10 words or brevity cue."""
    cues = dict(SPECIFICITY_PATTERNS)
    for level in (Specificity.DETAILED, Specificity.MODERATE):
        if word_count > SPECIFICITY_THRESHOLDS[level] or cues[level].search(text):
            return level
    return Specificity.VAGUE


def detect_complexity(text: str, word_count: int) -> Complexity:
    """COMPLEX > 30 words or complexity cue; MODERATE > 15 words or intermediate cue."""
    cues = dict(COMPLEXITY_PATTERNS)
    for level in (Complexity.COMPLEX, Complexity.MODERATE):
        if word_count > COMPLEXITY_THRESHOLDS[level] or cues[level].search(text):
            return level
    return Complexity.SIMPLE


def detect_domain(text: str) -> Domain:
    return match_first(text, DOMAIN_PATTERNS, Domain.GENERAL)


def detect_urgency(text: str) -> Urgency:
    return match_first(text, URGENCY_PATTERNS, Urgency.LOW)


def extract_keywords(tokens: Sequence[str]) -> tuple[str, ...]:
    """Content words in first-occurrence order.

    Drops short tokens and stop words, case-folds, deduplicates, and keeps at
    most ``MAX_KEYWORDS``. Punctuation attached to a token is kept as-is
    ("job?" stays "job?").
    """
    seen: set[str] = set()
    keywords: list[str] = []
    for token in tokens:
        if len(token) < MIN_KEYWORD_LENGTH:
            continue
        word = token.casefold()
        if word in STOP_WORDS or word in seen:
            continue
        seen.add(word)
        keywords.append(word)
        if len(keywords) == MAX_KEYWORDS:
            break
    return tuple(keywords)


def make_topic(text: str) -> str:
    if len(text) > TOPIC_MAX_CHARS:
        return text[:TOPIC_MAX_CHARS] + TOPIC_ELLIPSIS
    return text


def classify(raw_input: str) -> Profile:
    """Stage 1 main entry: classify raw text into a ``Profile``.

    Never raises for string input; every axis falls back to its default.
    Non-string input is a caller contract violation and raises ``TypeError``.
    """
    if not isinstance(raw_input, str):
        raise TypeError(f"raw_input must be str, got {type(raw_input).__name__}")

    tokens = tokenize(raw_input)
    word_count = len(tokens)

    profile = Profile(
        topic=make_topic(raw_input),
        intent=detect_intent(raw_input),
        specificity=detect_specificity(raw_input, word_count),
        keywords=extract_keywords(tokens),
        complexity=detect_complexity(raw_input, word_count),
        domain=detect_domain(raw_input),
        urgency=detect_urgency(raw_input),
    )

    logger.debug(
        "Classified input: words=%d, intent=%s, specificity=%s, complexity=%s, domain=%s, urgency=%s, keywords=%d",
        word_count,
        profile.intent.value,
        profile.specificity.value,
        profile.complexity.value,
        profile.domain.value,
        profile.urgency.value,
        len(profile.keywords),
    )
    return profile
