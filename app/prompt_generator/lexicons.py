"""Static lexicons used by the input classifier.

Each axis is an ordered tuple of ``(label, pattern)`` pairs. Order is the
priority: the classifier takes the first pattern that matches, so a word that
appears in two groups (e.g. "fix" in both IMPROVE and SOLVE, "study" in
ANALYZE and LEARN) always resolves to the earlier group.

All patterns are case-insensitive, whole-word matches.
"""

from __future__ import annotations

import re

from app.prompt_generator.types import Complexity, Domain, Intent, Specificity, Urgency


def _words(*words: str) -> re.Pattern[str]:
    """Compile a whole-word, case-insensitive alternation."""
    return re.compile(r"\b(" + "|".join(re.escape(w) for w in words) + r")\b", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Intent — evaluated in this exact order, default CREATE
# ---------------------------------------------------------------------------

INTENT_PATTERNS: tuple[tuple[Intent, re.Pattern[str]], ...] = (
    (Intent.EXPLAIN, _words("explain", "describe", "tell", "show", "how", "what", "why", "define", "clarify", "elaborate")),
    (Intent.IMPROVE, _words("improve", "enhance", "optimize", "refine", "fix", "better", "upgrade", "boost", "polish")),
    (Intent.ANALYZE, _words("analyze", "review", "evaluate", "assess", "examine", "compare", "study", "investigate")),
    (Intent.CREATE, _words("create", "make", "build", "generate", "produce", "design", "develop", "craft", "construct")),
    (Intent.SOLVE, _words("solve", "fix", "debug", "troubleshoot", "resolve", "address", "handle")),
    (Intent.PLAN, _words("plan", "strategy", "roadmap", "outline", "organize", "structure", "schedule")),
    (Intent.LEARN, _words("learn", "understand", "master", "study", "practice", "tutorial", "guide")),
)


# ---------------------------------------------------------------------------
# Specificity / complexity cue words (combined with word-count thresholds)
# ---------------------------------------------------------------------------

SPECIFICITY_PATTERNS: tuple[tuple[Specificity, re.Pattern[str]], ...] = (
    (Specificity.DETAILED, _words("specific", "detailed", "comprehensive", "thorough", "complete", "in-depth", "step-by-step")),
    (Specificity.MODERATE, _words("brief", "quick", "simple", "basic", "overview", "summary")),
)

COMPLEXITY_PATTERNS: tuple[tuple[Complexity, re.Pattern[str]], ...] = (
    (Complexity.COMPLEX, _words("complex", "advanced", "sophisticated", "comprehensive", "multi-step", "intricate")),
    (Complexity.MODERATE, _words("moderate", "intermediate", "standard", "typical", "regular")),
)

# Word counts strictly greater than these promote the axis one level
SPECIFICITY_THRESHOLDS: dict[Specificity, int] = {
    Specificity.DETAILED: 25,
    Specificity.MODERATE: 10,
}

COMPLEXITY_THRESHOLDS: dict[Complexity, int] = {
    Complexity.COMPLEX: 30,
    Complexity.MODERATE: 15,
}


# ---------------------------------------------------------------------------
# Domain — first match wins, default GENERAL
# ---------------------------------------------------------------------------

DOMAIN_PATTERNS: tuple[tuple[Domain, re.Pattern[str]], ...] = (
    (
        Domain.BUSINESS,
        _words("business", "marketing", "sales", "revenue", "profit", "strategy", "company", "corporate", "startup", "enterprise"),
    ),
    (
        Domain.TECHNICAL,
        _words("code", "programming", "software", "development", "api", "database", "system", "tech", "algorithm", "framework"),
    ),
    (
        Domain.CREATIVE,
        _words("creative", "art", "design", "visual", "story", "content", "copy", "brand", "aesthetic", "artistic"),
    ),
    (
        Domain.ACADEMIC,
        _words("research", "study", "academic", "paper", "thesis", "analysis", "scientific", "scholarly", "education"),
    ),
    (
        Domain.PERSONAL,
        _words("personal", "lifestyle", "health", "fitness", "relationship", "family", "hobby", "self"),
    ),
    (
        Domain.PROFESSIONAL,
        _words("professional", "career", "job", "work", "skill", "resume", "interview", "workplace"),
    ),
)


# ---------------------------------------------------------------------------
# Urgency — first match wins, default LOW
# ---------------------------------------------------------------------------

URGENCY_PATTERNS: tuple[tuple[Urgency, re.Pattern[str]], ...] = (
    (Urgency.HIGH, _words("urgent", "asap", "immediately", "quickly", "fast", "rush", "deadline", "critical")),
    (Urgency.MEDIUM, _words("soon", "timely", "prompt", "efficient", "expedite")),
)


# ---------------------------------------------------------------------------
# Keyword extraction
# ---------------------------------------------------------------------------

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the",
        "a",
        "an",
        "and",
        "or",
        "but",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "about",
        "into",
        "through",
        "during",
        "before",
        "after",
        "above",
        "below",
        "up",
        "down",
        "out",
        "off",
        "over",
        "under",
        "again",
        "further",
        "then",
        "once",
        "please",
        "help",
        "me",
        "i",
        "you",
        "this",
        "that",
        "these",
        "those",
    }
)

MAX_KEYWORDS = 12
MIN_KEYWORD_LENGTH = 3  # tokens of length <= 2 are dropped

TOPIC_MAX_CHARS = 60
TOPIC_ELLIPSIS = "..."
