"""Core types and enums for the Prompt Generator.

A call produces one ``Profile`` (the classification of the raw input) and
three ``PromptTemplate`` objects. Both are frozen: nothing is cached or
mutated across calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Tool types — output modality selector
# ---------------------------------------------------------------------------


class ToolType(str, Enum):
    """Target generation tool the prompts are written for."""

    TEXT = "text"
    IMAGE = "image"
    CODE = "code"
    AUDIO = "audio"
    VIDEO = "video"

    @classmethod
    def resolve(cls, value: str | ToolType) -> ToolType:
        """Map a raw tool-type string to a member; anything unknown routes to TEXT.

        Matching is case-sensitive: ``"Image"`` is not ``"image"``.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.TEXT


# ---------------------------------------------------------------------------
# Classification axes
# ---------------------------------------------------------------------------


class Intent(str, Enum):
    """What the user is trying to do (first matching lexicon wins)."""

    EXPLAIN = "explain"
    IMPROVE = "improve"
    ANALYZE = "analyze"
    CREATE = "create"  # Also the default when nothing matches
    SOLVE = "solve"
    PLAN = "plan"
    LEARN = "learn"


class Specificity(str, Enum):
    VAGUE = "vague"
    MODERATE = "moderate"
    DETAILED = "detailed"


class Complexity(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class Domain(str, Enum):
    """Subject area of the request."""

    GENERAL = "general"  # Default
    BUSINESS = "business"
    TECHNICAL = "technical"
    CREATIVE = "creative"
    ACADEMIC = "academic"
    PERSONAL = "personal"
    PROFESSIONAL = "professional"


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ---------------------------------------------------------------------------
# Data containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Profile:
    """Structured classification of a raw input, derived from the text alone."""

    topic: str  # Truncated echo of the input, descriptive only
    intent: Intent
    specificity: Specificity
    keywords: tuple[str, ...]  # Lower-cased, deduplicated, at most 12
    complexity: Complexity
    domain: Domain
    urgency: Urgency

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict for API payload."""
        return {
            "topic": self.topic,
            "intent": self.intent.value,
            "specificity": self.specificity.value,
            "keywords": list(self.keywords),
            "complexity": self.complexity.value,
            "domain": self.domain.value,
            "urgency": self.urgency.value,
        }


@dataclass(frozen=True)
class PromptTemplate:
    """One generated prompt variant."""

    title: str
    prompt: str

    def to_dict(self) -> dict:
        return {"title": self.title, "prompt": self.prompt}
