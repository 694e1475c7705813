"""Shared instruction block for text prompts.

The block is three independent fragments, each a pure function of the
profile (and, for the question check, the raw input), joined in fixed order:

    response_format + content_approach + delivery_style
"""

from __future__ import annotations

from app.prompt_generator.guards import (
    Guard,
    all_of,
    any_keyword,
    any_of,
    domain_is,
    first_match,
    intent_is,
)
from app.prompt_generator.types import Complexity, Domain, Intent, Profile, Specificity

# Keyword flags
is_creative = any_keyword("creative", "innovative", "unique", "original", "artistic")
is_technical = any_keyword("technical", "code", "algorithm", "process", "method", "system")
is_analytical = any_keyword("analyze", "compare", "evaluate", "assess", "review")
is_urgent = any_keyword("urgent", "quick", "fast", "asap")
is_beginner = any_keyword("beginner", "simple", "basic", "easy")
is_business = any_of(domain_is(Domain.BUSINESS), any_keyword("business", "marketing", "strategy", "revenue"))


# ---------------------------------------------------------------------------
# Response format — complexity / specificity / urgency
# ---------------------------------------------------------------------------

_RESPONSE_FORMAT_GUARDS: tuple[Guard, ...] = (
    Guard(
        lambda p: p.complexity is Complexity.COMPLEX or p.specificity is Specificity.DETAILED,
        "Structure your response with clear headings, numbered steps, and detailed explanations. ",
    ),
    Guard(
        lambda p: is_urgent(p) or p.specificity is Specificity.MODERATE,
        "Provide a concise, well-organized response with key points highlighted. ",
    ),
)
_RESPONSE_FORMAT_DEFAULT = "Present information clearly with logical flow and easy-to-follow structure. "


def response_format(profile: Profile, raw_input: str = "") -> str:
    return first_match(profile, _RESPONSE_FORMAT_GUARDS, _RESPONSE_FORMAT_DEFAULT)


# ---------------------------------------------------------------------------
# Content approach — domain / intent flags
# ---------------------------------------------------------------------------

_CONTENT_APPROACH_GUARDS: tuple[Guard, ...] = (
    Guard(
        all_of(is_creative, domain_is(Domain.CREATIVE)),
        "Use innovative thinking, creative examples, and inspire new perspectives. ",
    ),
    Guard(
        all_of(is_technical, domain_is(Domain.TECHNICAL)),
        "Include specific technical details, code examples, best practices, and implementation guidance. ",
    ),
    Guard(
        is_analytical,
        "Provide data-driven insights, comparative analysis, and evidence-based recommendations. ",
    ),
    Guard(
        is_business,
        "Focus on practical business value, ROI considerations, and strategic implications. ",
    ),
)
_QUESTION_APPROACH = "Answer comprehensively with clear explanations, examples, and actionable next steps. "
_CONTENT_APPROACH_DEFAULT = "Provide practical, actionable guidance with real-world applications. "


def content_approach(profile: Profile, raw_input: str = "") -> str:
    """Questions (a "?" in the input, or explain intent) rank just above the default."""
    is_question = "?" in raw_input or intent_is(Intent.EXPLAIN)(profile)
    default = _QUESTION_APPROACH if is_question else _CONTENT_APPROACH_DEFAULT
    return first_match(profile, _CONTENT_APPROACH_GUARDS, default)


# ---------------------------------------------------------------------------
# Delivery style — domain / keyword flags
# ---------------------------------------------------------------------------

_DELIVERY_STYLE_GUARDS: tuple[Guard, ...] = (
    Guard(
        domain_is(Domain.ACADEMIC),
        "Maintain scholarly rigor with citations and theoretical foundations where appropriate.",
    ),
    Guard(
        any_of(domain_is(Domain.PROFESSIONAL), is_business),
        "Use professional language suitable for workplace communication and decision-making.",
    ),
    Guard(
        is_beginner,
        "Explain concepts in accessible terms with beginner-friendly examples and avoid jargon.",
    ),
    Guard(
        is_urgent,
        "Prioritize the most critical information and provide quick, implementable solutions.",
    ),
)
_DELIVERY_STYLE_DEFAULT = "Balance thoroughness with clarity, ensuring the response is both comprehensive and practical."


def delivery_style(profile: Profile, raw_input: str = "") -> str:
    return first_match(profile, _DELIVERY_STYLE_GUARDS, _DELIVERY_STYLE_DEFAULT)


def build_instruction_block(profile: Profile, raw_input: str = "") -> str:
    return response_format(profile, raw_input) + content_approach(profile, raw_input) + delivery_style(profile, raw_input)
