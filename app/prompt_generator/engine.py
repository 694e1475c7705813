"""Prompt Generator entry point: classify, then synthesize.

Usage:
    from app.prompt_generator import generate

    templates = generate("image", "Create a vibrant product photo for Instagram marketing")
    # [PromptTemplate(title="Photorealistic", ...), ... x3]
"""

from __future__ import annotations

from app.prompt_generator.classifier import classify
from app.prompt_generator.synthesizer import synthesize
from app.prompt_generator.types import Profile, PromptTemplate, ToolType


def analyze(raw_input: str) -> Profile:
    """Classify ``raw_input`` without generating templates."""
    return classify(raw_input)


def generate_with_profile(tool_type: str | ToolType, raw_input: str) -> tuple[Profile, list[PromptTemplate]]:
    """Run both stages and return the profile alongside the templates."""
    profile = classify(raw_input)
    return profile, synthesize(tool_type, raw_input, profile)


def generate(tool_type: str | ToolType, raw_input: str) -> list[PromptTemplate]:
    """Generate exactly three prompt variants for ``raw_input``.

    ``tool_type`` is one of text/image/code/audio/video (case-sensitive);
    anything else is treated as text. Raises ``TypeError`` only when
    ``raw_input`` is not a string.
    """
    _, templates = generate_with_profile(tool_type, raw_input)
    return templates
