"""Prompt Generator — turns free-form user text into three tailored prompt variants.

Pipeline:
  1. Input Classifier (intent, specificity, domain, complexity, urgency, keywords)
  2. Template Synthesizer (one routine per tool type: text, image, code, audio, video)

Deterministic and side-effect free: no I/O, no network, no persistence.
"""

from app.prompt_generator.classifier import classify
from app.prompt_generator.engine import analyze, generate, generate_with_profile
from app.prompt_generator.synthesizer import synthesize
from app.prompt_generator.types import PromptTemplate, Profile, ToolType

__all__ = [
    "Profile",
    "PromptTemplate",
    "ToolType",
    "analyze",
    "classify",
    "generate",
    "generate_with_profile",
    "synthesize",
]
