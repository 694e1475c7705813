"""Pydantic schemas for the Prompt Generator API."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr

from app.core.config import settings
from app.prompt_generator.types import ToolType

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class GenerateRequest(BaseModel):
    """Raw user text plus the target tool type."""

    tool_type: StrictStr = Field(
        ToolType.TEXT.value,
        description="text | image | code | audio | video (case-sensitive); anything else is treated as text",
    )
    input: StrictStr = Field(
        max_length=settings.max_input_length,
        description="Free-form user request; may be empty",
    )


class AnalyzeRequest(BaseModel):
    input: StrictStr = Field(max_length=settings.max_input_length)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class ProfileResponse(BaseModel):
    topic: str
    intent: str
    specificity: str
    keywords: list[str]
    complexity: str
    domain: str
    urgency: str


class PromptTemplateResponse(BaseModel):
    title: str
    prompt: str


class GenerateResponse(BaseModel):
    tool_type: str = Field(description="Tool type actually used after fallback")
    profile: ProfileResponse
    prompts: list[PromptTemplateResponse] = Field(min_length=3, max_length=3)


class ToolTypesResponse(BaseModel):
    tool_types: list[str]
    default: str
