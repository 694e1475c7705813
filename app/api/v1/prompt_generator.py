"""API endpoints for the Prompt Generator.

Provides:
  - POST /prompt-generator/generate — classify input and return three prompt variants
  - POST /prompt-generator/analyze — classification profile only
  - GET  /prompt-generator/tool-types — supported tool types
"""

import logging

from fastapi import APIRouter, Request

from app.core.config import settings
from app.core.rate_limit import limiter
from app.prompt_generator import analyze, generate_with_profile
from app.prompt_generator.types import ToolType
from app.schemas.prompt_generator import (
    AnalyzeRequest,
    GenerateRequest,
    GenerateResponse,
    ProfileResponse,
    ToolTypesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prompt-generator", tags=["prompt-generator"])


@router.post("/generate", response_model=GenerateResponse)
@limiter.limit(settings.generate_rate_limit)
async def generate_prompts(request: Request, body: GenerateRequest):
    """Generate three tool-specific prompt variants from raw user text.

    Unknown tool types are served by the text routine; the response reports
    the tool type that was actually used.
    """
    resolved = ToolType.resolve(body.tool_type)
    profile, templates = generate_with_profile(resolved, body.input)

    logger.info(
        "Generated %d prompts: tool_type=%s (requested %s), intent=%s, domain=%s, input=%d chars",
        len(templates),
        resolved.value,
        body.tool_type,
        profile.intent.value,
        profile.domain.value,
        len(body.input),
        extra={"tool_type": resolved.value},
    )
    return {
        "tool_type": resolved.value,
        "profile": profile.to_dict(),
        "prompts": [t.to_dict() for t in templates],
    }


@router.post("/analyze", response_model=ProfileResponse)
@limiter.limit(settings.generate_rate_limit)
async def analyze_input(request: Request, body: AnalyzeRequest):
    """Return the classification profile for the input without generating prompts."""
    return analyze(body.input).to_dict()


@router.get("/tool-types", response_model=ToolTypesResponse)
async def list_tool_types():
    return {"tool_types": [t.value for t in ToolType], "default": ToolType.TEXT.value}
