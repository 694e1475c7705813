"""Stage 2: Template Synthesizer.

Dispatches on tool type to one of five routines. Each routine picks its
context strings from guard chains over the ``Profile`` and interpolates them
into three fixed templates that differ in tone and depth.

The pseudo-CLI flag suffixes on image and video prompts
(``--ar 16:9 --style raw --quality 2`` etc.) are part of the output contract:
downstream consumers parse them, so they must stay verbatim.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from app.prompt_generator.guards import (
    Guard,
    any_keyword,
    first_keyword,
    first_match,
    intent_is,
    specificity_is,
)
from app.prompt_generator.instructions import build_instruction_block
from app.prompt_generator.types import Intent, Profile, PromptTemplate, Specificity, ToolType

logger = logging.getLogger(__name__)

Routine = Callable[[str, Profile], list[PromptTemplate]]


def _themes(profile: Profile, count: int, joiner: str, fallback: str) -> str:
    """Join the first ``count`` keywords, or ``fallback`` when there are none."""
    return joiner.join(profile.keywords[:count]) or fallback


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

_DETAILED_APPROACH_GUARDS: tuple[Guard, ...] = (
    Guard(
        intent_is(Intent.EXPLAIN),
        "Provide comprehensive education covering theory, practical application, and real-world implications with expert-level depth.",
    ),
    Guard(
        intent_is(Intent.IMPROVE),
        "Deliver strategic improvement framework with measurable outcomes, implementation roadmap, and success metrics.",
    ),
    Guard(
        intent_is(Intent.ANALYZE),
        "Conduct thorough analysis with multiple methodologies, data interpretation, and actionable strategic recommendations.",
    ),
)
_DETAILED_APPROACH_DEFAULT = (
    "Create comprehensive implementation guide with industry best practices, risk mitigation, and scalability considerations."
)


def _creative_approach(profile: Profile) -> str:
    # Only the two leading keywords count as themes here
    themes = profile.keywords[:2]
    if profile.intent is Intent.EXPLAIN:
        anchors = " and ".join(themes) or "the core ideas"
        return (
            f"Transform complex concepts into engaging narratives using {anchors} as creative anchors "
            "that make learning memorable and fun."
        )
    if any(t in ("business", "marketing", "strategy") for t in themes):
        return (
            "Craft compelling business storytelling that connects emotionally while delivering "
            "strategic insights and innovative solutions."
        )
    return "Create inspiring content that sparks curiosity and motivates action through creative examples and fresh perspectives."


def generate_for_text(raw_input: str, profile: Profile) -> list[PromptTemplate]:
    instructions = build_instruction_block(profile, raw_input)
    persona = "educator" if profile.intent is Intent.EXPLAIN else "content strategist"
    detailed = first_match(profile, _DETAILED_APPROACH_GUARDS, _DETAILED_APPROACH_DEFAULT)

    return [
        PromptTemplate(
            title="Quick & Simple",
            prompt=f"You are a professional {persona}. {raw_input}\n\n{instructions}",
        ),
        PromptTemplate(
            title="Detailed & Professional",
            prompt=(
                f"Act as a subject matter expert in {_themes(profile, 3, ', ', 'this subject')}. "
                f'Transform this request: "{raw_input}" into a comprehensive guide.\n\n'
                f"{detailed}\n\n{instructions}"
            ),
        ),
        PromptTemplate(
            title="Creative & Engaging",
            prompt=(
                "You are a creative strategist and storyteller specializing in "
                f'{_themes(profile, 2, " and ", "this subject")}. Based on "{raw_input}":\n\n'
                f"{_creative_approach(profile)}\n\n{instructions}"
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# Image
# ---------------------------------------------------------------------------

IMAGE_PHOTOREALISTIC_FLAGS = "--ar 16:9 --style raw --quality 2"
IMAGE_ARTISTIC_FLAGS = "--v 6 --stylize 750"
IMAGE_COMMERCIAL_FLAGS = "--ar 1:1 --quality 2"

_IMAGE_SUBJECT_GUARDS: tuple[Guard, ...] = (
    Guard(
        any_keyword("person", "people", "portrait", "face"),
        "portrait photography with perfect skin tones and natural expressions",
    ),
    Guard(
        any_keyword("landscape", "nature", "outdoor", "scenery"),
        "landscape photography with dramatic natural lighting and atmospheric depth",
    ),
    Guard(
        any_keyword("product", "object", "commercial", "brand"),
        "commercial product photography with clean backgrounds and professional presentation",
    ),
)
_IMAGE_SUBJECT_DEFAULT = "professional photography with optimal composition and lighting"

_ART_STYLES = ("modern", "vintage", "abstract", "realistic", "minimalist", "detailed")
_ART_MOODS = ("dark", "bright", "colorful", "monochrome", "vibrant", "subtle")

# Social platforms are checked first: a request naming one is always framed for social media
_COMMERCIAL_PURPOSE_GUARDS: tuple[Guard, ...] = (
    Guard(
        any_keyword("social", "media", "instagram"),
        "social media optimized for maximum engagement and shareability",
    ),
    Guard(
        any_keyword("marketing", "advertisement", "promotion"),
        "marketing campaign ready with strong brand appeal and conversion optimization",
    ),
    Guard(
        any_keyword("website", "web", "digital"),
        "web-optimized with fast loading and responsive design considerations",
    ),
)
_COMMERCIAL_PURPOSE_DEFAULT = "versatile commercial use with professional presentation standards"


def _artistic_style(profile: Profile) -> str:
    style = first_keyword(profile, _ART_STYLES) or "contemporary"
    mood = first_keyword(profile, _ART_MOODS) or "balanced"
    themes = _themes(profile, 2, " and ", "its central")
    return f"{style} artistic style with {mood} aesthetic, emphasizing {themes} themes"


def generate_for_image(raw_input: str, profile: Profile) -> list[PromptTemplate]:
    subject = first_match(profile, _IMAGE_SUBJECT_GUARDS, _IMAGE_SUBJECT_DEFAULT)
    purpose = first_match(profile, _COMMERCIAL_PURPOSE_GUARDS, _COMMERCIAL_PURPOSE_DEFAULT)

    return [
        PromptTemplate(
            title="Photorealistic",
            prompt=(
                f"Create a stunning photorealistic image: {raw_input}\n\n"
                f"Focus on {subject}, captured with cinema-quality equipment and post-production excellence. "
                f"{IMAGE_PHOTOREALISTIC_FLAGS}"
            ),
        ),
        PromptTemplate(
            title="Artistic & Creative",
            prompt=(
                f"Generate artistic interpretation of: {raw_input}\n\n"
                f"Create {_artistic_style(profile)} that captures the essence of your vision "
                f"with masterful artistic execution. {IMAGE_ARTISTIC_FLAGS}"
            ),
        ),
        PromptTemplate(
            title="Commercial & Clean",
            prompt=(
                f"Professional commercial image for: {raw_input}\n\n"
                f"Deliver {purpose} with clean, modern aesthetics that align with current design trends. "
                f"{IMAGE_COMMERCIAL_FLAGS}"
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# Code
# ---------------------------------------------------------------------------

_CODE_TECHNOLOGIES = ("react", "javascript", "python", "java", "api", "database")
_CODE_PURPOSES = ("app", "website", "system", "algorithm", "function")

_CODE_CONTEXT_GUARDS: tuple[Guard, ...] = (
    Guard(
        intent_is(Intent.IMPROVE),
        "refactored solution with enhanced performance, security, and maintainability standards",
    ),
)
_CODE_CONTEXT_DEFAULT = "robust, scalable solution following current industry best practices and design patterns"

_LEARNING_GUARDS: tuple[Guard, ...] = (
    Guard(
        specificity_is(Specificity.VAGUE),
        "comprehensive learning guide starting from basics and building up to advanced concepts with interactive examples",
    ),
    Guard(
        any_keyword("beginner", "learn", "tutorial"),
        "beginner-friendly tutorial with clear explanations, practical exercises, and common mistake prevention",
    ),
)
_LEARNING_DEFAULT = "structured educational implementation with progressive complexity and hands-on learning opportunities"

_QUICK_SOLUTION_GUARDS: tuple[Guard, ...] = (
    Guard(
        intent_is(Intent.SOLVE),
        "immediate fix with minimal changes that resolves the core issue efficiently and safely",
    ),
    Guard(
        any_keyword("prototype", "mvp", "demo"),
        "rapid prototype demonstrating core functionality with clean, extensible foundation",
    ),
)
_QUICK_SOLUTION_DEFAULT = "streamlined solution focusing on essential features with clear, maintainable code structure"


def _code_context(profile: Profile) -> str:
    tech = first_keyword(profile, _CODE_TECHNOLOGIES)
    purpose = first_keyword(profile, _CODE_PURPOSES)
    if tech and purpose:
        return f"optimized {tech} {purpose} with enterprise-grade architecture and comprehensive testing suite"
    return first_match(profile, _CODE_CONTEXT_GUARDS, _CODE_CONTEXT_DEFAULT)


def generate_for_code(raw_input: str, profile: Profile) -> list[PromptTemplate]:
    learning = first_match(profile, _LEARNING_GUARDS, _LEARNING_DEFAULT)
    quick = first_match(profile, _QUICK_SOLUTION_GUARDS, _QUICK_SOLUTION_DEFAULT)

    return [
        PromptTemplate(
            title="Production Ready",
            prompt=(
                f"Create production-grade code for: {raw_input}\n\n"
                f"Deliver {_code_context(profile)} with complete documentation and deployment readiness."
            ),
        ),
        PromptTemplate(
            title="Learning & Educational",
            prompt=(
                f"Build educational implementation of: {raw_input}\n\n"
                f"Create {learning} that maximizes understanding and retention."
            ),
        ),
        PromptTemplate(
            title="Quick Solution",
            prompt=(
                f"Rapid implementation for: {raw_input}\n\n"
                f"Provide {quick} ready for immediate use and future enhancement."
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------

_NARRATION_GUARDS: tuple[Guard, ...] = (
    Guard(
        any_keyword("podcast", "interview", "conversation"),
        "engaging podcast-style delivery with natural conversational flow and authentic personality",
    ),
    Guard(
        any_keyword("presentation", "business", "corporate"),
        "executive-level professional presentation with authoritative confidence and clarity",
    ),
    Guard(
        any_keyword("story", "narrative", "book"),
        "compelling storytelling with dramatic pacing and emotional resonance",
    ),
)
_NARRATION_DEFAULT = "versatile professional narration adapted to content requirements and audience expectations"

_FRIENDLY_GUARDS: tuple[Guard, ...] = (
    Guard(
        any_keyword("tutorial", "guide", "how-to"),
        "friendly tutorial style that makes complex topics feel approachable and easy to understand",
    ),
    Guard(
        any_keyword("story", "personal", "experience"),
        "intimate storytelling that creates personal connection and emotional engagement",
    ),
)
_FRIENDLY_DEFAULT = "warm, relatable conversation that feels like chatting with a knowledgeable friend"

_AUTHORITY_GUARDS: tuple[Guard, ...] = (
    Guard(
        any_keyword("academic", "research", "scientific"),
        "scholarly authority with academic precision and evidence-based credibility",
    ),
    Guard(
        any_keyword("business", "executive", "corporate"),
        "executive leadership presence with strategic insight and business acumen",
    ),
    Guard(
        any_keyword("legal", "medical", "technical"),
        "professional expertise with technical accuracy and regulatory compliance",
    ),
)
_AUTHORITY_DEFAULT = "authoritative expertise with confident delivery and subject matter mastery"


def generate_for_audio(raw_input: str, profile: Profile) -> list[PromptTemplate]:
    return [
        PromptTemplate(
            title="Professional Narration",
            prompt=(
                f"Create professional audio narration for: {raw_input}\n\n"
                f"Deliver {first_match(profile, _NARRATION_GUARDS, _NARRATION_DEFAULT)} "
                "with broadcast-quality production standards."
            ),
        ),
        PromptTemplate(
            title="Conversational & Friendly",
            prompt=(
                f"Generate friendly, conversational audio: {raw_input}\n\n"
                f"Create {first_match(profile, _FRIENDLY_GUARDS, _FRIENDLY_DEFAULT)} "
                "with authentic personality and natural charm."
            ),
        ),
        PromptTemplate(
            title="Formal & Authoritative",
            prompt=(
                f"Produce formal, authoritative audio content: {raw_input}\n\n"
                f"Establish {first_match(profile, _AUTHORITY_GUARDS, _AUTHORITY_DEFAULT)} "
                "with impeccable professional presentation standards."
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# Video
# ---------------------------------------------------------------------------

VIDEO_CINEMATIC_FLAGS = "--duration 60s --fps 24"
VIDEO_SOCIAL_FLAGS = "--aspect 9:16 --duration 30s"

_CINEMATIC_GUARDS: tuple[Guard, ...] = (
    Guard(
        any_keyword("commercial", "advertisement", "brand"),
        "high-end commercial cinematography with brand storytelling and emotional impact",
    ),
    Guard(
        any_keyword("documentary", "interview", "real"),
        "documentary-style cinematography with authentic storytelling and compelling visual narrative",
    ),
    Guard(
        any_keyword("artistic", "creative", "experimental"),
        "artistic cinematography with creative visual language and innovative filming techniques",
    ),
)
_CINEMATIC_DEFAULT = "cinematic excellence with professional production values and compelling visual storytelling"

_SOCIAL_GUARDS: tuple[Guard, ...] = (
    Guard(
        any_keyword("tiktok", "viral", "trending"),
        "viral TikTok content with trending hooks, fast-paced editing, and maximum shareability",
    ),
    Guard(
        any_keyword("instagram", "reel", "story"),
        "Instagram-optimized content with aesthetic appeal and engagement-driven storytelling",
    ),
    Guard(
        any_keyword("educational", "tutorial", "tips"),
        "educational social content with quick learning value and actionable takeaways",
    ),
)
_SOCIAL_DEFAULT = "platform-optimized content designed for maximum engagement and organic reach"

_EDUCATIONAL_GUARDS: tuple[Guard, ...] = (
    Guard(
        any_keyword("tutorial", "how-to", "guide"),
        "comprehensive tutorial with step-by-step demonstrations and practical hands-on learning",
    ),
    Guard(
        any_keyword("explain", "concept", "theory"),
        "concept explanation with visual aids, examples, and clear knowledge progression",
    ),
    Guard(
        any_keyword("course", "lesson", "training"),
        "structured educational content with learning objectives and retention optimization",
    ),
)
_EDUCATIONAL_DEFAULT = "educational video content designed for effective knowledge transfer and engagement"


def generate_for_video(raw_input: str, profile: Profile) -> list[PromptTemplate]:
    return [
        PromptTemplate(
            title="Cinematic & Professional",
            prompt=(
                f"Create cinematic video sequence: {raw_input}\n\n"
                f"Produce {first_match(profile, _CINEMATIC_GUARDS, _CINEMATIC_DEFAULT)} "
                f"with 4K broadcast quality. {VIDEO_CINEMATIC_FLAGS}"
            ),
        ),
        PromptTemplate(
            title="Social Media Ready",
            prompt=(
                f"Generate social media video for: {raw_input}\n\n"
                f"Create {first_match(profile, _SOCIAL_GUARDS, _SOCIAL_DEFAULT)} "
                f"with mobile-first design. {VIDEO_SOCIAL_FLAGS}"
            ),
        ),
        PromptTemplate(
            title="Educational & Clear",
            prompt=(
                f"Produce educational video content: {raw_input}\n\n"
                f"Deliver {first_match(profile, _EDUCATIONAL_GUARDS, _EDUCATIONAL_DEFAULT)} "
                "with professional instructional design principles."
            ),
        ),
    ]


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_ROUTINES: dict[ToolType, Routine] = {
    ToolType.TEXT: generate_for_text,
    ToolType.IMAGE: generate_for_image,
    ToolType.CODE: generate_for_code,
    ToolType.AUDIO: generate_for_audio,
    ToolType.VIDEO: generate_for_video,
}


def synthesize(tool_type: str | ToolType, raw_input: str, profile: Profile) -> list[PromptTemplate]:
    """Stage 2 main entry: produce exactly three templates for ``tool_type``.

    Unknown tool types route to the text routine.
    """
    resolved = ToolType.resolve(tool_type)
    if resolved.value != tool_type:
        logger.debug("Unknown tool type %r, falling back to %s", tool_type, resolved.value)

    templates = _ROUTINES[resolved](raw_input, profile)
    logger.debug("Synthesized %d templates for tool_type=%s", len(templates), resolved.value)
    return templates
