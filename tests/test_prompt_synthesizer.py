"""Tests for the Prompt Generator template synthesizer (stage 2)."""

import pytest

from app.prompt_generator import generate
from app.prompt_generator.classifier import classify
from app.prompt_generator.guards import (
    Guard,
    all_of,
    any_keyword,
    any_of,
    first_keyword,
    first_match,
)
from app.prompt_generator.instructions import (
    build_instruction_block,
    content_approach,
    delivery_style,
    response_format,
)
from app.prompt_generator.synthesizer import (
    IMAGE_ARTISTIC_FLAGS,
    IMAGE_COMMERCIAL_FLAGS,
    IMAGE_PHOTOREALISTIC_FLAGS,
    VIDEO_CINEMATIC_FLAGS,
    VIDEO_SOCIAL_FLAGS,
    synthesize,
)
from app.prompt_generator.types import (
    Complexity,
    Domain,
    Intent,
    PromptTemplate,
    Specificity,
    ToolType,
)

TITLES = {
    "text": ["Quick & Simple", "Detailed & Professional", "Creative & Engaging"],
    "image": ["Photorealistic", "Artistic & Creative", "Commercial & Clean"],
    "code": ["Production Ready", "Learning & Educational", "Quick Solution"],
    "audio": ["Professional Narration", "Conversational & Friendly", "Formal & Authoritative"],
    "video": ["Cinematic & Professional", "Social Media Ready", "Educational & Clear"],
}


def _prompts(tool_type: str, text: str) -> list[str]:
    return [t.prompt for t in generate(tool_type, text)]


# ==========================================================================
# Guard chains
# ==========================================================================


class TestGuards:
    def test_first_match_respects_order(self, make_profile):
        profile = make_profile(keywords=["alpha", "beta"])
        guards = (
            Guard(any_keyword("beta"), "second-listed keyword, first guard"),
            Guard(any_keyword("alpha"), "first-listed keyword, second guard"),
        )
        assert first_match(profile, guards, "default") == "second-listed keyword, first guard"

    def test_first_match_default(self, make_profile):
        guards = (Guard(any_keyword("missing"), "never"),)
        assert first_match(make_profile(), guards, "default") == "default"

    def test_first_keyword_uses_input_order(self, make_profile):
        profile = make_profile(keywords=["vintage", "modern"])
        assert first_keyword(profile, ("modern", "vintage")) == "vintage"

    def test_first_keyword_none(self, make_profile):
        assert first_keyword(make_profile(keywords=["alpha"]), ("beta",)) is None

    def test_combinators(self, make_profile):
        profile = make_profile(keywords=["alpha"], domain=Domain.CREATIVE)
        creative = lambda p: p.domain is Domain.CREATIVE  # noqa: E731
        assert all_of(any_keyword("alpha"), creative)(profile)
        assert not all_of(any_keyword("beta"), creative)(profile)
        assert any_of(any_keyword("beta"), creative)(profile)


# ==========================================================================
# Shared instruction block (text)
# ==========================================================================


class TestInstructions:
    def test_response_format_complex(self, make_profile):
        result = response_format(make_profile(complexity=Complexity.COMPLEX))
        assert result.startswith("Structure your response with clear headings")

    def test_response_format_detailed(self, make_profile):
        result = response_format(make_profile(specificity=Specificity.DETAILED))
        assert result.startswith("Structure your response with clear headings")

    def test_response_format_urgent_keyword(self, make_profile):
        result = response_format(make_profile(keywords=["asap"]))
        assert result.startswith("Provide a concise, well-organized response")

    def test_response_format_moderate(self, make_profile):
        result = response_format(make_profile(specificity=Specificity.MODERATE))
        assert result.startswith("Provide a concise, well-organized response")

    def test_response_format_default(self, make_profile):
        assert response_format(make_profile()).startswith("Present information clearly")

    def test_content_creative_needs_creative_domain(self, make_profile):
        creative = make_profile(keywords=["creative"], domain=Domain.CREATIVE)
        assert content_approach(creative).startswith("Use innovative thinking")
        general = make_profile(keywords=["creative"])
        assert content_approach(general).startswith("Provide practical, actionable guidance")

    def test_content_technical_beats_analytical(self, make_profile):
        profile = make_profile(keywords=["code", "review"], domain=Domain.TECHNICAL)
        assert content_approach(profile).startswith("Include specific technical details")

    def test_content_analytical(self, make_profile):
        assert content_approach(make_profile(keywords=["compare"])).startswith("Provide data-driven insights")

    def test_content_business_domain(self, make_profile):
        result = content_approach(make_profile(domain=Domain.BUSINESS))
        assert result.startswith("Focus on practical business value")

    def test_content_business_beats_question(self, make_profile):
        result = content_approach(make_profile(keywords=["revenue"]), "what about revenue?")
        assert result.startswith("Focus on practical business value")

    def test_content_question_mark(self, make_profile):
        assert content_approach(make_profile(), "is this right?").startswith("Answer comprehensively")

    def test_content_explain_intent(self, make_profile):
        assert content_approach(make_profile(intent=Intent.EXPLAIN)).startswith("Answer comprehensively")

    def test_content_default(self, make_profile):
        assert content_approach(make_profile(), "do it").startswith("Provide practical, actionable guidance")

    def test_delivery_academic(self, make_profile):
        assert delivery_style(make_profile(domain=Domain.ACADEMIC)).startswith("Maintain scholarly rigor")

    def test_delivery_professional_domain(self, make_profile):
        result = delivery_style(make_profile(domain=Domain.PROFESSIONAL))
        assert result.startswith("Use professional language")

    def test_delivery_business_keyword(self, make_profile):
        result = delivery_style(make_profile(keywords=["strategy"]))
        assert result.startswith("Use professional language")

    def test_delivery_beginner(self, make_profile):
        result = delivery_style(make_profile(keywords=["beginner"]))
        assert result.startswith("Explain concepts in accessible terms")

    def test_delivery_urgent(self, make_profile):
        result = delivery_style(make_profile(keywords=["fast"]))
        assert result.startswith("Prioritize the most critical information")

    def test_delivery_default(self, make_profile):
        assert delivery_style(make_profile()).startswith("Balance thoroughness with clarity")

    def test_block_is_concatenation_in_order(self, make_profile):
        profile = make_profile(keywords=["review"], domain=Domain.ACADEMIC, complexity=Complexity.COMPLEX)
        raw = "review the paper"
        assert build_instruction_block(profile, raw) == (
            response_format(profile, raw) + content_approach(profile, raw) + delivery_style(profile, raw)
        )


# ==========================================================================
# Text routine
# ==========================================================================


class TestTextRoutine:
    def test_resume_scenario(self):
        text = "How do I improve my resume for a tech job?"
        quick, detailed, creative = _prompts("text", text)

        assert quick.startswith(f"You are a professional educator. {text}\n\n")
        assert "Present information clearly" in quick
        assert "Answer comprehensively" in quick
        assert quick.endswith("both comprehensive and practical.")

        assert detailed.startswith("Act as a subject matter expert in how, improve, resume.")
        assert f'Transform this request: "{text}"' in detailed
        assert "Provide comprehensive education covering theory" in detailed

        assert "specializing in how and improve." in creative
        assert "using how and improve as creative anchors" in creative

    def test_non_explain_persona(self):
        quick = _prompts("text", "Write a poem about autumn")[0]
        assert quick.startswith("You are a professional content strategist.")

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("improve onboarding emails", "Deliver strategic improvement framework"),
            ("assess our hiring funnel", "Conduct thorough analysis"),
            ("write a poem about autumn", "Create comprehensive implementation guide"),
        ],
    )
    def test_detailed_approach_by_intent(self, text, expected):
        assert expected in _prompts("text", text)[1]

    def test_creative_business_theme(self):
        creative = _prompts("text", "marketing launch ideas")[2]
        assert "Craft compelling business storytelling" in creative

    def test_creative_default(self):
        creative = _prompts("text", "write a poem about autumn")[2]
        assert "Create inspiring content that sparks curiosity" in creative

    def test_instruction_block_shared_by_all_three(self):
        text = "Quick tips for marketing a bakery"
        block = build_instruction_block(classify(text), text)
        assert all(p.endswith(block) for p in _prompts("text", text))

    def test_empty_input_has_readable_expertise(self):
        _, detailed, creative = _prompts("text", "")
        assert "expert in this subject." in detailed
        assert "specializing in this subject." in creative


# ==========================================================================
# Image routine
# ==========================================================================


class TestImageRoutine:
    def test_instagram_marketing_scenario(self):
        templates = generate("image", "Create a vibrant product photo for Instagram marketing")
        assert [t.title for t in templates] == TITLES["image"]

        photo, artistic, commercial = (t.prompt for t in templates)
        assert "commercial product photography" in photo
        assert "contemporary artistic style with vibrant aesthetic" in artistic
        assert "emphasizing create and vibrant themes" in artistic
        assert "social media optimized" in commercial

    def test_flags_verbatim(self):
        photo, artistic, commercial = _prompts("image", "a lighthouse at dusk")
        assert photo.endswith(" --ar 16:9 --style raw --quality 2")
        assert artistic.endswith(" --v 6 --stylize 750")
        assert commercial.endswith(" --ar 1:1 --quality 2")
        assert IMAGE_PHOTOREALISTIC_FLAGS == "--ar 16:9 --style raw --quality 2"
        assert IMAGE_ARTISTIC_FLAGS == "--v 6 --stylize 750"
        assert IMAGE_COMMERCIAL_FLAGS == "--ar 1:1 --quality 2"

    def test_portrait(self):
        assert "portrait photography" in _prompts("image", "portrait of old people laughing")[0]

    def test_landscape(self):
        assert "landscape photography" in _prompts("image", "misty nature scenery")[0]

    def test_default_subject(self):
        assert "professional photography with optimal composition" in _prompts("image", "a lighthouse")[0]

    def test_style_and_mood_from_keywords(self):
        artistic = _prompts("image", "vintage dark poster")[1]
        assert "vintage artistic style with dark aesthetic" in artistic

    def test_marketing_without_social(self):
        commercial = _prompts("image", "banner for marketing")[2]
        assert "marketing campaign ready" in commercial

    def test_web(self):
        assert "web-optimized" in _prompts("image", "hero image for website")[2]

    def test_commercial_default(self):
        assert "versatile commercial use" in _prompts("image", "a lighthouse")[2]


# ==========================================================================
# Code routine
# ==========================================================================


class TestCodeRoutine:
    def test_fix_login_scenario(self):
        production, learning, quick = _prompts("code", "Fix this broken login function")
        # "fix" resolves to improve (tested before solve)
        assert "refactored solution with enhanced performance" in production
        assert "comprehensive learning guide starting from basics" in learning
        assert "streamlined solution focusing on essential features" in quick

    def test_technology_purpose_pair(self):
        production, _, quick = _prompts("code", "debug python api function")
        assert "optimized python function with enterprise-grade architecture" in production
        assert "immediate fix with minimal changes" in quick

    def test_default_context(self):
        production = _prompts("code", "sorting helper")[0]
        assert "robust, scalable solution" in production

    def test_beginner_learning(self):
        learning = _prompts("code", "quick react tutorial for beginner")[1]
        assert "beginner-friendly tutorial" in learning

    def test_structured_learning_default(self):
        learning = _prompts("code", "a brief sorting helper")[1]
        assert "structured educational implementation" in learning

    def test_prototype(self):
        quick = _prompts("code", "Create an mvp landing page")[2]
        assert "rapid prototype demonstrating core functionality" in quick


# ==========================================================================
# Audio routine
# ==========================================================================


class TestAudioRoutine:
    def test_podcast(self):
        narration, friendly, formal = _prompts("audio", "Record a podcast intro")
        assert "engaging podcast-style delivery" in narration
        assert "warm, relatable conversation" in friendly
        assert "authoritative expertise with confident delivery" in formal

    def test_business(self):
        narration, _, formal = _prompts("audio", "quarterly business presentation")
        assert "executive-level professional presentation" in narration
        assert "executive leadership presence" in formal

    def test_story(self):
        narration, friendly, _ = _prompts("audio", "my personal story")
        assert "compelling storytelling with dramatic pacing" in narration
        assert "intimate storytelling" in friendly

    def test_tutorial(self):
        assert "friendly tutorial style" in _prompts("audio", "tutorial on baking bread")[1]

    def test_research(self):
        assert "scholarly authority" in _prompts("audio", "research findings on sleep")[2]

    def test_technical(self):
        assert "regulatory compliance" in _prompts("audio", "technical briefing")[2]

    def test_default_narration(self):
        assert "versatile professional narration" in _prompts("audio", "welcome message")[0]


# ==========================================================================
# Video routine
# ==========================================================================


class TestVideoRoutine:
    def test_flags_verbatim(self):
        cinematic, social, educational = _prompts("video", "sunrise over mountains")
        assert cinematic.endswith(" --duration 60s --fps 24")
        assert social.endswith(" --aspect 9:16 --duration 30s")
        assert "--" not in educational
        assert VIDEO_CINEMATIC_FLAGS == "--duration 60s --fps 24"
        assert VIDEO_SOCIAL_FLAGS == "--aspect 9:16 --duration 30s"

    def test_brand_commercial(self):
        assert "high-end commercial cinematography" in _prompts("video", "brand commercial spot")[0]

    def test_documentary(self):
        assert "documentary-style cinematography" in _prompts("video", "documentary on bees")[0]

    def test_tiktok(self):
        assert "viral TikTok content" in _prompts("video", "viral tiktok dance")[1]

    def test_instagram(self):
        assert "Instagram-optimized content" in _prompts("video", "instagram reel of latte art")[1]

    def test_tutorial(self):
        cinematic, social, educational = _prompts("video", "cooking tutorial")
        assert "cinematic excellence" in cinematic
        assert "educational social content" in social
        assert "comprehensive tutorial with step-by-step demonstrations" in educational

    def test_concept(self):
        assert "concept explanation with visual aids" in _prompts("video", "relativity theory basics")[2]

    def test_course(self):
        assert "structured educational content" in _prompts("video", "onboarding course")[2]


# ==========================================================================
# Dispatch and cardinality
# ==========================================================================


class TestDispatch:
    @pytest.mark.parametrize("tool_type", list(TITLES))
    def test_titles_per_tool_type(self, tool_type):
        assert [t.title for t in generate(tool_type, "anything at all")] == TITLES[tool_type]

    @pytest.mark.parametrize("tool_type", ["unknown_type", "Image", "", "TEXT"])
    def test_unknown_routes_to_text(self, tool_type):
        text = "How do I improve my resume for a tech job?"
        assert generate(tool_type, text) == generate("text", text)

    def test_accepts_enum(self):
        text = "hero image for website"
        assert generate(ToolType.IMAGE, text) == generate("image", text)

    def test_synthesize_uses_given_profile(self):
        text = "a lighthouse"
        assert synthesize("code", text, classify(text)) == generate("code", text)

    @pytest.mark.parametrize("tool_type", [*TITLES, "unknown"])
    @pytest.mark.parametrize(
        "text",
        ["", "   ", "?!", "Привет мир", "x", " ".join(["lorem"] * 200)],
    )
    def test_always_three_complete_templates(self, tool_type, text):
        templates = generate(tool_type, text)
        assert len(templates) == 3
        assert all(isinstance(t, PromptTemplate) for t in templates)
        assert all(t.title and t.prompt for t in templates)
        assert len({t.title for t in templates}) == 3

    def test_non_string_input_rejected(self):
        with pytest.raises(TypeError):
            generate("text", None)  # type: ignore[arg-type]

    def test_template_to_dict(self):
        template = generate("code", "sorting helper")[0]
        assert template.to_dict() == {"title": "Production Ready", "prompt": template.prompt}
