"""Prompt templates and the requirement detail table."""

from vibeprompt.prompts.final_spec import final_spec_prompt
from vibeprompt.prompts.requirements import (
    MANDATORY_REQUIREMENTS,
    REQUIREMENT_DETAILS,
    requirement_detail,
)
from vibeprompt.prompts.templates import (
    FEATURE_SUGGESTION_MIN_DESCRIPTION,
    PromptPair,
    description_enhancement_prompt,
    feature_suggestion_prompt,
    project_type_guidance_prompt,
    tech_options_prompt,
    tech_recommendation_prompt,
)

__all__ = [
    "FEATURE_SUGGESTION_MIN_DESCRIPTION",
    "MANDATORY_REQUIREMENTS",
    "REQUIREMENT_DETAILS",
    "PromptPair",
    "description_enhancement_prompt",
    "feature_suggestion_prompt",
    "final_spec_prompt",
    "project_type_guidance_prompt",
    "requirement_detail",
    "tech_options_prompt",
    "tech_recommendation_prompt",
]
