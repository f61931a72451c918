"""AI assistance for each wizard task: template, gateway call, parser."""

from typing import Sequence

from vibeprompt.core import gateway as profiles
from vibeprompt.core.gateway import ModelGateway
from vibeprompt.core.logging import get_logger
from vibeprompt.parsers import parse_feature_list, parse_tech_catalog
from vibeprompt.prompts import (
    FEATURE_SUGGESTION_MIN_DESCRIPTION,
    description_enhancement_prompt,
    feature_suggestion_prompt,
    final_spec_prompt,
    project_type_guidance_prompt,
    tech_options_prompt,
    tech_recommendation_prompt,
)
from vibeprompt.schemas.catalog import TechOptionCatalog
from vibeprompt.schemas.project import ProjectAnswer

logger = get_logger("vibeprompt.assistant")


class ProjectAssistant:
    """Asks the model for help with one wizard step at a time."""

    def __init__(self, gateway: ModelGateway):
        """
        Initialize assistant.

        Args:
            gateway: Model gateway used for every request
        """
        self.gateway = gateway

    def project_type_guidance(self, project_type: str) -> str:
        """Plain-language overview of a project type."""
        prompt = project_type_guidance_prompt(project_type)
        return self.gateway.complete(prompt.to_messages(), profiles.PROJECT_GUIDANCE)

    def suggest_features(self, project_type: str, project_name: str, description: str) -> list[str]:
        """
        Suggest core features for the project.

        Args:
            project_type: Selected project type
            project_name: Project name
            description: Project description

        Returns:
            Up to ten suggestions; empty when the description is too short
            to work from or the model could not answer
        """
        if len(description) <= FEATURE_SUGGESTION_MIN_DESCRIPTION:
            return []

        prompt = feature_suggestion_prompt(project_type, project_name, description)
        result = self.gateway.complete_result(prompt.to_messages(), profiles.FEATURE_SUGGESTIONS)
        if not result.ok:
            logger.info(
                "No feature suggestions available",
                context={"event_type": "suggestions_unavailable", "reason": result.reason.value},
            )
            return []
        return parse_feature_list(result.text)

    def enhance_description(self, description: str, project_type: str, project_name: str) -> str:
        """
        Rewrite a short description as detailed prose.

        Returns:
            The enhanced description, or an empty string when there was
            nothing to enhance or the model could not answer
        """
        if not description.strip():
            return ""

        prompt = description_enhancement_prompt(description, project_type, project_name)
        result = self.gateway.complete_result(
            prompt.to_messages(), profiles.DESCRIPTION_ENHANCEMENT
        )
        return result.text.strip() if result.ok else ""

    def generate_tech_options(self, project_type: str) -> TechOptionCatalog:
        """
        Ask the model for a technology catalog.

        Falls back to the static catalog for ``project_type`` when the model
        fails or replies with anything but a valid catalog.
        """
        prompt = tech_options_prompt(project_type)
        result = self.gateway.complete_result(prompt.to_messages(), profiles.TECH_OPTIONS)
        # Fallback text is never JSON, so the parser lands on the static catalog
        return parse_tech_catalog(result.text if result.ok else "", project_type)

    def recommend_tech_stack(
        self,
        project_type: str,
        project_name: str,
        description: str,
        core_features: Sequence[str],
    ) -> str:
        """Prose explaining which stack suits the project."""
        prompt = tech_recommendation_prompt(project_type, project_name, description, core_features)
        return self.gateway.complete(prompt.to_messages(), profiles.TECH_RECOMMENDATION)

    def generate_final_spec(self, answer: ProjectAnswer) -> str:
        """
        Generate the final build specification.

        Args:
            answer: Complete wizard answers

        Returns:
            Specification text, or the gateway's fallback message
        """
        prompt = final_spec_prompt(answer)
        return self.gateway.complete(prompt.to_messages(), profiles.FINAL_SPECIFICATION)
