"""Tests for prompt templates and final prompt assembly."""

import json

import pytest

from vibeprompt.prompts import (
    MANDATORY_REQUIREMENTS,
    REQUIREMENT_DETAILS,
    description_enhancement_prompt,
    feature_suggestion_prompt,
    final_spec_prompt,
    project_type_guidance_prompt,
    requirement_detail,
    tech_options_prompt,
    tech_recommendation_prompt,
)
from vibeprompt.schemas.project import ProfessionalRequirements, ProjectAnswer, RequirementFlag


def _heading(flag):
    return requirement_detail(flag).splitlines()[0]


class TestSmallTemplates:
    """Test the per-step prompt templates."""

    def test_deterministic(self):
        """Test identical inputs give identical prompts."""
        first = feature_suggestion_prompt("web-app", "TaskFlow", "A to-do list for teams")
        second = feature_suggestion_prompt("web-app", "TaskFlow", "A to-do list for teams")
        assert first == second

    def test_messages_are_system_then_user(self):
        messages = project_type_guidance_prompt("game").to_messages()
        assert [m.role for m in messages] == ["system", "user"]
        assert "game" in messages[1].content

    def test_feature_prompt_mentions_inputs(self):
        prompt = feature_suggestion_prompt("ecommerce", "ShopLite", "Sell handmade soap online")
        assert "ShopLite" in prompt.user
        assert "Sell handmade soap online" in prompt.user
        assert "8-10" in prompt.user
        assert "one per line" in prompt.user

    def test_enhancement_defaults_project_name(self):
        prompt = description_enhancement_prompt("A recipe app", "mobile-app", "")
        assert "Unnamed Project" in prompt.user
        assert '"A recipe app"' in prompt.user

    def test_tech_options_prompt_is_json_only(self):
        """Test the example JSON is rendered with single braces."""
        prompt = tech_options_prompt("game")
        assert "{{" not in prompt.user
        assert '"frontend": {' in prompt.user
        assert "JSON object only" in prompt.user
        assert "valid JSON only" in prompt.system

    def test_recommendation_lists_features(self):
        prompt = tech_recommendation_prompt("web-app", "TaskFlow", "Teams", ["Auth", "Search"])
        assert "Features: Auth, Search" in prompt.user
        assert "not a list" in prompt.user


class TestRequirementDetails:
    """Test the requirement detail table."""

    def test_every_flag_has_guidance(self):
        for flag in RequirementFlag:
            assert REQUIREMENT_DETAILS[flag].startswith("### ")

    def test_headings_are_unique(self):
        headings = [_heading(flag) for flag in RequirementFlag]
        assert len(set(headings)) == len(headings)

    def test_lookup_by_value(self):
        assert "PAYMENT PROCESSING" in requirement_detail("payments")
        assert requirement_detail(RequirementFlag.ADMIN_PANEL).startswith("### ADMIN DASHBOARD")

    def test_unknown_flag_is_empty(self):
        assert requirement_detail("teleportation") == ""

    def test_mandatory_block_sections(self):
        for section in ("Error Handling", "Logging", "Accessibility", "Performance", "Deployment"):
            assert section in MANDATORY_REQUIREMENTS


class TestFinalSpecPrompt:
    """Test final prompt assembly."""

    def test_serializes_core_fields(self, sample_answer):
        """Test every collected field appears in the user prompt."""
        prompt = final_spec_prompt(sample_answer)
        for value in (
            "TaskFlow",
            sample_answer.description,
            "Small remote teams",
            "Auth",
            "Dashboard",
            "Search",
            "react",
            "vercel",
            "comprehensive",
            "Dark mode",
        ):
            assert value in prompt.user

    def test_project_json_embedded(self, sample_answer):
        prompt = final_spec_prompt(sample_answer)
        expected = json.dumps(sample_answer.to_payload(), indent=2, ensure_ascii=False)
        assert expected in prompt.user

    def test_enabled_flags_only(self, sample_answer):
        """Test userAccounts and payments appear and nothing else does."""
        prompt = final_spec_prompt(sample_answer)
        assert "USER ACCOUNTS" in prompt.user
        assert "PAYMENT PROCESSING" in prompt.user
        assert "ADMIN DASHBOARD" not in prompt.user
        for flag in RequirementFlag:
            if flag in (RequirementFlag.USER_ACCOUNTS, RequirementFlag.PAYMENTS):
                continue
            assert _heading(flag) not in prompt.user

    @pytest.mark.parametrize("flag", list(RequirementFlag))
    def test_each_flag_contributes_its_heading(self, flag):
        requirements = ProfessionalRequirements().toggled(flag)
        prompt = final_spec_prompt(ProjectAnswer(professional_requirements=requirements))
        assert _heading(flag) in prompt.user

    def test_mandatory_block_always_present(self):
        """Test the mandatory block is present even with nothing selected."""
        prompt = final_spec_prompt(ProjectAnswer())
        assert "MANDATORY REQUIREMENTS" in prompt.user
        assert "Error Handling" in prompt.user
        assert "Accessibility" in prompt.user
        assert "PROFESSIONAL REQUIREMENTS SELECTED" not in prompt.user

    def test_system_prompt_has_rubric_and_sections(self, sample_answer):
        prompt = final_spec_prompt(sample_answer)
        assert "RUBRIC" in prompt.system
        assert "## 10. RISKS & ASSUMPTIONS" in prompt.system
        assert "PAYMENT PROCESSING" not in prompt.system

    def test_deterministic(self, sample_answer):
        assert final_spec_prompt(sample_answer) == final_spec_prompt(sample_answer)
