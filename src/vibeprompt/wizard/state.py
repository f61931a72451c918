"""Wizard steps, advance gates and request bookkeeping."""

import threading
from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic.alias_generators import to_camel

from vibeprompt.schemas.catalog import TECH_CATEGORIES, TechOptionCatalog
from vibeprompt.schemas.project import (
    ProjectAnswer,
    ProjectType,
    RequirementFlag,
    TestingApproach,
    TestingPlan,
)

MIN_CORE_FEATURES = 3


class WizardStep(IntEnum):
    """Ordered wizard steps."""

    WELCOME = 0
    PROJECT_TYPE = 1
    PROJECT_DETAILS = 2
    FEATURES = 3
    TECH_STACK = 4
    TESTING = 5
    PROFESSIONAL_REQUIREMENTS = 6
    FINAL_DETAILS = 7
    GENERATE = 8


STEP_TITLES: dict[WizardStep, str] = {
    WizardStep.WELCOME: "Welcome",
    WizardStep.PROJECT_TYPE: "Project Type",
    WizardStep.PROJECT_DETAILS: "Project Details",
    WizardStep.FEATURES: "Core Features",
    WizardStep.TECH_STACK: "Tech Stack",
    WizardStep.TESTING: "Testing",
    WizardStep.PROFESSIONAL_REQUIREMENTS: "Professional Requirements",
    WizardStep.FINAL_DETAILS: "Final Details",
    WizardStep.GENERATE: "Generate",
}

# Answer fields each step reads or edits (camelCase, as serialized)
STEP_FIELDS: dict[WizardStep, tuple[str, ...]] = {
    WizardStep.WELCOME: (),
    WizardStep.PROJECT_TYPE: ("projectType",),
    WizardStep.PROJECT_DETAILS: ("projectType", "projectName", "description", "targetAudience"),
    WizardStep.FEATURES: ("projectType", "projectName", "description", "coreFeatures"),
    WizardStep.TECH_STACK: ("projectType", "projectName", "description", "coreFeatures", "techStack"),
    WizardStep.TESTING: ("testing",),
    WizardStep.PROFESSIONAL_REQUIREMENTS: ("professionalRequirements",),
    WizardStep.FINAL_DETAILS: ("additionalRequirements",),
    WizardStep.GENERATE: (
        "projectType",
        "projectName",
        "description",
        "targetAudience",
        "coreFeatures",
        "techStack",
        "testing",
        "professionalRequirements",
        "additionalRequirements",
    ),
}


def can_advance(
    step: WizardStep,
    answer: ProjectAnswer,
    catalog: Optional[TechOptionCatalog] = None,
) -> bool:
    """
    Check whether the answer satisfies the gate for leaving ``step``.

    Gates only check presence, never content quality.

    Args:
        step: Step the user wants to leave
        answer: Current answers
        catalog: Technology catalog on offer, if one has been loaded

    Returns:
        True if the wizard may move to the next step
    """
    if step == WizardStep.PROJECT_TYPE:
        return bool(answer.project_type)
    if step == WizardStep.PROJECT_DETAILS:
        return bool(
            answer.project_name.strip()
            and answer.description.strip()
            and answer.target_audience.strip()
        )
    if step == WizardStep.FEATURES:
        return len(answer.core_features) >= MIN_CORE_FEATURES
    if step == WizardStep.TECH_STACK:
        if catalog is None:
            return answer.tech_stack.is_complete()
        return all(answer.tech_stack.get(name) for name, _ in catalog.categories())
    if step == WizardStep.TESTING:
        return bool(answer.testing.approach)
    if step == WizardStep.GENERATE:
        return False
    return True


def _field_name(field: str) -> str:
    """Resolve a snake_case or camelCase answer field to its attribute name."""
    if field in ProjectAnswer.model_fields:
        return field
    for name in ProjectAnswer.model_fields:
        if to_camel(name) == field:
            return name
    raise KeyError(f"Unknown answer field: {field}")


class WizardState:
    """
    Current step plus the answers collected so far.

    Answers are immutable; every mutation swaps in a re-validated copy.
    """

    def __init__(self, answer: Optional[ProjectAnswer] = None, step: WizardStep = WizardStep.WELCOME):
        self.step = WizardStep(step)
        self.answer = answer or ProjectAnswer()
        self.catalog: Optional[TechOptionCatalog] = None

    @property
    def is_first(self) -> bool:
        return self.step == WizardStep.WELCOME

    @property
    def is_last(self) -> bool:
        return self.step == WizardStep.GENERATE

    def can_advance(self) -> bool:
        return can_advance(self.step, self.answer, self.catalog)

    def advance(self) -> bool:
        """Move to the next step if the current gate is open."""
        if not self.can_advance():
            return False
        self.step = WizardStep(self.step + 1)
        return True

    def retreat(self) -> bool:
        """Move back one step; WELCOME stays put."""
        if self.is_first:
            return False
        self.step = WizardStep(self.step - 1)
        return True

    def restart(self) -> None:
        self.step = WizardStep.WELCOME
        self.answer = ProjectAnswer()
        self.catalog = None

    def update(self, field: str, value: Any) -> ProjectAnswer:
        """
        Replace one answer field.

        Args:
            field: Field name in snake_case or camelCase
            value: New value, validated by the answer schema

        Returns:
            The new answer

        Raises:
            KeyError: If the field does not exist
            ValueError: If the value fails validation
        """
        self.answer = self.answer.merged(**{_field_name(field): value})
        return self.answer

    def select_project_type(self, project_type: ProjectType | str) -> None:
        self.update("project_type", ProjectType(project_type).value)

    def add_feature(self, feature: str) -> None:
        self.answer = self.answer.with_feature(feature)

    def remove_feature(self, index: int) -> None:
        self.answer = self.answer.without_feature(index)

    def select_tech(self, category: str, value: str) -> None:
        if category not in TECH_CATEGORIES:
            raise KeyError(f"Unknown technology category: {category}")
        self.update("tech_stack", self.answer.tech_stack.model_copy(update={category: value}))

    def select_testing(self, approach: TestingApproach | str) -> None:
        self.update("testing", TestingPlan.for_approach(approach))

    def toggle_requirement(self, flag: RequirementFlag | str) -> None:
        requirements = self.answer.professional_requirements.toggled(RequirementFlag(flag))
        self.update("professional_requirements", requirements)

    def add_requirement(self, requirement: str) -> None:
        self.answer = self.answer.with_requirement(requirement)

    def remove_requirement(self, index: int) -> None:
        self.answer = self.answer.without_requirement(index)

    def step_view(self, step: Optional[WizardStep] = None) -> dict[str, Any]:
        """The slice of the answer a step displays or edits."""
        step = self.step if step is None else WizardStep(step)
        payload = self.answer.to_payload()
        return {key: payload[key] for key in STEP_FIELDS[step]}


class RequestPurpose(str, Enum):
    """Kinds of model request the wizard issues."""

    GUIDANCE = "guidance"
    SUGGESTIONS = "suggestions"
    ENHANCEMENT = "enhancement"
    TECH_OPTIONS = "tech_options"
    RECOMMENDATION = "recommendation"
    FINAL_SPEC = "final_spec"


class RequestTracker:
    """
    Generation counter per request purpose.

    ``begin`` hands out a token and marks the purpose as requesting.
    ``finish`` marks it idle again and reports whether the token is still the
    latest, so a slow stale reply cannot overwrite a newer one.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generations: dict[RequestPurpose, int] = {}
        self._pending: dict[RequestPurpose, int] = {}

    def begin(self, purpose: RequestPurpose) -> int:
        with self._lock:
            token = self._generations.get(purpose, 0) + 1
            self._generations[purpose] = token
            self._pending[purpose] = self._pending.get(purpose, 0) + 1
            return token

    def finish(self, purpose: RequestPurpose, token: int) -> bool:
        with self._lock:
            self._pending[purpose] = max(self._pending.get(purpose, 0) - 1, 0)
            return token == self._generations.get(purpose)

    def is_current(self, purpose: RequestPurpose, token: int) -> bool:
        with self._lock:
            return token == self._generations.get(purpose)

    def invalidate(self, purpose: RequestPurpose) -> None:
        """Make every outstanding token for ``purpose`` stale."""
        with self._lock:
            self._generations[purpose] = self._generations.get(purpose, 0) + 1

    def is_loading(self, purpose: Optional[RequestPurpose] = None) -> bool:
        with self._lock:
            if purpose is None:
                return any(self._pending.values())
            return self._pending.get(purpose, 0) > 0
