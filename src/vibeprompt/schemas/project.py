"""Schema for the project answers collected by the wizard."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ProjectType(str, Enum):
    """Kinds of project the wizard knows how to plan."""

    WEBSITE = "website"
    WEB_APP = "web-app"
    MOBILE_APP = "mobile-app"
    ECOMMERCE = "ecommerce"
    SOCIAL_PLATFORM = "social-platform"
    GAME = "game"


PROJECT_TYPE_LABELS: dict[ProjectType, tuple[str, str]] = {
    ProjectType.WEBSITE: ("Website", "Portfolio, blog, or business website"),
    ProjectType.WEB_APP: ("Web Application", "Interactive web-based application"),
    ProjectType.MOBILE_APP: ("Mobile App", "iOS or Android application"),
    ProjectType.ECOMMERCE: ("E-commerce", "Online store or marketplace"),
    ProjectType.SOCIAL_PLATFORM: ("Social Platform", "Community or social networking site"),
    ProjectType.GAME: ("Game", "Browser or mobile game"),
}


class TestingApproach(str, Enum):
    """Testing depth the user can pick."""

    __test__ = False

    BASIC = "basic"
    COMPREHENSIVE = "comprehensive"
    ADVANCED = "advanced"


TESTING_TOOLS: dict[TestingApproach, tuple[str, ...]] = {
    TestingApproach.BASIC: ("Manual testing", "Browser testing"),
    TestingApproach.COMPREHENSIVE: (
        "Automated tests",
        "User experience testing",
        "Performance testing",
    ),
    TestingApproach.ADVANCED: (
        "Unit tests",
        "Integration tests",
        "E2E testing",
        "Performance monitoring",
    ),
}


class RequirementFlag(str, Enum):
    """Closed set of professional requirement toggles."""

    USER_ACCOUNTS = "userAccounts"
    SENSITIVE_DATA = "sensitiveData"
    ADMIN_PANEL = "adminPanel"
    MOBILE_RESPONSIVE = "mobileResponsive"
    REAL_TIME_FEATURES = "realTimeFeatures"
    FILE_UPLOADS = "fileUploads"
    PAYMENTS = "payments"
    SEARCH_FEATURE = "searchFeature"
    ANALYTICS = "analytics"
    MULTI_LANGUAGE = "multiLanguage"


REQUIREMENT_LABELS: dict[RequirementFlag, str] = {
    RequirementFlag.USER_ACCOUNTS: "User Accounts & Login",
    RequirementFlag.SENSITIVE_DATA: "Sensitive Data Handling",
    RequirementFlag.ADMIN_PANEL: "Admin Dashboard",
    RequirementFlag.MOBILE_RESPONSIVE: "Mobile-Friendly Design",
    RequirementFlag.REAL_TIME_FEATURES: "Real-Time Updates",
    RequirementFlag.FILE_UPLOADS: "File Uploads",
    RequirementFlag.PAYMENTS: "Payment Processing",
    RequirementFlag.SEARCH_FEATURE: "Search Functionality",
    RequirementFlag.ANALYTICS: "Usage Analytics",
    RequirementFlag.MULTI_LANGUAGE: "Multiple Languages",
}


def _empty_if_none(v: Any, empty: Any) -> Any:
    return empty if v is None else v


class _AnswerModel(BaseModel):
    """Frozen base: camelCase aliases on the wire, snake_case in Python."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class TechStack(_AnswerModel):
    """Chosen option identifier per technology category."""

    frontend: str = ""
    backend: str = ""
    database: str = ""
    hosting: str = ""

    @field_validator("frontend", "backend", "database", "hosting", mode="before")
    @classmethod
    def normalize_choice(cls, v) -> str:
        """Treat None as unset."""
        return _empty_if_none(v, "")

    def is_empty(self) -> bool:
        return not (self.frontend or self.backend or self.database or self.hosting)

    def is_complete(self) -> bool:
        return bool(self.frontend and self.backend and self.database and self.hosting)

    def get(self, category: str) -> str:
        return getattr(self, category)


class TestingPlan(_AnswerModel):
    """Testing approach and the tools that approach implies."""

    __test__ = False

    approach: str = ""
    tools: list[str] = Field(default_factory=list)

    @field_validator("approach", mode="before")
    @classmethod
    def normalize_approach(cls, v) -> str:
        """Accept enum members, reject unknown approaches."""
        if v is None or v == "":
            return ""
        return TestingApproach(v).value

    @field_validator("tools", mode="before")
    @classmethod
    def normalize_tools(cls, v) -> list[str]:
        return list(_empty_if_none(v, []))

    @classmethod
    def for_approach(cls, approach: TestingApproach | str) -> "TestingPlan":
        """Build the plan for an approach; tools always follow the approach."""
        approach = TestingApproach(approach)
        return cls(approach=approach.value, tools=list(TESTING_TOOLS[approach]))


class ProfessionalRequirements(_AnswerModel):
    """The ten professional requirement toggles, all off by default."""

    user_accounts: bool = False
    sensitive_data: bool = False
    admin_panel: bool = False
    mobile_responsive: bool = False
    real_time_features: bool = False
    file_uploads: bool = False
    payments: bool = False
    search_feature: bool = False
    analytics: bool = False
    multi_language: bool = False

    @staticmethod
    def field_for(flag: RequirementFlag) -> str:
        """Python attribute name backing a flag."""
        return _FLAG_FIELDS[RequirementFlag(flag)]

    def is_enabled(self, flag: RequirementFlag) -> bool:
        return getattr(self, self.field_for(flag))

    def enabled_flags(self) -> list[RequirementFlag]:
        """Enabled flags in declaration order."""
        return [flag for flag in RequirementFlag if self.is_enabled(flag)]

    def selected_count(self) -> int:
        return len(self.enabled_flags())

    def toggled(self, flag: RequirementFlag) -> "ProfessionalRequirements":
        name = self.field_for(flag)
        return self.model_copy(update={name: not getattr(self, name)})


_FLAG_FIELDS: dict[RequirementFlag, str] = {
    flag: name
    for name in ProfessionalRequirements.model_fields
    for flag in RequirementFlag
    if to_camel(name) == flag.value
}


class ProjectAnswer(_AnswerModel):
    """Everything the wizard has collected so far."""

    project_type: str = Field(
        default="",
        description="One of the ProjectType values, or empty while unset",
    )
    project_name: str = ""
    description: str = ""
    target_audience: str = ""
    core_features: list[str] = Field(default_factory=list)
    tech_stack: TechStack = Field(default_factory=TechStack)
    testing: TestingPlan = Field(default_factory=TestingPlan)
    professional_requirements: ProfessionalRequirements = Field(
        default_factory=ProfessionalRequirements
    )
    additional_requirements: list[str] = Field(default_factory=list)

    @field_validator("project_type", mode="before")
    @classmethod
    def normalize_project_type(cls, v) -> str:
        """Accept enum members and empty values, reject unknown types."""
        if v is None or v == "":
            return ""
        return ProjectType(v).value

    @field_validator("project_name", "description", "target_audience", mode="before")
    @classmethod
    def normalize_text(cls, v) -> str:
        return _empty_if_none(v, "")

    @field_validator("core_features", "additional_requirements", mode="before")
    @classmethod
    def normalize_entries(cls, v) -> list[str]:
        """Normalize free-text lists to strings."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return [str(item) for item in v]

    @field_validator("tech_stack", "testing", "professional_requirements", mode="before")
    @classmethod
    def normalize_records(cls, v, info):
        if v is None:
            return cls.model_fields[info.field_name].default_factory()
        return v

    def merged(self, **changes: Any) -> "ProjectAnswer":
        """Return a new answer with ``changes`` applied and re-validated."""
        data = self.model_dump()
        data.update(changes)
        return ProjectAnswer.model_validate(data)

    def with_feature(self, feature: str) -> "ProjectAnswer":
        return self.merged(core_features=_append_unique(self.core_features, feature))

    def without_feature(self, index: int) -> "ProjectAnswer":
        return self.merged(core_features=_drop_index(self.core_features, index))

    def with_requirement(self, requirement: str) -> "ProjectAnswer":
        return self.merged(
            additional_requirements=_append_unique(self.additional_requirements, requirement)
        )

    def without_requirement(self, index: int) -> "ProjectAnswer":
        return self.merged(
            additional_requirements=_drop_index(self.additional_requirements, index)
        )

    def to_payload(self) -> dict[str, Any]:
        """camelCase dictionary used when serializing into prompts."""
        return self.model_dump(by_alias=True, mode="json")


def _append_unique(items: list[str], entry: str) -> list[str]:
    entry = entry.strip()
    if not entry or entry in items:
        return list(items)
    return [*items, entry]


def _drop_index(items: list[str], index: int) -> list[str]:
    return [item for i, item in enumerate(items) if i != index]
