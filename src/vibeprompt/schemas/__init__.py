"""Pydantic schemas for wizard answers and technology catalogs."""

from vibeprompt.schemas.catalog import (
    TECH_CATEGORIES,
    Difficulty,
    TechCategory,
    TechOption,
    TechOptionCatalog,
)
from vibeprompt.schemas.project import (
    ProfessionalRequirements,
    ProjectAnswer,
    ProjectType,
    RequirementFlag,
    TechStack,
    TestingApproach,
    TestingPlan,
)

__all__ = [
    "TECH_CATEGORIES",
    "Difficulty",
    "ProfessionalRequirements",
    "ProjectAnswer",
    "ProjectType",
    "RequirementFlag",
    "TechCategory",
    "TechOption",
    "TechOptionCatalog",
    "TechStack",
    "TestingApproach",
    "TestingPlan",
]
