"""Schema for technology option catalogs."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

TECH_CATEGORIES: tuple[str, ...] = ("frontend", "backend", "database", "hosting")


class Difficulty(str, Enum):
    """How hard an option is for a beginner."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class TechOption(BaseModel):
    """A single selectable technology."""

    value: str = Field(description="kebab-case identifier stored in the answer")
    label: str = Field(description="Display name")
    description: str = Field(description="What it is and why it suits this project type")
    pros: list[str] = Field(default_factory=list, description="Key benefits")
    difficulty: Difficulty

    @field_validator("pros", mode="before")
    @classmethod
    def normalize_pros(cls, v) -> list[str]:
        """Normalize pros to list of strings."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return [str(item) for item in v]


class TechCategory(BaseModel):
    """One category of options (frontend, backend, ...)."""

    title: str
    description: str
    options: list[TechOption] = Field(min_length=1, description="Selectable options, at least one")


class TechOptionCatalog(BaseModel):
    """Options for all four technology categories."""

    frontend: TechCategory
    backend: TechCategory
    database: TechCategory
    hosting: TechCategory

    def categories(self) -> list[tuple[str, TechCategory]]:
        return [(name, self.category(name)) for name in TECH_CATEGORIES]

    def category(self, name: str) -> TechCategory:
        if name not in TECH_CATEGORIES:
            raise KeyError(f"Unknown technology category: {name}")
        return getattr(self, name)

    def option_values(self, name: str) -> list[str]:
        return [option.value for option in self.category(name).options]

    def first_value(self, name: str) -> str:
        options = self.category(name).options
        return options[0].value if options else ""

    def find(self, name: str, value: str) -> Optional[TechOption]:
        for option in self.category(name).options:
            if option.value == value:
                return option
        return None
