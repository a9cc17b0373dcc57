from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..catalog.frameworks import FrameworkId
from ..catalog.requirements import ProjectType, Requirements


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True
    )


class ProjectRequest(CamelModel):
    project_name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=10, description="Free-text project summary, at least 10 characters")
    project_type: ProjectType
    requirements: Requirements = Field(default_factory=Requirements)
    template: str | None = Field(
        default=None, description="Template whose boilerplate is appended to the prompt"
    )


class Evaluation(CamelModel):
    framework: FrameworkId
    framework_name: str
    recommendation: str
    prompt: str


class RecommendationCreate(CamelModel):
    project_type: str = Field(..., min_length=1)
    requirements: Requirements
    recommended_framework: FrameworkId


class RecommendationOut(CamelModel):
    id: int
    project_type: str
    requirements: Requirements
    recommended_framework: FrameworkId
    user_feedback: int | None = None
    created_at: str


class RecommendationStats(CamelModel):
    total: int
    by_framework: dict[str, int]


class PromptCreate(CamelModel):
    project_name: str = Field(..., min_length=1)
    project_type: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    requirements: Requirements
    prompt: str = Field(..., min_length=1)
    recommendation: str = Field(..., min_length=1)


class PromptOut(CamelModel):
    id: int
    project_name: str
    project_type: str
    description: str
    requirements: Requirements
    prompt: str
    recommendation: str
    created_at: str


class FeatureOut(CamelModel):
    kind: str
    value: bool | str


class FrameworkOut(CamelModel):
    id: FrameworkId
    key: str
    project_type: str
    name: str
    description: str
    strengths: list[str]
    features: dict[str, FeatureOut]


class ComparisonRow(CamelModel):
    feature: str
    values: dict[str, FeatureOut | None]


class ComparisonOut(CamelModel):
    project_type: str
    frameworks: list[str]
    rows: list[ComparisonRow]


class TemplateOut(CamelModel):
    name: str
    description: str
    project_type: ProjectType
    requirements: Requirements
    features: list[str]
    boilerplate_prompt: str


class BoilerplateOut(CamelModel):
    name: str
    boilerplate: str
