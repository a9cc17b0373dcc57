from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from .requirements import ProjectType, RequirementFlag


class FrameworkId(str, Enum):
    react = "web.react"
    vue = "web.vue"
    next = "web.next"
    express = "api.express"
    fastify = "api.fastify"

    @property
    def project_type(self) -> str:
        return self.value.split(".", 1)[0]

    @property
    def key(self) -> str:
        return self.value.split(".", 1)[1]


class UnknownFrameworkError(KeyError):
    """Raised when a framework id or key is not in the catalog."""


@dataclass(frozen=True)
class FlagFeature:
    enabled: bool
    kind: str = field(default="flag", init=False)

    @property
    def value(self) -> bool:
        return self.enabled


@dataclass(frozen=True)
class TextFeature:
    text: str
    kind: str = field(default="text", init=False)

    @property
    def value(self) -> str:
        return self.text


FeatureValue = Union[FlagFeature, TextFeature]


@dataclass(frozen=True)
class FrameworkDescriptor:
    id: FrameworkId
    name: str
    description: str
    strengths: frozenset[RequirementFlag]
    features: Mapping[str, FeatureValue]

    @property
    def project_type(self) -> str:
        return self.id.project_type

    @property
    def key(self) -> str:
        return self.id.key


def _features(**values: bool | str) -> Mapping[str, FeatureValue]:
    built: dict[str, FeatureValue] = {}
    for name, value in values.items():
        built[name] = FlagFeature(value) if isinstance(value, bool) else TextFeature(value)
    return MappingProxyType(built)


_FRAMEWORKS: tuple[FrameworkDescriptor, ...] = (
    FrameworkDescriptor(
        id=FrameworkId.react,
        name="React",
        description="A JavaScript library for building user interfaces",
        strengths=frozenset({RequirementFlag.ecosystem, RequirementFlag.performance}),
        features=_features(
            componentBased=True,
            virtualDOM=True,
            SSR=False,
            staticTyping=False,
            builtInRouting=False,
            stateManagement="External libraries",
        ),
    ),
    FrameworkDescriptor(
        id=FrameworkId.vue,
        name="Vue.js",
        description="The Progressive JavaScript Framework",
        strengths=frozenset({RequirementFlag.ease_of_use, RequirementFlag.ecosystem}),
        features=_features(
            componentBased=True,
            virtualDOM=True,
            SSR=True,
            staticTyping=True,
            builtInRouting=True,
            stateManagement="Vuex built-in",
        ),
    ),
    FrameworkDescriptor(
        id=FrameworkId.next,
        name="Next.js",
        description="The React Framework for Production",
        strengths=frozenset({RequirementFlag.performance, RequirementFlag.scalability}),
        features=_features(
            componentBased=True,
            virtualDOM=True,
            SSR=True,
            staticTyping=True,
            builtInRouting=True,
            stateManagement="External libraries",
        ),
    ),
    FrameworkDescriptor(
        id=FrameworkId.express,
        name="Express.js",
        description="Fast, unopinionated, minimalist web framework for Node.js",
        strengths=frozenset({RequirementFlag.ecosystem, RequirementFlag.ease_of_use}),
        features=_features(
            middleware=True,
            routing=True,
            templateEngine=True,
            orm=False,
            validation=False,
            authentication="External libraries",
        ),
    ),
    FrameworkDescriptor(
        id=FrameworkId.fastify,
        name="Fastify",
        description="Fast and low overhead web framework for Node.js",
        strengths=frozenset({RequirementFlag.performance, RequirementFlag.scalability}),
        features=_features(
            middleware=True,
            routing=True,
            templateEngine=True,
            orm=False,
            validation=True,
            authentication="External plugins",
        ),
    ),
)

CATALOG: Mapping[FrameworkId, FrameworkDescriptor] = MappingProxyType(
    {fw.id: fw for fw in _FRAMEWORKS}
)


def get_framework(framework_id: FrameworkId | str) -> FrameworkDescriptor:
    try:
        return CATALOG[FrameworkId(framework_id)]
    except ValueError:
        raise UnknownFrameworkError(framework_id) from None


def frameworks_for_type(project_type: ProjectType | str) -> tuple[FrameworkDescriptor, ...]:
    """Return catalog entries for a project type, in catalog order (may be empty)."""
    return tuple(fw for fw in _FRAMEWORKS if fw.project_type == project_type)


def compare_frameworks(
    project_type: ProjectType | str,
    keys: list[str],
) -> list[dict]:
    """
    Build a feature-by-feature comparison of the selected frameworks.

    Rows follow the feature order of the first selected framework. A feature
    the other frameworks do not declare is reported as ``None`` for them.
    Duplicate keys are compared once. Raises UnknownFrameworkError if any
    key is not a framework of that type.
    """
    available = {fw.key: fw for fw in frameworks_for_type(project_type)}
    selected: list[FrameworkDescriptor] = []
    for key in dict.fromkeys(keys):
        if key not in available:
            raise UnknownFrameworkError(f"{project_type}.{key}")
        selected.append(available[key])

    if not selected:
        return []

    return [
        {
            "feature": feature,
            "values": {fw.key: fw.features.get(feature) for fw in selected},
        }
        for feature in selected[0].features
    ]
