from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequirementFlag(str, Enum):
    # Declaration order is the canonical order used in prompts.
    performance = "performance"
    scalability = "scalability"
    ease_of_use = "easeOfUse"
    ecosystem = "ecosystem"


class ProjectType(str, Enum):
    web = "web"
    api = "api"
    cli = "cli"
    mobile = "mobile"


class Requirements(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    performance: bool = False
    scalability: bool = False
    ease_of_use: bool = False
    ecosystem: bool = False

    def is_set(self, flag: RequirementFlag) -> bool:
        return bool(self.model_dump(by_alias=True)[flag.value])

    def enabled_flags(self) -> list[RequirementFlag]:
        """Return the flags that are ``True``, in canonical order."""
        return [flag for flag in RequirementFlag if self.is_set(flag)]

    def to_record(self) -> dict[str, bool]:
        """Serialise with the canonical flag names, as stored in the database."""
        return self.model_dump(by_alias=True)
