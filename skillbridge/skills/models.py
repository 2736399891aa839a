"""Models for the skills system."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

class SkillScope(str, Enum):
    PROJECT = "project"
    USER = "user"
    CONFIG = "config"

@dataclass(frozen=True)
class Skill:
    name: str
    directory: Path
    identifier: str
    description: str
    body: str
    path: Path
    allowed_tools: Optional[tuple[str, ...]] = None
    metadata: Optional[dict[str, str]] = None
    license: Optional[str] = None

@dataclass(frozen=True)
class SkillError:
    path: Path
    kind: str
    message: str

@dataclass
class SkillLoadOutcome:
    skills: list[Skill] = field(default_factory=list)
    errors: list[SkillError] = field(default_factory=list)
    duplicates: list[str] = field(default_factory=list)

    def extend(self, other: "SkillLoadOutcome") -> None:
        self.skills.extend(other.skills)
        self.errors.extend(other.errors)

@dataclass(frozen=True)
class SkillRoot:
    path: Path
    scope: SkillScope
