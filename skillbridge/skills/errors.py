"""Errors raised while turning a SKILL.md file into a Skill."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

class SkillParseError(Exception):
    kind = "parse"

    def __init__(self, path: Path | None, message: str) -> None:
        super().__init__(message)
        self.path = path

class SkillIOError(SkillParseError):
    kind = "io"

class FormatError(SkillParseError):
    kind = "format"

class SchemaError(SkillParseError):
    """One or more frontmatter fields failed validation."""

    kind = "schema"

    def __init__(self, path: Path | None, messages: Iterable[str]) -> None:
        self.messages = list(messages)
        super().__init__(path, "; ".join(self.messages))

    def with_path(self, path: Path) -> "SchemaError":
        return SchemaError(path, self.messages)

class NamingConflictError(SkillParseError):
    kind = "naming"

    def __init__(self, path: Path, declared_name: str, directory_name: str) -> None:
        self.declared_name = declared_name
        self.directory_name = directory_name
        super().__init__(
            path,
            f'frontmatter name "{declared_name}" does not match directory name "{directory_name}"',
        )

class DuplicateIdentifierWarning(UserWarning):
    pass
