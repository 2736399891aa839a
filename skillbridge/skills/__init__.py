"""Discovery, validation and rendering of SKILL.md bundles."""

from .models import (
    Skill,
    SkillScope,
    SkillError,
    SkillLoadOutcome,
    SkillRoot,
)
from .errors import (
    SkillParseError,
    SkillIOError,
    FormatError,
    SchemaError,
    NamingConflictError,
    DuplicateIdentifierWarning,
)
from .config import SkillsConfig, SKILLS_FILENAME
from .schema import SkillFrontmatter, validate_frontmatter
from .naming import generate_tool_name
from .loader import (
    load_skills,
    load_skills_from_roots,
    load_skill,
    parse_skill_file,
    skill_roots_for_config,
)
from .resources import iter_skill_resources
from .render import render_skill_prompt

__all__ = [
    "Skill",
    "SkillScope",
    "SkillError",
    "SkillLoadOutcome",
    "SkillRoot",
    "SkillParseError",
    "SkillIOError",
    "FormatError",
    "SchemaError",
    "NamingConflictError",
    "DuplicateIdentifierWarning",
    "SkillsConfig",
    "SKILLS_FILENAME",
    "SkillFrontmatter",
    "validate_frontmatter",
    "generate_tool_name",
    "load_skills",
    "load_skills_from_roots",
    "load_skill",
    "parse_skill_file",
    "skill_roots_for_config",
    "iter_skill_resources",
    "render_skill_prompt",
]
