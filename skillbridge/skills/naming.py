"""Tool identifiers derived from where a skill lives under its root.

Examples (root ``.opencode/skills``):
    brand-guidelines/SKILL.md       -> skills_brand_guidelines
    document-skills/docx/SKILL.md   -> skills_document_skills_docx

Hyphens and underscores collapse to the same identifier, so sibling
directories ``my-skill`` and ``my_skill`` both map to ``skills_my_skill``.
Discovery reports such collisions as duplicates.
"""
from __future__ import annotations

import os
from pathlib import PurePath

TOOL_NAME_PREFIX = "skills_"

def generate_tool_name(skill_path: str | os.PathLike[str], root: str | os.PathLike[str]) -> str:
    rel = PurePath(os.path.relpath(skill_path, root))
    components = [part for part in rel.parent.parts if part not in (".", "")]
    return TOOL_NAME_PREFIX + "_".join(part.replace("-", "_") for part in components)
