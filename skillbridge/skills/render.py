"""Text returned to the agent when a skill tool is invoked."""
from __future__ import annotations

import os
from typing import Iterable

from .models import Skill

SKILL_TEMPLATE = """<skill name="{name}">

{body}

</skill>"""

RESOURCES_TEMPLATE = """<skill_resources>
IMPORTANT: The skill {name} may reference certain resource files. Use their full paths:

{paths}
</skill_resources>"""

def render_skill(skill: Skill) -> str:
    return SKILL_TEMPLATE.format(name=skill.name, body=skill.body)

def render_skill_resources(skill: Skill, resources: Iterable[str | os.PathLike[str]]) -> str:
    paths = [os.fspath(resource) for resource in resources]
    if not paths:
        return ""
    return RESOURCES_TEMPLATE.format(name=skill.name, paths="\n".join(paths))

def render_skill_prompt(skill: Skill, resources: Iterable[str | os.PathLike[str]]) -> str:
    """Skill body, followed by the resource block when the skill ships any files."""
    text = render_skill(skill)
    block = render_skill_resources(skill, resources)
    if block:
        text = f"{text}\n\n{block}"
    return text
