"""Tool that hands a skill's instructions to the agent."""
from __future__ import annotations
from typing import Any, Dict
from skillbridge.skills.models import Skill
from skillbridge.skills.render import render_skill_prompt
from skillbridge.skills.resources import iter_skill_resources

class SkillTool:
    def __init__(self, skill: Skill):
        self.skill = skill
        self.name = skill.identifier
        self.display_name = skill.name
        self.description = skill.description
        # Skill tools take no arguments.
        self.parameter_schema: Dict[str, Any] = {"type": "object", "properties": {}}

    def execute(self) -> str:
        """Render the skill with a fresh listing of its resource files."""
        return render_skill_prompt(self.skill, iter_skill_resources(self.skill))

    __call__ = execute

    def get_function_declaration(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameter_schema,
        }

    def __repr__(self) -> str:
        return (
            f"SkillTool(name={self.name!r}, display_name={self.display_name!r}, "
            f"path={str(self.skill.path)!r})"
        )
