"""Registers discovered skills with the host as zero-argument tools.

The host passes its working directory and, optionally, a ``register``
function with the signature ``register(name, description, handler)``.
Discovery runs once, when the plugin is set up; the skills found then are
what the process serves until it exits.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Optional

from skillbridge.skills.config import SkillsConfig
from skillbridge.skills.loader import load_skills
from skillbridge.skills.models import Skill, SkillLoadOutcome
from skillbridge.tools.skill_tool import SkillTool

logger = logging.getLogger(__name__)

RegisterTool = Callable[[str, str, Callable[[], str]], None]

class SkillsManager:
    def __init__(self, config: SkillsConfig) -> None:
        self.config = config
        logger.info("Skills: starting discovery...")
        self.outcome: SkillLoadOutcome = load_skills(config)
        logger.info(
            "Found %d skill(s): %s",
            len(self.outcome.skills),
            [skill.name for skill in self.outcome.skills],
        )

    @property
    def skills(self) -> List[Skill]:
        return list(self.outcome.skills)

    def tools(self) -> Dict[str, SkillTool]:
        """Identifier -> tool. A later skill with the same identifier replaces an earlier one."""
        tools: Dict[str, SkillTool] = {}
        for skill in self.outcome.skills:
            tools[skill.identifier] = SkillTool(skill)
        return tools

    def register_all(self, register: RegisterTool) -> Dict[str, SkillTool]:
        tools: Dict[str, SkillTool] = {}
        for skill in self.outcome.skills:
            tool = SkillTool(skill)
            register(tool.name, tool.description, tool)
            tools[tool.name] = tool
        logger.info("Registered %d skill tool(s)", len(tools))
        return tools

def setup_skills(
    directory: str | os.PathLike[str],
    register: Optional[RegisterTool] = None,
    config: Optional[SkillsConfig] = None,
) -> Dict[str, Callable[[], str]]:
    """Discover skills for ``directory`` and hand each one to ``register``.

    ``config``, when given, takes precedence over ``directory``. Returns the
    identifier -> handler mapping that was registered.
    """
    if config is None:
        config = SkillsConfig.from_env(Path(directory))
    manager = SkillsManager(config)
    if register is None:
        tools = manager.tools()
        logger.info("Prepared %d skill tool(s) for the caller", len(tools))
    else:
        tools = manager.register_all(register)
    return dict(tools)
