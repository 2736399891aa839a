from .skill_tool import SkillTool
from .tool_registry import ToolRegistry

__all__ = ["SkillTool", "ToolRegistry"]
