from typing import Dict, List, Optional, Any, Callable
from skillbridge.tools.skill_tool import SkillTool

class ToolRegistry:
    """Name -> tool mapping. Registering an existing name replaces the old tool."""

    def __init__(self):
        self._tools: Dict[str, Any] = {}
        self._descriptions: Dict[str, str] = {}

    def register(self, tool: SkillTool):
        """Register a tool."""
        self._tools[tool.name] = tool
        self._descriptions[tool.name] = tool.description

    def register_callable(self, name: str, description: str, handler: Callable[[], str]):
        """Register a zero-argument handler under a name."""
        self._tools[name] = handler
        self._descriptions[name] = description

    def get_tool(self, name: str) -> Optional[Callable[[], str]]:
        """Get tool by name."""
        return self._tools.get(name)

    def get_description(self, name: str) -> Optional[str]:
        return self._descriptions.get(name)

    def invoke(self, name: str) -> str:
        tool = self._tools.get(name)
        if tool is None:
            raise KeyError(f"Unknown tool: {name}")
        return tool()

    def list_tools(self) -> List[Callable[[], str]]:
        """Get list of all registered tools."""
        return list(self._tools.values())

    def get_function_declarations(self) -> List[Dict[str, Any]]:
        """Get function declarations for all tools."""
        return [
            {"name": name, "description": self._descriptions[name],
             "parameters": {"type": "object", "properties": {}}}
            for name in self._tools
        ]

    def remove_tool(self, name: str) -> bool:
        """Remove a tool from registry."""
        if name in self._tools:
            del self._tools[name]
            del self._descriptions[name]
            return True
        return False

    def clear(self):
        """Clear all tools from registry."""
        self._tools.clear()
        self._descriptions.clear()

    def get_tool_names(self) -> List[str]:
        """Get list of tool names."""
        return list(self._tools.keys())
