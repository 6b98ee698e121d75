"""
Tool registry for the taskreflect framework.

Maps tool names to instances so the CLI and the planner's tool-selection
step can look a tool up and list the descriptors it offers.
"""
import logging
from typing import Dict, List, Optional

from .tool_base import Tool
from .reflect_tool import ReflectTool
from ..core.schemas import DetailedToolInfo

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Name -> tool lookup, in registration order."""

    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """
        Register a tool under its name.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool with name '{tool.name}' is already registered")

        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name} ({tool.tool_type.value})")

    def get_tool(self, tool_name: str) -> Optional[Tool]:
        return self._tools.get(tool_name)

    def get_all_tools(self) -> List[Tool]:
        return list(self._tools.values())

    def get_tool_infos(self) -> List[DetailedToolInfo]:
        """Descriptors offered to the planner"""
        return [tool.get_tool_info() for tool in self._tools.values()]


def create_default_registry(**reflect_kwargs) -> ToolRegistry:
    """Registry holding the built-in tools"""
    registry = ToolRegistry()
    registry.register(ReflectTool(**reflect_kwargs))
    return registry
