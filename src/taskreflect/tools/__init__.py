"""taskreflect tools

Base tool contract, the REFLECT tool and the registry that exposes tool
descriptors to the planner.
"""

from .tool_base import Tool, ToolConfig, ToolPermission
from .reflect_tool import ReflectTool
from .tool_registry import ToolRegistry, create_default_registry

__all__ = [
    "Tool",
    "ToolConfig",
    "ToolPermission",
    "ReflectTool",
    "ToolRegistry",
    "create_default_registry",
]
