"""
taskreflect core module

Shared types, schemas and errors used by the tools and the payload parser.
"""

from .types import ExecutionContext, ExecutionResult
from .schemas import SubProblem, TaskEntry, ToolParameter, DetailedToolInfo
from .errors import ReflectError

__all__ = [
    "ExecutionContext",
    "ExecutionResult",
    "SubProblem",
    "TaskEntry",
    "ToolParameter",
    "DetailedToolInfo",
    "ReflectError",
]
