"""
taskreflect

REFLECT tool for agent orchestration: turns an XML-tagged planner payload
into task records for the task queue.
"""

__version__ = "0.1.0"

from .core.schemas import SubProblem, TaskEntry
from .parsing import TaskPayloadParser, parse_task_payload
from .tools import ReflectTool, ToolRegistry, create_default_registry

__all__ = [
    "SubProblem",
    "TaskEntry",
    "TaskPayloadParser",
    "parse_task_payload",
    "ReflectTool",
    "ToolRegistry",
    "create_default_registry",
    "__version__",
]
