# taskreflect/enums.py
from enum import Enum

class ToolType(str, Enum):
    """Identifiers the planner uses to select a tool"""

    REFLECT = "REFLECT"  # Add new tasks to the task queue

class ToolPermission(Enum):
    """Tool permission levels"""

    READ = "read"  # Read-only operations
    WRITE = "write"  # Task queue / state modifications
