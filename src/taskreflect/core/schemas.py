# taskreflect/core/schemas.py
"""
Pydantic models for task records, tool descriptors and REFLECT arguments.
"""
# ==================== Imports ====================
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import ToolType

# ==================== Constants ====================
REFLECTION_PLACEHOLDER = "Generated by reflection"


# ==================== Task Records ====================
class SubProblem(BaseModel):
    """A decomposed piece of a task, tracked individually within its parent"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    description: str
    reasoning: str = REFLECTION_PLACEHOLDER


class TaskEntry(BaseModel):
    """A unit of work destined for the task queue"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    description: str
    reasoning: str = REFLECTION_PLACEHOLDER
    sub_problems: List[SubProblem] = Field(..., min_length=1)


# ==================== Tool Descriptors ====================
class ToolParameter(BaseModel):
    """Declared parameter metadata exposed to the tool-selection logic"""

    name: str
    type: str
    description: str
    required: bool = True


class DetailedToolInfo(BaseModel):
    """Fixed descriptor of a tool: type, name, description and parameters"""

    type: ToolType
    name: str
    description: str
    parameters: List[ToolParameter] = Field(default_factory=list)


# ==================== REFLECT Arguments ====================
class ReflectArgs(BaseModel):
    """Arguments accepted by the REFLECT tool"""

    model_config = ConfigDict(extra="ignore")

    new_tasks: str = Field(..., description="XML-formatted task structure")

    @field_validator("new_tasks", mode="before")
    @classmethod
    def require_string(cls, value: Any) -> Any:
        # Reject non-strings instead of letting pydantic coerce them
        if not isinstance(value, str):
            raise ValueError("new_tasks must be a string")
        return value


class ReflectOutput(BaseModel):
    """Successful REFLECT payload handed back to the framework"""

    new_tasks: List[TaskEntry]
    tasks_count: int = Field(..., ge=1)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "new_tasks": [task.model_dump() for task in self.new_tasks],
            "tasks_count": self.tasks_count,
        }


def dump_tasks(tasks: List[TaskEntry], indent: Optional[int] = None) -> str:
    """Serialise task records to a JSON string"""
    return ReflectOutput(new_tasks=tasks, tasks_count=len(tasks)).model_dump_json(indent=indent)
