# taskreflect/core/types.py
# ==================== Imports ====================
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime

from ..enums import ToolType


# ==================== Class Definitions ====================
@dataclass
class ExecutionContext:
    """Caller context passed along with tool parameters"""

    session_id: Optional[str] = None
    calling_model: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ExecutionResult:
    """Result envelope returned by every tool execution"""

    success: bool
    tool_name: str
    tool_type: Optional[ToolType] = None
    result: Any = None
    error: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return not self.success

    def to_dict(self) -> Dict[str, Any]:
        """Convert the envelope to a JSON-friendly dictionary"""
        data = {
            "success": self.success,
            "tool_name": self.tool_name,
            "tool_type": self.tool_type.value if self.tool_type else None,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.success:
            data["result"] = self.result
        else:
            data["error"] = self.error
        if self.metadata:
            data["metadata"] = self.metadata
        return data
