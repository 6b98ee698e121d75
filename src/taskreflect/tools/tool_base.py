# taskreflect/tools/tool_base.py
# ==================== Imports ====================
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional, Set, Union
import asyncio
import logging
from pydantic import BaseModel, Field, ConfigDict

from ..core.schemas import DetailedToolInfo, ToolParameter
from ..core.types import ExecutionContext, ExecutionResult
from ..enums import ToolPermission, ToolType
from ..config import DEFAULT_TIMEOUT, DEFAULT_MAX_RETRIES

# ==================== Constants ====================
logger = logging.getLogger("taskreflect.tools")


# ==================== Class Definitions ====================
class ToolConfig(BaseModel):
    """Tool configuration with Pydantic validation"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    required_permissions: Set[ToolPermission] = Field(default_factory=set)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class Tool(ABC):
    """Base contract shared by every tool: descriptor plus result envelope"""

    tool_type: ToolType
    parameters: List[ToolParameter] = []

    def __init__(
        self,
        name: str,
        description: str,
        config: Optional[Union[ToolConfig, Dict[str, Any]]] = None,
    ):
        self.name = name
        self.description = description

        if config is not None and isinstance(config, dict):
            self.config = ToolConfig(**config)
        else:
            self.config = config or ToolConfig()

        # Runtime state
        self._initialized = False

    # ==================== Core Methods ====================
    def get_tool_info(self) -> DetailedToolInfo:
        """Fixed descriptor consumed by the tool-selection logic"""
        return DetailedToolInfo(
            type=self.tool_type,
            name=self.name,
            description=self.description,
            parameters=list(self.parameters),
        )

    async def initialize(self) -> None:
        if not self._initialized:
            await self._validate_permissions()
            self._initialized = True
            logger.debug(f"Initialized tool: {self.name}")

    async def execute(
        self,
        parameters: Dict[str, Any],
        context: Optional[ExecutionContext] = None,
    ) -> ExecutionResult:
        """Execute the tool with timeout and retries.

        Never raises: timeouts and unexpected errors become failure results.
        """
        if not self._initialized:
            try:
                await self.initialize()
            except PermissionError as e:
                logger.error(f"Tool {self.name} could not be initialized: {e}")
                return self.create_failure_result(str(e))

        parameters = parameters or {}
        context = context or ExecutionContext()

        missing = self._missing_parameters(parameters)
        if missing:
            error = self.format_parameter_error(missing)
            logger.warning(error)
            return self.create_failure_result(error)

        logger.debug(f"Executing {self.name} with args: {list(parameters.keys())}")

        tries = 0
        max_tries = self.config.max_retries + 1  # Include the initial attempt

        while tries < max_tries:
            try:
                async with asyncio.timeout(self.config.timeout):
                    return await self._do_work(parameters, context)
            except TimeoutError:
                tries += 1
                if tries >= max_tries:
                    logger.error(
                        f"Tool {self.name} exceeded max retries ({max_tries - 1}) after timeout."
                    )
                    return self.create_failure_result(
                        f"{self.name} tool timed out after {self.config.timeout}s"
                    )
                logger.warning(
                    f"Tool {self.name} timed out, retrying attempt {tries + 1}/{max_tries}"
                )
            except Exception as e:
                logger.error(f"Tool {self.name} execution failed: {e}", exc_info=True)
                return self.create_failure_result(f"{self.name} tool failed: {e}")

    @abstractmethod
    async def _do_work(
        self, parameters: Dict[str, Any], context: ExecutionContext
    ) -> ExecutionResult:
        """Core tool execution logic to be implemented by subclasses"""

    # ==================== Result Envelope ====================
    def create_success_result(self, result: Any, **metadata) -> ExecutionResult:
        return ExecutionResult(
            success=True,
            tool_name=self.name,
            tool_type=self.tool_type,
            result=result,
            metadata=metadata,
        )

    def create_failure_result(self, error: str, **metadata) -> ExecutionResult:
        return ExecutionResult(
            success=False,
            tool_name=self.name,
            tool_type=self.tool_type,
            error=error,
            metadata=metadata,
        )

    # ==================== Helper Methods ====================
    def format_parameter_error(self, missing: List[str]) -> str:
        return f"{self.name} tool missing required parameter(s): {', '.join(missing)}"

    def _missing_parameters(self, parameters: Dict[str, Any]) -> List[str]:
        return [p.name for p in self.parameters if p.required and p.name not in parameters]

    async def _validate_permissions(self) -> None:
        """Validate required permissions are available"""
        for permission in self.config.required_permissions:
            if not await self._check_permission(permission):
                raise PermissionError(f"Missing required permission: {permission}")

    async def _check_permission(self, permission: ToolPermission) -> bool:
        # Default implementation - override for actual checks
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert tool to dictionary format"""
        return {
            **self.get_tool_info().model_dump(mode="json"),
            "config": self.config.model_dump(mode="json"),
            "initialized": self._initialized,
        }

    async def cleanup(self) -> None:
        """Clean up tool resources"""
        self._initialized = False
