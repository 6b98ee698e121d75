"""
Reflect tool for the taskreflect framework.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .tool_base import Tool, ToolConfig, ToolPermission
from ..config import Settings
from ..core.errors import ParameterError, ReflectError
from ..core.schemas import ReflectArgs, ReflectOutput, ToolParameter
from ..core.types import ExecutionContext, ExecutionResult
from ..enums import ToolType
from ..parsing.task_payload_parser import TaskPayloadParser

logger = logging.getLogger("taskreflect.tools.reflect")

REFLECT_DESCRIPTION = (
    "Add new tasks with sub-problems to the task queue when current tasks are finished "
    "but generation output is incomplete. Use ONLY when: 1) Task queue is empty but main "
    "objective is not yet complete, 2) Current tasks are finished but generation output is "
    "incomplete, 3) Need to create new tasks to continue progress toward completion, "
    "4) Session is ending but final output quality is insufficient. DO NOT use for task "
    "refinement or sub-problem adjustment - that's handled by task optimization. This tool "
    "helps create new tasks to bridge gaps when existing work is complete but the overall "
    "objective remains unfinished. IMPORTANTLY: Also use this tool when the task queue is "
    "empty but the main objective is not yet complete - analyze what still needs to be done "
    "and generate the necessary tasks to finish the work. This tool helps maintain organized "
    "task flow and ensures comprehensive character and worldbook development."
)

NEW_TASKS_DESCRIPTION = (
    "XML-formatted task structure. Use nested XML elements: <task><description>task "
    "description</description><reasoning>task reasoning</reasoning><sub_problem>sub-problem "
    "1</sub_problem><sub_problem>sub-problem 2</sub_problem></task>. Multiple tasks can be "
    "included by repeating the <task> element."
)

PARAMETER_ERROR = "REFLECT tool requires 'new_tasks' parameter as a string with XML format."


class ReflectTool(Tool):
    """Adds new tasks with sub-problems to the task queue from a planner payload."""

    tool_type = ToolType.REFLECT
    parameters: List[ToolParameter] = [
        ToolParameter(
            name="new_tasks",
            type="string",
            description=NEW_TASKS_DESCRIPTION,
            required=True,
        ),
    ]

    def __init__(
        self,
        parser: Optional[TaskPayloadParser] = None,
        config: Optional[Union[ToolConfig, Dict[str, Any]]] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the reflect tool.

        Args:
            parser: Payload parser; a wall-clock parser is created when omitted
            config: Tool configuration, overriding values derived from settings
            settings: Runtime settings, read from the environment when omitted
        """
        if config is None:
            settings = settings or Settings.from_env()
            config = ToolConfig(
                timeout=settings.tool_timeout,
                max_retries=settings.max_retries,
                required_permissions={ToolPermission.WRITE},
            )
        super().__init__(name="REFLECT", description=REFLECT_DESCRIPTION, config=config)
        self.parser = parser or TaskPayloadParser()

    def format_parameter_error(self, missing: List[str]) -> str:
        return PARAMETER_ERROR

    async def _do_work(
        self, parameters: Dict[str, Any], context: ExecutionContext
    ) -> ExecutionResult:
        """
        Parse the new_tasks payload into task records.
        """
        try:
            args = self._validate_args(parameters)
        except ParameterError as e:
            logger.warning(f"ReflectTool: {e.message}")
            return self.create_failure_result(e.message)

        try:
            tasks = self.parser.parse(args.new_tasks)
        except ReflectError as e:
            logger.warning(f"ReflectTool: rejected payload: {e.message}")
            if e.task_position is None:
                return self.create_failure_result(e.message)
            return self.create_failure_result(e.message, task_position=e.task_position)
        except Exception as e:
            logger.error(f"ReflectTool: unexpected parse failure: {e}", exc_info=True)
            return self.create_failure_result(
                f"REFLECT tool: Failed to parse XML task structure - {e}"
            )

        output = ReflectOutput(new_tasks=tasks, tasks_count=len(tasks))
        logger.info(
            f"ReflectTool: created {output.tasks_count} task(s)"
            + (f" for session {context.session_id}" if context.session_id else "")
        )
        return self.create_success_result(output.to_payload())

    @staticmethod
    def _validate_args(parameters: Dict[str, Any]) -> ReflectArgs:
        try:
            return ReflectArgs(**parameters)
        except ValidationError as e:
            logger.debug(f"ReflectTool: argument validation error: {e}")
            raise ParameterError(PARAMETER_ERROR) from e
