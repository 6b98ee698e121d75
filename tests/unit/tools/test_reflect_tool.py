"""
Unit tests for the REFLECT tool.
"""
import pytest
from unittest.mock import MagicMock

from taskreflect.core.schemas import DetailedToolInfo, REFLECTION_PLACEHOLDER
from taskreflect.core.types import ExecutionContext, ExecutionResult
from taskreflect.enums import ToolPermission, ToolType
from taskreflect.parsing import TaskPayloadParser
from taskreflect.tools.reflect_tool import PARAMETER_ERROR, ReflectTool
from taskreflect.tools.tool_base import ToolConfig


VALID_PAYLOAD = (
    "<task><description>Write backstory</description>"
    "<sub_problem>Draft childhood</sub_problem>"
    "<sub_problem>Draft motivations</sub_problem></task>"
)


@pytest.fixture
def tool():
    return ReflectTool(parser=TaskPayloadParser(clock=lambda: 42))


class TestReflectToolInfo:
    """Descriptor exposed to the planner."""

    def test_tool_info(self, tool):
        info = tool.get_tool_info()

        assert isinstance(info, DetailedToolInfo)
        assert info.type == ToolType.REFLECT
        assert info.name == "REFLECT"
        assert "task queue" in info.description
        assert len(info.parameters) == 1
        param = info.parameters[0]
        assert param.name == "new_tasks"
        assert param.type == "string"
        assert param.required is True
        assert "<sub_problem>" in param.description

    def test_description_ends_with_task_flow_guidance(self, tool):
        assert tool.get_tool_info().description.endswith(
            "This tool helps maintain organized task flow and ensures comprehensive "
            "character and worldbook development."
        )

    def test_default_config_requires_write(self):
        tool = ReflectTool()

        assert ToolPermission.WRITE in tool.config.required_permissions

    def test_settings_feed_default_config(self):
        from taskreflect.config import Settings

        tool = ReflectTool(settings=Settings(tool_timeout=5.0, max_retries=2))

        assert tool.config.timeout == 5.0
        assert tool.config.max_retries == 2

    def test_explicit_config_wins(self):
        tool = ReflectTool(config=ToolConfig(timeout=1.5))

        assert tool.config.timeout == 1.5
        assert tool.config.required_permissions == set()


class TestReflectToolExecution:
    """Success and failure envelopes."""

    @pytest.mark.asyncio
    async def test_success_result(self, tool):
        result = await tool.execute({"new_tasks": VALID_PAYLOAD})

        assert isinstance(result, ExecutionResult)
        assert result.success
        assert result.tool_type == ToolType.REFLECT
        assert result.result["tasks_count"] == 1
        task = result.result["new_tasks"][0]
        assert task == {
            "id": "reflect_task_42_0",
            "description": "Write backstory",
            "reasoning": REFLECTION_PLACEHOLDER,
            "sub_problems": [
                {
                    "id": "reflect_sub_42_0_0",
                    "description": "Draft childhood",
                    "reasoning": REFLECTION_PLACEHOLDER,
                },
                {
                    "id": "reflect_sub_42_0_1",
                    "description": "Draft motivations",
                    "reasoning": REFLECTION_PLACEHOLDER,
                },
            ],
        }

    @pytest.mark.asyncio
    async def test_context_is_accepted(self, tool):
        context = ExecutionContext(session_id="session-1", calling_model="planner")

        result = await tool.execute({"new_tasks": VALID_PAYLOAD}, context)

        assert result.success

    @pytest.mark.asyncio
    async def test_missing_parameter(self, tool):
        result = await tool.execute({})

        assert not result.success
        assert result.error == PARAMETER_ERROR

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [None, 123, ["<task></task>"], {"task": "x"}])
    async def test_non_string_parameter(self, tool, value):
        result = await tool.execute({"new_tasks": value})

        assert not result.success
        assert result.error == PARAMETER_ERROR

    @pytest.mark.asyncio
    async def test_empty_string_reports_no_tasks(self, tool):
        result = await tool.execute({"new_tasks": ""})

        assert not result.success
        assert "no valid task elements found" in result.error
        assert "task_position" not in result.metadata
        assert "metadata" not in result.to_dict()

    @pytest.mark.asyncio
    async def test_missing_description(self, tool):
        result = await tool.execute({"new_tasks": "<task><sub_problem>x</sub_problem></task>"})

        assert not result.success
        assert "Task 1 must have a description" in result.error
        assert result.metadata["task_position"] == 1

    @pytest.mark.asyncio
    async def test_second_task_without_sub_problems(self, tool):
        payload = VALID_PAYLOAD + "<task><description>Broken</description></task>"

        result = await tool.execute({"new_tasks": payload})

        assert not result.success
        assert result.result is None
        assert "Task 2 must have at least one sub_problem" in result.error

    @pytest.mark.asyncio
    async def test_unexpected_error_is_wrapped(self):
        parser = MagicMock()
        parser.parse.side_effect = RuntimeError("boom")
        tool = ReflectTool(parser=parser)

        result = await tool.execute({"new_tasks": VALID_PAYLOAD})

        assert not result.success
        assert result.error == "REFLECT tool: Failed to parse XML task structure - boom"

    @pytest.mark.asyncio
    async def test_extra_parameters_are_ignored(self, tool):
        result = await tool.execute({"new_tasks": VALID_PAYLOAD, "unused": True})

        assert result.success

    @pytest.mark.asyncio
    async def test_result_to_dict(self, tool):
        result = await tool.execute({"new_tasks": VALID_PAYLOAD})

        data = result.to_dict()
        assert data["success"] is True
        assert data["tool_type"] == "REFLECT"
        assert data["result"]["tasks_count"] == 1
        assert "error" not in data
