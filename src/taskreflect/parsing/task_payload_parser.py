"""
Parser for REFLECT payloads.

A payload is free text holding zero or more ``<task>`` blocks. Matching is
flat and lazy, not structural XML parsing: a block ends at the first
``</task>`` and only the first ``<description>`` / ``<reasoning>`` of a
block is read.
"""

import re
import time
import logging
from typing import Callable, List, Optional

from ..core.errors import EmptyResultError, MissingDescriptionError, NoSubProblemsError
from ..core.schemas import REFLECTION_PLACEHOLDER, SubProblem, TaskEntry

logger = logging.getLogger("taskreflect.parsing")

# Lazy captures; DOTALL so tag content may span lines
TASK_REGEX = re.compile(r"<task>(.*?)</task>", re.DOTALL)
DESCRIPTION_REGEX = re.compile(r"<description>(.*?)</description>", re.DOTALL)
REASONING_REGEX = re.compile(r"<reasoning>(.*?)</reasoning>", re.DOTALL)
SUB_PROBLEM_REGEX = re.compile(r"<sub_problem>(.*?)</sub_problem>", re.DOTALL)

TASK_ID_PREFIX = "reflect_task"
SUB_PROBLEM_ID_PREFIX = "reflect_sub"


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


class TaskPayloadParser:
    """Turns a REFLECT payload into task records.

    Args:
        clock: Callable returning the time component used in generated IDs.
            Defaults to wall-clock milliseconds.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self.clock = clock or _wall_clock_ms

    def parse(self, payload: str) -> List[TaskEntry]:
        """Parse every <task> block in the payload.

        Raises:
            MissingDescriptionError: a block has no <description>
            NoSubProblemsError: a block has no <sub_problem>
            EmptyResultError: no <task> block was found
        """
        stamp = self.clock()
        tasks = [
            self._parse_task(block, task_index, stamp)
            for task_index, block in enumerate(self._extract_task_blocks(payload))
        ]

        if not tasks:
            raise EmptyResultError()

        logger.debug(f"Parsed {len(tasks)} task(s) from payload")
        return tasks

    def _extract_task_blocks(self, payload: str) -> List[str]:
        return TASK_REGEX.findall(payload)

    def _parse_task(self, block: str, task_index: int, stamp: int) -> TaskEntry:
        description_match = DESCRIPTION_REGEX.search(block)
        if not description_match:
            raise MissingDescriptionError(task_index)
        description = description_match.group(1).strip()

        reasoning_match = REASONING_REGEX.search(block)
        reasoning = reasoning_match.group(1).strip() if reasoning_match else REFLECTION_PLACEHOLDER

        sub_problems = [
            SubProblem(
                id=f"{SUB_PROBLEM_ID_PREFIX}_{stamp}_{task_index}_{sub_index}",
                description=text.strip(),
                reasoning=REFLECTION_PLACEHOLDER,
            )
            for sub_index, text in enumerate(SUB_PROBLEM_REGEX.findall(block))
        ]
        if not sub_problems:
            raise NoSubProblemsError(task_index)

        logger.debug(f"Task {task_index + 1}: {len(sub_problems)} sub-problem(s)")
        return TaskEntry(
            id=f"{TASK_ID_PREFIX}_{stamp}_{task_index}",
            description=description,
            reasoning=reasoning,
            sub_problems=sub_problems,
        )


_default_parser = TaskPayloadParser()


def parse_task_payload(payload: str) -> List[TaskEntry]:
    """Parse a payload with the default wall-clock parser"""
    return _default_parser.parse(payload)
