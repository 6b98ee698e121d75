"""
Errors raised while turning a REFLECT payload into task records.

Every error is caught at the tool boundary and turned into a failure
result; callers of ``ReflectTool.execute`` never see these exceptions.
"""

from typing import Optional


class ReflectError(Exception):
    """Base class for REFLECT failures"""

    def __init__(self, message: str, task_index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        # Zero-based index of the offending <task> block, if any
        self.task_index = task_index

    @property
    def task_position(self) -> Optional[int]:
        """1-based task position as shown in messages"""
        return None if self.task_index is None else self.task_index + 1


class ParameterError(ReflectError):
    """The new_tasks parameter is missing or not a string"""


class StructuralError(ReflectError):
    """A <task> block lacks a required element"""


class MissingDescriptionError(StructuralError):
    def __init__(self, task_index: int):
        super().__init__(
            f"REFLECT tool: Task {task_index + 1} must have a description "
            f"(missing <description> element).",
            task_index=task_index,
        )


class NoSubProblemsError(StructuralError):
    def __init__(self, task_index: int):
        super().__init__(
            f"REFLECT tool: Task {task_index + 1} must have at least one sub_problem "
            f"(missing <sub_problem> element).",
            task_index=task_index,
        )


class EmptyResultError(ReflectError):
    """No <task> blocks were recognised anywhere in the payload"""

    def __init__(self):
        super().__init__(
            "REFLECT tool: no valid task elements found in new_tasks parameter "
            "(expected one or more <task> blocks)."
        )
