"""Payload parsing for the REFLECT tool."""

from .task_payload_parser import TaskPayloadParser, parse_task_payload

__all__ = ["TaskPayloadParser", "parse_task_payload"]
