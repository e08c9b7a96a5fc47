"""Static catalog of the operations exposed over MCP."""
from __future__ import annotations

from enum import StrEnum
from typing import Final

from lm_sidekick._exceptions import UnknownToolError
from lm_sidekick.prompts import Complexity, TaskKind
from lm_sidekick.types.tool import ToolDescriptor

MIN_BATCH_SIZE: Final = 1
MAX_BATCH_SIZE: Final = 50
DEFAULT_BATCH_SIZE: Final = 10


class ToolName(StrEnum):
    OFFLOAD_CONTEXT = "offload_context"
    AUTOMATE_MENIAL_TASK = "automate_menial_task"
    BATCH_PROCESS = "batch_process"
    HEALTH_CHECK = "health_check"


OFFLOAD_CONTEXT_TOOL: Final = ToolDescriptor(
    name=ToolName.OFFLOAD_CONTEXT.value,
    description="Offload complex context to local LM Studio for processing",
    input_schema={
        "type": "object",
        "properties": {
            "context": {
                "type": "string",
                "description": "The context or information to process",
            },
            "task": {
                "type": "string",
                "description": "The specific task to perform with the context",
            },
            "complexity": {
                "type": "string",
                "enum": [c.value for c in Complexity],
                "description": "Task complexity level",
                "default": Complexity.LOW.value,
            },
        },
        "required": ["context", "task"],
    },
)

AUTOMATE_MENIAL_TASK_TOOL: Final = ToolDescriptor(
    name=ToolName.AUTOMATE_MENIAL_TASK.value,
    description="Automate simple, repetitive tasks using local AI",
    input_schema={
        "type": "object",
        "properties": {
            "task_type": {
                "type": "string",
                "enum": [k.value for k in TaskKind],
                "description": "Type of menial task to perform",
            },
            "input_data": {
                "type": "string",
                "description": "Data to process",
            },
            "output_format": {
                "type": "string",
                "description": "Desired output format",
                "default": "text",
            },
        },
        "required": ["task_type", "input_data"],
    },
)

BATCH_PROCESS_TOOL: Final = ToolDescriptor(
    name=ToolName.BATCH_PROCESS.value,
    description="Process multiple similar items in batch",
    input_schema={
        "type": "object",
        "properties": {
            "items": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of items to process",
            },
            "operation": {
                "type": "string",
                "description": "Operation to perform on each item",
            },
            "batch_size": {
                "type": "integer",
                "minimum": MIN_BATCH_SIZE,
                "maximum": MAX_BATCH_SIZE,
                "default": DEFAULT_BATCH_SIZE,
                "description": "Number of items to process at once",
            },
        },
        "required": ["items", "operation"],
    },
)

HEALTH_CHECK_TOOL: Final = ToolDescriptor(
    name=ToolName.HEALTH_CHECK.value,
    description="Check the health and status of the LM Studio connection",
    input_schema={
        "type": "object",
        "properties": {},
        "additionalProperties": False,
    },
)

TOOLS: Final[tuple[ToolDescriptor, ...]] = (
    OFFLOAD_CONTEXT_TOOL,
    AUTOMATE_MENIAL_TASK_TOOL,
    BATCH_PROCESS_TOOL,
    HEALTH_CHECK_TOOL,
)

_BY_NAME: Final[dict[str, ToolDescriptor]] = {tool.name: tool for tool in TOOLS}


def get_descriptor(name: str) -> ToolDescriptor:
    """Return the descriptor registered under *name* or raise UnknownToolError."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownToolError(name) from None


__all__ = [
    "ToolName",
    "TOOLS",
    "get_descriptor",
    "MIN_BATCH_SIZE",
    "MAX_BATCH_SIZE",
    "DEFAULT_BATCH_SIZE",
]
