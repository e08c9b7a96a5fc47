"""
Prompt construction for every operation.

Pure functions only: a task request goes in, a single prompt string comes out.

Task kinds
- summarize, extract, format, validate, classify
  Each prefixes the input with its instruction and appends the requested
  output format as a trailing directive.

Example
-------
>>> build_task_prompt("summarize", "The quick brown fox...")
'Summarize the following content concisely:\\n\\nThe quick brown fox...\\n\\nOutput format: text'
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final, Sequence

from lm_sidekick._exceptions import ConfigurationError


class TaskKind(StrEnum):
    SUMMARIZE = "summarize"
    EXTRACT = "extract"
    FORMAT = "format"
    VALIDATE = "validate"
    CLASSIFY = "classify"


class Complexity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


TASK_INSTRUCTIONS: Final[dict[TaskKind, str]] = {
    TaskKind.SUMMARIZE: "Summarize the following content concisely",
    TaskKind.EXTRACT: "Extract key information from",
    TaskKind.FORMAT: "Format the following data properly",
    TaskKind.VALIDATE: "Validate and check the following for correctness",
    TaskKind.CLASSIFY: "Classify or categorize the following",
}

# (temperature, max_tokens)
HIGH_COMPLEXITY_OPTIONS: Final = (0.7, 4096)
DEFAULT_COMPLEXITY_OPTIONS: Final = (0.3, 2048)


def build_task_prompt(task_type: str, input_data: str, output_format: str = "text") -> str:
    """Prompt for ``automate_menial_task``; raises ConfigurationError for an unknown kind."""
    try:
        instruction = TASK_INSTRUCTIONS[TaskKind(task_type)]
    except ValueError:
        raise ConfigurationError(f"Unrecognized task type: {task_type!r}") from None
    return f"{instruction}:\n\n{input_data}\n\nOutput format: {output_format}"


def build_offload_prompt(context: str, task: str, complexity: str = Complexity.LOW) -> str:
    """Prompt for ``offload_context``; the context is embedded verbatim."""
    return (
        f"Task: {task}\n"
        f"Complexity: {complexity}\n"
        f"Context: {context}\n\n"
        "Please process this context and complete the requested task. "
        "Be concise and focused."
    )


def complexity_options(complexity: str) -> tuple[float, int]:
    """Sampling temperature and token budget for a complexity level."""
    if complexity == Complexity.HIGH:
        return HIGH_COMPLEXITY_OPTIONS
    return DEFAULT_COMPLEXITY_OPTIONS


def build_batch_prompt(items: Sequence[str], operation: str, start: int = 0) -> str:
    """
    Prompt for one batch chunk.

    Args:
        items: The chunk's items.
        operation: Operation to apply to each item.
        start: 0-based position of the chunk's first item in the whole input,
               so numbering continues across chunks.
    """
    numbered = "\n".join(
        f"{start + offset + 1}. {item}" for offset, item in enumerate(items)
    )
    return (
        f"Operation: {operation}\n"
        f"Items to process:\n"
        f"{numbered}\n\n"
        "Process each item according to the operation and provide results."
    )


__all__ = [
    "TaskKind",
    "Complexity",
    "TASK_INSTRUCTIONS",
    "build_task_prompt",
    "build_offload_prompt",
    "build_batch_prompt",
    "complexity_options",
]
