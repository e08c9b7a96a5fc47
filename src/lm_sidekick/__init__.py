"""
LM Sidekick - MCP server that hands context and menial tasks to a local LM Studio model.
"""

__version__ = "1.0.0"

from ._exceptions import BackendError, ConfigurationError, SidekickError, UnknownToolError
from .batch import BatchReport, BatchRunner, ChunkOutcome
from .dispatcher import ToolDispatcher
from .providers import BaseAsyncLLM, LMStudioLLM
from .registry import TOOLS, ToolName
from .settings import Settings
from .types import CompletionRequest, ToolDescriptor, ToolInvocation, ToolResult

__all__ = [
    "BackendError",
    "BaseAsyncLLM",
    "BatchReport",
    "BatchRunner",
    "ChunkOutcome",
    "CompletionRequest",
    "ConfigurationError",
    "LMStudioLLM",
    "Settings",
    "SidekickError",
    "TOOLS",
    "ToolDescriptor",
    "ToolDispatcher",
    "ToolInvocation",
    "ToolName",
    "ToolResult",
    "UnknownToolError",
]
