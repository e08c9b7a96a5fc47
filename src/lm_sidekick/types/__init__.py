from .chat import ChatMessage, CompletionRequest
from .tool import ToolDescriptor, ToolInvocation, ToolResult

__all__ = [
    "ChatMessage",
    "CompletionRequest",
    "ToolDescriptor",
    "ToolInvocation",
    "ToolResult",
]
