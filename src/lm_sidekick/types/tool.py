"""
Protocol-neutral dataclasses for the tools this server exposes.

Conversion to MCP wire types happens at the edges (``to_mcp``); everything
else in the package works with these.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from mcp import types as mcp_types

__all__ = ["ToolDescriptor", "ToolInvocation", "ToolResult"]


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """Name, description and JSON-Schema input shape of one operation."""
    name: str
    description: str
    input_schema: Mapping[str, Any]

    def defaults(self) -> dict[str, Any]:
        """Declared default of every property that has one."""
        properties = self.input_schema.get("properties", {})
        return {
            key: prop["default"]
            for key, prop in properties.items()
            if "default" in prop
        }

    def to_mcp(self) -> mcp_types.Tool:
        return mcp_types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=dict(self.input_schema),
        )


@dataclass(slots=True)
class ToolInvocation:
    """An incoming call: operation name plus its argument bundle."""
    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)

    def with_defaults(self, descriptor: ToolDescriptor) -> dict[str, Any]:
        """Arguments with every missing optional field filled from *descriptor*."""
        return {**descriptor.defaults(), **dict(self.arguments)}


@dataclass(slots=True)
class ToolResult:
    """Uniform success envelope: an ordered list of text blocks."""
    content: list[dict[str, str]]

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}])

    @property
    def joined_text(self) -> str:
        return "\n".join(block["text"] for block in self.content)

    def to_mcp(self) -> list[mcp_types.TextContent]:
        return [
            mcp_types.TextContent(type="text", text=block["text"])
            for block in self.content
        ]
