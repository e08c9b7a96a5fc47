"""Tests for the MCP wiring of the dispatcher."""

import json

from mcp import types as mcp_types

from lm_sidekick import ToolDispatcher
from lm_sidekick.server import SERVER_NAME, build_server

from conftest import StubLLM


def _server(llm=None):
    return build_server(ToolDispatcher(llm or StubLLM()))


async def _call(server, name, arguments):
    handler = server.request_handlers[mcp_types.CallToolRequest]
    request = mcp_types.CallToolRequest(
        method="tools/call",
        params=mcp_types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return (await handler(request)).root


class TestServer:
    def test_name(self):
        assert _server().name == SERVER_NAME

    async def test_list_tools(self):
        server = _server()
        handler = server.request_handlers[mcp_types.ListToolsRequest]

        result = (await handler(mcp_types.ListToolsRequest(method="tools/list"))).root

        assert [tool.name for tool in result.tools] == [
            "offload_context",
            "automate_menial_task",
            "batch_process",
            "health_check",
        ]

    async def test_call_tool_returns_text(self):
        result = await _call(_server(), "health_check", {})

        assert not result.isError
        assert json.loads(result.content[0].text)["lm_studio_connection"] == "healthy"

    async def test_backend_failure_is_a_tool_error(self):
        result = await _call(
            _server(StubLLM(fail_on=(1,))),
            "offload_context",
            {"context": "c", "task": "t"},
        )

        assert result.isError
        assert "backend down" in result.content[0].text

    async def test_unknown_tool_is_a_tool_error(self):
        result = await _call(_server(), "drop_tables", {})

        assert result.isError
        assert "drop_tables" in result.content[0].text
