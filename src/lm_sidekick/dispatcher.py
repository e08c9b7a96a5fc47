"""
Routing of tool calls to their handlers.

Every handler returns a ``ToolResult``. Backend failures raised by
``offload_context`` and ``automate_menial_task`` propagate unchanged;
``batch_process`` folds them into its report and ``health_check`` reports
them as an unhealthy status.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Final, Mapping, Optional, Sequence

from lm_sidekick._exceptions import UnknownToolError
from lm_sidekick.batch import BatchRunner
from lm_sidekick.prompts import (
    Complexity,
    build_offload_prompt,
    build_task_prompt,
    complexity_options,
)
from lm_sidekick.providers.base import BaseAsyncLLM
from lm_sidekick.registry import DEFAULT_BATCH_SIZE, TOOLS, ToolName, get_descriptor
from lm_sidekick.types.tool import ToolDescriptor, ToolInvocation, ToolResult

MENIAL_TASK_TEMPERATURE: Final = 0.1

Handler = Callable[..., Awaitable[ToolResult]]


class ToolDispatcher:
    """Looks up the handler for an operation name and runs it."""

    def __init__(
        self,
        llm: BaseAsyncLLM,
        *,
        batch_runner: Optional[BatchRunner] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.llm = llm
        self.batch_runner = batch_runner or BatchRunner(llm)
        self.logger = logger or logging.getLogger(__name__)
        self._handlers: dict[ToolName, Handler] = {
            ToolName.OFFLOAD_CONTEXT: self.offload_context,
            ToolName.AUTOMATE_MENIAL_TASK: self.automate_menial_task,
            ToolName.BATCH_PROCESS: self.batch_process,
            ToolName.HEALTH_CHECK: self.health_check,
        }

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        self.logger.debug("Tools list requested")
        return TOOLS

    async def dispatch(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> ToolResult:
        """
        Run the operation registered under *name*.

        Args:
            name: Operation name.
            arguments: Argument bundle; missing optional fields take their
                       declared defaults and undeclared fields are ignored.

        Raises:
            UnknownToolError: *name* is not registered. No handler runs.
        """
        invocation = ToolInvocation(name=name, arguments=arguments or {})
        self.logger.info("Tool execution requested: %s", invocation.name)

        try:
            descriptor = get_descriptor(invocation.name)
        except UnknownToolError:
            self.logger.error("Unknown tool: %s", invocation.name)
            raise
        handler = self._handlers[ToolName(descriptor.name)]

        declared = descriptor.input_schema.get("properties", {})
        kwargs = {
            key: value
            for key, value in invocation.with_defaults(descriptor).items()
            if key in declared
        }

        try:
            return await handler(**kwargs)
        except Exception:
            self.logger.exception("Tool execution failed: %s", invocation.name)
            raise

    # --- handlers ----------------------------------------------------------
    async def offload_context(
        self,
        context: str,
        task: str,
        complexity: str = Complexity.LOW,
    ) -> ToolResult:
        self.logger.info("Context offload requested: %s (%s)", task, complexity)
        temperature, max_tokens = complexity_options(complexity)
        prompt = build_offload_prompt(context, task, complexity)
        try:
            result = await self.llm.complete(
                prompt, temperature=temperature, max_tokens=max_tokens
            )
        except Exception as exc:
            self.logger.error("Context offload failed: %s", exc)
            raise
        self.logger.info("Context offload completed successfully")
        return ToolResult.text(result)

    async def automate_menial_task(
        self,
        task_type: str,
        input_data: str,
        output_format: str = "text",
    ) -> ToolResult:
        self.logger.info("Menial task automation: %s", task_type)
        prompt = build_task_prompt(task_type, input_data, output_format)
        try:
            result = await self.llm.complete(prompt, temperature=MENIAL_TASK_TEMPERATURE)
        except Exception as exc:
            self.logger.error("Menial task automation failed: %s", exc)
            raise
        self.logger.info("Menial task completed: %s", task_type)
        return ToolResult.text(result)

    async def batch_process(
        self,
        items: Sequence[str],
        operation: str,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> ToolResult:
        report = await self.batch_runner.run(list(items), operation, batch_size)
        return ToolResult.text(report.render())

    async def health_check(self) -> ToolResult:
        self.logger.info("Health check requested")
        healthy = await self.llm.health_check()
        status = {
            "lm_studio_connection": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "model": self.llm.model,
            "api_url": self.llm.base_url,
        }
        self.logger.info("Health check completed: %s", status["lm_studio_connection"])
        return ToolResult.text(json.dumps(status, indent=2))


__all__ = ["ToolDispatcher", "MENIAL_TASK_TEMPERATURE"]
