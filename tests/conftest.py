"""Shared stubs for sidekick tests."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

import httpx
import pytest
from openai import AsyncOpenAI

from lm_sidekick import BackendError
from lm_sidekick.logging_config import LOGGER_NAME
from lm_sidekick.providers import BaseAsyncLLM, LMStudioLLM

BASE_URL = "http://lm.test/v1"
API_KEY = "test-key"


class StubLLM(BaseAsyncLLM):
    """Records every completion request and answers from a canned reply."""

    def __init__(
        self,
        reply: str = "ok",
        *,
        healthy: bool = True,
        fail_on: tuple[int, ...] = (),
    ) -> None:
        super().__init__("stub-model", base_url="http://stub.test/v1")
        self.reply = reply
        self.healthy = healthy
        self.fail_on = fail_on
        self.calls: list[dict[str, Any]] = []

    async def complete(
        self,
        prompt: str,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        self.calls.append(
            {"prompt": prompt, "temperature": temperature, "max_tokens": max_tokens}
        )
        number = len(self.calls)
        if number in self.fail_on:
            raise BackendError(f"backend down on call {number}", status_code=503)
        return f"{self.reply} {number}"

    async def health_check(self) -> bool:
        return self.healthy


class RecordingSleep:
    """Stand-in for asyncio.sleep that returns immediately."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def completion_body(content: Optional[str]) -> dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "local-model",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


MODELS_BODY = {
    "object": "list",
    "data": [{"id": "local-model", "object": "model", "created": 0, "owned_by": "me"}],
}


def make_llm(handler: Callable[[httpx.Request], httpx.Response]) -> LMStudioLLM:
    """LMStudioLLM whose HTTP traffic is answered by *handler*."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = AsyncOpenAI(
        api_key=API_KEY,
        base_url=BASE_URL,
        http_client=http_client,
        max_retries=0,
    )
    return LMStudioLLM.from_client("local-model", client)


def request_json(request: httpx.Request) -> dict[str, Any]:
    return json.loads(request.content)


@pytest.fixture
def stub_llm() -> StubLLM:
    return StubLLM()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def restore_logger():
    """Undo configure_logging() so later tests see the default package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
