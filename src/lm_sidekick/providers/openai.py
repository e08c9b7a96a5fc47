from __future__ import annotations

import logging
from typing import Any, Optional, Self

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion

from lm_sidekick._exceptions import classify_error
from lm_sidekick.providers.base import NO_RESPONSE, BaseAsyncLLM
from lm_sidekick.settings import Settings
from lm_sidekick.types.chat import CompletionRequest

# Health checks must stay fast regardless of the completion timeout.
HEALTH_CHECK_TIMEOUT = 5.0


class LMStudioRequestAdapter:
    """Pure transformations between CompletionRequest and the chat completions API."""

    def to_provider(self, model: str, request: CompletionRequest) -> dict[str, Any]:
        """Build keyword arguments for ``chat.completions.create``."""
        return {
            "model": model,
            "messages": request.messages,
            **request.as_dict(),
        }

    def from_provider(self, raw: ChatCompletion) -> str:
        """First choice's message text, or the placeholder when there is none."""
        if raw.choices and raw.choices[0].message:
            content = raw.choices[0].message.content
            if content:
                return content
        return NO_RESPONSE


class LMStudioLLM(BaseAsyncLLM):
    """
    Client for an OpenAI-compatible local server such as LM Studio (async-only).

    Requests are attempted once; there is no automatic retry.
    Use ``LMStudioLLM.from_client`` when you already have an ``AsyncOpenAI`` instance.
    """

    def __init__(
        self,
        model: str,
        *,
        api_key: str,
        base_url: str,
        timeout: float = 30.0,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(model=model, logger=logger, name=name, base_url=base_url)
        self.api_key = api_key
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )
        self._adapter = LMStudioRequestAdapter()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> Self:
        return cls(
            settings.model,
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            logger=logger,
        )

    # Alternate constructor
    @classmethod
    def from_client(
        cls,
        model: str,
        client: AsyncOpenAI,
        *,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> Self:
        """
        Build an ``LMStudioLLM`` around an already-configured ``AsyncOpenAI`` client.
        """
        if not isinstance(client, AsyncOpenAI):
            raise TypeError(
                f"LMStudioLLM.from_client expects AsyncOpenAI; got {type(client).__name__}"
            )

        self = cls.__new__(cls)  # bypass __init__
        BaseAsyncLLM.__init__(
            self,
            model=model,
            logger=logger,
            name=name,
            base_url=str(client.base_url).rstrip("/"),
        )
        self.api_key = client.api_key or ""
        self._client = client
        self._adapter = LMStudioRequestAdapter()
        return self

    @property
    def adapter(self) -> LMStudioRequestAdapter:
        return self._adapter

    async def complete(
        self,
        prompt: str,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        overrides: dict[str, Any] = {}
        if temperature is not None:
            overrides["temperature"] = temperature
        if max_tokens is not None:
            overrides["max_tokens"] = max_tokens
        request = CompletionRequest(prompt, **overrides)
        args = self._adapter.to_provider(self.model, request)

        self._log(
            f"Sending request to model {self.model} "
            f"(temperature={request.temperature}, max_tokens={request.max_tokens})",
            logging.DEBUG,
        )
        try:
            response: ChatCompletion = await self._client.chat.completions.create(**args)
        except Exception as exc:
            error = classify_error(exc, self.logger)
            self._log(f"LM Studio API call failed: {error}", logging.ERROR)
            raise error from exc

        return self._adapter.from_provider(response)

    async def health_check(self) -> bool:
        try:
            await self._client.with_options(timeout=HEALTH_CHECK_TIMEOUT).models.list()
        except Exception as exc:
            self._log(f"Health check failed: {exc}", logging.WARNING)
            return False
        return True

    async def aclose(self) -> None:
        await self._client.close()


__all__ = ["LMStudioLLM", "LMStudioRequestAdapter", "HEALTH_CHECK_TIMEOUT"]
