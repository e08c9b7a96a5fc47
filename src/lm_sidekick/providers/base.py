"""Base class for inference clients."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

__all__ = ["BaseAsyncLLM", "NO_RESPONSE"]

# Returned when the backend answered but produced no text.
NO_RESPONSE = "No response generated"


class BaseAsyncLLM(ABC):
    """
    Base class for inference clients. All implementations are async-first.
    """

    def __init__(
        self,
        model: str,
        *,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> None:
        """
        Initializes the base client.

        Args:
            model: The identifier of the model to be used.
            logger: Optional logger instance. If None, a logger named after
                    this module will be used.
            name: Optional name for this component, used in logging.
                  If None, defaults to the concrete class's name.
            base_url: Root of the backend API, used for reporting.
        """
        self.model = model
        self.logger = logger or logging.getLogger(__name__)
        self.name = name if name is not None else self.__class__.__name__
        self.base_url = base_url

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Send a single-turn prompt and return the generated text.

        Raises:
            BackendError: The backend was unreachable, timed out or
                returned a non-success status.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Return True when the backend answers its models endpoint. Never raises."""
        ...

    def _log(self, message: str, level: int = logging.INFO) -> None:
        self.logger.log(level, f"[{self.name}] {message}")

    # --- lifecycle ---------------------------------------------------------
    async def aclose(self) -> None:
        """Release underlying HTTP resources. Safe to call multiple times."""

    async def __aenter__(self) -> "BaseAsyncLLM":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
