"""
Translate noisy backend tracebacks into sidekick-level errors, while
preserving the original exception for full tracebacks.
"""

from __future__ import annotations

import logging
from typing import Optional

import openai

__all__: tuple[str, ...] = (
    "SidekickError",
    "BackendError",
    "UnknownToolError",
    "ConfigurationError",
    "classify_error",
)


class SidekickError(RuntimeError):
    """Base class for every error raised by lm-sidekick."""


class BackendError(SidekickError):
    """The inference backend was unreachable, timed out or answered with an error.

    Attributes:
        status_code: HTTP status returned by the backend, if it answered at all.
        original_exc: The underlying transport/SDK exception, if any.
    """

    status_code: Optional[int]
    original_exc: Optional[Exception]

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        original_exc: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.original_exc = original_exc
        if original_exc is not None:
            self.__cause__ = original_exc


class UnknownToolError(SidekickError):
    """Dispatch was requested for an operation that is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ConfigurationError(SidekickError):
    """Internal state that schema validation should have made impossible."""


def classify_error(
    exc: Exception,
    logger: Optional[logging.Logger] = None,
) -> BackendError:
    """Wrap an SDK exception in BackendError with a concise message."""
    log = logger or logging.getLogger("lm_sidekick.exceptions")

    if isinstance(exc, BackendError):
        return exc

    status_code: Optional[int] = None
    if isinstance(exc, openai.APIStatusError):
        status_code = exc.status_code
        reason = exc.response.reason_phrase
        msg = f"LM Studio API error: {status_code} {reason}".rstrip()
    elif isinstance(exc, openai.APITimeoutError):
        msg = "Request to LM Studio timed out"
    elif isinstance(exc, openai.APIConnectionError):
        msg = "Connection problem – unable to reach LM Studio"
    else:
        msg = f"{exc.__class__.__name__}: {exc}"

    log.warning("Wrapping backend exception", extra={"exc": exc})
    return BackendError(
        f"Failed to communicate with LM Studio: {msg}",
        status_code=status_code,
        original_exc=exc,
    )
