"""Chat completion request types."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

# Type alias for chat messages
ChatMessage = dict[str, Any]

DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 2048


@dataclass(frozen=True, slots=True)
class CompletionRequest:
    """A single-turn completion request, built fresh for every backend call."""

    prompt: str
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS

    def __post_init__(self) -> None:
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be within [0, 1], got {self.temperature}")
        if self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")

    @property
    def messages(self) -> list[ChatMessage]:
        return [{"role": "user", "content": self.prompt}]

    def as_dict(self) -> dict[str, Any]:
        """
        Convert to the sampling parameters sent alongside the messages.

        Returns:
            ``max_tokens``, ``temperature`` and ``stream`` (always False).
        """
        params = asdict(self)
        params.pop("prompt")
        params["stream"] = False
        return params
