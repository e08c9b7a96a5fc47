"""
Sequential chunk-and-loop processing for ``batch_process``.

Chunks are sent one at a time with a fixed pause between them; a failing chunk
is recorded in the report and the loop moves on to the next one.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterator, Optional, Sequence

from lm_sidekick.prompts import build_batch_prompt
from lm_sidekick.providers.base import BaseAsyncLLM
from lm_sidekick.registry import MAX_BATCH_SIZE, MIN_BATCH_SIZE

BATCH_TEMPERATURE = 0.2
DEFAULT_DELAY = 1.0

Sleep = Callable[[float], Awaitable[object]]


@dataclass(slots=True)
class ChunkOutcome:
    """Result of one chunk: the backend's text or the error that stopped it."""

    number: int
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def render(self) -> str:
        if self.is_error:
            return f"Batch {self.number}: Error - {self.error}"
        return f"Batch {self.number}: {self.text}"


@dataclass(slots=True)
class BatchReport:
    """Per-chunk outcomes in chunk order, one entry per chunk."""

    outcomes: list[ChunkOutcome] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[ChunkOutcome]:
        return iter(self.outcomes)

    @property
    def failed(self) -> list[ChunkOutcome]:
        return [outcome for outcome in self.outcomes if outcome.is_error]

    def render(self) -> str:
        return "\n\n".join(outcome.render() for outcome in self.outcomes)


def chunked(items: Sequence[str], size: int) -> Iterator[tuple[int, Sequence[str]]]:
    """Yield ``(start, chunk)`` pairs of consecutive slices of at most *size* items."""
    for start in range(0, len(items), size):
        yield start, items[start : start + size]


class BatchRunner:
    """Runs a batch operation against an inference client, one chunk at a time."""

    def __init__(
        self,
        llm: BaseAsyncLLM,
        *,
        delay: float = DEFAULT_DELAY,
        sleep: Sleep = asyncio.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.llm = llm
        self.delay = delay
        self._sleep = sleep
        self.logger = logger or logging.getLogger(__name__)

    async def run(
        self,
        items: Sequence[str],
        operation: str,
        batch_size: int,
    ) -> BatchReport:
        if not MIN_BATCH_SIZE <= batch_size <= MAX_BATCH_SIZE:
            raise ValueError(
                f"batch_size must be between {MIN_BATCH_SIZE} and {MAX_BATCH_SIZE}, got {batch_size}"
            )

        self.logger.info("Batch processing %d items: %s", len(items), operation)
        report = BatchReport()
        for start, chunk in chunked(items, batch_size):
            number = start // batch_size + 1
            if start:
                await self._sleep(self.delay)
            report.outcomes.append(await self._run_chunk(number, start, chunk, operation))

        self.logger.info(
            "Batch processing completed: %d chunks, %d failed",
            len(report),
            len(report.failed),
        )
        return report

    async def _run_chunk(
        self,
        number: int,
        start: int,
        chunk: Sequence[str],
        operation: str,
    ) -> ChunkOutcome:
        prompt = build_batch_prompt(chunk, operation, start)
        try:
            text = await self.llm.complete(prompt, temperature=BATCH_TEMPERATURE)
        except Exception as exc:
            self.logger.error("Batch processing failed at batch %d: %s", number, exc)
            return ChunkOutcome(number, error=str(exc))
        return ChunkOutcome(number, text=text)


__all__ = ["BatchRunner", "BatchReport", "ChunkOutcome", "chunked"]
