"""Bounded-concurrency task runner.

A fixed pool of worker tasks pulls targets from a shared iterator, so at most
``max_concurrency`` worker calls are unresolved at any instant and no task is
created per target. Results are index-aligned with the submitted targets.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from secprobe.errors import MalformedInputError, ScanCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class TaskFailure:
    """Outcome recorded for a target whose worker raised."""

    target: Any
    message: str


def default_on_error(target: Any, exc: BaseException) -> TaskFailure:
    return TaskFailure(target=target, message=str(exc) or exc.__class__.__name__)


async def run_all(
    targets: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    max_concurrency: int,
    *,
    on_error: Callable[[T, BaseException], R] = default_on_error,
    progress: ProgressCallback | None = None,
    progress_every: int = 100,
    cancel_event: asyncio.Event | None = None,
) -> list[R]:
    """Run *worker* over every target with a fixed concurrency ceiling.

    Every target yields exactly one entry in the returned list, at the same
    index. Exceptions raised by the worker are converted with *on_error*.
    Once *cancel_event* is set no further target starts; targets never started
    get ``on_error(target, ScanCancelledError())``.
    """
    if max_concurrency < 1:
        raise MalformedInputError(f"max_concurrency must be >= 1, got {max_concurrency}")
    if progress_every < 1:
        raise MalformedInputError(f"progress_every must be >= 1, got {progress_every}")

    total = len(targets)
    results: list[Any] = [None] * total
    pending = iter(range(total))
    completed = 0

    def record(index: int, outcome: R) -> None:
        nonlocal completed
        results[index] = outcome
        completed += 1
        if progress and completed % progress_every == 0:
            progress(completed, total)

    async def pool_worker() -> None:
        for index in pending:
            target = targets[index]
            if cancel_event is not None and cancel_event.is_set():
                record(index, on_error(target, ScanCancelledError()))
                continue
            try:
                outcome = await worker(target)
            except Exception as exc:
                logger.debug("Worker failed for %r: %s", target, exc)
                outcome = on_error(target, exc)
            record(index, outcome)

    pool_size = min(max_concurrency, total)
    if pool_size:
        await asyncio.gather(*(pool_worker() for _ in range(pool_size)))
    return results
