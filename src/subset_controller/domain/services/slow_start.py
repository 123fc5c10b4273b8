"""Slow-start batch execution.

Runs ``count`` calls in rounds of geometrically growing size:

1. The first round dispatches ``min(count, initial_batch_size)`` calls
2. Every call of a round runs concurrently; the round ends when all return
3. A fully successful round doubles the size (capped by what remains)
4. A round with any failure is the last one

This bounds the burst against a control plane that may already be
failing while still reaching full parallelism in O(log N) rounds.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class SlowStartResult:
    """Outcome of a slow-start run."""
    successes: int = 0
    error: Optional[Exception] = None
    batch_sizes: list[int] = field(default_factory=list)


class SlowStartBatcher:
    """Executes indexed calls with slow-start ramp-up.

    Example:
        batcher = SlowStartBatcher(initial_batch_size=1)
        result = batcher.run(len(names), lambda i: create(names[i]))
    """

    def __init__(self, initial_batch_size: int = 1, thread_name_prefix: str = "slow-start"):
        """Initialize the batcher.

        Args:
            initial_batch_size: Size of the first round.
            thread_name_prefix: Prefix for worker thread names.
        """
        self._initial_batch_size = initial_batch_size
        self._thread_name_prefix = thread_name_prefix

    def run(self, count: int, fn: Callable[[int], None]) -> SlowStartResult:
        """Run ``fn(index)`` for every index in ``range(count)``.

        A call fails by raising. The reported error is the failure with the
        lowest index in the last round.

        Args:
            count: Number of calls.
            fn: Per-index operation.

        Returns:
            Success count, first error and the size of every round.
        """
        result = SlowStartResult()
        remaining = count
        index = 0
        batch_size = min(remaining, self._initial_batch_size)

        while batch_size > 0:
            result.batch_sizes.append(batch_size)
            failures = self._run_round(fn, index, batch_size)
            index += batch_size

            result.successes += batch_size - len(failures)
            if failures:
                result.error = failures[0]
                return result

            remaining -= batch_size
            batch_size = min(2 * batch_size, remaining)

        return result

    def _run_round(self, fn: Callable[[int], None], start: int, size: int) -> list[Exception]:
        with ThreadPoolExecutor(max_workers=size, thread_name_prefix=self._thread_name_prefix) as pool:
            futures: list[Future] = [pool.submit(fn, start + i) for i in range(size)]
            wait(futures)

        failures = []
        for future in futures:
            error = future.exception()
            if error is not None:
                failures.append(error)
        return failures


def slow_start_batch(
    count: int,
    initial_batch_size: int,
    fn: Callable[[int], None],
) -> tuple[int, Optional[Exception]]:
    """Run ``fn`` over ``range(count)`` with slow-start ramp-up.

    Returns:
        Tuple of (successful calls, first error or None).
    """
    result = SlowStartBatcher(initial_batch_size).run(count, fn)
    return result.successes, result.error
