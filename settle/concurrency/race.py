"""
Race combinators
================

First source to settle wins, Ok or Error alike (extract + wrap pattern).
"""

from __future__ import annotations

import asyncio
import functools
import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import LazyCoroResult, Result

from .._helpers import cancel_pending, settle_one
from .._types import Source


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def raceM[M, Raw](
    *thunks: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """
    Generic race combinator.

    Return the raw outcome of the first thunk to complete.
    Ties go to the earliest thunk in argument order. Always cancels the rest.
    """

    async def run() -> Raw:
        if not thunks:
            raise ValueError("race() requires at least one source")

        tasks = [asyncio.ensure_future(t()) for t in thunks]
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
            first_done = min(done, key=tasks.index)
            return first_done.result()
        finally:
            cancel_pending(tasks)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def race[T](sources: Sequence[Source[T]]) -> LazyCoroResult[T, typing.Any]:
    """
    Settle with whichever source settles first.

    A source that fails first makes the race fail with its reason.
    """
    thunks: list[Callable[[], Coroutine[typing.Any, typing.Any, Result[T, typing.Any]]]] = [
        functools.partial(settle_one, source) for source in sources
    ]
    return raceM(*thunks, wrap=LazyCoroResult)


__all__ = ("race", "raceM")
