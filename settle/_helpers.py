"""Internal helpers for settle.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for writing new combinators."""

from __future__ import annotations

import asyncio
import inspect
import typing
from collections.abc import Iterable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._types import Catch, Source

# Settle functions (Source[T] -> Result[T, reason])
async def settle_one[T](
    source: Source[T],
    catch: Catch = (Exception,),
) -> Result[T, typing.Any]:
    """
    Suspend until *source* settles and report how it settled.

    A LazyCoroResult already speaks Result: its Ok/Error is returned as is.
    Any source, LazyCoroResult included, that raises one of *catch*
    fails with that exception. Everything else propagates.

    Raises:
        RuntimeError: *source* is a coroutine that was already awaited.
            Reusing a coroutine is a caller bug, not a failed source.
    """
    if inspect.iscoroutine(source) and inspect.getcoroutinestate(source) == inspect.CORO_CLOSED:
        raise RuntimeError(f"cannot settle an already awaited coroutine: {source!r}")
    try:
        if isinstance(source, LazyCoroResult):
            return await source
        return Ok(await source)
    except catch as exc:
        return Error(exc)

def failure_message(reason: object) -> str:
    """
    Human-readable message of a failure reason.

    Exceptions give their message, bare error values their str().
    Exceptions without arguments fall back to the class name.
    """
    if isinstance(reason, BaseException):
        return str(reason) or type(reason).__name__
    return str(reason)

# Task housekeeping
def cancel_pending(tasks: Iterable[asyncio.Future[typing.Any]]) -> None:
    """Cancel every task that has not finished yet."""
    for t in tasks:
        if not t.done():
            t.cancel()

__all__ = (
    # Settling
    "settle_one",
    "failure_message",
    # Tasks
    "cancel_pending",
)
