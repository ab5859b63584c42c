"""
Lifting values into LazyCoroResult.

Resolve, reject, and bridge plain awaitables (which raise on failure)
into the Result-based world of the combinators.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any, Never

from kungfu import Error, LazyCoroResult, Result

from .._helpers import settle_one
from .._types import LCR, Catch


def pure[T](value: T) -> LCR[T, Never]:
    """
    Lift a value into an always-succeeding LazyCoroResult (resolve).

    Example:
        from settle import lift as L

        one = L.up.pure(1)
        await L.down.to_result(one)  # Ok(1)
    """
    return LazyCoroResult.pure(value)


def fail[E](error: E) -> LCR[Never, E]:
    """
    Create an always-failing LazyCoroResult (reject). Dual of pure().

    Example:
        from settle import lift as L

        boom = L.up.fail(ValueError("boom"))
        await L.down.to_result(boom)  # Error(ValueError('boom'))
    """
    return Error(error).to_async()


def from_awaitable[T](
    source: Awaitable[T],
    *,
    catch: Catch = (Exception,),
) -> LCR[T, Any]:
    """
    Settle an exception-raising awaitable into a LazyCoroResult.

    **When to use:** coroutines, tasks and futures from code that knows
    nothing about Result.

    Example:
        from settle import lift as L

        user = L.up.from_awaitable(client.get_user(42))
        await L.down.to_result(user)  # Ok(User(...)) or Error(HTTPError(...))

    NOTE: A coroutine can only be awaited once. Awaiting the returned
          LazyCoroResult twice only works for futures and tasks.
    """
    async def run() -> Result[T, Any]:
        return await settle_one(source, catch)

    return LazyCoroResult(run)


__all__ = (
    "pure",
    "fail",
    "from_awaitable",
)
