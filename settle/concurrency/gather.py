"""
Gather combinators
==================

All-or-nothing collection of concurrently settling sources.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Sequence

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import cancel_pending, failure_message, settle_one
from .._logging import get_logger
from .._types import Source

logger = get_logger(__name__)


def gather_all[T](sources: Sequence[Source[T]]) -> LazyCoroResult[list[T], str]:
    """
    Run all sources concurrently, collect their values in input order.

    Fail-fast: the first failure to settle cancels whatever is still
    running, and its message comes back as the Error value instead of
    being raised.

    Example:
        await gather_all([pure(1), pure(3), pure(12)])  # Ok([1, 3, 12])
        await gather_all([pure(1), boom()])             # Error("boom")
    """

    async def run() -> Result[list[T], str]:
        tasks: list[asyncio.Future[Result[T, typing.Any]]] = [
            asyncio.ensure_future(settle_one(source)) for source in sources
        ]
        try:
            for fut in asyncio.as_completed(tasks):
                match await fut:
                    case Error(reason):
                        logger.warning(
                            "gather_all_failed",
                            pending=sum(not t.done() for t in tasks),
                            error=repr(reason),
                        )
                        return Error(failure_message(reason))
                    case Ok(_):
                        pass
            return Ok([t.result().unwrap() for t in tasks])
        finally:
            cancel_pending(tasks)

    return LazyCoroResult(run)


__all__ = ("gather_all",)
