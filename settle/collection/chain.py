"""
Chain combinators
=================

Sequential settle + fold that tolerates failing sources.
"""

from __future__ import annotations

import functools
import inspect
import typing
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from .._errors import EmptyAccumulatorError
from .._helpers import settle_one
from .._logging import get_logger
from .._types import Catch, Combine, Source
from ..writer import Log

logger = get_logger(__name__)

_LOG_LEVELS = ("debug", "info", "warning")


@dataclass(frozen=True, slots=True)
class ChainPolicy:
    """Configuration for chain: what counts as a failed source, how loudly to report it."""

    catch: Catch = (Exception,)
    log_level: Literal["debug", "info", "warning"] = "warning"

    def __post_init__(self) -> None:
        if not self.catch or not all(
            inspect.isclass(exc) and issubclass(exc, BaseException) for exc in self.catch
        ):
            raise ValueError("ChainPolicy.catch must hold one or more exception types")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"ChainPolicy.log_level must be one of {_LOG_LEVELS}")


def chain[T](
    sources: Sequence[Source[T]],
    combine: Combine[T],
    *,
    initial: Option[T] = Nothing(),
    policy: ChainPolicy = ChainPolicy(),
) -> LazyCoroResult[T, EmptyAccumulatorError]:
    """
    Settle sources one by one, skip the failed ones, fold the rest.

    Sources are awaited strictly in input order, never concurrently.
    Values of successful sources are folded left to right with *combine*:

        combine(combine(combine(v0, v1), v2), ...)

    Failed sources are logged and dropped; they never reach the result.
    A source fails when it raises one of ``policy.catch`` or, for a
    LazyCoroResult, returns Error. A nested chain whose own combine raises
    is therefore just another failed source.

    Edge cases:
    - ``initial=Some(seed)`` starts the fold from *seed*, so a run where
      nothing succeeded yields ``Ok(seed)``.
    - Without *initial*, a single success is returned unfolded and a run
      with no successes yields ``Error(EmptyAccumulatorError)``.
    - An exception raised by *combine* propagates unchanged.
    - Coroutine sources can be awaited once. Awaiting the same chain of
      coroutines again raises RuntimeError instead of reporting failures.

    Example:
        await chain([pure(1), fail("x"), pure(3)], operator.add)  # Ok(4)
    """

    async def run() -> Result[T, EmptyAccumulatorError]:
        values: list[T] = []
        failures: Log[typing.Any] = Log()

        for index in range(len(sources)):
            match await settle_one(sources[index], policy.catch):
                case Ok(value):
                    values.append(value)
                case Error(reason):
                    failures = failures.tell(reason)
                    getattr(logger, policy.log_level)(
                        "chain_source_failed",
                        index=index,
                        error=repr(reason),
                    )

        logger.debug("chain_settled", succeeded=len(values), failed=len(failures))

        match initial:
            case Some(seed):
                return Ok(functools.reduce(combine, values, seed))
            case _:
                if not values:
                    return Error(EmptyAccumulatorError(len(failures)))
                return Ok(functools.reduce(combine, values))

    return LazyCoroResult(run)


__all__ = ("ChainPolicy", "chain")
