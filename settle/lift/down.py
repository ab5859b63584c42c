"""
Running a LazyCoroResult down to a value.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._types import LCR


async def to_result[T, E](lcr: LCR[T, E]) -> Result[T, E]:
    """
    Run and return the Result.

    Example:
        from settle import lift as L

        result = await L.down.to_result(chain(sources, operator.add))
        # result: Ok(6)
    """
    return await lcr()


async def unsafe[T, E](lcr: LCR[T, E]) -> T:
    """
    Run and unwrap, raising on Error.

    NOTE: kungfu raises UnwrapError carrying the error value.
    """
    result = await lcr()
    return result.unwrap()


async def or_else[T, E](lcr: LCR[T, E], default: T) -> T:
    """
    Run and return the value, or *default* on Error.

    Example:
        from settle import lift as L

        total = await L.down.or_else(chain(sources, operator.add), default=0)
    """
    result = await lcr()
    match result:
        case Ok(v):
            return v
        case Error(_):
            return default


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
)
