"""
Answer
======

Settle a yes/no answer into a LazyCoroResult.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import WrongParameterError

YES = 'Hooray!!! She said "Yes"!'
NO = 'Oh no, she said "No".'
WRONG_PARAMETER = "Wrong parameter is passed! Ask her again."


def answer(value: object) -> LazyCoroResult[str, WrongParameterError]:
    """
    Resolve with YES for True, NO for False, fail for anything else.

    Only real bools count: 0, 1, None and "true" all fail.

    Example:
        await answer(True)   # Ok('Hooray!!! She said "Yes"!')
        await answer(None)   # Error(WrongParameterError(...))
    """

    async def run() -> Result[str, WrongParameterError]:
        if not isinstance(value, bool):
            return Error(WrongParameterError(WRONG_PARAMETER))
        return Ok(YES if value else NO)

    return LazyCoroResult(run)


__all__ = ("NO", "WRONG_PARAMETER", "YES", "answer")
