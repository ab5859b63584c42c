"""
Log - failure record
====================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered record of what went wrong during one run.

    chain() starts from an empty Log and tells it every failure reason,
    in source order. The record stays private to that run.
    """

    def tell(self, entry: A, /) -> Log[A]:
        """
        Record *entry*; the receiver is left untouched.

        Example:
            Log[str]().tell("timeout").tell("refused")  # Log(["timeout", "refused"])
        """
        return Log([*self, entry])


__all__ = ("Log",)
