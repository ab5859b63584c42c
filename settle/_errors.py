from __future__ import annotations

class WrongParameterError(Exception):
    """answer() got something other than a bool."""

class EmptyAccumulatorError(Exception):
    """chain() had no successful values and no initial value to fold."""

    failed: int

    def __init__(self, failed: int) -> None:
        self.failed = failed
        super().__init__(f"Nothing to fold: no source succeeded ({failed} failed)")

__all__ = ("EmptyAccumulatorError", "WrongParameterError")
