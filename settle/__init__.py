"""
settle - promise-style combinators over kungfu LazyCoroResult.

Building blocks for settling async sources:
- answer: settle a bool into a fixed yes/no message
- gather_all: all succeed or fail fast
- race: first source to settle wins
- chain: settle sources one by one, skip failures, fold the rest

Everything returns a lazy LazyCoroResult; nothing runs until awaited.
"""

# Core types
from ._types import LCR, Catch, Combine, Source

# Internal helpers (for custom combinators)
from . import _helpers

# Lift helpers (resolve / reject / bridging)
from . import lift
from .lift import fail, from_awaitable, pure

# Writer
from . import writer
from .writer import Log

# Answer
from .answer import NO, WRONG_PARAMETER, YES, answer

# Concurrency
from .concurrency import gather_all, race, raceM

# Collection operations
from .collection import ChainPolicy, chain

# Logging
from ._logging import configure_logging, get_logger

# Errors
from ._errors import EmptyAccumulatorError, WrongParameterError

__all__ = (
    # Types
    "Catch",
    "Combine",
    "LCR",
    "Source",
    # Internal helpers (for custom combinators)
    "_helpers",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "fail",
    "from_awaitable",
    "pure",
    # Writer module
    "writer",
    "Log",
    # Answer
    "NO",
    "WRONG_PARAMETER",
    "YES",
    "answer",
    # Concurrency
    "gather_all",
    "race",
    "raceM",
    # Collection
    "ChainPolicy",
    "chain",
    # Logging
    "configure_logging",
    "get_logger",
    # Errors
    "EmptyAccumulatorError",
    "WrongParameterError",
)
