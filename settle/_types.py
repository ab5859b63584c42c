"""
Core type definitions for settle.

Aliases shared by every combinator in the package.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Source = anything that eventually settles: a plain awaitable (raises on
# failure) or a LazyCoroResult (Error on failure)
type Source[T] = Awaitable[T] | LazyCoroResult[T, typing.Any]

# Combine = binary operation folded over successful values
type Combine[T] = Callable[[T, T], T]

# Catch = exception classes that count as a source failure
type Catch = tuple[type[BaseException], ...]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    # Type aliases
    "Source",
    "Combine",
    "Catch",
    # Concrete shortcuts
    "LCR",
)
