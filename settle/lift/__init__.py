"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from settle import lift as L   # Recommended
    from settle import lift        # Explicit

Architecture:
- L.up.*    - lifting values and awaitables into LazyCoroResult
- L.down.*  - running a LazyCoroResult down to a Result or value

Examples:
    from settle import lift as L

    one = L.up.pure(1)
    boom = L.up.fail(ValueError("boom"))
    task = L.up.from_awaitable(asyncio.ensure_future(fetch()))

    result = await L.down.to_result(one)          # Ok(1)
    value = await L.down.or_else(boom, default=0) # 0
"""

from __future__ import annotations

from . import down, up

# Most common functions in root for easy access
from .down import or_else, to_result, unsafe
from .up import fail, from_awaitable, pure

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "from_awaitable",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
