from __future__ import annotations

import asyncio

from _infra import banner, run

from kungfu import Error, Ok
from settle import answer, gather_all, lift as L, race


async def main() -> None:
    banner("01_quickstart: answer + gather_all + race")

    for value in (True, False, None):
        match await answer(value):
            case Ok(message):
                print(f"answer({value!r}): {message}")
            case Error(err):
                print(f"answer({value!r}) failed: {err}")

    everything = await gather_all([L.pure(1), L.pure(3), L.pure(12)])
    print(f"gather_all: {everything!r}")

    async def later(value: str, delay: float) -> str:
        await asyncio.sleep(delay)
        return value

    fastest = await race([later("second", 0.05), later("first", 0.0)])
    print(f"race: {fastest!r}")


if __name__ == "__main__":
    run(main)
