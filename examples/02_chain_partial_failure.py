from __future__ import annotations

import operator

from _infra import FakeQuote, banner, run

from kungfu import Error, Ok, Some
from settle import ChainPolicy, chain, configure_logging


async def main() -> None:
    banner("02_chain_partial_failure: sum the quotes that answered")
    configure_logging(level="INFO")

    feeds = [
        FakeQuote(name="nyse", price=101.5, delay_seconds=0.01),
        FakeQuote(name="lse", price=99.0, broken=True),
        FakeQuote(name="tse", price=100.25, delay_seconds=0.02),
    ]

    total = chain(
        [feed.fetch() for feed in feeds],
        operator.add,
        initial=Some(0.0),
        policy=ChainPolicy(log_level="info"),
    )

    match await total:
        case Ok(value):
            print(f"total: {value}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
