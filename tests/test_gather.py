from __future__ import annotations

import asyncio

from kungfu import Error, Ok
from structlog.testing import capture_logs

from settle import fail, gather_all, pure


async def ok_after[T](value: T, delay: float = 0.0) -> T:
    await asyncio.sleep(delay)
    return value


async def fail_after(message: str, delay: float = 0.0) -> int:
    await asyncio.sleep(delay)
    raise ValueError(message)


# ---------------------------------------------------------------------------
# Basic correctness
# ---------------------------------------------------------------------------


class TestGatherAllBasic:
    async def test_empty(self) -> None:
        assert await gather_all([]) == Ok([])

    async def test_all_ok(self) -> None:
        assert await gather_all([pure(1), pure(3), pure(12)]) == Ok([1, 3, 12])

    async def test_input_order_not_completion_order(self) -> None:
        result = await gather_all([ok_after("a", 0.03), ok_after("b", 0.0), ok_after("c", 0.01)])
        assert result == Ok(["a", "b", "c"])

    async def test_mixed_source_kinds(self) -> None:
        fut: asyncio.Future[int] = asyncio.get_running_loop().create_future()
        fut.set_result(2)
        assert await gather_all([pure(1), fut, ok_after(3)]) == Ok([1, 2, 3])

    async def test_runs_concurrently(self) -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()
        result = await gather_all([ok_after(i, 0.05) for i in range(5)])
        assert result == Ok([0, 1, 2, 3, 4])
        assert loop.time() - started < 0.2


# ---------------------------------------------------------------------------
# Failure: message returned, not raised
# ---------------------------------------------------------------------------


class TestGatherAllFailure:
    async def test_failure_message_returned(self) -> None:
        result = await gather_all([ok_after(1), fail_after("boom"), ok_after(3)])
        assert result == Error("boom")

    async def test_lazy_error_message(self) -> None:
        assert await gather_all([pure(1), fail(KeyError("nope"))]) == Error("'nope'")

    async def test_plain_error_value(self) -> None:
        assert await gather_all([fail("bad input")]) == Error("bad input")

    async def test_exception_without_message(self) -> None:
        async def bare() -> int:
            raise RuntimeError

        assert await gather_all([bare()]) == Error("RuntimeError")

    async def test_first_failure_wins(self) -> None:
        result = await gather_all([fail_after("late", 0.05), fail_after("early", 0.0)])
        assert result == Error("early")

    async def test_failure_cancels_pending(self) -> None:
        cancelled: list[int] = []

        async def slow(v: int) -> int:
            try:
                await asyncio.sleep(10)
                return v
            except asyncio.CancelledError:
                cancelled.append(v)
                raise

        result = await gather_all([slow(1), fail_after("boom"), slow(2)])
        assert result == Error("boom")
        await asyncio.sleep(0)
        assert sorted(cancelled) == [1, 2]

    async def test_failure_logged(self) -> None:
        with capture_logs() as logs:
            await gather_all([fail_after("boom")])

        assert [e["event"] for e in logs] == ["gather_all_failed"]
        assert logs[0]["log_level"] == "warning"
