from __future__ import annotations

from settle import Log


class TestLog:
    def test_starts_empty(self) -> None:
        assert Log[str]() == []

    def test_tell_keeps_order(self) -> None:
        log = Log[str]().tell("timeout").tell("refused")
        assert log == ["timeout", "refused"]

    def test_tell_returns_new_log(self) -> None:
        log = Log[str]().tell("a")
        told = log.tell("b")
        assert isinstance(told, Log)
        assert told == ["a", "b"]
        assert log == ["a"]
