"""Tests for the compute-once cache cell."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from dumpctl.domain.lazy import Lazy


class TestLazy:
    def test_not_computed_until_requested(self) -> None:
        calls: list[int] = []
        cell = Lazy(lambda: calls.append(1) or "value")
        assert cell.computed is False
        assert calls == []

    def test_computed_once(self) -> None:
        calls: list[int] = []

        def build() -> str:
            calls.append(1)
            return "value"

        cell = Lazy(build)
        assert cell.get() == "value"
        assert cell.get() == "value"
        assert cell.computed is True
        assert len(calls) == 1

    def test_same_object_returned(self) -> None:
        cell = Lazy(lambda: ["x"])
        assert cell.get() is cell.get()

    def test_concurrent_first_use_builds_once(self) -> None:
        calls = 0
        lock = threading.Lock()
        start = threading.Barrier(8)

        def build() -> str:
            nonlocal calls
            with lock:
                calls += 1
            time.sleep(0.05)
            return "help text"

        cell = Lazy(build)

        def worker() -> str:
            start.wait()
            return cell.get()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: worker(), range(8)))

        assert calls == 1
        assert results == ["help text"] * 8

    def test_failed_build_is_retried(self) -> None:
        attempts: list[int] = []

        def build() -> str:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("boom")
            return "ok"

        cell = Lazy(build)
        with pytest.raises(RuntimeError, match="boom"):
            cell.get()
        assert cell.computed is False
        assert cell.get() == "ok"
        assert len(attempts) == 2
