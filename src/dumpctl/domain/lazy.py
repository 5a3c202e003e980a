"""Compute-once cache cell shared across threads."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """Run *builder* on first :meth:`get` and hand every caller that result.

    Concurrent first callers block on a lock; exactly one of them runs the
    builder. Once computed the value never changes. If the builder raises,
    the cell stays empty and the next caller tries again.
    """

    def __init__(self, builder: Callable[[], T]) -> None:
        self._builder = builder
        self._lock = threading.Lock()
        self._value: T | None = None
        self._ready = False

    @property
    def computed(self) -> bool:
        return self._ready

    def get(self) -> T:
        if not self._ready:
            with self._lock:
                if not self._ready:
                    self._value = self._builder()
                    self._ready = True
        return self._value  # type: ignore[return-value]
