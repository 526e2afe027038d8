# chronoalgebra/core/interning.py
from __future__ import annotations

from threading import Lock
from typing import Callable, Generic, Hashable, TypeVar

T = TypeVar("T")


class Interner(Generic[T]):
    """
    Canonical-instance table: one live instance per constructor key.

    Two lookups with equal keys return the very same object, so values built
    through an Interner can be compared by identity.
    """

    def __init__(self) -> None:
        self._instances: dict[Hashable, T] = {}
        self._lock = Lock()

    def get(self, key: Hashable, factory: Callable[[], T]) -> T:
        instance = self._instances.get(key)
        if instance is not None:
            return instance
        with self._lock:
            instance = self._instances.get(key)
            if instance is None:
                instance = factory()
                self._instances[key] = instance
            return instance

    def __len__(self) -> int:
        return len(self._instances)

    def __contains__(self, key: object) -> bool:
        return key in self._instances

    def clear(self) -> None:
        with self._lock:
            self._instances.clear()
