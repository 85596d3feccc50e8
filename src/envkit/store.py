"""Concrete environment store backends.

``OsEnvironmentStore`` is the process environment itself. ``MemoryStore``
is an isolated mapping for injection into ``EnvConfig`` in tests or
embedded uses where the real environment must stay untouched.
"""
from __future__ import annotations

import os
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from envkit.coercion import map_to_string

__all__ = [
    "OsEnvironmentStore",
    "MemoryStore",
]


class OsEnvironmentStore:
    """Store backed by ``os.environ``.

    The OS mapping only holds strings, so non-string values are written
    through ``map_to_string``.
    """

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def set(self, key: str, value: Any) -> None:
        os.environ[key] = map_to_string(value)

    def delete(self, key: str) -> None:
        os.environ.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in os.environ

    def items(self) -> Iterable[tuple[str, str]]:
        return list(os.environ.items())

    def __repr__(self) -> str:
        return "OsEnvironmentStore()"


class MemoryStore:
    """Dict-backed store that keeps values exactly as given."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def items(self) -> Iterable[tuple[str, Any]]:
        with self._lock:
            return list(self._data.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"MemoryStore({len(self)} keys)"
