"""Exception types raised or reported by envkit.

Only ``require`` raises during ordinary reads. File problems are attached
to the memoized ``LoadResult`` instead of propagating.
"""
from __future__ import annotations

from pathlib import Path

__all__ = [
    "EnvError",
    "EnvFileError",
    "MissingEnvError",
]


class EnvError(Exception):
    """Base class for envkit errors."""


class EnvFileError(EnvError):
    """A .env file could not be read or contains malformed lines.

    Attributes:
        path: File that failed
        lines: Offending source lines (empty for read failures)
    """

    def __init__(self, path: Path, message: str, lines: tuple[str, ...] = ()) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.lines = lines


class MissingEnvError(EnvError, KeyError):
    """A required environment variable is not set."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Required environment variable not set: {self.key}"
