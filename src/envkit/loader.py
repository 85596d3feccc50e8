"""One-time .env loading into an environment store.

The first ``load()`` call resolves the base directory, reads ``.env``
from it and copies each pair into the store unless the key is already
set (the live environment always wins). The outcome is memoized; every
later call returns the same ``LoadResult`` without touching the disk.

Base directory resolution order:
1. ``base_path`` passed to ``DotenvLoader``
2. ``BASE_PATH`` entry in the store
3. Current working directory

Usage:
    loader = DotenvLoader(OsEnvironmentStore())
    result = loader.load()
    if not result.ok:
        logger.warning("env file problem: %s", result.error)
"""
from __future__ import annotations

import io
import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from dotenv.parser import parse_stream

from envkit.errors import EnvFileError
from envkit.interfaces import EnvironmentStore, LoaderMetricsProtocol

logger = logging.getLogger(__name__)

__all__ = [
    "BASE_PATH_KEY",
    "DEFAULT_FILENAME",
    "LoadResult",
    "DotenvLoader",
    "parse_env_text",
]

BASE_PATH_KEY = "BASE_PATH"
DEFAULT_FILENAME = ".env"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of the one-time .env load."""

    path: Path | None
    parsed: dict[str, str] = field(default_factory=dict)
    applied: tuple[str, ...] = ()
    error: EnvFileError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def parse_env_text(text: str) -> tuple[dict[str, str], tuple[str, ...]]:
    """Parse .env text into (pairs, malformed_lines).

    Comments, blank lines, ``export`` prefixes and quoting follow
    python-dotenv. Variables are not interpolated. Keys without a value
    (a bare ``KEY`` line) are skipped.
    """
    pairs: dict[str, str] = {}
    malformed: list[str] = []
    for binding in parse_stream(io.StringIO(text)):
        if binding.error:
            malformed.append(binding.original.string.strip())
            continue
        if binding.key is None or binding.value is None:
            continue
        pairs[binding.key] = binding.value
    return pairs, tuple(malformed)


class DotenvLoader:
    """Seed a store from a .env file exactly once.

    Thread-safe: the load runs under a lock with a double-checked fast
    path, so concurrent first reads still trigger a single file read.
    """

    def __init__(
        self,
        store: EnvironmentStore,
        base_path: str | os.PathLike[str] | None = None,
        filename: str = DEFAULT_FILENAME,
        reader: Callable[[Path], str] | None = None,
        metrics: LoaderMetricsProtocol | None = None,
    ) -> None:
        self._store = store
        self._base_path = base_path
        self._filename = filename
        self._reader = reader or _read_text
        self._metrics = metrics
        self._result: LoadResult | None = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._result is not None

    def resolve_path(self) -> Path:
        """Return the .env path the next (first) load would read."""
        base = self._base_path or self._store.get(BASE_PATH_KEY) or os.getcwd()
        return Path(base).expanduser().resolve() / self._filename

    def load(self) -> LoadResult:
        """Load the file on first call; return the memoized result afterwards."""
        # Fast path: already loaded
        if self._result is not None:
            return self._result

        with self._lock:
            if self._result is not None:
                return self._result
            self._result = self._load_once()
            return self._result

    def reset(self) -> None:
        """
        Forget the memoized result (for testing).

        Values already copied into the store are left in place.
        """
        with self._lock:
            self._result = None

    def _load_once(self) -> LoadResult:
        path = self.resolve_path()
        if not path.is_file():
            logger.debug("No env file at %s", path)
            self._record("missing", 0)
            return LoadResult(path=path)

        try:
            text = self._reader(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read env file %s: %s", path, e)
            self._record("error", 0)
            return LoadResult(path=path, error=EnvFileError(path, f"unreadable ({e})"))

        parsed, malformed = parse_env_text(text)
        applied = self._apply(parsed)

        error = None
        if malformed:
            logger.warning(
                "Env file %s has %d malformed line(s); first: %r", path, len(malformed), malformed[0]
            )
            error = EnvFileError(path, f"{len(malformed)} malformed line(s)", malformed)
        else:
            logger.info("Loaded %d variable(s) from %s", len(applied), path)

        self._record("error" if error else "loaded", len(applied))
        return LoadResult(path=path, parsed=parsed, applied=applied, error=error)

    def _apply(self, parsed: dict[str, str]) -> tuple[str, ...]:
        applied: list[str] = []
        for key, value in parsed.items():
            if key in self._store:
                logger.debug("Keeping existing value for %s; env file entry ignored", key)
                continue
            self._store.set(key, value)
            applied.append(key)
        return tuple(applied)

    def _record(self, outcome: str, applied: int) -> None:
        if self._metrics is not None:
            self._metrics.record_load(outcome, applied)
