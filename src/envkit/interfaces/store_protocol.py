"""
Store Protocol - Interface for the key/value environment store.

Breaks the dependency between:
- envkit.env_config (reads and coerces values)
- envkit.loader (seeds values once from a .env file)
- envkit.store (concrete os.environ / in-memory backends)
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentStore(Protocol):
    """
    Protocol for a process-wide string-keyed value mapping.

    Values are normally strings. A backend may keep non-string values
    as-is; readers never assume otherwise and coerce at read time.

    Usage:
        def read_port(store: EnvironmentStore) -> str | None:
            return store.get("PORT")
    """

    def get(self, key: str) -> Any | None:
        """Return the stored value for key, or None when absent."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        ...

    def __contains__(self, key: object) -> bool:
        ...

    def items(self) -> Iterable[tuple[str, Any]]:
        """Snapshot of all stored pairs."""
        ...


@runtime_checkable
class LoaderProtocol(Protocol):
    """Run-once bulk loader that seeds a store before the first read."""

    def load(self) -> Any:
        """Perform the load on first call; return the memoized result after."""
        ...


@runtime_checkable
class LoaderMetricsProtocol(Protocol):
    """Instrumentation hook for the loader (see envkit.metrics)."""

    def record_load(self, outcome: str, applied: int) -> None:
        """
        Record one completed load.

        Args:
            outcome: One of "loaded", "missing", "error"
            applied: Number of keys written into the store
        """
        ...
