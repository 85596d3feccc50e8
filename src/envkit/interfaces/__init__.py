"""
Interfaces package for envkit.

Protocol definitions used to inject collaborators (the backing store,
the one-time loader, loader instrumentation) instead of reaching for
process-wide state directly.

Key Principles:
- Protocols are import-free (only use typing and stdlib)
- No runtime dependencies on other envkit modules
- Can be imported anywhere without circular risk

Usage:
    from envkit.interfaces import EnvironmentStore

    def dump(store: EnvironmentStore) -> dict[str, str]:
        return dict(store.items())
"""

from .store_protocol import EnvironmentStore, LoaderMetricsProtocol, LoaderProtocol

__all__ = [
    "EnvironmentStore",
    "LoaderProtocol",
    "LoaderMetricsProtocol",
]
