"""Prometheus instrumentation for the .env loader.

Opt-in: nothing is registered until a ``LoaderMetrics`` is built, and the
default facade does not build one. Pass a dedicated ``CollectorRegistry``
when more than one instance may exist in a process.

    registry = CollectorRegistry()
    loader = DotenvLoader(store, metrics=LoaderMetrics(registry))
"""
from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge

__all__ = ["LoaderMetrics"]

_OUTCOMES = ("loaded", "missing", "error")


class LoaderMetrics:
    """Counts .env load outcomes and tracks how many keys were applied."""

    def __init__(self, registry: CollectorRegistry | None = None, namespace: str = "envkit") -> None:
        registry = registry or REGISTRY
        self.loads = Counter(
            "dotenv_loads",
            "Completed .env loads by outcome",
            ["outcome"],
            namespace=namespace,
            registry=registry,
        )
        self.keys_applied = Gauge(
            "dotenv_keys_applied",
            "Keys written into the environment by the last .env load",
            namespace=namespace,
            registry=registry,
        )
        for outcome in _OUTCOMES:
            self.loads.labels(outcome=outcome)

    def record_load(self, outcome: str, applied: int) -> None:
        if outcome not in _OUTCOMES:
            raise ValueError(f"unknown load outcome: {outcome}")
        self.loads.labels(outcome=outcome).inc()
        self.keys_applied.set(applied)
