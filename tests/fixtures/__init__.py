"""Shared test fixtures and utilities for the envkit test suite.

    from tests.fixtures import make_env, write_env_file
    from tests.fixtures.dummies import StaticLocaleDetector
"""

from tests.fixtures.dummies import (
    DummyLoaderMetrics,
    NullLoader,
    StaticLocaleDetector,
)

from tests.fixtures.factories import (
    make_env,
    write_env_file,
)

__all__ = [
    # Dummies
    'DummyLoaderMetrics',
    'NullLoader',
    'StaticLocaleDetector',
    # Factories
    'make_env',
    'write_env_file',
]
