"""
Env Facade - Lazy process-wide EnvConfig plus module-level helpers.

The default instance wraps ``os.environ`` and loads ``.env`` from
``BASE_PATH`` (or the working directory) on first read. It is built on
first use, not at import, so importing envkit never touches the disk.

Usage:
    import envkit

    port = envkit.get_number('PORT', 8000)
    if envkit.is_production():
        ...

    # Explicit instance when injection is preferred:
    from envkit.facade import get_env_lazy
    env = get_env_lazy()
"""

import threading
from collections.abc import Mapping
from typing import Any

from envkit.env_config import EnvConfig
from envkit.loader import LoadResult

__all__ = [
    "get_env_lazy",
    "reset_env_lazy",
    "load",
    "get",
    "set",
    "clear",
    "get_array",
    "get_numbers",
    "get_strings",
    "get_string_set",
    "get_number",
    "get_string",
    "get_boolean",
    "get_object",
    "is_set",
    "require",
    "get_all",
    "is_env",
    "is_",
    "is_test",
    "is_development",
    "is_production",
    "is_local",
    "is_heroku",
    "api_version",
    "get_locale",
    "get_country_code",
]

# Singleton state
_env_instance: EnvConfig | None = None
_env_lock = threading.Lock()


def get_env_lazy() -> EnvConfig:
    """
    Get the default EnvConfig with lazy initialization.

    Thread-safe with double-checked locking; every caller in the process
    shares one instance and therefore one run-once .env load.
    """
    global _env_instance

    # Fast path: already initialized
    if _env_instance is not None:
        return _env_instance

    with _env_lock:
        if _env_instance is None:
            _env_instance = EnvConfig()
        return _env_instance


def reset_env_lazy(env: EnvConfig | None = None) -> None:
    """
    Reset the default instance (for testing).

    Passing ``env`` installs it as the default; otherwise the next call
    builds a fresh one, which loads ``.env`` again.
    """
    global _env_instance
    with _env_lock:
        _env_instance = env


# Convenience helpers that delegate to the singleton
def load() -> LoadResult:
    return get_env_lazy().load()


def get(key: str, default: Any = None) -> Any:
    return get_env_lazy().get(key, default)


def set(key: str, value: Any) -> Any:  # noqa: A001
    return get_env_lazy().set(key, value)


def clear(*keys: str) -> None:
    get_env_lazy().clear(*keys)


def get_array(key: str | None, default: Any = None) -> list[str]:
    return get_env_lazy().get_array(key, default)


def get_numbers(key: str | None, default: Any = None) -> list[int | float]:
    return get_env_lazy().get_numbers(key, default)


def get_strings(key: str | None, default: Any = None) -> list[str]:
    return get_env_lazy().get_strings(key, default)


def get_string_set(key: str | None, default: Any = None) -> list[str]:
    return get_env_lazy().get_string_set(key, default)


def get_number(key: str, default: Any = None) -> Any:
    return get_env_lazy().get_number(key, default)


def get_string(key: str, default: Any = None) -> Any:
    return get_env_lazy().get_string(key, default)


def get_boolean(key: str, default: Any = None) -> Any:
    return get_env_lazy().get_boolean(key, default)


def get_object(key: str, default: Any = None) -> Any:
    return get_env_lazy().get_object(key, default)


def is_set(key: str) -> bool:
    return get_env_lazy().is_set(key)


def require(key: str) -> Any:
    return get_env_lazy().require(key)


def get_all(prefix: str = "") -> dict[str, Any]:
    return get_env_lazy().get_all(prefix)


def is_env(name: Any) -> bool:
    return get_env_lazy().is_env(name)


# `is` is a keyword
is_ = is_env


def is_test() -> bool:
    return get_env_lazy().is_test()


def is_development() -> bool:
    return get_env_lazy().is_development()


def is_production() -> bool:
    return get_env_lazy().is_production()


def is_local() -> bool:
    return get_env_lazy().is_local()


def is_heroku() -> bool:
    return get_env_lazy().is_heroku()


def api_version(options: Mapping[str, Any] | None = None, **kwargs: Any) -> str | None:
    return get_env_lazy().api_version(options, **kwargs)


def get_locale(default_locale: str = "sw") -> str:
    return get_env_lazy().get_locale(default_locale)


def get_country_code(default_country_code: str = "TZ") -> str:
    return get_env_lazy().get_country_code(default_country_code)
