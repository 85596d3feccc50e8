"""
envkit - helpers for reading and coercing environment variables.

Module-level functions operate on a lazily built, process-wide
``EnvConfig`` over ``os.environ``; a ``.env`` file is loaded into it once,
before the first read. Build your own ``EnvConfig`` (for example over a
``MemoryStore``) to work against an isolated store.

Usage:
    import envkit

    envkit.get_number('PORT', 8000)
    envkit.get_array('ALLOWED_HOSTS')
    envkit.api_version(minor=True)

Prometheus counters for the .env load are opt-in: pass
``envkit.metrics.LoaderMetrics(registry)`` as ``DotenvLoader(metrics=...)``.
"""

from .coercion import auto_parse, map_to_number, map_to_string
from .env_config import EnvConfig
from .errors import EnvError, EnvFileError, MissingEnvError
from .facade import (
    api_version,
    clear,
    get,
    get_all,
    get_array,
    get_boolean,
    get_country_code,
    get_env_lazy,
    get_locale,
    get_number,
    get_numbers,
    get_object,
    get_string,
    get_string_set,
    get_strings,
    is_,
    is_development,
    is_env,
    is_heroku,
    is_local,
    is_production,
    is_set,
    is_test,
    load,
    require,
    reset_env_lazy,
    set,
)
from .loader import DotenvLoader, LoadResult
from .semver import SemVer, coerce_version
from .store import MemoryStore, OsEnvironmentStore
from .version import __version__

__all__ = [
    "__version__",
    # Core
    "EnvConfig",
    "DotenvLoader",
    "LoadResult",
    "OsEnvironmentStore",
    "MemoryStore",
    "get_env_lazy",
    "reset_env_lazy",
    # Store access
    "load",
    "get",
    "set",
    "clear",
    "is_set",
    "require",
    "get_all",
    # Coercion
    "map_to_number",
    "map_to_string",
    "auto_parse",
    "get_array",
    "get_numbers",
    "get_strings",
    "get_string_set",
    "get_number",
    "get_string",
    "get_boolean",
    "get_object",
    # Predicates
    "is_env",
    "is_",
    "is_test",
    "is_development",
    "is_production",
    "is_local",
    "is_heroku",
    # Derived values
    "api_version",
    "get_locale",
    "get_country_code",
    "SemVer",
    "coerce_version",
    # Errors
    "EnvError",
    "EnvFileError",
    "MissingEnvError",
]
