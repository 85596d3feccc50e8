"""Centralized environment variable access with type coercion.

This module provides a single object through which environment values are
read, written and coerced. It ensures the .env file is loaded once before
the first read and that defaults are handled the same way everywhere.

Usage:
    from envkit.env_config import EnvConfig

    env = EnvConfig()

    # Number values
    port = env.get_number('PORT', 8000)

    # Boolean values
    debug = env.get_boolean('DEBUG', False)

    # Comma separated lists
    hosts = env.get_array('ALLOWED_HOSTS', ['localhost'])

    # JSON objects
    features = env.get_object('FEATURES')

Typed getters share one rule: the value resolved from the store (or the
default) is coerced only when it is truthy. A falsy default such as 0, ''
or False comes back untouched, and a missing key with no default comes
back as None.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from envkit.coercion import auto_parse, map_to_number, map_to_string
from envkit.errors import MissingEnvError
from envkit.interfaces import EnvironmentStore, LoaderProtocol
from envkit.loader import DotenvLoader, LoadResult
from envkit.locales import country_code_from_locale, detect_os_locale
from envkit.semver import coerce_version, format_api_version
from envkit.store import OsEnvironmentStore

logger = logging.getLogger(__name__)

__all__ = [
    "EnvConfig",
    "NODE_ENV_KEY",
    "RUNTIME_ENV_KEY",
    "API_VERSION_KEY",
    "DEFAULT_LOCALE_KEY",
    "DEFAULT_COUNTRY_CODE_KEY",
    "API_VERSION_DEFAULTS",
]

NODE_ENV_KEY = "NODE_ENV"
RUNTIME_ENV_KEY = "RUNTIME_ENV"
API_VERSION_KEY = "API_VERSION"
DEFAULT_LOCALE_KEY = "DEFAULT_LOCALE"
DEFAULT_COUNTRY_CODE_KEY = "DEFAULT_COUNTRY_CODE"

API_VERSION_DEFAULTS: Mapping[str, Any] = {
    "version": "1.0.0",
    "prefix": "v",
    "major": True,
    "minor": False,
    "patch": False,
}


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


class EnvConfig:
    """Environment variable access over an injected store."""

    def __init__(
        self,
        store: EnvironmentStore | None = None,
        loader: LoaderProtocol | None = None,
        locale_detector: Callable[[EnvironmentStore], str | None] | None = None,
    ) -> None:
        self.store = store if store is not None else OsEnvironmentStore()
        self.loader = loader if loader is not None else DotenvLoader(self.store)
        self._locale_detector = locale_detector or detect_os_locale

    def __repr__(self) -> str:
        return f"EnvConfig(store={self.store!r})"

    # -- store access -----------------------------------------------------

    def load(self) -> LoadResult:
        """Run the one-time .env load (no-op after the first call)."""
        return self.loader.load()

    def get(self, key: str, default: Any = None) -> Any:
        """Get raw environment value.

        Falsy stored values ('' or '0') are returned as-is; only an
        absent key falls back to default.

        Args:
            key: Environment variable name
            default: Value returned when key is not set

        Returns:
            Stored value, default, or None

        Example:
            base_path = env.get('BASE_PATH', os.getcwd())
        """
        self.load()
        value = self.store.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> Any:
        """Set environment value and return it unchanged."""
        self.store.set(key, value)
        return value

    def clear(self, *keys: str) -> None:
        """Remove keys from the environment. Unknown keys are ignored.

        Example:
            env.clear('BASE_PATH', 'API_VERSION')
        """
        for key in keys:
            self.store.delete(key)

    # -- list getters -----------------------------------------------------

    def get_array(self, key: str | None, default: Any = None) -> list[str]:
        """Get list of strings from a comma separated variable.

        Default items come first, followed by the items split from the
        variable. Every item is trimmed; empty items are dropped and
        duplicates removed keeping first-seen order.

        Args:
            key: Environment variable name; a blank key reads only the default
            default: Item or list of items to start from

        Returns:
            List of strings

        Example:
            # CATEGORIES="Fashion, Technology,Fashion"
            env.get_array('CATEGORIES')  # ['Fashion', 'Technology']
        """
        values = _as_list(default)
        if isinstance(key, str) and key:
            values.extend(map_to_string(self.get(key, "")).split(","))
        items = (map_to_string(value).strip() for value in values)
        return list(dict.fromkeys(item for item in items if item))

    def get_numbers(self, key: str | None, default: Any = None) -> list[int | float]:
        """Get list of numbers; see get_array.

        Deduplication happens on the text, so '1' and '1.0' both survive.

        Example:
            # AGES="11, 18"
            env.get_numbers('AGES')  # [11, 18]
        """
        return [map_to_number(value) for value in self.get_array(key, default)]

    def get_strings(self, key: str | None, default: Any = None) -> list[str]:
        """Get list of strings; see get_array."""
        return [map_to_string(value) for value in self.get_array(key, default)]

    def get_string_set(self, key: str | None, default: Any = None) -> list[str]:
        """Get sorted list of unique strings.

        Example:
            # CATEGORIES="Technology,Fashion,Technology"
            env.get_string_set('CATEGORIES')  # ['Fashion', 'Technology']
        """
        return sorted(set(self.get_strings(key, default)))

    # -- scalar getters ---------------------------------------------------

    def get_number(self, key: str, default: Any = None) -> Any:
        """Get number value.

        Only truthy values are coerced, so a default of 0 is returned as
        given and an unparseable value yields nan.

        Example:
            port = env.get_number('PORT', 8000)
        """
        value = self.get(key, default)
        return map_to_number(value) if value else value

    def get_string(self, key: str, default: Any = None) -> Any:
        """Get string value; falsy values are returned without coercion."""
        value = self.get(key, default)
        return map_to_string(value) if value else value

    def get_boolean(self, key: str, default: Any = None) -> Any:
        """Get boolean value.

        The literal strings 'true' and 'false' map to booleans. Any other
        truthy value becomes True; falsy values are returned unchanged, so
        a missing key with no default gives None.

        Example:
            debug = env.get_boolean('DEBUG', False)
        """
        value = self.get(key, default)
        if value == "false":
            value = False
        if value == "true":
            value = True
        return bool(value) if value else value

    def get_object(self, key: str, default: Any = None) -> Any:
        """Get structured value decoded from JSON.

        Values that are not valid JSON are returned as the raw string.
        With the key unset the default (an empty dict unless given) is
        returned; a non-empty default goes through the same decoding.

        Example:
            # FEATURES='{"search": true}'
            env.get_object('FEATURES')  # {'search': True}
        """
        value = self.get(key, {} if default is None else default)
        return auto_parse(value) if value else value

    # -- supplemental accessors -------------------------------------------

    def is_set(self, key: str) -> bool:
        """Check if environment variable is set and not blank."""
        value = self.get(key)
        return bool(map_to_string(value).strip())

    def require(self, key: str) -> Any:
        """Get required environment variable.

        Raises:
            MissingEnvError: If variable is unset or blank

        Example:
            api_key = env.require('API_KEY')
        """
        if not self.is_set(key):
            raise MissingEnvError(key)
        return self.get(key)

    def get_all(self, prefix: str = "") -> dict[str, Any]:
        """Get all environment variables whose name starts with prefix."""
        self.load()
        return {k: v for k, v in self.store.items() if k.startswith(prefix)}

    # -- environment predicates -------------------------------------------

    def is_env(self, name: Any) -> bool:
        """Check NODE_ENV against name, case-insensitively.

        An unset NODE_ENV compares as ''.
        """
        return map_to_string(self.get(NODE_ENV_KEY)).lower() == map_to_string(name).lower()

    def is_test(self) -> bool:
        return self.is_env("test")

    def is_development(self) -> bool:
        return self.is_env("development")

    def is_production(self) -> bool:
        return self.is_env("production")

    def is_local(self) -> bool:
        return self.is_test() or self.is_development()

    def is_heroku(self) -> bool:
        return map_to_string(self.get(RUNTIME_ENV_KEY)).lower() == "heroku"

    # -- derived values ---------------------------------------------------

    def api_version(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> str | None:
        """Build the API version string from API_VERSION.

        Options (mapping and/or keywords, keywords win):
            version: Fallback semantic version (default '1.0.0')
            prefix: Prepended to the result (default 'v')
            major: Accepted for compatibility; major is always emitted
            minor: Emit major.minor
            patch: Emit major.minor.patch (wins over minor)

        Returns:
            Prefixed version, or None when neither API_VERSION nor the
            version option holds a parseable version

        Example:
            env.api_version()                    # 'v1'
            env.api_version(version='2.3.4', minor=True)  # 'v2.3'
        """
        # None leaves an option at its default
        opts = dict(API_VERSION_DEFAULTS)
        for overrides in (options or {}, kwargs):
            opts.update((k, v) for k, v in overrides.items() if v is not None)
        fallback = opts["version"]

        raw = self.get_string(API_VERSION_KEY, fallback)
        parsed = coerce_version(raw)
        if parsed is None and raw != fallback:
            logger.warning("Unparseable %s=%r; using version=%r", API_VERSION_KEY, raw, fallback)
            parsed = coerce_version(fallback)
        if parsed is None:
            logger.warning("Unparseable api version %r", fallback)
            return None

        return format_api_version(
            parsed,
            prefix=map_to_string(opts["prefix"]),
            minor=bool(opts["minor"]),
            patch=bool(opts["patch"]),
        )

    def get_locale(self, default_locale: str = "sw") -> str:
        """Get runtime locale.

        The detected OS locale (or default_locale when detection finds
        nothing) is superseded by DEFAULT_LOCALE when that is set.

        Example:
            env.get_locale()  # 'sw'
        """
        self.load()
        detected = self._locale_detector(self.store) or default_locale
        return self.get_string(DEFAULT_LOCALE_KEY, detected)

    def get_country_code(self, default_country_code: str = "TZ") -> str:
        """Get runtime country code.

        Derived from the region part of get_locale() ('en_US' -> 'US'),
        falling back to default_country_code, and superseded by
        DEFAULT_COUNTRY_CODE when that is set.
        """
        country_code = country_code_from_locale(map_to_string(self.get_locale()), default_country_code)
        return self.get_string(DEFAULT_COUNTRY_CODE_KEY, country_code)

