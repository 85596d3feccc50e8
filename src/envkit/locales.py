"""OS locale detection and locale -> country code derivation."""
from __future__ import annotations

import locale
import logging
import re

from envkit.coercion import map_to_string
from envkit.interfaces import EnvironmentStore

logger = logging.getLogger(__name__)

__all__ = [
    "LOCALE_ENV_KEYS",
    "detect_os_locale",
    "country_code_from_locale",
]

# Same precedence the C library uses for message catalogs
LOCALE_ENV_KEYS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")

_UNSET_LOCALES = {"C", "POSIX"}
_SUFFIX_RE = re.compile(r"[.:@].*$")


def _clean(raw: str) -> str | None:
    value = _SUFFIX_RE.sub("", raw.strip())
    if not value or value in _UNSET_LOCALES:
        return None
    return value


def detect_os_locale(store: EnvironmentStore) -> str | None:
    """Return the OS locale (e.g. ``en_US``), or None when it cannot be determined.

    Locale variables in the store are consulted first; ``en_US.UTF-8``,
    ``de_DE@euro`` and ``fr_FR:fr`` all reduce to the bare locale name.
    Falls back to the interpreter's view via ``locale.getlocale()``.
    """
    for key in LOCALE_ENV_KEYS:
        value = _clean(map_to_string(store.get(key)))
        if value:
            return value

    try:
        detected = locale.getlocale()[0]
    except ValueError as e:
        logger.debug("locale.getlocale() failed: %s", e)
        return None
    return _clean(detected) if detected else None


def country_code_from_locale(value: str, default: str) -> str:
    """Take the region part of a locale name.

    ``en_US`` -> ``US`` and ``en-GB`` -> ``GB``. When both separators
    split the name, the hyphen split is applied last and wins. Names with
    no separator yield ``default``.
    """
    country_code = default

    parts = value.split("_")
    if len(parts) > 1:
        country_code = parts[-1]

    parts = value.split("-")
    if len(parts) > 1:
        country_code = parts[-1]

    return country_code
