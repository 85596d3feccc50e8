"""Loose semantic-version coercion and API version formatting.

``coerce_version`` is forgiving in the way release tooling usually is:
it takes the first ``major[.minor[.patch]]`` run it finds and fills the
missing parts with zero.

    coerce_version('v2')          # SemVer(2, 0, 0)
    coerce_version('2.3.4-beta')  # SemVer(2, 3, 4)
    coerce_version('latest')      # None
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from envkit.coercion import map_to_string

__all__ = [
    "SemVer",
    "coerce_version",
    "format_api_version",
]

_VERSION_RE = re.compile(r"(?<!\d)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?!\d)")


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def coerce_version(value: Any) -> SemVer | None:
    """Coerce value into a SemVer, or None when it holds no version digits."""
    if isinstance(value, SemVer):
        return value
    match = _VERSION_RE.search(map_to_string(value))
    if not match:
        return None
    major, minor, patch = match.groups()
    return SemVer(int(major), int(minor or 0), int(patch or 0))


def format_api_version(version: SemVer, prefix: str = "v", minor: bool = False, patch: bool = False) -> str:
    """Render version as ``<prefix>major[.minor[.patch]]``; patch wins over minor."""
    if patch:
        parts: tuple[int, ...] = (version.major, version.minor, version.patch)
    elif minor:
        parts = (version.major, version.minor)
    else:
        parts = (version.major,)
    return f"{prefix}{'.'.join(str(part) for part in parts)}"
