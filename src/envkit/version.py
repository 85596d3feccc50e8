"""Central version metadata for envkit.

Single authoritative place for the package version. Keep in sync with
pyproject.toml during release tagging.
"""
from __future__ import annotations

__version__ = "0.12.1"

__all__ = ["__version__"]
