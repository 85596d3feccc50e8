"""Scalar coercion helpers shared by every typed accessor.

Environment values are strings. These helpers turn them (and the typed
defaults callers pass alongside them) into numbers, strings or decoded
structures without raising:

    map_to_number('3.2')     # 3.2
    map_to_number('0x1F')    # 31
    map_to_number('abc')     # nan
    map_to_string(3.0)       # '3'
    map_to_string(True)      # 'true'
    auto_parse('{"a": 1}')   # {'a': 1}
    auto_parse('not json')   # 'not json'
"""
from __future__ import annotations

import json
import math
import re
from typing import Any

__all__ = [
    "map_to_number",
    "map_to_string",
    "auto_parse",
]

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_RADIX_RE = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
_RADIX_BASE = {"x": 16, "o": 8, "b": 2}
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _parse_number_text(text: str) -> int | float:
    text = text.strip()
    if not text:
        return 0
    if _INTEGER_RE.match(text):
        return int(text)
    if _DECIMAL_RE.match(text):
        return float(text)
    radix = _RADIX_RE.match(text)
    if radix:
        try:
            return int(radix.group(2), _RADIX_BASE[radix.group(1).lower()])
        except ValueError:
            return math.nan
    # spelled-out form only; "inf" and "nan" stay nan
    if text in _INFINITY:
        return _INFINITY[text]
    return math.nan


def map_to_number(value: Any) -> int | float:
    """Convert value to a number, best effort.

    None and blank strings become 0, booleans become 1/0, numbers pass
    through. Strings accept decimal, exponent, 0x/0o/0b and Infinity
    forms. Everything else yields nan rather than raising.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        return _parse_number_text(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def map_to_string(value: Any) -> str:
    """Convert value to a string, best effort.

    None becomes '', booleans render lowercase so they read back through
    get_boolean, integral floats drop the trailing '.0' and non-finite
    floats use the Infinity/NaN spelling map_to_number reads back.
    Lists and tuples join their items with ',' (the separator get_array
    splits on); dicts render as JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(map_to_string(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, default=str)
    return str(value)


def auto_parse(value: Any) -> Any:
    """Decode JSON-looking strings, keeping the raw value when decoding fails.

    Dicts and lists are walked so string members get the same treatment.
    """
    if isinstance(value, str):
        try:
            return json.loads(value)
        except (ValueError, RecursionError):
            return value
    if isinstance(value, dict):
        return {key: auto_parse(item) for key, item in value.items()}
    if isinstance(value, list):
        return [auto_parse(item) for item in value]
    return value
