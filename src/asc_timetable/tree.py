"""Shape-agnostic helpers over the parsed XML tree.

An XML element may appear zero, one or many times, so any node can be None,
a single mapping/string, or a list of them. These helpers know nothing about
timetables.
"""

import re
from typing import Any

_NUMBER_RE = re.compile(r"^[-+]?\d+(\.\d+)?$", re.ASCII)


def as_record(value: Any) -> dict[str, Any] | None:
    """Return value if it is a mapping node, else None."""
    if isinstance(value, dict):
        return value
    return None


def to_list(value: Any) -> list[Any]:
    """Normalize an optional/single/repeated node to a list.

    None becomes [], a list is returned as-is (no flattening), anything else
    is wrapped in a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def to_scalar_string(value: Any) -> str | None:
    """Trim strings and stringify numbers/booleans; everything else is None."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def to_number(value: Any) -> int | float | None:
    """Coerce a scalar to int (no decimal part) or float, or return None.

    Only plain signed decimals are accepted: no exponents, no blanks, no
    leading/trailing dots.
    """
    text = to_scalar_string(value)
    if not text:
        return None
    match = _NUMBER_RE.match(text)
    if match is None:
        return None
    if match.group(1) is None:
        return int(text)
    return float(text)
