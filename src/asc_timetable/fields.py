"""Alias-driven field and relation resolution.

Timetable dialects spell the same attribute many ways ("teacherIds",
"teachers", "teacher", ...). Each call site passes its aliases in priority
order and the first usable one wins; later aliases are never consulted.
"""

import re
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

from asc_timetable.tree import as_record, to_list, to_scalar_string

# Keys tried on an object element inside a relation field.
RELATION_ITEM_KEYS: tuple[str, ...] = ("id", "value", "_id")

_SEPARATOR_RE = re.compile(r"[,\s]+")


class RelationShape(str, Enum):
    """The shapes a relation field can take in the source tree."""

    DELIMITED = "delimited"  # "T1, T2 T3"
    LIST = "list"  # repeated elements: ["T1", {"id": "T2"}]
    OBJECT = "object"  # single element: {"id": "T1"} or {"id": ["T1", "T2"]}


def resolve_field(node: Any, keys: Sequence[str]) -> str | None:
    """Return the first alias whose value converts to a scalar string.

    Args:
        node: Parsed element; non-mapping nodes resolve to None.
        keys: Candidate keys in priority order.

    Returns:
        Trimmed string value, or None if no alias is usable.
    """
    record = as_record(node)
    if record is None:
        return None
    for key in keys:
        value = to_scalar_string(record.get(key))
        if value is not None:
            return value
    return None


def first_present(node: Any, keys: Sequence[str]) -> Any:
    """Return the raw value of the first alias that is present (not None)."""
    record = as_record(node)
    if record is None:
        return None
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def classify_relation(value: Any) -> RelationShape:
    """Classify a present relation value into one of the known shapes."""
    if isinstance(value, list):
        return RelationShape.LIST
    if isinstance(value, dict):
        return RelationShape.OBJECT
    return RelationShape.DELIMITED


def _split_delimited(value: Any) -> list[str]:
    text = to_scalar_string(value) or ""
    return [token.strip() for token in _SEPARATOR_RE.split(text) if token.strip()]


def _ids_from_items(items: Iterable[Any]) -> list[str]:
    ids = []
    for item in items:
        item_id = resolve_field(item, RELATION_ITEM_KEYS)
        if item_id is None:
            item_id = to_scalar_string(item)
        if item_id:
            ids.append(item_id)
    return ids


def resolve_relation(node: Any, keys: Sequence[str]) -> list[str]:
    """Normalize a multi-valued reference field to an ordered list of ids.

    The first present alias decides the result, even when it yields no ids.

    Args:
        node: Parsed element holding the relation.
        keys: Candidate keys in priority order.

    Returns:
        List of id strings; empty when no alias is present.
    """
    record = as_record(node)
    if record is None:
        return []
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        shape = classify_relation(value)
        if shape is RelationShape.DELIMITED:
            return _split_delimited(value)
        if shape is RelationShape.LIST:
            return _ids_from_items(value)
        # Object: unwrap an "id" child (possibly repeated), else the object itself.
        inner = value.get("id")
        return _ids_from_items(to_list(inner if inner is not None else value))
    return []


def collect_unknown(node: Any, known_keys: Iterable[str]) -> dict[str, str]:
    """Collect scalar fields whose key is not in known_keys."""
    record = as_record(node)
    if record is None:
        return {}
    known = set(known_keys)
    raw: dict[str, str] = {}
    for key, value in record.items():
        if key in known:
            continue
        text = to_scalar_string(value)
        if text is not None:
            raw[key] = text
    return raw
